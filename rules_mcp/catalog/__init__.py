"""Content loading, caching, filtering and template resolution."""

from .cache import RegistryCache
from .filters import filter_rules
from .formatter import format_rules_as_text
from .loader import DocumentLoader
from .parser import ParsedDocument, parse_document, validate_required_fields
from .service import ContentCatalog
from .templates import resolve, tokenize

__all__ = [
    "ContentCatalog",
    "DocumentLoader",
    "ParsedDocument",
    "RegistryCache",
    "filter_rules",
    "format_rules_as_text",
    "parse_document",
    "resolve",
    "tokenize",
    "validate_required_fields",
]
