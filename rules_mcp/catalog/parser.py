"""Parse documents with YAML frontmatter."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import yaml

from rules_mcp.errors import InvalidDocument, MissingFields

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


@dataclass(frozen=True)
class ParsedDocument:
    """Untyped frontmatter mapping plus trimmed body."""
    metadata: dict[str, Any]
    content: str
    source_id: str
    path: Path | None = None


def split_frontmatter(raw_text: str) -> tuple[str | None, str]:
    """Return (frontmatter block or None, body). A leading byte order mark is ignored."""
    raw_text = raw_text.removeprefix("\ufeff")
    match = _FRONTMATTER_RE.match(raw_text)
    if not match:
        return None, raw_text
    return match.group(1), raw_text[match.end():]


def parse_document(raw_text: str, source_id: str, path: Path | None = None) -> ParsedDocument:
    """
    Split raw text into frontmatter metadata and body.

    A document without a leading ``---`` block has empty metadata. Required
    keys are not checked here, see validate_required_fields().

    Raises:
        InvalidDocument: frontmatter is not valid YAML or not a mapping
    """
    block, body = split_frontmatter(raw_text)
    metadata: dict[str, Any] = {}

    if block is not None:
        try:
            loaded = yaml.safe_load(block)
        except yaml.YAMLError as e:
            raise InvalidDocument(source_id, f"frontmatter is not valid YAML ({e})") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise InvalidDocument(source_id, "frontmatter must be a mapping of keys to values")
        metadata = {str(key): value for key, value in loaded.items()}

    return ParsedDocument(metadata=metadata, content=body.strip(), source_id=source_id, path=path)


def validate_required_fields(metadata: dict[str, Any], required: Iterable[str], source_id: str) -> None:
    """Raise MissingFields listing every required key absent from metadata."""
    missing = [name for name in required if name not in metadata]
    if missing:
        raise MissingFields(source_id, missing)
