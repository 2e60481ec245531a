"""
Content Catalog

Composes the loader, converters, cache, filters, formatter and template
resolver into the lookups the MCP server needs.

Content root layout:
    rules/<system>/*.md   one rule per file, one directory per project system
    resources/*.md        documentation resources
    prompts/*.md          prompt templates
    tools/*.md            tool descriptors
"""

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, TypeVar

from rules_mcp.catalog import converters
from rules_mcp.catalog.cache import RegistryCache
from rules_mcp.catalog.filters import filter_rules
from rules_mcp.catalog.formatter import format_rules_as_text
from rules_mcp.catalog.loader import DocumentLoader
from rules_mcp.catalog.parser import ParsedDocument
from rules_mcp.catalog.templates import resolve
from rules_mcp.errors import InvalidDocument, UnknownEntity
from rules_mcp.models import (
    ProjectSystem,
    PromptTemplate,
    Resource,
    Rule,
    RuleCollection,
    RuleFilter,
    ToolDefinition,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

RESOURCES = "resources"
PROMPTS = "prompts"
TOOLS = "tools"


def rules_collection_id(system: ProjectSystem) -> str:
    return f"rules/{system.value}"


class ContentCatalog:
    """
    Read-only catalog of rules, resources, prompts and tools.

    Each collection is loaded from disk on first use and cached by this
    instance until one of the clear_* methods is called.
    """

    def __init__(
        self,
        content_path: Path,
        recursive: bool = False,
        loader: DocumentLoader | None = None,
        cache: RegistryCache | None = None,
    ):
        """
        Initialize catalog.

        Args:
            content_path: Content root directory
            recursive: Descend into subdirectories of resources/prompts/tools
            loader: Document loader (default: markdown loader)
            cache: Registry cache to populate (default: a fresh cache)
        """
        self.content_path = Path(content_path)
        self.recursive = recursive
        self.loader = loader or DocumentLoader()
        self.cache = cache or RegistryCache()

        for system in ProjectSystem:
            self.cache.register(rules_collection_id(system), self._rules_loader(system))
        self.cache.register(RESOURCES, self._load_resources)
        self.cache.register(PROMPTS, self._load_prompts)
        self.cache.register(TOOLS, self._load_tools)

    @classmethod
    def from_config(cls, config) -> "ContentCatalog":
        return cls(content_path=config.content_path, recursive=config.recursive)

    # =========================================================================
    # Directories
    # =========================================================================

    @property
    def rules_path(self) -> Path:
        return self.content_path / "rules"

    def system_rules_path(self, system: ProjectSystem) -> Path:
        return self.rules_path / system.value

    @property
    def resources_path(self) -> Path:
        return self.content_path / RESOURCES

    @property
    def prompts_path(self) -> Path:
        return self.content_path / PROMPTS

    @property
    def tools_path(self) -> Path:
        return self.content_path / TOOLS

    # =========================================================================
    # Rules
    # =========================================================================

    def get_rules(self, system: ProjectSystem | str) -> tuple[Rule, ...]:
        """All loaded rules of a system, unfiltered."""
        system = ProjectSystem.from_text(system)
        return self.cache.get_all(rules_collection_id(system))

    def get_all_rules(
        self,
        system: ProjectSystem | str,
        category: str | None = None,
        language: str | None = None,
        codeType: str | None = None,
    ) -> RuleCollection:
        """
        Get rules of a system narrowed by optional criteria.

        Args:
            system: Project system ("microfrontend" or "microservice")
            category: Rule category, or "all"/None for every category
            language: Keep rules for this language plus language-agnostic ones
            codeType: Keep rules for this code type plus unscoped ones

        Raises:
            UnknownSystem: system is not a supported project system
            UnknownValue: a criterion is not a recognized value
        """
        system = ProjectSystem.from_text(system)
        criteria = RuleFilter.from_text(category=category, language=language, codeType=codeType)
        rules = filter_rules(self.get_rules(system), criteria)
        return RuleCollection(system=system, rules=rules, language=criteria.language)

    @staticmethod
    def format_rules_as_text(collection: RuleCollection) -> str:
        return format_rules_as_text(collection)

    # =========================================================================
    # Resources
    # =========================================================================

    def get_all_resources(self) -> tuple[Resource, ...]:
        return self.cache.get_all(RESOURCES)

    def get_resource_by_uri(self, uri: str) -> Resource | None:
        return next((r for r in self.get_all_resources() if r.uri == uri), None)

    # =========================================================================
    # Prompts
    # =========================================================================

    def get_all_prompts(self) -> tuple[PromptTemplate, ...]:
        return self.cache.get_all(PROMPTS)

    def get_prompt_by_name(self, name: str) -> PromptTemplate | None:
        return next((p for p in self.get_all_prompts() if p.name == name), None)

    def resolve_template(self, name: str, args: Mapping[str, Any] | None = None) -> str:
        """
        Resolve a prompt template by name.

        Raises:
            UnknownEntity: no prompt with that name is loaded
        """
        prompt = self.get_prompt_by_name(name)
        if prompt is None:
            raise UnknownEntity("prompt", name)
        return resolve(prompt.templateBody, args or {})

    # =========================================================================
    # Tools
    # =========================================================================

    def get_all_tools(self) -> tuple[ToolDefinition, ...]:
        return self.cache.get_all(TOOLS)

    def get_tool_by_name(self, name: str) -> ToolDefinition | None:
        return next((t for t in self.get_all_tools() if t.name == name), None)

    # =========================================================================
    # Cache
    # =========================================================================

    def clear_rules_cache(self, system: ProjectSystem | str | None = None) -> None:
        systems = [ProjectSystem.from_text(system)] if system is not None else list(ProjectSystem)
        for item in systems:
            self.cache.clear(rules_collection_id(item))

    def clear_resources_cache(self) -> None:
        self.cache.clear(RESOURCES)

    def clear_prompts_cache(self) -> None:
        self.cache.clear(PROMPTS)

    def clear_tools_cache(self) -> None:
        self.cache.clear(TOOLS)

    def clear_all_caches(self) -> None:
        self.cache.clear()

    def preload(self) -> None:
        """Load every collection that is not cached yet."""
        for collection_id in self.cache.collections():
            self.cache.get_all(collection_id)

    # =========================================================================
    # Loading
    # =========================================================================

    def _rules_loader(self, system: ProjectSystem) -> Callable[[], list[Rule]]:
        def load() -> list[Rule]:
            documents = self.loader.load_all(self.system_rules_path(system), converters.RULE_FIELDS)
            rules = self._convert(documents, lambda doc: converters.rule_from_document(doc, system))
            return _unique(rules, lambda rule: rule.id, f"{system.value} rule id")
        return load

    def _load_resources(self) -> list[Resource]:
        documents = self.loader.load_all(self.resources_path, converters.RESOURCE_FIELDS, self.recursive)
        resources = self._convert(documents, converters.resource_from_document)
        return _unique(resources, lambda resource: resource.uri, "resource uri")

    def _load_prompts(self) -> list[PromptTemplate]:
        documents = self.loader.load_all(self.prompts_path, converters.PROMPT_FIELDS, self.recursive)
        prompts = self._convert(documents, converters.prompt_from_document)
        return _unique(prompts, lambda prompt: prompt.name, "prompt name")

    def _load_tools(self) -> list[ToolDefinition]:
        documents = self.loader.load_all(self.tools_path, converters.TOOL_FIELDS, self.recursive)
        tools = self._convert(documents, converters.tool_from_document)
        return _unique(tools, lambda tool: tool.name, "tool name")

    @staticmethod
    def _convert(documents: Iterable[ParsedDocument], convert: Callable[[ParsedDocument], T]) -> list[T]:
        records: list[T] = []
        for document in documents:
            try:
                records.append(convert(document))
            except InvalidDocument as e:
                logger.warning(f"Skipping invalid document {document.source_id}: {e.reason}")
        return records


def _unique(records: list[T], key: Callable[[T], str], label: str) -> list[T]:
    """Drop records whose key was already seen; the first one wins."""
    seen: set[str] = set()
    unique: list[T] = []
    for record in records:
        value = key(record)
        if value in seen:
            logger.warning(f"Skipping duplicate {label}: {value}")
            continue
        seen.add(value)
        unique.append(record)
    return unique
