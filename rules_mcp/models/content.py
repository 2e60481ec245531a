"""
Content types
Records loaded from the content directories and the closed value sets they use.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from rules_mcp.errors import UnknownSystem, UnknownValue


class _TextEnum(Enum):
    """Enum whose members are parsed from their text value."""

    @classmethod
    def choices(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_text(cls, value: Any, field_name: Optional[str] = None):
        """Convert text to a member, raising UnknownValue on anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise UnknownValue(field_name or cls._field_name(), value, cls.choices())

    @classmethod
    def _field_name(cls) -> str:
        return cls.__name__


class RuleCategory(_TextEnum):
    """Rule categories. The "all" filter sentinel is not a category."""
    ARCHITECTURE = "architecture"
    PERFORMANCE = "performance"
    SECURITY = "security"
    TESTING = "testing"

    @classmethod
    def _field_name(cls) -> str:
        return "category"


class ProjectSystem(_TextEnum):
    """Project archetype a rule applies to."""
    MICROFRONTEND = "microfrontend"
    MICROSERVICE = "microservice"

    @classmethod
    def from_text(cls, value: Any, field_name: Optional[str] = None):
        try:
            return super().from_text(value, field_name)
        except UnknownValue:
            raise UnknownSystem(value, cls.choices()) from None


class Language(_TextEnum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    GO = "go"
    RUST = "rust"

    @classmethod
    def _field_name(cls) -> str:
        return "language"


class CodeType(_TextEnum):
    SOURCE = "source"
    TEST = "test"

    @classmethod
    def _field_name(cls) -> str:
        return "codeType"


ALL_CATEGORIES = "all"


def _freeze(record, *names: str) -> None:
    """Store sequence fields of a frozen record as tuples."""
    for name in names:
        object.__setattr__(record, name, tuple(getattr(record, name)))


@dataclass(frozen=True)
class Rule:
    """Development rule for one project system."""
    id: str
    title: str
    description: str
    category: RuleCategory
    system: ProjectSystem
    content: str
    language: Optional[Language] = None
    codeType: Optional[CodeType] = None
    tags: Tuple[str, ...] = ()
    examples: Tuple[str, ...] = ()

    def __post_init__(self):
        _freeze(self, "tags", "examples")


@dataclass(frozen=True)
class Resource:
    """Static documentation resource."""
    uri: str
    name: str
    description: str
    mimeType: str
    content: str


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str = ""
    required: bool = False


@dataclass(frozen=True)
class PromptTemplate:
    """Prompt with named arguments and a template body."""
    name: str
    description: str
    arguments: Tuple[PromptArgument, ...]
    templateBody: str

    def __post_init__(self):
        _freeze(self, "arguments")

    def missing_arguments(self, args: Optional[Dict[str, str]]) -> List[str]:
        """Names of required arguments absent or empty in args."""
        args = args or {}
        return [arg.name for arg in self.arguments if arg.required and not args.get(arg.name)]


@dataclass(frozen=True)
class ToolDefinition:
    """Tool descriptor loaded from the tools directory."""
    name: str
    description: str
    inputSchema: Dict[str, Any]
    content: str = ""
    system: Optional[ProjectSystem] = None
    source_path: Optional[Path] = None


@dataclass(frozen=True)
class RuleFilter:
    """Optional criteria for narrowing a rule set. None means no filtering."""
    category: Optional[RuleCategory] = None
    language: Optional[Language] = None
    codeType: Optional[CodeType] = None

    @classmethod
    def from_text(
        cls,
        category: Optional[str] = None,
        language: Optional[str] = None,
        codeType: Optional[str] = None,
    ) -> "RuleFilter":
        """Build criteria from request text; "all" or empty means any category."""
        return cls(
            category=RuleCategory.from_text(category) if category and category != ALL_CATEGORIES else None,
            language=Language.from_text(language) if language else None,
            codeType=CodeType.from_text(codeType) if codeType else None,
        )


@dataclass(frozen=True)
class RuleCollection:
    """Query result: rules of one system, optionally scoped to a language."""
    system: ProjectSystem
    rules: Tuple[Rule, ...]
    language: Optional[Language] = None

    def __post_init__(self):
        _freeze(self, "rules")
