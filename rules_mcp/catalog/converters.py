"""
Record converters.

Turn validated frontmatter mappings into typed records. Every problem in a
document is collected before failing so one warning names all of them.
"""

from typing import Any, Callable

from rules_mcp.catalog.parser import ParsedDocument
from rules_mcp.errors import MalformedFields, UnknownValue
from rules_mcp.models import (
    CodeType,
    Language,
    ProjectSystem,
    PromptArgument,
    PromptTemplate,
    Resource,
    Rule,
    RuleCategory,
    ToolDefinition,
)

RULE_FIELDS = ("id", "title", "category", "system")
RESOURCE_FIELDS = ("uri", "name", "description", "mimeType")
PROMPT_FIELDS = ("name", "description", "arguments")
TOOL_FIELDS = ("name", "description", "inputSchema")


class _FieldReader:
    """Reads typed values from a metadata mapping, recording problems."""

    def __init__(self, document: ParsedDocument):
        self.document = document
        self.metadata = document.metadata
        self.problems: dict[str, str] = {}

    def text(self, name: str, required: bool = True, default: str = "") -> str:
        value = self.metadata.get(name)
        if value is None:
            if required:
                self.problems[name] = "must be a non-empty string"
            return default
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            self.problems[name] = "must be a string"
            return default
        value = str(value).strip()
        if required and not value:
            self.problems[name] = "must be a non-empty string"
        return value

    def choice(self, name: str, parse: Callable[[Any], Any], required: bool = True):
        value = self.metadata.get(name)
        if value is None or value == "":
            if required:
                self.problems[name] = "is required"
            return None
        try:
            return parse(value)
        except UnknownValue as e:
            self.problems[name] = f"unrecognized value {value!r}, expected one of: {', '.join(e.allowed)}"
            return None

    def text_list(self, name: str) -> list[str]:
        value = self.metadata.get(name)
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(item, (str, int, float)) for item in value):
            self.problems[name] = "must be a list of strings"
            return []
        return [str(item) for item in value]

    def mapping(self, name: str) -> dict[str, Any]:
        value = self.metadata.get(name)
        if not isinstance(value, dict):
            self.problems[name] = "must be a mapping"
            return {}
        return value

    def finish(self) -> None:
        if self.problems:
            raise MalformedFields(self.document.source_id, self.problems)


def rule_from_document(document: ParsedDocument, expected_system: ProjectSystem | None = None) -> Rule:
    """Convert a rule document; the body becomes the rule content."""
    reader = _FieldReader(document)
    rule_id = reader.text("id")
    title = reader.text("title")
    description = reader.text("description", required=False)
    category = reader.choice("category", RuleCategory.from_text)
    system = reader.choice("system", ProjectSystem.from_text)
    language = reader.choice("language", Language.from_text, required=False)
    code_type = reader.choice("codeType", CodeType.from_text, required=False)
    tags = reader.text_list("tags")
    examples = reader.text_list("examples")

    if not document.content:
        reader.problems["content"] = "rule body is empty"
    if expected_system is not None and system is not None and system != expected_system:
        reader.problems["system"] = f"{system.value!r} does not match directory {expected_system.value!r}"
    reader.finish()

    return Rule(
        id=rule_id,
        title=title,
        description=description,
        category=category,
        system=system,
        content=document.content,
        language=language,
        codeType=code_type,
        tags=tags,
        examples=examples,
    )


def resource_from_document(document: ParsedDocument) -> Resource:
    reader = _FieldReader(document)
    resource = Resource(
        uri=reader.text("uri"),
        name=reader.text("name"),
        description=reader.text("description"),
        mimeType=reader.text("mimeType"),
        content=document.content,
    )
    reader.finish()
    return resource


def prompt_from_document(document: ParsedDocument) -> PromptTemplate:
    """Convert a prompt document; the body is the template."""
    reader = _FieldReader(document)
    name = reader.text("name")
    description = reader.text("description")

    arguments: list[PromptArgument] = []
    raw_arguments = document.metadata.get("arguments")
    if raw_arguments is None:
        raw_arguments = []
    if not isinstance(raw_arguments, list):
        reader.problems["arguments"] = "must be a list"
        raw_arguments = []

    seen: set[str] = set()
    for index, item in enumerate(raw_arguments):
        key = f"arguments[{index}]"
        if not isinstance(item, dict) or not isinstance(item.get("name"), str) or not item["name"].strip():
            reader.problems[key] = "must be a mapping with a non-empty name"
            continue
        arg_name = item["name"].strip()
        if arg_name in seen:
            reader.problems[key] = f"duplicate argument {arg_name!r}"
            continue
        required = item.get("required", False)
        if not isinstance(required, bool):
            reader.problems[key] = "required must be true or false"
            continue
        seen.add(arg_name)
        arguments.append(PromptArgument(
            name=arg_name,
            description=str(item.get("description") or ""),
            required=required,
        ))

    reader.finish()
    return PromptTemplate(
        name=name,
        description=description,
        arguments=arguments,
        templateBody=document.content,
    )


def tool_from_document(document: ParsedDocument) -> ToolDefinition:
    reader = _FieldReader(document)
    name = reader.text("name")
    description = reader.text("description")
    input_schema = reader.mapping("inputSchema")
    system = reader.choice("system", ProjectSystem.from_text, required=False)

    if input_schema and input_schema.get("type", "object") != "object":
        reader.problems["inputSchema"] = "type must be 'object'"
    reader.finish()

    return ToolDefinition(
        name=name,
        description=description,
        inputSchema=input_schema,
        content=document.content,
        system=system,
        source_path=document.path,
    )
