"""Tests for converting frontmatter documents into typed records."""

import pytest

from rules_mcp.catalog.converters import (
    prompt_from_document,
    resource_from_document,
    rule_from_document,
    tool_from_document,
)
from rules_mcp.catalog.parser import ParsedDocument
from rules_mcp.errors import MalformedFields
from rules_mcp.models import CodeType, Language, ProjectSystem, RuleCategory


def doc(metadata, content="Body"):
    return ParsedDocument(metadata=metadata, content=content, source_id="doc.md")


RULE = {
    "id": "ms-arch-001",
    "title": "API Gateway",
    "description": "Use a gateway",
    "category": "architecture",
    "system": "microservice",
}


class TestRuleConversion:
    """Test rule_from_document."""

    def test_required_fields(self):
        rule = rule_from_document(doc(RULE, "# Gateway"))

        assert rule.id == "ms-arch-001"
        assert rule.category is RuleCategory.ARCHITECTURE
        assert rule.system is ProjectSystem.MICROSERVICE
        assert rule.language is None
        assert rule.codeType is None
        assert rule.tags == ()
        assert rule.content == "# Gateway"

    def test_optional_fields(self):
        metadata = dict(RULE, language="python", codeType="test", tags=["a", "b"], examples=["x"])

        rule = rule_from_document(doc(metadata))

        assert rule.language is Language.PYTHON
        assert rule.codeType is CodeType.TEST
        assert rule.tags == ("a", "b")
        assert rule.examples == ("x",)

    def test_description_defaults_to_empty(self):
        metadata = {k: v for k, v in RULE.items() if k != "description"}

        assert rule_from_document(doc(metadata)).description == ""

    def test_unrecognized_values_are_listed(self):
        """Should report every malformed field at once."""
        metadata = dict(RULE, category="misc", language="cobol", codeType="docs")

        with pytest.raises(MalformedFields) as exc:
            rule_from_document(doc(metadata))

        assert set(exc.value.problems) == {"category", "language", "codeType"}
        assert "misc" in exc.value.problems["category"]

    def test_empty_body_is_rejected(self):
        with pytest.raises(MalformedFields) as exc:
            rule_from_document(doc(RULE, content=""))

        assert "content" in exc.value.problems

    def test_system_must_match_directory(self):
        with pytest.raises(MalformedFields) as exc:
            rule_from_document(doc(RULE), expected_system=ProjectSystem.MICROFRONTEND)

        assert "system" in exc.value.problems

    def test_null_required_value(self):
        with pytest.raises(MalformedFields) as exc:
            rule_from_document(doc(dict(RULE, id=None)))

        assert "id" in exc.value.problems

    def test_tags_must_be_a_list(self):
        with pytest.raises(MalformedFields) as exc:
            rule_from_document(doc(dict(RULE, tags="a, b")))

        assert "tags" in exc.value.problems


class TestResourceConversion:

    def test_resource(self):
        resource = resource_from_document(doc({
            "uri": "docs://guide",
            "name": "Guide",
            "description": "A guide",
            "mimeType": "text/markdown",
        }, "Guide body"))

        assert resource.uri == "docs://guide"
        assert resource.mimeType == "text/markdown"
        assert resource.content == "Guide body"

    def test_blank_uri(self):
        with pytest.raises(MalformedFields):
            resource_from_document(doc({"uri": " ", "name": "G", "description": "d", "mimeType": "text/plain"}))


class TestPromptConversion:

    def test_arguments(self):
        prompt = prompt_from_document(doc({
            "name": "design",
            "description": "Design",
            "arguments": [
                {"name": "app_name", "description": "App", "required": True},
                {"name": "framework"},
            ],
        }, "Design {{app_name}}"))

        assert [a.name for a in prompt.arguments] == ["app_name", "framework"]
        assert prompt.arguments[0].required is True
        assert prompt.arguments[1].required is False
        assert prompt.arguments[1].description == ""
        assert prompt.templateBody == "Design {{app_name}}"

    def test_empty_argument_list(self):
        prompt = prompt_from_document(doc({"name": "p", "description": "d", "arguments": []}))

        assert prompt.arguments == ()

    def test_invalid_arguments(self):
        with pytest.raises(MalformedFields) as exc:
            prompt_from_document(doc({
                "name": "p",
                "description": "d",
                "arguments": [{"description": "no name"}, {"name": "x", "required": "yes"}],
            }))

        assert set(exc.value.problems) == {"arguments[0]", "arguments[1]"}

    def test_arguments_must_be_a_list(self):
        with pytest.raises(MalformedFields):
            prompt_from_document(doc({"name": "p", "description": "d", "arguments": "app_name"}))


class TestToolConversion:

    def test_rule_tool(self):
        tool = tool_from_document(doc({
            "name": "get-microservice-rules",
            "description": "Rules",
            "system": "microservice",
            "inputSchema": {"type": "object", "properties": {}},
        }))

        assert tool.system is ProjectSystem.MICROSERVICE
        assert tool.inputSchema["type"] == "object"

    def test_unknown_system(self):
        with pytest.raises(MalformedFields) as exc:
            tool_from_document(doc({
                "name": "t",
                "description": "d",
                "system": "monolith",
                "inputSchema": {"type": "object"},
            }))

        assert "system" in exc.value.problems

    def test_schema_must_be_object(self):
        with pytest.raises(MalformedFields):
            tool_from_document(doc({"name": "t", "description": "d", "inputSchema": {"type": "array"}}))
