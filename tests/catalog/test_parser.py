"""Tests for frontmatter parsing and required field validation."""

import pytest

from rules_mcp.catalog.parser import parse_document, split_frontmatter, validate_required_fields
from rules_mcp.errors import InvalidDocument, MissingFields


class TestParseDocument:
    """Test parse_document."""

    def test_parses_scalars_and_sequences(self):
        """Should read scalar and list values from the frontmatter."""
        raw = "---\nid: r-1\ntitle: Rule\ntags:\n  - a\n  - b\n---\n\n  Body text.  \n\n"

        document = parse_document(raw, "rule.md")

        assert document.metadata == {"id": "r-1", "title": "Rule", "tags": ["a", "b"]}
        assert document.content == "Body text."
        assert document.source_id == "rule.md"

    def test_no_frontmatter_means_empty_metadata(self):
        """Should treat the whole text as body when there is no frontmatter."""
        document = parse_document("# Just markdown\n", "plain.md")

        assert document.metadata == {}
        assert document.content == "# Just markdown"

    def test_empty_frontmatter(self):
        """Should accept an empty frontmatter block."""
        document = parse_document("---\n---\nBody", "empty.md")

        assert document.metadata == {}
        assert document.content == "Body"

    def test_frontmatter_must_start_the_document(self):
        """A --- block after other text is body, not metadata."""
        document = parse_document("Intro\n---\nid: x\n---\n", "late.md")

        assert document.metadata == {}

    def test_invalid_yaml(self):
        """Should raise InvalidDocument for malformed YAML."""
        with pytest.raises(InvalidDocument) as exc:
            parse_document("---\nid: [unclosed\n---\nBody", "bad.md")

        assert exc.value.source_id == "bad.md"

    def test_non_mapping_frontmatter(self):
        """Should raise InvalidDocument when frontmatter is a list."""
        with pytest.raises(InvalidDocument):
            parse_document("---\n- a\n- b\n---\nBody", "list.md")

    def test_body_keeps_inner_separators(self):
        """Horizontal rules inside the body are not frontmatter."""
        document = parse_document("---\nid: x\n---\nOne\n\n---\n\nTwo\n", "hr.md")

        assert document.metadata == {"id": "x"}
        assert document.content == "One\n\n---\n\nTwo"

    def test_split_frontmatter_windows_newlines(self):
        """Should recognise CRLF line endings."""
        block, body = split_frontmatter("---\r\nid: x\r\n---\r\nBody")

        assert block is not None
        assert "id: x" in block
        assert body == "Body"

    def test_leading_byte_order_mark(self):
        document = parse_document("\ufeff---\nuri: docs://bom\n---\nBody", "bom.md")

        assert document.metadata == {"uri": "docs://bom"}
        assert document.content == "Body"


class TestValidateRequiredFields:
    """Test validate_required_fields."""

    def test_all_present(self):
        validate_required_fields({"id": 1, "title": "t"}, ["id", "title"], "ok.md")

    def test_lists_every_missing_field(self):
        """Should name exactly the missing fields, in required order."""
        with pytest.raises(MissingFields) as exc:
            validate_required_fields({"title": "t"}, ["id", "title", "category", "system"], "rule.md")

        assert exc.value.missing == ["id", "category", "system"]
        assert exc.value.source_id == "rule.md"
        assert "id, category, system" in str(exc.value)

    def test_null_value_counts_as_present(self):
        """Presence is about keys; values are checked by the converters."""
        validate_required_fields({"id": None}, ["id"], "null.md")
