"""Tests for specview.parser.schema."""

from __future__ import annotations

import pytest

from specview.parser.schema import summarize_content, summarize_schema


class TestSummarizeSchema:
    """Test schema label extraction."""

    def test_schema_reference_name(self) -> None:
        assert summarize_schema({"$ref": "#/components/schemas/Pet"}) == "Pet"

    def test_reference_into_other_section(self) -> None:
        assert summarize_schema({"$ref": "#/components/responses/Pet"}) is None

    @pytest.mark.parametrize(
        "type_name", ["string", "number", "integer", "boolean", "array", "object"]
    )
    def test_primitive(self, type_name: str) -> None:
        assert summarize_schema({"type": type_name}) == type_name

    def test_format_ignored(self) -> None:
        assert summarize_schema({"type": "integer", "format": "int64"}) == "integer"

    def test_type_array_first_primitive(self) -> None:
        assert summarize_schema({"type": ["null", "string"]}) == "string"

    def test_type_array_without_primitive(self) -> None:
        assert summarize_schema({"type": ["null"]}) is None

    def test_composition_without_type(self) -> None:
        assert summarize_schema({"oneOf": [{"type": "string"}, {"type": "integer"}]}) is None

    def test_composition_with_primitive_type(self) -> None:
        assert summarize_schema({"type": "object", "allOf": [{}]}) == "object"

    def test_advisory_type_verbatim(self) -> None:
        assert summarize_schema({"type": "file"}) == "file"

    def test_empty_schema(self) -> None:
        assert summarize_schema({}) is None

    def test_not_a_mapping(self) -> None:
        assert summarize_schema(None) is None


class TestSummarizeContent:
    """Test media-type map summaries."""

    def test_keeps_declaration_order_and_uses_first_schema(self) -> None:
        content = {
            "application/xml": {"schema": {"type": "string"}},
            "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
        }
        assert summarize_content(content) == (["application/xml", "application/json"], "string")

    def test_first_entry_without_schema(self) -> None:
        content = {"text/plain": {}, "application/json": {"schema": {"type": "object"}}}
        assert summarize_content(content) == (["text/plain", "application/json"], None)

    def test_empty(self) -> None:
        assert summarize_content({}) == ([], None)

    def test_missing(self) -> None:
        assert summarize_content(None) == ([], None)
