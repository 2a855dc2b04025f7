"""Tests for specview.parser.loader."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from specview.exceptions import SpecLoadError
from specview.exit_codes import EXIT_SPEC_LOAD_ERROR
from specview.parser.loader import (
    format_hint,
    load_api_spec,
    load_description,
    parse_description,
    read_description,
    validate_openapi_version,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# read_description
# ---------------------------------------------------------------------------


class TestReadDescription:
    """Test reading raw description text from disk."""

    def test_reads_file_content(self) -> None:
        content = read_description(FIXTURES_DIR / "petstore.yaml")
        assert "Petstore API" in content

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.yaml"
        with pytest.raises(SpecLoadError, match="file not found") as exc_info:
            read_description(missing)
        assert exc_info.value.stage == "read"
        assert exc_info.value.source == str(missing)

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SpecLoadError) as exc_info:
            read_description(tmp_path)
        assert exc_info.value.stage == "read"

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.json"
        empty.write_text("  \n", encoding="utf-8")
        with pytest.raises(SpecLoadError, match="empty"):
            read_description(empty)


# ---------------------------------------------------------------------------
# parse_description
# ---------------------------------------------------------------------------


class TestParseDescription:
    """Test JSON/YAML decoding with and without a format hint."""

    def test_json_hint(self) -> None:
        result = parse_description('{"openapi": "3.0.0"}', hint="json")
        assert result == {"openapi": "3.0.0"}

    def test_yaml_hint(self) -> None:
        result = parse_description("openapi: '3.0.0'\n", hint="yaml")
        assert result == {"openapi": "3.0.0"}

    def test_invalid_json_with_json_hint(self) -> None:
        with pytest.raises(SpecLoadError, match="invalid JSON") as exc_info:
            parse_description("{not json", hint="json", source="api.json")
        assert exc_info.value.stage == "json"
        assert str(exc_info.value).startswith("json: api.json: ")

    def test_invalid_yaml_with_yaml_hint(self) -> None:
        with pytest.raises(SpecLoadError, match="invalid YAML") as exc_info:
            parse_description("key: [unclosed", hint="yaml")
        assert exc_info.value.stage == "yaml"

    def test_fallback_tries_json_first(self) -> None:
        assert parse_description('{"a": 1}') == {"a": 1}

    def test_fallback_to_yaml(self) -> None:
        content = textwrap.dedent("""\
            openapi: "3.1.0"
            info:
              title: Fallback
        """)
        result = parse_description(content)
        assert result["info"]["title"] == "Fallback"

    def test_fallback_reports_both_errors(self) -> None:
        with pytest.raises(SpecLoadError) as exc_info:
            parse_description("{bad: [", source="api.txt")
        message = str(exc_info.value)
        assert exc_info.value.stage == "parse"
        assert "JSON error" in message
        assert "YAML error" in message

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(SpecLoadError, match="got list") as exc_info:
            parse_description("[1, 2, 3]", hint="json")
        assert exc_info.value.stage == "structure"

    def test_empty_yaml_document_rejected(self) -> None:
        with pytest.raises(SpecLoadError, match="empty document"):
            parse_description("# only a comment\n", hint="yaml")


class TestFormatHint:
    """Test extension-based format selection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("api.json", "json"),
            ("API.JSON", "json"),
            ("api.yaml", "yaml"),
            ("api.yml", "yaml"),
            ("api.txt", ""),
            ("api", ""),
        ],
    )
    def test_hint(self, name: str, expected: str) -> None:
        assert format_hint(name) == expected


# ---------------------------------------------------------------------------
# validate_openapi_version
# ---------------------------------------------------------------------------


class TestValidateOpenAPIVersion:
    """Test OpenAPI version validation."""

    def test_accepts_30(self) -> None:
        assert validate_openapi_version({"openapi": "3.0.3"}) == "3.0.3"

    def test_accepts_31(self) -> None:
        assert validate_openapi_version({"openapi": "3.1.0"}) == "3.1.0"

    def test_rejects_swagger(self) -> None:
        with pytest.raises(SpecLoadError, match="Swagger 2.0 is not supported") as exc_info:
            validate_openapi_version({"swagger": "2.0"})
        assert exc_info.value.stage == "version"

    def test_rejects_missing_field(self) -> None:
        with pytest.raises(SpecLoadError, match="missing 'openapi' field"):
            validate_openapi_version({"info": {}})

    def test_rejects_other_major(self) -> None:
        with pytest.raises(SpecLoadError, match="unsupported OpenAPI version: 4.0.0"):
            validate_openapi_version({"openapi": "4.0.0"})


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------


class TestLoadApiSpec:
    """Test load_description and load_api_spec end to end."""

    def test_load_description_yaml(self) -> None:
        raw = load_description(FIXTURES_DIR / "petstore.yaml")
        assert raw["info"]["title"] == "Petstore API"

    def test_load_description_json(self) -> None:
        raw = load_description(FIXTURES_DIR / "broken_refs.json")
        assert raw["openapi"] == "3.1.0"

    def test_load_api_spec_petstore(self) -> None:
        spec = load_api_spec(FIXTURES_DIR / "petstore.yaml")
        assert spec.title == "Petstore API"
        assert spec.version == "1.0.0"
        assert len(spec.endpoints) == 5

    def test_load_api_spec_rejects_swagger(self, tmp_path: Path) -> None:
        path = tmp_path / "swagger.json"
        path.write_text(json.dumps({"swagger": "2.0", "info": {}}), encoding="utf-8")
        with pytest.raises(SpecLoadError) as exc_info:
            load_api_spec(path)
        assert exc_info.value.stage == "version"
        assert exc_info.value.exit_code == EXIT_SPEC_LOAD_ERROR

    def test_load_api_spec_structure_error(self, tmp_path: Path) -> None:
        path = tmp_path / "noinfo.json"
        path.write_text(json.dumps({"openapi": "3.0.0", "paths": {}}), encoding="utf-8")
        with pytest.raises(SpecLoadError, match="missing 'info' object") as exc_info:
            load_api_spec(path)
        assert exc_info.value.source == str(path)
