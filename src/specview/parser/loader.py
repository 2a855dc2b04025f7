"""Read API descriptions from local files and decode them into dictionaries.

This module is the storage and format boundary of the pipeline. It supports
JSON and YAML with extension-based format selection and a JSON-then-YAML
fallback for unrecognised extensions, and validates that the document
declares a supported OpenAPI version (3.x).

The public functions are:

* :func:`read_description` -- Read the raw text of a description file.
* :func:`parse_description` -- Decode raw text as JSON or YAML.
* :func:`load_description` -- Both of the above in one call.
* :func:`validate_openapi_version` -- Reject Swagger 2.x and non-3.x documents.
* :func:`load_api_spec` -- Full pipeline: read, decode, validate, normalize.

Every failure is raised as :class:`~specview.exceptions.SpecLoadError`
tagged with the stage that failed and the offending path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml

from specview.exceptions import SpecLoadError
from specview.models import APISpec
from specview.parser.normalizer import normalize


def read_description(path: str | Path) -> str:
    """Read a description file as UTF-8 text.

    Args:
        path: Path to the local file.

    Returns:
        The raw file content.

    Raises:
        SpecLoadError: With stage ``read`` if the file is missing,
            unreadable, or empty.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecLoadError("file not found", stage="read", source=str(path))

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecLoadError(f"cannot read file: {exc}", stage="read", source=str(path)) from exc

    if not content.strip():
        raise SpecLoadError("file is empty", stage="read", source=str(path))

    return content


def format_hint(path: str | Path) -> str:
    """Return ``"json"``, ``"yaml"`` or ``""`` based on the file extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return ""


def parse_description(
    content: str,
    hint: str = "",
    source: Optional[str] = None,
) -> dict[str, Any]:
    """Decode *content* as JSON or YAML.

    A ``json`` hint only tries JSON and a ``yaml`` hint only tries YAML.
    Without a hint, JSON is attempted first and YAML second.

    Args:
        content: The raw string content.
        hint: Optional format hint (``"json"`` or ``"yaml"``).
        source: Path used in error messages.

    Returns:
        The decoded mapping.

    Raises:
        SpecLoadError: If the content cannot be decoded, or decodes to
            something other than a mapping.
    """
    if hint == "json":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            raise SpecLoadError(f"invalid JSON: {exc}", stage="json", source=source) from exc
        return _require_mapping(result, source)

    if hint == "yaml":
        try:
            result = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise SpecLoadError(f"invalid YAML: {_one_line(exc)}", stage="yaml", source=source) from exc
        return _require_mapping(result, source)

    try:
        return _require_mapping(json.loads(content), source)
    except json.JSONDecodeError as exc:
        json_error: Exception = exc

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SpecLoadError(
            "not valid as JSON or YAML "
            f"(JSON error: {json_error}; YAML error: {_one_line(exc)})",
            stage="parse",
            source=source,
        ) from exc
    return _require_mapping(result, source)


def _require_mapping(result: Any, source: Optional[str]) -> dict[str, Any]:
    """Ensure the decoded document is a mapping."""
    if not isinstance(result, dict):
        found = type(result).__name__ if result is not None else "empty document"
        raise SpecLoadError(
            f"description must be a JSON/YAML object (got {found})",
            stage="structure",
            source=source,
        )
    return result


def _one_line(exc: Exception) -> str:
    """Collapse a multi-line parser message into one line."""
    return " ".join(str(exc).split())


def load_description(path: str | Path) -> dict[str, Any]:
    """Read and decode a description file.

    Raises:
        SpecLoadError: If the file cannot be read or decoded.
    """
    content = read_description(path)
    return parse_description(content, hint=format_hint(path), source=str(path))


def validate_openapi_version(spec: dict[str, Any], source: Optional[str] = None) -> str:
    """Validate and return the OpenAPI version string.

    Supports OpenAPI 3.x. Raises for Swagger 2.x, missing version fields,
    or other versions.

    Args:
        spec: The decoded description.
        source: Path used in error messages.

    Returns:
        The OpenAPI version string (e.g., ``'3.0.3'``, ``'3.1.0'``).

    Raises:
        SpecLoadError: With stage ``version``.
    """
    if "swagger" in spec:
        raise SpecLoadError(
            f"Swagger {spec['swagger']} is not supported; "
            "only OpenAPI 3.0.x and 3.1.x descriptions can be browsed",
            stage="version",
            source=source,
        )

    openapi_version = spec.get("openapi")
    if openapi_version is None:
        raise SpecLoadError(
            "missing 'openapi' field; is this an OpenAPI 3.x document?",
            stage="version",
            source=source,
        )

    version_str = str(openapi_version)
    if version_str.startswith("3."):
        return version_str

    raise SpecLoadError(
        f"unsupported OpenAPI version: {version_str}",
        stage="version",
        source=source,
    )


def load_api_spec(path: str | Path) -> APISpec:
    """Load a description file and normalize it into an :class:`APISpec`.

    Example::

        spec = load_api_spec("petstore.yaml")
        for endpoint in spec.endpoints:
            print(endpoint.method.label, endpoint.path)
    """
    raw = load_description(path)
    validate_openapi_version(raw, source=str(path))
    return normalize(raw, source=str(path))
