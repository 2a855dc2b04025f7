"""Normalize a decoded OpenAPI description into a flat :class:`APISpec`.

This module walks the ``paths`` table of a decoded (but unresolved)
description and produces one :class:`~specview.models.APIEndpoint` per
path + HTTP method pair, sorted by path and then by method priority.

For every operation it:

* merges path-level and operation-level parameters, keyed by ``name`` and
  ``in``; operation-level declarations replace path-level ones sharing the
  same key, the rest are inherited;
* resolves the request body against ``components/requestBodies``;
* resolves each response against ``components/responses`` and stores it
  under its status label (``"200"``, ``"5XX"`` or ``"default"``).

References are resolved with :func:`~specview.parser.resolver.resolve`, a
single-hop lookup.  Anything that cannot be resolved (a broken pointer, a
pointer to another pointer, a response without a description) is omitted
from the result.  A path item that is itself a ``$ref`` contributes no
endpoints.  The only hard failure is a document whose top-level shape
cannot be read at all.

The single public entry point is :func:`normalize`.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from specview.exceptions import SpecLoadError
from specview.models import (
    APIEndpoint,
    APIParameter,
    APISpec,
    HTTPMethod,
    ParameterLocation,
    RequestBodyInfo,
    ResponseInfo,
)
from specview.parser.resolver import ComponentKind, is_reference, resolve
from specview.parser.schema import summarize_content, summarize_schema

_RANGE_STATUS = re.compile(r"^([1-5])[xX]{2}$")
_CODE_STATUS = re.compile(r"^[0-9]{3}$")


def normalize(raw_spec: dict[str, Any], source: Optional[str] = None) -> APISpec:
    """Build an :class:`~specview.models.APISpec` from a decoded description.

    Args:
        raw_spec: The description as returned by
            :func:`~specview.parser.loader.load_description`.
        source: Path of the document, used in error messages.

    Returns:
        The normalized model with endpoints sorted by
        ``(path, method priority)``.

    Raises:
        SpecLoadError: With stage ``structure`` if the document lacks an
            ``info`` object with a title and version, or if ``paths`` is
            not a mapping.

    Example::

        spec = normalize(load_description("petstore.yaml"))
        [(e.method.label, e.path) for e in spec.endpoints]
        # [('GET', '/pets'), ('POST', '/pets'), ('GET', '/pets/{petId}')]
    """
    if not isinstance(raw_spec, dict):
        raise SpecLoadError("description must be an object", stage="structure", source=source)

    info = raw_spec.get("info")
    if not isinstance(info, dict):
        raise SpecLoadError("missing 'info' object", stage="structure", source=source)
    for field in ("title", "version"):
        if info.get(field) is None:
            raise SpecLoadError(f"missing 'info.{field}'", stage="structure", source=source)

    paths = raw_spec.get("paths")
    if paths is None:
        paths = {}
    if not isinstance(paths, dict):
        raise SpecLoadError("'paths' must be an object", stage="structure", source=source)

    components = raw_spec.get("components")
    if not isinstance(components, dict):
        components = None

    endpoints: list[APIEndpoint] = []
    for path, path_item in paths.items():
        if not isinstance(path, str) or path.startswith("x-"):
            continue
        if not isinstance(path_item, dict) or is_reference(path_item):
            continue
        endpoints.extend(_extract_path_endpoints(path, path_item, components))

    endpoints.sort(key=lambda endpoint: endpoint.sort_key)

    description = info.get("description")
    return APISpec(
        title=str(info["title"]),
        version=str(info["version"]),
        description=description if isinstance(description, str) else None,
        endpoints=endpoints,
    )


def _extract_path_endpoints(
    path: str,
    path_item: dict[str, Any],
    components: Optional[dict[str, Any]],
) -> list[APIEndpoint]:
    """Build one endpoint per HTTP method declared on *path_item*."""
    path_params = _as_list(path_item.get("parameters"))
    endpoints: list[APIEndpoint] = []

    for method in HTTPMethod:
        operation = path_item.get(method.value)
        if not isinstance(operation, dict):
            continue

        endpoints.append(
            APIEndpoint(
                method=method,
                path=path,
                summary=_optional_str(operation.get("summary")),
                description=_optional_str(operation.get("description")),
                operation_id=_optional_str(operation.get("operationId")),
                tags=[str(tag) for tag in _as_list(operation.get("tags"))],
                parameters=merge_parameters(
                    path_params,
                    _as_list(operation.get("parameters")),
                    components,
                ),
                request_body=_extract_request_body(operation.get("requestBody"), components),
                responses=_extract_responses(operation.get("responses"), components),
            )
        )

    return endpoints


def merge_parameters(
    path_params: list[Any],
    op_params: list[Any],
    components: Optional[dict[str, Any]],
) -> list[APIParameter]:
    """Merge path-level and operation-level parameters.

    Parameters are keyed by ``(name, location)``.  Path-level entries are
    inserted first and operation-level entries second, so an operation-level
    entry replaces a path-level one with the same key.  The result keeps
    first-insertion order, which is deterministic for a given document.
    Unresolvable parameters are skipped before merging.

    Args:
        path_params: Raw ``parameters`` of the path item.
        op_params: Raw ``parameters`` of the operation.
        components: The description's ``components`` mapping.

    Returns:
        At most one :class:`~specview.models.APIParameter` per key.
    """
    merged: dict[tuple[str, ParameterLocation], APIParameter] = {}
    for raw in [*path_params, *op_params]:
        param = _extract_parameter(raw, components)
        if param is not None:
            merged[(param.name, param.location)] = param
    return list(merged.values())


def _extract_parameter(
    raw: Any,
    components: Optional[dict[str, Any]],
) -> Optional[APIParameter]:
    """Resolve and convert one parameter, or return ``None`` to drop it."""
    param = resolve(raw, ComponentKind.PARAMETER, components)
    if param is None:
        return None

    name = param.get("name")
    if not isinstance(name, str) or not name:
        return None
    try:
        location = ParameterLocation(param.get("in"))
    except ValueError:
        return None

    # Parameters described with ``content`` instead of ``schema`` have no label.
    type_label = summarize_schema(param["schema"]) if "schema" in param else None

    return APIParameter(
        name=name,
        location=location,
        description=_optional_str(param.get("description")),
        required=bool(param.get("required", False)),
        type_label=type_label,
    )


def _extract_request_body(
    raw: Any,
    components: Optional[dict[str, Any]],
) -> Optional[RequestBodyInfo]:
    """Resolve and summarize an operation's ``requestBody``."""
    if raw is None:
        return None
    body = resolve(raw, ComponentKind.REQUEST_BODY, components)
    if body is None:
        return None

    content_types, type_label = summarize_content(body.get("content"))
    return RequestBodyInfo(
        description=_optional_str(body.get("description")),
        required=bool(body.get("required", False)),
        content_types=content_types,
        type_label=type_label,
    )


def _extract_responses(
    raw: Any,
    components: Optional[dict[str, Any]],
) -> dict[str, ResponseInfo]:
    """Resolve and summarize every declared response, keyed by status label.

    The mapping is ordered by status label.
    """
    if not isinstance(raw, dict):
        return {}

    responses: dict[str, ResponseInfo] = {}
    for key, value in raw.items():
        status = format_status_key(key)
        if status is None:
            continue
        response = resolve(value, ComponentKind.RESPONSE, components)
        if response is None:
            continue
        description = response.get("description")
        if not isinstance(description, str):
            continue

        content_types, type_label = summarize_content(response.get("content"))
        responses[status] = ResponseInfo(
            status_code=status,
            description=description,
            content_types=content_types,
            type_label=type_label,
        )

    return dict(sorted(responses.items()))


def format_status_key(key: Any) -> Optional[str]:
    """Format a ``responses`` key as a status label.

    ``200`` and ``"200"`` become ``"200"``, ``"5xx"`` becomes ``"5XX"`` and
    ``"default"`` stays ``"default"``.  Anything else (extensions such as
    ``x-internal``) returns ``None``.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return str(key)
    if not isinstance(key, str):
        return None
    if key == "default":
        return key
    if _CODE_STATUS.match(key):
        return key
    match = _RANGE_STATUS.match(key)
    if match:
        return f"{match.group(1)}XX"
    return None


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
