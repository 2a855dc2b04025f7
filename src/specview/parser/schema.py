"""Reduce schemas to short human-readable labels.

The browser shows one word per schema: either the primitive JSON Schema
type (``string``, ``integer``, ...) or, for a pointer into
``#/components/schemas/``, the referenced schema's *name*.  The name is
shown verbatim and is not resolved further.
"""

from __future__ import annotations

from typing import Any, Optional

from specview.parser.resolver import ComponentKind, is_reference, reference_name

PRIMITIVE_TYPES = frozenset(
    {"string", "number", "integer", "boolean", "array", "object"}
)

_COMPOSITION_KEYWORDS = ("oneOf", "allOf", "anyOf", "not")


def summarize_schema(schema: Any) -> Optional[str]:
    """Return a label for *schema*, or ``None`` if it has none.

    Rules, first match wins:

    1. A ``#/components/schemas/<Name>`` pointer yields ``<Name>``.
       Pointers into any other section yield ``None``.
    2. A primitive ``type`` yields that type.  OpenAPI 3.1 type arrays
       yield their first non-null primitive.
    3. Composed schemas (``oneOf``/``allOf``/``anyOf``/``not``) without a
       primitive type yield ``None``.
    4. Any other string ``type`` is an advisory hint and is used verbatim.

    Examples::

        summarize_schema({"$ref": "#/components/schemas/Pet"})   # 'Pet'
        summarize_schema({"type": "integer", "format": "int64"})  # 'integer'
        summarize_schema({"type": ["string", "null"]})           # 'string'
        summarize_schema({"type": "file"})                       # 'file'
        summarize_schema({})                                     # None
    """
    if not isinstance(schema, dict):
        return None

    if is_reference(schema):
        return reference_name(schema["$ref"], ComponentKind.SCHEMA)

    type_value = schema.get("type")
    if isinstance(type_value, list):
        for candidate in type_value:
            if candidate in PRIMITIVE_TYPES:
                return candidate
        return None

    if type_value in PRIMITIVE_TYPES:
        return type_value

    if any(keyword in schema for keyword in _COMPOSITION_KEYWORDS):
        return None

    if isinstance(type_value, str) and type_value:
        return type_value
    return None


def summarize_content(content: Any) -> tuple[list[str], Optional[str]]:
    """Summarize a media-type mapping (``content`` of a body or response).

    Returns:
        A ``(content_types, type_label)`` tuple.  ``content_types`` keeps
        declaration order; ``type_label`` comes from the first entry only.
    """
    if not isinstance(content, dict) or not content:
        return [], None

    content_types = [str(media_type) for media_type in content]
    first = next(iter(content.values()))
    type_label = None
    if isinstance(first, dict):
        type_label = summarize_schema(first.get("schema"))
    return content_types, type_label
