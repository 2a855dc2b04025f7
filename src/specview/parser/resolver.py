"""Resolve ``$ref`` pointers against the ``components`` section of a description.

OpenAPI documents reuse named parameters, request bodies, and responses via
pointers such as ``{"$ref": "#/components/responses/NotFound"}``.  This
module performs a **single-hop** lookup of such pointers:

1. The pointer must start with the prefix matching the kind of item being
   resolved (see :class:`ComponentKind`).
2. The prefix is stripped to obtain a component name.
3. The name is looked up in the matching ``components`` table.
4. If the entry found there is itself a ``$ref``, it is treated as
   unresolved.  Transitive references are not followed.

Any failure yields ``None``.  Callers treat ``None`` as "omit this element";
it is never an error for the document as a whole.

The public functions are :func:`resolve` and :func:`is_reference`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional


class ComponentKind(str, enum.Enum):
    """Component sections that endpoint elements can point into.

    The value is the section name under ``components``.
    """

    PARAMETER = "parameters"
    REQUEST_BODY = "requestBodies"
    RESPONSE = "responses"
    SCHEMA = "schemas"

    @property
    def prefix(self) -> str:
        """Pointer prefix for this section, e.g. ``#/components/parameters/``."""
        return f"#/components/{self.value}/"


def is_reference(item: Any) -> bool:
    """Return True if *item* is a ``{"$ref": ...}`` object."""
    return isinstance(item, dict) and "$ref" in item


def reference_name(ref: Any, kind: ComponentKind) -> Optional[str]:
    """Strip the *kind* prefix from a pointer string.

    Returns:
        The component name, or ``None`` if *ref* is not a string carrying
        the expected prefix.
    """
    if not isinstance(ref, str) or not ref.startswith(kind.prefix):
        return None
    name = ref[len(kind.prefix):]
    return name or None


def resolve(
    item: Any,
    kind: ComponentKind,
    components: Optional[dict[str, Any]],
) -> Optional[dict[str, Any]]:
    """Return the concrete object for a possibly-referenced *item*.

    Args:
        item: An inline object or a ``{"$ref": ...}`` pointer.
        kind: The component section the pointer must address.
        components: The description's ``components`` mapping, or ``None``
            when the document declares none.

    Returns:
        The inline object itself, the referenced component, or ``None``
        when the pointer cannot be resolved in a single hop.

    Example::

        components = {"responses": {"NotFound": {"description": "Missing"}}}
        resolve({"$ref": "#/components/responses/NotFound"},
                ComponentKind.RESPONSE, components)
        # {'description': 'Missing'}
    """
    if not isinstance(item, dict):
        return None
    if not is_reference(item):
        return item

    name = reference_name(item["$ref"], kind)
    if name is None or not isinstance(components, dict):
        return None

    table = components.get(kind.value)
    if not isinstance(table, dict):
        return None

    target = table.get(name)
    if not isinstance(target, dict) or is_reference(target):
        return None
    return target
