"""API description parser -- load, resolve ``$ref`` pointers, and normalize.

This sub-package turns an OpenAPI 3.x document (JSON or YAML, local file)
into an :class:`~specview.models.APISpec` that the browser can display.

Typical usage::

    from specview.parser import load_description, validate_openapi_version, normalize

    raw = load_description("openapi.yaml")
    validate_openapi_version(raw)
    spec = normalize(raw)

Sub-modules:

* :mod:`~specview.parser.loader` -- I/O layer plus format detection and
  OpenAPI version validation.
* :mod:`~specview.parser.resolver` -- Single-hop ``$ref`` lookup in the
  ``components`` section.
* :mod:`~specview.parser.schema` -- Schema-to-label summarizer.
* :mod:`~specview.parser.normalizer` -- Walks ``paths`` and produces the
  sorted endpoint list.
"""

from specview.parser.loader import (
    load_api_spec,
    load_description,
    validate_openapi_version,
)
from specview.parser.normalizer import normalize

__all__ = [
    "load_api_spec",
    "load_description",
    "validate_openapi_version",
    "normalize",
]
