"""Canonical Pydantic models shared across all specview modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into two groups:

**Configuration models** -- loaded from JSON in the user's config directory:
    :class:`ViewerConfig`, :class:`OutputConfig`, and :class:`GlobalConfig`.

**Normalized description models** -- produced by the normalizer and consumed
by the browser session and the renderers:
    :class:`HTTPMethod`, :class:`ParameterLocation`, :class:`APIParameter`,
    :class:`RequestBodyInfo`, :class:`ResponseInfo`, :class:`APIEndpoint`,
    and :class:`APISpec`.

Normalized models are frozen: once the normalizer has built an
:class:`APISpec` nothing downstream can reassign its fields.
"""

from __future__ import annotations

import enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Config ---


class ViewerConfig(BaseModel):
    """Interactive browser settings stored in :class:`GlobalConfig`."""

    poll_interval_ms: int = Field(
        default=100,
        ge=10,
        le=1000,
        description="How long the event loop waits for a key before redrawing",
    )
    list_width_percent: int = Field(
        default=40,
        ge=20,
        le=80,
        description="Width of the endpoint list pane as a share of the screen",
    )
    vim_keys: bool = Field(
        default=True, description="Navigate the list with j/k as well as arrows"
    )


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto",
        description="Format used when neither --json nor --plain is given",
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/specview/config.json``.

    Loaded by :func:`~specview.config.load_global_config`. Fields here have
    the lowest precedence and can be overridden by environment variables or
    CLI flags. See :func:`~specview.config.resolve_config` for the full
    precedence chain.
    """

    viewer: ViewerConfig = Field(default_factory=ViewerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Normalized description ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised by OpenAPI 3.x path-item objects.

    Declaration order is the display priority used when sorting endpoints
    that share a path.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"
    TRACE = "trace"

    @property
    def label(self) -> str:
        """Upper-case display form, e.g. ``"GET"``."""
        return self.value.upper()

    @property
    def priority(self) -> int:
        """Sort rank: GET < POST < PUT < PATCH < DELETE < HEAD < OPTIONS < TRACE."""
        return _METHOD_PRIORITY[self]


_METHOD_PRIORITY = {method: rank for rank, method in enumerate(HTTPMethod)}


class ParameterLocation(str, enum.Enum):
    """Locations where an API parameter can appear, per OpenAPI ``in`` field."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class APIParameter(BaseModel):
    """A single parameter of an endpoint after path/operation merging.

    At most one parameter exists per ``(name, location)`` pair within an
    endpoint.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    location: ParameterLocation
    description: Optional[str] = None
    required: bool = False
    type_label: Optional[str] = Field(
        default=None, description="Short schema label, e.g. 'integer' or 'Pet'"
    )


class RequestBodyInfo(BaseModel):
    """Request body summary for an :class:`APIEndpoint`.

    ``type_label`` is derived from the first content entry only; the other
    entries contribute their media type to ``content_types``.
    """

    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    required: bool = False
    content_types: list[str] = Field(default_factory=list)
    type_label: Optional[str] = None


class ResponseInfo(BaseModel):
    """Response summary stored under a status label (``"200"``, ``"5XX"``, ``"default"``)."""

    model_config = ConfigDict(frozen=True)

    status_code: str
    description: str
    content_types: list[str] = Field(default_factory=list)
    type_label: Optional[str] = None


class APIEndpoint(BaseModel):
    """One path + HTTP method pair declared in the description."""

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    path: str
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    parameters: list[APIParameter] = Field(default_factory=list)
    request_body: Optional[RequestBodyInfo] = None
    responses: dict[str, ResponseInfo] = Field(default_factory=dict)

    @property
    def sort_key(self) -> tuple[str, int]:
        """Key ordering endpoints by path, then by method priority."""
        return (self.path, self.method.priority)


class APISpec(BaseModel):
    """Flat, renderer-ready representation of an API description.

    Built once by :func:`~specview.parser.normalizer.normalize` and owned by
    the browser session for the lifetime of the process.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    version: str
    description: Optional[str] = None
    endpoints: list[APIEndpoint] = Field(default_factory=list)
