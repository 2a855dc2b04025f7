"""Inspect commands -- print description details without the browser.

Provides the ``specview paths`` and ``specview info`` commands.  Both load
and normalize a description exactly like the browser does, then present
the result as a table or structured output.  ``paths`` accepts the same
case-insensitive path filter the browser's search uses.
"""

from __future__ import annotations

from typing import Optional

import typer

from specview.exceptions import SpecLoadError
from specview.models import APISpec
from specview.output import debug, error, format_response, get_output, info
from specview.tui.session import filter_indices


def load_spec_or_exit(spec_file: str) -> APISpec:
    """Load and normalize *spec_file*, exiting with its error code on failure.

    Raises:
        typer.Exit: With :data:`~specview.exit_codes.EXIT_SPEC_LOAD_ERROR`
            when the description cannot be loaded.
    """
    from specview.parser import load_api_spec

    try:
        spec = load_api_spec(spec_file)
    except SpecLoadError as exc:
        error(f"Failed to load description: {exc}")
        raise typer.Exit(code=exc.exit_code) from None

    debug(f"Normalized {len(spec.endpoints)} endpoints from {spec_file}")
    return spec


def paths_command(
    spec_file: str = typer.Argument(..., help="OpenAPI description (JSON or YAML)."),
    filter_query: Optional[str] = typer.Option(
        None, "--filter", "-f", help="Only show paths containing this text (case-insensitive)."
    ),
) -> None:
    """List every endpoint in the description.

    Endpoints are sorted by path, then by method (GET, POST, PUT, PATCH,
    DELETE, HEAD, OPTIONS, TRACE).

    Example::

        specview paths openapi.yaml
        specview paths openapi.yaml --filter users
    """
    spec = load_spec_or_exit(spec_file)
    indices = filter_indices(spec.endpoints, filter_query or "")

    if not indices:
        info("No matching endpoints.")
        return

    rows: list[list[str]] = []
    for index in indices:
        endpoint = spec.endpoints[index]
        rows.append([endpoint.method.label, endpoint.path, endpoint.summary or "-"])

    get_output().print_table(
        ["Method", "Path", "Summary"],
        rows,
        title=f"{spec.title} v{spec.version} -- Paths ({len(rows)})",
    )


def info_command(
    spec_file: str = typer.Argument(..., help="OpenAPI description (JSON or YAML)."),
) -> None:
    """Show API info (title, version, description, endpoint count).

    Example::

        specview info openapi.yaml
        specview --json info openapi.yaml
    """
    spec = load_spec_or_exit(spec_file)

    data: dict = {
        "title": spec.title,
        "version": spec.version,
        "description": spec.description or "-",
        "endpoints": len(spec.endpoints),
    }
    format_response(data)
