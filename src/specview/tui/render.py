"""Rich renderables for the two-pane browser.

Rendering is read-only: every function here takes a
:class:`~specview.tui.session.BrowserSession` (or an endpoint) and returns
Rich objects without touching the session.  The left pane lists the
filtered endpoints, the right pane shows the selected endpoint's details
starting at the session's scroll offset.
"""

from __future__ import annotations

from rich.console import Group
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from specview.models import APIEndpoint, HTTPMethod, ParameterLocation, ViewerConfig
from specview.tui.session import BrowserSession, Focus

METHOD_WIDTH = max(len(method.label) for method in HTTPMethod)

_METHOD_COLORS = {
    HTTPMethod.GET: "green",
    HTTPMethod.POST: "blue",
    HTTPMethod.PUT: "yellow",
    HTTPMethod.DELETE: "red",
    HTTPMethod.PATCH: "cyan",
    HTTPMethod.HEAD: "magenta",
    HTTPMethod.OPTIONS: "grey62",
    HTTPMethod.TRACE: "grey62",
}

_STATUS_COLORS = {
    "2": "green",
    "3": "yellow",
    "4": "red",
    "5": "magenta",
}

_LOCATION_ORDER = (
    ParameterLocation.PATH,
    ParameterLocation.QUERY,
    ParameterLocation.HEADER,
    ParameterLocation.COOKIE,
)

_HELP = "↑/↓ move  enter details  esc back  / search  q quit"


def method_color(method: HTTPMethod) -> str:
    return _METHOD_COLORS[method]


def status_color(status: str) -> str:
    return _STATUS_COLORS.get(status[:1], "grey62")


def border_style(focused: bool) -> str:
    return "cyan" if focused else "grey37"


# ------------------------------------------------------------------ #
# List pane
# ------------------------------------------------------------------ #


def list_title(session: BrowserSession) -> str:
    """Title of the list pane: API title and version, plus filter status."""
    spec = session.spec
    title = f"{spec.title} v{spec.version}"
    if session.search_query and not session.search_mode:
        title += (
            f" [{session.search_query}]"
            f" ({len(session.filtered_indices)}/{len(spec.endpoints)})"
        )
    return title


def visible_window(selected: int, count: int, rows: int) -> range:
    """Return the slice of list positions to draw so *selected* stays visible."""
    rows = max(1, rows)
    start = max(0, selected - rows + 1)
    return range(start, min(count, start + rows))


def render_list(session: BrowserSession, rows: int) -> Panel:
    """Render the filtered endpoint list, windowed to *rows* lines."""
    lines: list[Text] = []
    window = visible_window(session.selected_index, len(session.filtered_indices), rows)
    for position in window:
        endpoint = session.spec.endpoints[session.filtered_indices[position]]
        selected = position == session.selected_index
        line = Text.assemble(
            ("> " if selected else "  "),
            (f"{endpoint.method.label:<{METHOD_WIDTH}}", method_color(endpoint.method)),
            " ",
            endpoint.path,
        )
        if selected:
            line.stylize("bold on grey23")
        lines.append(line)

    if not lines:
        lines.append(Text("No matching endpoints", style="grey50"))

    return Panel(
        Group(*lines),
        title=Text(list_title(session)),
        title_align="left",
        subtitle=Text(_HELP, style="grey50"),
        border_style=border_style(session.focus == Focus.LIST and not session.search_mode),
    )


def render_search_bar(session: BrowserSession) -> Panel:
    return Panel(
        Text(f"/{session.search_query}"),
        title="Search",
        title_align="left",
        border_style="yellow",
    )


# ------------------------------------------------------------------ #
# Detail pane
# ------------------------------------------------------------------ #


def build_detail_lines(endpoint: APIEndpoint) -> list[Text]:
    """Build the detail pane content for *endpoint*, one :class:`Text` per line."""
    lines: list[Text] = [
        Text.assemble(
            (endpoint.method.label, f"bold {method_color(endpoint.method)}"),
            " ",
            (endpoint.path, "bold"),
        ),
        Text(""),
    ]

    if endpoint.summary:
        lines += [Text(endpoint.summary, style="white"), Text("")]
    if endpoint.description:
        lines += [Text(line, style="grey70") for line in endpoint.description.splitlines()]
        lines.append(Text(""))
    if endpoint.operation_id or endpoint.tags:
        if endpoint.operation_id:
            lines.append(Text(f"Operation: {endpoint.operation_id}", style="grey50"))
        if endpoint.tags:
            lines.append(Text(f"Tags: {', '.join(endpoint.tags)}", style="grey50"))
        lines.append(Text(""))

    if endpoint.parameters:
        lines.append(Text("Parameters", style="bold cyan"))
        for location in _LOCATION_ORDER:
            params = [p for p in endpoint.parameters if p.location == location]
            if not params:
                continue
            lines.append(Text(f"  {location.value.capitalize()}", style="grey50"))
            for param in params:
                marker = "*" if param.required else ""
                lines.append(
                    Text.assemble(
                        "    ",
                        (f"{param.name}{marker}", "yellow"),
                        (f" ({param.type_label or 'any'})", "grey50"),
                    )
                )
                if param.description:
                    lines.append(Text(f"      {param.description}", style="grey70"))
        lines.append(Text(""))

    body = endpoint.request_body
    if body is not None:
        heading = "Request Body (required)" if body.required else "Request Body"
        lines.append(Text(heading, style="bold cyan"))
        if body.content_types:
            lines.append(Text(f"  Content-Type: {', '.join(body.content_types)}", style="grey50"))
        if body.description:
            lines.append(Text(f"  {body.description}", style="grey70"))
        if body.type_label:
            lines.append(Text(f"  Schema: {body.type_label}", style="grey70"))
        lines.append(Text(""))

    if endpoint.responses:
        lines.append(Text("Responses", style="bold cyan"))
        for status, response in endpoint.responses.items():
            lines.append(
                Text.assemble(
                    "  ",
                    (status, status_color(status)),
                    " - ",
                    (response.description, "white"),
                )
            )
            if response.content_types:
                lines.append(
                    Text(f"    Content-Type: {', '.join(response.content_types)}", style="grey50")
                )
            if response.type_label:
                lines.append(Text(f"    Schema: {response.type_label}", style="grey50"))

    return lines


def render_detail(session: BrowserSession) -> Panel:
    """Render the selected endpoint, starting at the clamped scroll offset."""
    endpoint = session.selected_endpoint()
    if endpoint is None:
        content = [Text("No endpoint selected", style="grey50")]
    else:
        content = build_detail_lines(endpoint)
        offset = min(session.detail_scroll, max(0, len(content) - 1))
        content = content[offset:]

    return Panel(
        Group(*content),
        title="Details",
        title_align="left",
        border_style=border_style(session.focus == Focus.DETAIL),
    )


# ------------------------------------------------------------------ #
# Frame
# ------------------------------------------------------------------ #


def render_frame(session: BrowserSession, config: ViewerConfig, height: int) -> Layout:
    """Compose the full screen for one frame.

    Args:
        session: State to draw.
        config: Viewer settings (pane proportions).
        height: Terminal height in lines, used to window the list.
    """
    search_rows = 3 if session.search_mode else 0
    list_rows = height - 2 - search_rows

    left = Layout(name="left", ratio=config.list_width_percent)
    if session.search_mode:
        left.split_column(
            Layout(render_list(session, list_rows), name="list"),
            Layout(render_search_bar(session), name="search", size=3),
        )
    else:
        left.update(render_list(session, list_rows))

    layout = Layout()
    layout.split_row(
        left,
        Layout(render_detail(session), name="detail", ratio=100 - config.list_width_percent),
    )
    return layout
