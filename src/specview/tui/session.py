"""Browser session state and its transitions.

A :class:`BrowserSession` owns the normalized :class:`~specview.models.APISpec`
and the mutable view state layered on top of it: the filtered index
sequence, the selection cursor into that sequence, the detail scroll offset,
which pane has focus, and the search query being edited.

Every transition is synchronous and total.  Operations on an empty filtered
list are no-ops rather than errors.  Whenever the query changes the filtered
indices are recomputed from scratch by :func:`filter_indices`, so they can
never go stale.
"""

from __future__ import annotations

import enum
from typing import Optional

from specview.models import APIEndpoint, APISpec


class Focus(str, enum.Enum):
    """Pane that receives navigation intents."""

    LIST = "list"
    DETAIL = "detail"


def filter_indices(endpoints: list[APIEndpoint], query: str) -> list[int]:
    """Return the ascending indices of endpoints whose path contains *query*.

    Matching is a case-insensitive substring test on the path.  An empty
    query matches every endpoint.
    """
    if not query:
        return list(range(len(endpoints)))
    needle = query.lower()
    return [i for i, endpoint in enumerate(endpoints) if needle in endpoint.path.lower()]


class BrowserSession:
    """Mutable view state of one interactive browsing session.

    Attributes:
        spec: The normalized description (never mutated).
        filtered_indices: Ascending indices into ``spec.endpoints`` that
            match the current query.
        selected_index: Position within ``filtered_indices``; 0 when the
            filtered list is empty.
        focus: Pane receiving navigation intents.
        detail_scroll: Line offset of the detail pane (never negative).
        search_mode: Whether the query is being edited.
        search_query: The current filter text.
        should_quit: Set by :meth:`quit`; the event loop stops once it is True.
    """

    def __init__(self, spec: APISpec) -> None:
        self.spec = spec
        self.filtered_indices: list[int] = list(range(len(spec.endpoints)))
        self.selected_index = 0
        self.focus = Focus.LIST
        self.detail_scroll = 0
        self.search_mode = False
        self.search_query = ""
        self.should_quit = False

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def selected_endpoint(self) -> Optional[APIEndpoint]:
        """Return the endpoint under the cursor, or ``None`` if nothing matches."""
        if not self.filtered_indices:
            return None
        return self.spec.endpoints[self.filtered_indices[self.selected_index]]

    @property
    def filter_active(self) -> bool:
        """Whether a non-empty query is narrowing the list."""
        return bool(self.search_query)

    # ------------------------------------------------------------------ #
    # Selection
    # ------------------------------------------------------------------ #

    def select_next(self) -> None:
        """Move the cursor down, wrapping to the top, and reset the scroll."""
        count = len(self.filtered_indices)
        if count == 0:
            return
        self.selected_index = (self.selected_index + 1) % count
        self.detail_scroll = 0

    def select_previous(self) -> None:
        """Move the cursor up, wrapping to the bottom, and reset the scroll."""
        count = len(self.filtered_indices)
        if count == 0:
            return
        self.selected_index = (self.selected_index - 1) % count
        self.detail_scroll = 0

    # ------------------------------------------------------------------ #
    # Focus and scrolling
    # ------------------------------------------------------------------ #

    def focus_detail(self) -> None:
        self.focus = Focus.DETAIL

    def focus_list(self) -> None:
        self.focus = Focus.LIST

    def scroll_down(self) -> None:
        # Unbounded here; the renderer clamps to the content length.
        self.detail_scroll += 1

    def scroll_up(self) -> None:
        self.detail_scroll = max(0, self.detail_scroll - 1)

    # ------------------------------------------------------------------ #
    # Search
    # ------------------------------------------------------------------ #

    def enter_search_mode(self) -> None:
        """Start editing the query; search always happens in the list pane."""
        self.search_mode = True
        self.focus = Focus.LIST

    def search_push_char(self, char: str) -> None:
        self.search_query += char
        self.apply_filter()

    def search_pop_char(self) -> None:
        self.search_query = self.search_query[:-1]
        self.apply_filter()

    def confirm_search(self) -> None:
        """Stop editing but keep the query and its filtering in effect."""
        self.search_mode = False

    def cancel_search(self) -> None:
        """Stop editing, drop the query, and show the full list again."""
        self.search_mode = False
        self.search_query = ""
        self.apply_filter()

    def clear_search(self) -> None:
        """Drop a confirmed query and return the cursor to the top."""
        self.search_query = ""
        self.apply_filter()
        self.selected_index = 0

    def apply_filter(self) -> None:
        """Recompute ``filtered_indices`` from the query and clamp the cursor."""
        self.filtered_indices = filter_indices(self.spec.endpoints, self.search_query)
        if not self.filtered_indices:
            self.selected_index = 0
        elif self.selected_index >= len(self.filtered_indices):
            self.selected_index = len(self.filtered_indices) - 1

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def quit(self) -> None:
        self.should_quit = True
