"""Mode-dependent intent dispatch.

The browser is a two-state machine:

* :class:`BrowsingMode` -- navigating the list or the detail pane.
* :class:`SearchingMode` -- editing the filter query.

Each mode owns a total mapping from :class:`~specview.tui.intents.IntentKind`
to a transition on :class:`~specview.tui.session.BrowserSession`.  Intents a
mode does not list are ignored.  :func:`dispatch` picks the mode from
``session.search_mode`` and applies at most one transition.
"""

from __future__ import annotations

from typing import Callable, Union

from specview.tui.intents import Intent, IntentKind
from specview.tui.session import BrowserSession, Focus

Handler = Callable[[BrowserSession, Intent], None]


def _ignore(session: BrowserSession, intent: Intent) -> None:
    return None


# --- Browsing ---


def _browse_back(session: BrowserSession, intent: Intent) -> None:
    # Leaving the detail pane wins over clearing an active filter.
    if session.focus == Focus.DETAIL:
        session.focus_list()
    elif session.filter_active:
        session.clear_search()


def _browse_down(session: BrowserSession, intent: Intent) -> None:
    if session.focus == Focus.LIST:
        session.select_next()
    else:
        session.scroll_down()


def _browse_up(session: BrowserSession, intent: Intent) -> None:
    if session.focus == Focus.LIST:
        session.select_previous()
    else:
        session.scroll_up()


class BrowsingMode:
    """Intent handling while the query is not being edited."""

    name = "browsing"
    handlers: dict[IntentKind, Handler] = {
        IntentKind.QUIT: lambda session, intent: session.quit(),
        IntentKind.SEARCH: lambda session, intent: session.enter_search_mode(),
        IntentKind.CONFIRM: lambda session, intent: session.focus_detail(),
        IntentKind.BACK: _browse_back,
        IntentKind.NAVIGATE_DOWN: _browse_down,
        IntentKind.NAVIGATE_UP: _browse_up,
    }


# --- Searching ---


def _search_push(session: BrowserSession, intent: Intent) -> None:
    if intent.char:
        session.search_push_char(intent.char)


class SearchingMode:
    """Intent handling while the query is being edited.

    ``QUIT`` and ``SEARCH`` are deliberately absent: while typing a query
    they are ignored.
    """

    name = "searching"
    handlers: dict[IntentKind, Handler] = {
        IntentKind.BACK: lambda session, intent: session.cancel_search(),
        IntentKind.CONFIRM: lambda session, intent: session.confirm_search(),
        IntentKind.CHARACTER: _search_push,
        IntentKind.ERASE: lambda session, intent: session.search_pop_char(),
        IntentKind.NAVIGATE_DOWN: lambda session, intent: session.select_next(),
        IntentKind.NAVIGATE_UP: lambda session, intent: session.select_previous(),
    }


Mode = Union[type[BrowsingMode], type[SearchingMode]]


def current_mode(session: BrowserSession) -> Mode:
    """Return the mode class matching the session's search flag."""
    return SearchingMode if session.search_mode else BrowsingMode


def dispatch(session: BrowserSession, intent: Intent) -> None:
    """Apply the transition *intent* maps to in the session's current mode."""
    handler = current_mode(session).handlers.get(intent.kind, _ignore)
    handler(session, intent)
