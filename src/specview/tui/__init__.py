"""Interactive terminal browser.

Sub-modules:

* :mod:`~specview.tui.session` -- :class:`BrowserSession` state and its
  transitions (selection, scrolling, focus, search filtering).
* :mod:`~specview.tui.intents` -- Closed intent set and key translation.
* :mod:`~specview.tui.dispatch` -- Browsing / Searching state machine.
* :mod:`~specview.tui.keys` -- Raw key input from the terminal.
* :mod:`~specview.tui.render` -- Rich renderables for the two panes.
* :mod:`~specview.tui.runner` -- The control loop.
"""

from specview.tui.dispatch import dispatch
from specview.tui.intents import Intent, IntentKind, translate_key
from specview.tui.session import BrowserSession, Focus

__all__ = [
    "BrowserSession",
    "Focus",
    "Intent",
    "IntentKind",
    "dispatch",
    "translate_key",
]
