"""Single-threaded control loop of the interactive browser.

Each iteration:

1. stops if the session has quit;
2. draws the current frame;
3. waits up to the configured poll interval for one key;
4. translates it into an intent and applies at most one transition.

The poll wait only keeps the loop responsive (to resizes and Ctrl-C); no
transition ever blocks.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console
from rich.live import Live

from specview.models import ViewerConfig
from specview.tui.dispatch import dispatch
from specview.tui.intents import translate_key
from specview.tui.keys import KeyReader, cbreak_terminal
from specview.tui.render import render_frame
from specview.tui.session import BrowserSession

KeySource = Callable[[float], Optional[str]]


def step(session: BrowserSession, key: Optional[str], config: ViewerConfig) -> None:
    """Translate one key and apply the resulting transition."""
    intent = translate_key(key, searching=session.search_mode, vim_keys=config.vim_keys)
    dispatch(session, intent)


def event_loop(
    session: BrowserSession,
    config: ViewerConfig,
    live: Live,
    next_key: KeySource,
) -> None:
    """Run the draw / wait / dispatch cycle until the session quits."""
    timeout = config.poll_interval_ms / 1000
    while not session.should_quit:
        live.update(
            render_frame(session, config, live.console.size.height),
            refresh=True,
        )
        step(session, next_key(timeout), config)


def run_browser(session: BrowserSession, config: ViewerConfig, console: Console) -> None:
    """Take over the terminal and browse *session* until the user quits.

    Raises:
        TerminalError: If stdin is not a terminal.
    """
    with cbreak_terminal() as fd:
        with Live(console=console, screen=True, auto_refresh=False, transient=True) as live:
            event_loop(session, config, live, KeyReader(fd).read)
