"""Browse command -- open a description in the interactive browser."""

from __future__ import annotations

from typing import Optional

import typer

from specview.commands.inspect import load_spec_or_exit
from specview.exceptions import ConfigError, TerminalError
from specview.output import debug, error, get_output, suggest


def browse_command(
    spec_file: str = typer.Argument(..., help="OpenAPI description (JSON or YAML)."),
    poll_interval: Optional[int] = typer.Option(
        None,
        "--poll-interval",
        help="Milliseconds to wait for a key before redrawing (10-1000).",
    ),
    no_vim_keys: bool = typer.Option(
        False, "--no-vim-keys", help="Do not navigate with j/k."
    ),
) -> None:
    """Browse endpoints interactively.

    Up/Down (or j/k) move through the list, Enter shows the details pane,
    Esc goes back, / starts a path search, q quits.

    Example::

        specview browse openapi.yaml
    """
    from specview.config import resolve_config
    from specview.tui.runner import run_browser
    from specview.tui.session import BrowserSession

    try:
        config = resolve_config(
            cli_poll_interval_ms=poll_interval,
            cli_no_vim_keys=no_vim_keys,
        )
    except ConfigError as exc:
        error(f"Config error: {exc}")
        raise typer.Exit(code=exc.exit_code) from None

    spec = load_spec_or_exit(spec_file)
    debug(f"Poll interval {config.viewer.poll_interval_ms}ms")

    try:
        run_browser(BrowserSession(spec), config.viewer, get_output().console)
    except TerminalError as exc:
        error(str(exc))
        suggest(f"For non-interactive output run: specview paths {spec_file}")
        raise typer.Exit(code=exc.exit_code) from None
