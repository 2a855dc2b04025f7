"""Built-in CLI sub-commands for specview.

This package groups the Typer sub-command modules that form the CLI's
top-level command tree:

* :mod:`~specview.commands.browse` -- interactive two-pane browser.
* :mod:`~specview.commands.inspect` -- non-interactive ``paths`` and
  ``info`` listings of a description.
"""
