"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specview.exceptions.SpecviewError` subclass.

Example::

    $ specview browse missing.yaml
    $ echo $?
    7   # EXIT_SPEC_LOAD_ERROR -- the description could not be loaded
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or outside a terminal."""

EXIT_SPEC_LOAD_ERROR = 7
"""The API description could not be read, parsed, or validated."""

EXIT_CANCELLED = 130
"""The process was interrupted (Ctrl-C)."""
