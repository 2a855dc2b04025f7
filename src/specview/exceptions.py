"""Exception hierarchy for specview.

All exceptions inherit from :class:`SpecviewError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specview.exit_codes`.
The top-level error handler in :func:`specview.app.main` catches
``SpecviewError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    SpecviewError (exit 1)
    +-- InvalidUsageError   (exit 2)
    |   +-- TerminalError   (exit 2)
    +-- SpecLoadError       (exit 7)
    +-- ConfigError         (exit 1)
"""

from __future__ import annotations

from typing import Optional

from specview.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_LOAD_ERROR,
)


class SpecviewError(Exception):
    """Base exception for all specview errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specview.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SpecviewError):
    """Raised for invalid CLI arguments or option values."""

    exit_code = EXIT_INVALID_USAGE


class TerminalError(InvalidUsageError):
    """Raised when the interactive browser is started without a terminal."""


class SpecLoadError(SpecviewError):
    """Raised when an API description cannot be read, parsed, or validated.

    This is the only hard failure of the loading pipeline. Broken
    references and other per-element problems are never reported through
    it; the normalizer omits those elements instead.

    Args:
        message: Human-readable cause.
        stage: Pipeline stage that failed: ``read``, ``json``, ``yaml``,
            ``parse``, ``structure`` or ``version``.
        source: Path of the offending document, when known.
    """

    exit_code = EXIT_SPEC_LOAD_ERROR

    def __init__(
        self,
        message: str,
        stage: str = "parse",
        source: Optional[str] = None,
    ):
        super().__init__(message)
        self.stage = stage
        self.source = source

    def __str__(self) -> str:
        message = super().__str__()
        if self.source:
            return f"{self.stage}: {self.source}: {message}"
        return f"{self.stage}: {message}"


class ConfigError(SpecviewError):
    """Raised for configuration problems (invalid JSON, out-of-range values)."""

    exit_code = EXIT_GENERIC_FAILURE
