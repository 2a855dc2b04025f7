"""Shared test fixtures for specview.

Provides reusable fixtures for loading description fixtures, building
small in-memory specs, isolating config directories, managing output state,
and running CLI commands. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from specview.models import APIEndpoint, APISpec, HTTPMethod
from specview.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    Resetting forces a fresh manager to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Description fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_path() -> Path:
    """Path of the petstore YAML fixture."""
    return FIXTURES_DIR / "petstore.yaml"


@pytest.fixture
def petstore_raw(petstore_path: Path) -> dict[str, Any]:
    """Decoded petstore description (unresolved)."""
    return yaml.safe_load(petstore_path.read_text(encoding="utf-8"))


@pytest.fixture
def petstore_spec(petstore_raw: dict[str, Any]) -> APISpec:
    """Normalized petstore description."""
    from specview.parser.normalizer import normalize

    return normalize(petstore_raw)


@pytest.fixture
def make_spec() -> Callable[..., APISpec]:
    """Factory building an :class:`APISpec` with one GET endpoint per path.

    Paths are kept in the order given so tests control the index layout.
    """

    def _make(*paths: str) -> APISpec:
        return APISpec(
            title="Test API",
            version="1.0.0",
            endpoints=[APIEndpoint(method=HTTPMethod.GET, path=path) for path in paths],
        )

    return _make


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path so
    that tests never touch real user config, and clears all SPECVIEW_*
    environment variables.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("specview.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["SPECVIEW_CONFIG", "SPECVIEW_POLL_INTERVAL_MS"]:
        monkeypatch.delenv(var, raising=False)

    return tmp_path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner(isolated_config: Path):
    """Typer CLI test runner with configuration isolated to a temp dir."""
    from typer.testing import CliRunner

    return CliRunner()
