"""Configuration management with XDG paths and precedence resolution.

This module handles all persistent configuration for specview:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.specview/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~specview.models.GlobalConfig`
  JSON file storing viewer and output defaults.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, and the global config into the effective
  configuration.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from specview.exceptions import ConfigError
from specview.models import GlobalConfig, ViewerConfig

_APP_NAME = "specview"
_CONFIG_FILENAME = "config.json"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/specview/`` (default ``~/.config/specview/``).
    On macOS/Windows: ``~/.specview/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_CONFIG_HOME", (".config",))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/specview/`` (default ``~/.local/share/specview/``).
    On macOS/Windows: ``~/.specview/logs/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file.

    ``SPECVIEW_CONFIG`` points at an alternative file when set.
    """
    override = os.environ.get("SPECVIEW_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration.

    Returns:
        The deserialised :class:`~specview.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


# --- Precedence resolution ---


def resolve_config(
    cli_poll_interval_ms: Optional[int] = None,
    cli_no_vim_keys: bool = False,
) -> GlobalConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_poll_interval_ms``, ``cli_no_vim_keys``)
        2. Environment variables (``SPECVIEW_POLL_INTERVAL_MS``)
        3. User config (``~/.config/specview/config.json``)
        4. Defaults

    Raises:
        ConfigError: If the config file is invalid or an override is out of
            range.
    """
    global_cfg = load_global_config()
    viewer = global_cfg.viewer.model_dump()

    env_interval = os.environ.get("SPECVIEW_POLL_INTERVAL_MS")
    if env_interval:
        try:
            viewer["poll_interval_ms"] = int(env_interval)
        except ValueError as exc:
            raise ConfigError(
                f"SPECVIEW_POLL_INTERVAL_MS must be an integer (got {env_interval!r})"
            ) from exc

    if cli_poll_interval_ms is not None:
        viewer["poll_interval_ms"] = cli_poll_interval_ms
    if cli_no_vim_keys:
        viewer["vim_keys"] = False

    try:
        global_cfg = global_cfg.model_copy(
            update={"viewer": ViewerConfig.model_validate(viewer)}
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid viewer setting: {exc}") from exc

    return global_cfg
