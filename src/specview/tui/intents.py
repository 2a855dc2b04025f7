"""High-level user intents and their translation from key names.

The key reader (:mod:`specview.tui.keys`) produces symbolic key names;
:func:`translate_key` maps them onto the closed set of :class:`Intent`
values that drive :mod:`specview.tui.dispatch`.

Translation depends on whether the query is being edited.  While searching,
every printable character is query text (so ``q``, ``j``, ``k`` and ``/``
can be typed); while browsing, those keys are commands.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class IntentKind(str, enum.Enum):
    QUIT = "quit"
    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    CONFIRM = "confirm"
    BACK = "back"
    SEARCH = "search"
    CHARACTER = "character"
    ERASE = "erase"
    NONE = "none"


@dataclass(frozen=True)
class Intent:
    """One user intent.  ``char`` is set only for ``CHARACTER`` intents."""

    kind: IntentKind
    char: Optional[str] = None

    @classmethod
    def character(cls, char: str) -> Intent:
        return cls(IntentKind.CHARACTER, char)


NO_INTENT = Intent(IntentKind.NONE)

_COMMON_KEYS = {
    "up": IntentKind.NAVIGATE_UP,
    "down": IntentKind.NAVIGATE_DOWN,
    "enter": IntentKind.CONFIRM,
    "escape": IntentKind.BACK,
    "backspace": IntentKind.ERASE,
}

_BROWSING_KEYS = {
    "q": IntentKind.QUIT,
    "/": IntentKind.SEARCH,
}

_VIM_KEYS = {
    "j": IntentKind.NAVIGATE_DOWN,
    "k": IntentKind.NAVIGATE_UP,
}


def translate_key(key: Optional[str], searching: bool, vim_keys: bool = True) -> Intent:
    """Translate a key name into an :class:`Intent`.

    Args:
        key: Symbolic key name from :class:`~specview.tui.keys.KeyReader`, or
            ``None`` when the poll timed out.
        searching: Whether the session is editing its query.
        vim_keys: Whether ``j``/``k`` navigate while browsing.

    Returns:
        The matching intent, or :data:`NO_INTENT` for unmapped keys.
    """
    if key is None:
        return NO_INTENT

    if key in _COMMON_KEYS:
        return Intent(_COMMON_KEYS[key])

    if not searching:
        if key in _BROWSING_KEYS:
            return Intent(_BROWSING_KEYS[key])
        if vim_keys and key in _VIM_KEYS:
            return Intent(_VIM_KEYS[key])

    if len(key) == 1 and key.isprintable():
        return Intent.character(key)
    return NO_INTENT
