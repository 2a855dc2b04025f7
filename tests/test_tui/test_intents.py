"""Tests for specview.tui.intents."""

from __future__ import annotations

import pytest

from specview.tui.intents import NO_INTENT, Intent, IntentKind, translate_key


class TestTranslateKeyBrowsing:
    """Key translation outside search mode."""

    @pytest.mark.parametrize(
        ("key", "kind"),
        [
            ("up", IntentKind.NAVIGATE_UP),
            ("down", IntentKind.NAVIGATE_DOWN),
            ("k", IntentKind.NAVIGATE_UP),
            ("j", IntentKind.NAVIGATE_DOWN),
            ("enter", IntentKind.CONFIRM),
            ("escape", IntentKind.BACK),
            ("q", IntentKind.QUIT),
            ("/", IntentKind.SEARCH),
            ("backspace", IntentKind.ERASE),
        ],
    )
    def test_mapped_keys(self, key: str, kind: IntentKind) -> None:
        assert translate_key(key, searching=False) == Intent(kind)

    def test_vim_keys_disabled(self) -> None:
        assert translate_key("j", searching=False, vim_keys=False) == Intent.character("j")

    def test_other_printable_is_character(self) -> None:
        assert translate_key("x", searching=False) == Intent.character("x")

    def test_timeout(self) -> None:
        assert translate_key(None, searching=False) is NO_INTENT

    @pytest.mark.parametrize("key", ["left", "pageup", "tab"])
    def test_unmapped_names(self, key: str) -> None:
        assert translate_key(key, searching=False) == NO_INTENT


class TestTranslateKeySearching:
    """While searching, command letters are query text."""

    @pytest.mark.parametrize("key", ["q", "j", "k", "/", "u"])
    def test_letters_are_characters(self, key: str) -> None:
        intent = translate_key(key, searching=True)
        assert intent.kind == IntentKind.CHARACTER
        assert intent.char == key

    @pytest.mark.parametrize(
        ("key", "kind"),
        [
            ("escape", IntentKind.BACK),
            ("enter", IntentKind.CONFIRM),
            ("backspace", IntentKind.ERASE),
            ("down", IntentKind.NAVIGATE_DOWN),
        ],
    )
    def test_named_keys(self, key: str, kind: IntentKind) -> None:
        assert translate_key(key, searching=True).kind == kind
