"""Tests for message catalog lookup."""

from __future__ import annotations

from langneg.app.core.i18n import translate


class TestTranslate:
    def test_known_language(self) -> None:
        assert translate("ja", "greeting") == "こんにちは！"

    def test_falls_back_to_given_language(self) -> None:
        assert translate("fr", "greeting", "de") == "Hallo!"

    def test_missing_key_returns_key(self) -> None:
        assert translate("en", "no_such_key") == "no_such_key"

    def test_interpolation(self) -> None:
        assert translate("en", "greeting_named", name="Sam") == "Hello, Sam!"

    def test_missing_placeholder_leaves_template(self) -> None:
        assert translate("en", "greeting_named", other="x") == "Hello, {name}!"
