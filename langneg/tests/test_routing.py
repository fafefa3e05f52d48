"""Tests for language path convertor registration."""

from __future__ import annotations

import re

from starlette.convertors import CONVERTOR_TYPES

from langneg.app.api.routing import LanguageConvertor, register_language_convertor
from langneg.app.negotiation.types import Method
from langneg.tests.conftest import config_for


class TestLanguageConvertor:
    def test_regex_is_language_alternation(self) -> None:
        convertor = LanguageConvertor(config_for(["en", "ja", "de"], Method.PATH_PREFIX))
        assert convertor.regex == "en|ja|de"
        assert re.fullmatch(convertor.regex, "ja")
        assert not re.fullmatch(convertor.regex, "fr")

    def test_register_returns_prefix(self) -> None:
        prefix = register_language_convertor(config_for(["en"], Method.PATH_PREFIX))
        assert prefix == "/{lang:lang}"
        assert isinstance(CONVERTOR_TYPES["lang"], LanguageConvertor)
