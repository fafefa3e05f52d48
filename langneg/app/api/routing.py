"""Route registration helpers for path prefix negotiation."""

from __future__ import annotations

from starlette.convertors import Convertor, register_url_convertor

from langneg.app.negotiation.language_config import LanguageConfig

CONVERTOR_NAME = "lang"


class LanguageConvertor(Convertor[str]):
    """Match exactly one of the configured language codes."""

    def __init__(self, config: LanguageConfig) -> None:
        self.regex = config.language_alternation

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


def register_language_convertor(config: LanguageConfig) -> str:
    """Register the ``lang`` path convertor and return the route prefix.

    Must run before routes using ``{lang:lang}`` are created, since
    Starlette compiles route patterns on construction.
    """
    register_url_convertor(CONVERTOR_NAME, LanguageConvertor(config))
    return "/{lang:" + CONVERTOR_NAME + "}"
