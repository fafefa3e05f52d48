"""Validated, immutable language negotiation configuration."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import TypeVar

from langneg.app.negotiation.errors import (
    AmbiguousRedirectTargetError,
    ConflictingPathMethodsError,
    InvalidLanguageError,
    LanguageConfigError,
    NoLanguagesError,
    NoMethodsError,
)
from langneg.app.negotiation.types import Method, Option

_F = TypeVar("_F", Method, Option)

# A language code (letters and hyphens) or the wildcard, optionally followed
# by anything and then a quality value.
ACCEPT_LANGUAGE_PATTERN = r"([a-zA-Z-]+|\*)(?:.+?([\d.]+))?"


def _combine(flag_type: type[_F], value: _F | Iterable[_F]) -> _F:
    if isinstance(value, flag_type):
        return value
    combined = flag_type(0)
    for item in value:  # type: ignore[union-attr]
        combined |= item
    return combined


def _parse_names(flag_type: type[_F], names: Iterable[str]) -> _F:
    combined = flag_type(0)
    for name in names:
        key = name.strip().upper().replace("-", "_")
        try:
            combined |= flag_type[key]
        except KeyError:
            raise LanguageConfigError(
                f"Unknown {flag_type.__name__.lower()} {name!r}"
            ) from None
    return combined


@dataclass(frozen=True)
class LanguageConfig:
    """Languages, enabled methods and options for negotiation.

    Build instances with :meth:`create` (or :meth:`from_names`), which
    validates the combination.  The first language is the default one.
    """

    languages: tuple[str, ...]
    methods: Method
    options: Option = Option(0)

    @classmethod
    def create(
        cls,
        languages: Sequence[str],
        methods: Method | Iterable[Method],
        options: Option | Iterable[Option] = Option(0),
    ) -> LanguageConfig:
        methods = _combine(Method, methods)
        options = _combine(Option, options)

        if not languages:
            raise NoLanguagesError()
        seen: set[str] = set()
        for language in languages:
            if not language:
                raise InvalidLanguageError(language, "must not be empty")
            if language in seen:
                raise InvalidLanguageError(language, "listed more than once")
            seen.add(language)

        if not methods:
            raise NoMethodsError()
        if Method.PATH_PREFIX in methods and Method.SUBDOMAIN in methods:
            raise ConflictingPathMethodsError()
        if Option.REDIRECT_ON_HEADER_MATCH in options and not (
            methods & (Method.PATH_PREFIX | Method.SUBDOMAIN)
        ):
            raise AmbiguousRedirectTargetError()

        return cls(languages=tuple(languages), methods=methods, options=options)

    @classmethod
    def from_names(
        cls,
        languages: Sequence[str],
        methods: Iterable[str],
        options: Iterable[str] = (),
    ) -> LanguageConfig:
        """Build a config from names like ``"path_prefix"`` or ``"NO_VARY"``."""
        return cls.create(
            languages,
            _parse_names(Method, methods),
            _parse_names(Option, options),
        )

    @property
    def default_language(self) -> str:
        return self.languages[0]

    @cached_property
    def language_alternation(self) -> str:
        return "|".join(re.escape(language) for language in self.languages)

    @cached_property
    def subdomain_pattern(self) -> re.Pattern[str]:
        return re.compile(rf"^({self.language_alternation})\.", re.IGNORECASE)

    @cached_property
    def accept_language_pattern(self) -> re.Pattern[str]:
        return re.compile(ACCEPT_LANGUAGE_PATTERN)

    @cached_property
    def router_path(self) -> str:
        """Path pattern matching a leading language segment, e.g. ``/(en|ja)``."""
        return f"/({self.language_alternation})"
