"""Path prefix and subdomain language matchers."""

from __future__ import annotations

from langneg.app.negotiation.language_config import LanguageConfig
from langneg.app.negotiation.observer import (
    NegotiationEvent,
    NegotiationObserver,
    NullObserver,
    Outcome,
)


class PathPrefixMatcher:
    """Match the first path segment against the configured languages.

    The router may already have matched ``LanguageConfig.router_path``, but
    the segment is checked again here.
    """

    method = "path_prefix"

    def __init__(
        self, config: LanguageConfig, observer: NegotiationObserver | None = None
    ) -> None:
        self._languages = frozenset(config.languages)
        self._observer = observer or NullObserver()

    def match(self, segment: str | None) -> str | None:
        if segment and segment in self._languages:
            return segment
        self._observer.on_event(
            NegotiationEvent(
                self.method,
                Outcome.NO_MATCH,
                "prefix not found or not acceptable",
            )
        )
        return None


class SubdomainMatcher:
    """Match the leading host label (``ja.example.org``) against the languages.

    Host names are case-insensitive, so ``pt-br.example.org`` matches a
    configured ``pt-BR`` and the configured spelling is returned.
    """

    method = "subdomain"

    def __init__(
        self, config: LanguageConfig, observer: NegotiationObserver | None = None
    ) -> None:
        self._pattern = config.subdomain_pattern
        self._by_label: dict[str, str] = {}
        for language in config.languages:
            self._by_label.setdefault(language.lower(), language)
        self._observer = observer or NullObserver()

    def match(self, host: str | None) -> str | None:
        found = self._pattern.match(host) if host else None
        if found is not None:
            return self._by_label[found.group(1).lower()]
        self._observer.on_event(
            NegotiationEvent(
                self.method,
                Outcome.NO_MATCH,
                "subdomain not found or not acceptable",
            )
        )
        return None
