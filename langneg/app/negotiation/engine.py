"""Per-request language negotiation.

The engine tries the configured primary method (path prefix or subdomain),
then the Accept-Language header, then falls back to the default language.
It never touches a response itself: it returns a :class:`Negotiation`
whose instructions the caller applies before moving on.
"""

from __future__ import annotations

from starlette import status
from starlette.datastructures import URL

from langneg.app.negotiation.header import HeaderNegotiator
from langneg.app.negotiation.language_config import LanguageConfig
from langneg.app.negotiation.matchers import PathPrefixMatcher, SubdomainMatcher
from langneg.app.negotiation.observer import (
    LoggingObserver,
    NegotiationEvent,
    NegotiationObserver,
    Outcome,
)
from langneg.app.negotiation.types import (
    Method,
    Negotiation,
    NegotiationMethod,
    NegotiationRequest,
    NegotiationResult,
    Option,
    Redirect,
    ResponseInstructions,
)

ACCEPT_LANGUAGE = "Accept-Language"


class NegotiationEngine:
    """Negotiate languages for requests against one shared config.

    The engine holds no per-request state; the same request always yields
    the same negotiation.
    """

    def __init__(
        self,
        config: LanguageConfig,
        observer: NegotiationObserver | None = None,
    ) -> None:
        self.config = config
        self._observer = observer or LoggingObserver()
        self._path_matcher = PathPrefixMatcher(config, self._observer)
        self._subdomain_matcher = SubdomainMatcher(config, self._observer)
        self._header_negotiator = HeaderNegotiator(config.accept_language_pattern)

    def negotiate(self, request: NegotiationRequest) -> Negotiation:
        methods = self.config.methods
        options = self.config.options
        result = self._match_primary(request)
        vary: tuple[str, ...] = ()
        redirect: Redirect | None = None

        if result is None and Method.HEADER in methods:
            if Option.NO_VARY not in options:
                vary = (ACCEPT_LANGUAGE,)

            if request.accept_language is not None:
                result = self._header_negotiator.negotiate(
                    request.accept_language, self.config.languages
                )

            if result is None:
                self._emit("header", Outcome.NO_MATCH, "Accept-Language matching failed")
                if Option.NOT_ACCEPTABLE_ON_HEADER_MATCH_FAIL in options:
                    self._emit("header", Outcome.NOT_ACCEPTABLE)
                    return Negotiation(
                        NegotiationResult("", NegotiationMethod.FAILURE, 0.0),
                        ResponseInstructions(
                            vary=vary,
                            halt_status=status.HTTP_406_NOT_ACCEPTABLE,
                        ),
                    )
            else:
                self._emit("header", Outcome.MATCHED, result.language)
                if Option.REDIRECT_ON_HEADER_MATCH in options:
                    redirect = Redirect(self._redirect_location(request.url, result.language))
                    self._emit("header", Outcome.REDIRECT, redirect.location)

        if result is None:
            result = NegotiationResult(
                self.config.default_language, NegotiationMethod.DEFAULT, 0.0
            )
            self._emit("default", Outcome.DEFAULTED, result.language)

        content_language = None
        if redirect is None and Option.NO_CONTENT_LANGUAGE not in options:
            content_language = result.language

        return Negotiation(
            result,
            ResponseInstructions(
                content_language=content_language,
                vary=vary,
                redirect=redirect,
            ),
        )

    def _match_primary(self, request: NegotiationRequest) -> NegotiationResult | None:
        methods = self.config.methods
        if Method.PATH_PREFIX in methods:
            language = self._path_matcher.match(request.path_segment)
            if language is not None:
                self._emit("path_prefix", Outcome.MATCHED, language)
                return NegotiationResult(language, NegotiationMethod.PATH_PREFIX)
        elif Method.SUBDOMAIN in methods:
            language = self._subdomain_matcher.match(request.host)
            if language is not None:
                self._emit("subdomain", Outcome.MATCHED, language)
                return NegotiationResult(language, NegotiationMethod.SUBDOMAIN)
        return None

    def _redirect_location(self, url: str, language: str) -> str:
        current = URL(url)
        if Method.PATH_PREFIX in self.config.methods:
            return str(current.replace(path=f"/{language}{current.path}"))
        return str(current.replace(hostname=f"{language}.{current.hostname}"))

    def _emit(self, method: str, outcome: Outcome, detail: str = "") -> None:
        self._observer.on_event(NegotiationEvent(method, outcome, detail))
