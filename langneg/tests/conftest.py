"""Shared test fixtures.

``make_client`` builds a fresh app for each configuration so tests never
share negotiation settings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from langneg.app.main import create_app
from langneg.app.negotiation.language_config import LanguageConfig
from langneg.app.negotiation.observer import NegotiationEvent
from langneg.app.negotiation.types import Method, NegotiationRequest, Option

ClientFactory = Callable[..., TestClient]


def config_for(
    languages: Iterable[str],
    methods: Method,
    options: Option = Option(0),
) -> LanguageConfig:
    return LanguageConfig.create(list(languages), methods, options)


def request_for(
    url: str = "http://example.org/test", accept_language: str | None = None
) -> NegotiationRequest:
    return NegotiationRequest.from_url(url, accept_language)


class RecordingObserver:
    """Keep every negotiation event in memory."""

    def __init__(self) -> None:
        self.events: list[NegotiationEvent] = []

    def on_event(self, event: NegotiationEvent) -> None:
        self.events.append(event)


def _add_test_routes(app: FastAPI) -> None:
    @app.get("/vary")
    def vary_route() -> PlainTextResponse:
        return PlainTextResponse("ok", headers={"Vary": "Accept-Encoding"})


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def make_client() -> Iterator[ClientFactory]:
    clients: list[TestClient] = []

    def _make(
        languages: Iterable[str],
        methods: Method,
        options: Option = Option(0),
        base_url: str = "http://testserver",
    ) -> TestClient:
        app = create_app(config_for(languages, methods, options))
        _add_test_routes(app)
        client = TestClient(app, base_url=base_url)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
