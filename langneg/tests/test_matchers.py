"""Tests for the path prefix and subdomain matchers."""

from __future__ import annotations

from langneg.app.negotiation.matchers import PathPrefixMatcher, SubdomainMatcher
from langneg.app.negotiation.observer import Outcome
from langneg.app.negotiation.types import Method
from langneg.tests.conftest import RecordingObserver, config_for


class TestPathPrefixMatcher:
    def test_configured_segment(self) -> None:
        matcher = PathPrefixMatcher(config_for(["en", "ja", "de"], Method.PATH_PREFIX))
        assert matcher.match("de") == "de"

    def test_unknown_segment(self) -> None:
        matcher = PathPrefixMatcher(config_for(["en", "ja"], Method.PATH_PREFIX))
        assert matcher.match("fr") is None
        assert matcher.match("EN") is None

    def test_missing_segment(self) -> None:
        matcher = PathPrefixMatcher(config_for(["en"], Method.PATH_PREFIX))
        assert matcher.match(None) is None
        assert matcher.match("") is None

    def test_miss_is_reported(self, observer: RecordingObserver) -> None:
        matcher = PathPrefixMatcher(config_for(["en"], Method.PATH_PREFIX), observer)
        matcher.match("api")
        assert [(e.method, e.outcome) for e in observer.events] == [
            ("path_prefix", Outcome.NO_MATCH)
        ]


class TestSubdomainMatcher:
    def test_leading_label(self) -> None:
        matcher = SubdomainMatcher(config_for(["en", "ja", "de"], Method.SUBDOMAIN))
        assert matcher.match("ja.example.org") == "ja"

    def test_bare_domain(self) -> None:
        matcher = SubdomainMatcher(config_for(["en", "ja"], Method.SUBDOMAIN))
        assert matcher.match("example.org") is None
        assert matcher.match("") is None

    def test_label_must_be_whole(self) -> None:
        matcher = SubdomainMatcher(config_for(["en", "ja"], Method.SUBDOMAIN))
        assert matcher.match("jam.example.org") is None
        assert matcher.match("www.ja.example.org") is None

    def test_longer_code_alongside_prefix(self) -> None:
        matcher = SubdomainMatcher(config_for(["en", "en-gb"], Method.SUBDOMAIN))
        assert matcher.match("en-gb.example.org") == "en-gb"
        assert matcher.match("en.example.org") == "en"

    def test_mixed_case_code_returned_as_configured(self) -> None:
        matcher = SubdomainMatcher(config_for(["en", "pt-BR"], Method.SUBDOMAIN))
        assert matcher.match("pt-br.example.org") == "pt-BR"
        assert matcher.match("PT-BR.example.org") == "pt-BR"
        assert matcher.match("pt.example.org") is None

    def test_miss_is_reported(self, observer: RecordingObserver) -> None:
        matcher = SubdomainMatcher(config_for(["en"], Method.SUBDOMAIN), observer)
        matcher.match("www.example.org")
        assert observer.events[0].outcome == Outcome.NO_MATCH
        assert observer.events[0].method == "subdomain"
