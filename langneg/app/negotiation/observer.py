"""Diagnostic events emitted while negotiating a request."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    MATCHED = "matched"
    NO_MATCH = "no_match"
    REDIRECT = "redirect"
    NOT_ACCEPTABLE = "not_acceptable"
    DEFAULTED = "defaulted"


@dataclass(frozen=True)
class NegotiationEvent:
    method: str
    outcome: Outcome
    detail: str = ""


class NegotiationObserver(Protocol):
    def on_event(self, event: NegotiationEvent) -> None: ...


class LoggingObserver:
    """Write events to the module logger at DEBUG level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_event(self, event: NegotiationEvent) -> None:
        if event.detail:
            self._log.debug(
                "LangNeg: %s %s (%s)", event.method, event.outcome.value, event.detail
            )
        else:
            self._log.debug("LangNeg: %s %s", event.method, event.outcome.value)


class NullObserver:
    def on_event(self, event: NegotiationEvent) -> None:
        return None

