"""Value types shared by the negotiation engine and its callers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from urllib.parse import urlsplit

from starlette import status


class Method(enum.Flag):
    """Negotiation channels that can be enabled on a configuration."""

    SUBDOMAIN = enum.auto()  # en.example.com
    PATH_PREFIX = enum.auto()  # example.com/en/hello
    HEADER = enum.auto()  # Accept-Language


class Option(enum.Flag):
    """Switches that change the side effects of a negotiation."""

    NO_CONTENT_LANGUAGE = enum.auto()
    # Only relevant when Method.HEADER ran
    NO_VARY = enum.auto()
    REDIRECT_ON_HEADER_MATCH = enum.auto()
    NOT_ACCEPTABLE_ON_HEADER_MATCH_FAIL = enum.auto()


class NegotiationMethod(str, enum.Enum):
    """The channel that produced the final language."""

    SUBDOMAIN = "subdomain"
    PATH_PREFIX = "path_prefix"
    HEADER = "header"
    DEFAULT = "default"
    FAILURE = "failure"


@dataclass(frozen=True)
class NegotiationResult:
    language: str
    method: NegotiationMethod
    quality: float = 1.0


@dataclass(frozen=True)
class Redirect:
    location: str
    status_code: int = status.HTTP_307_TEMPORARY_REDIRECT


@dataclass(frozen=True)
class ResponseInstructions:
    """What the caller should do to the response.

    ``vary`` lists tokens to merge into an existing ``Vary`` header rather
    than replace it.  ``halt_status`` is only set when request processing
    must stop right here.
    """

    content_language: str | None = None
    vary: tuple[str, ...] = ()
    redirect: Redirect | None = None
    halt_status: int | None = None

    @property
    def should_continue(self) -> bool:
        return self.halt_status is None


@dataclass(frozen=True)
class Negotiation:
    result: NegotiationResult
    instructions: ResponseInstructions


@dataclass(frozen=True)
class NegotiationRequest:
    """The parts of an HTTP request that negotiation looks at."""

    url: str
    path_segment: str | None = None
    host: str = ""
    accept_language: str | None = None

    @classmethod
    def from_url(
        cls, url: str, accept_language: str | None = None
    ) -> NegotiationRequest:
        parts = urlsplit(url)
        segment = parts.path.lstrip("/").split("/", 1)[0]
        return cls(
            url=url,
            path_segment=segment or None,
            host=parts.hostname or "",
            accept_language=accept_language,
        )
