"""Accept-Language negotiation.

Each comma-separated entry of the header is parsed into a language code
(letters and hyphens, or ``*``) and an optional quality value.  Entries
that cannot be parsed are skipped rather than rejected, so a partly
malformed header still yields whatever it can.

Selection rules:

* ``*`` stands for the default (first configured) language.
* A missing quality means 1.0.  A quality that does not parse (including
  ``q=`` with no number at all), is 0 or is above 1 excludes the entry;
  RFC 7231 treats q=0 as "not acceptable".
* Only configured languages are candidates.
* A later candidate replaces the current best only when its quality is
  strictly higher, so on equal quality the earliest entry wins.
* A candidate with quality 1.0 ends the scan immediately.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from langneg.app.negotiation.language_config import ACCEPT_LANGUAGE_PATTERN
from langneg.app.negotiation.types import NegotiationMethod, NegotiationResult

WILDCARD = "*"
# A quality parameter whose value may or may not be numeric
QUALITY_PARAM = re.compile(r";\s*q\s*=", re.IGNORECASE)
MAX_QUALITY = 1.0


class HeaderNegotiator:
    def __init__(self, pattern: re.Pattern[str] | None = None) -> None:
        self._pattern = pattern or re.compile(ACCEPT_LANGUAGE_PATTERN)

    def negotiate(
        self, header_value: str, languages: Sequence[str]
    ) -> NegotiationResult | None:
        """Return the best configured language in *header_value*, or ``None``."""
        if not languages:
            return None
        supported = frozenset(languages)
        best: NegotiationResult | None = None

        for token in header_value.split(","):
            found = self._pattern.search(token)
            if found is None:
                continue

            language = found.group(1)
            if language == WILDCARD:
                language = languages[0]

            raw_quality = found.group(2)
            if raw_quality is None and QUALITY_PARAM.search(token):
                # q= present but nothing numeric after it
                continue
            quality = _parse_quality(raw_quality)
            if quality is None:
                continue

            if language in supported and (best is None or quality > best.quality):
                best = NegotiationResult(language, NegotiationMethod.HEADER, quality)
                if quality == MAX_QUALITY:
                    break

        return best


def _parse_quality(raw: str | None) -> float | None:
    """Return the quality of an entry, or ``None`` if it excludes the entry."""
    if raw is None:
        return MAX_QUALITY
    try:
        quality = float(raw)
    except ValueError:
        return None
    if quality <= 0.0 or quality > MAX_QUALITY:
        return None
    return quality
