"""Response messages in the negotiated language.

Catalogs live in ``locales/<code>/messages.json``; a configured language
without a catalog is served from the default language's catalog.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


@lru_cache(maxsize=16)
def _catalog(lang: str) -> dict[str, str]:
    path = _LOCALES_DIR / lang / "messages.json"
    if not lang or not path.is_file():
        logger.warning("No message catalog for %r at %s", lang, path)
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def translate(lang: str, key: str, fallback: str = "en", **kwargs: str) -> str:
    """Look up *key* for the negotiated *lang*.

    *fallback* is the config's default language.  Unknown keys come back
    unchanged, and so does a template whose placeholders are not all given.
    """
    text = _catalog(lang).get(key)
    if text is None and lang != fallback:
        text = _catalog(fallback).get(key)
    if text is None:
        return key
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except KeyError:
        return text
