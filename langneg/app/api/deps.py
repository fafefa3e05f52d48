from __future__ import annotations

from fastapi import Request

from langneg.app.negotiation.types import NegotiationMethod, NegotiationResult


def get_negotiation(request: Request) -> NegotiationResult:
    """Return the negotiated language stored by the middleware.

    Without the middleware installed this reports a default match on the
    app's configured default language (or ``en``).
    """
    result = getattr(request.state, "language_negotiation", None)
    if result is not None:
        return result
    default = getattr(request.app.state, "default_language", "en")
    return NegotiationResult(default, NegotiationMethod.DEFAULT, 0.0)
