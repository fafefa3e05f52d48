"""Language negotiation middleware."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from langneg.app.negotiation.engine import ACCEPT_LANGUAGE, NegotiationEngine
from langneg.app.negotiation.types import NegotiationRequest, ResponseInstructions


class LanguageNegotiationMiddleware(BaseHTTPMiddleware):
    """Negotiate the request language and apply the resulting instructions.

    The result is exposed as ``request.state.language_negotiation`` (and the
    bare code as ``request.state.language``).  Not-acceptable and redirect
    outcomes are answered here without calling the downstream app.
    """

    def __init__(self, app: ASGIApp, engine: NegotiationEngine) -> None:
        super().__init__(app)
        self.engine = engine

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        negotiation = self.engine.negotiate(_negotiation_request(request))
        request.state.language_negotiation = negotiation.result
        request.state.language = negotiation.result.language

        instructions = negotiation.instructions
        if not instructions.should_continue:
            response = Response(status_code=instructions.halt_status)
        elif instructions.redirect is not None:
            response = RedirectResponse(
                instructions.redirect.location,
                status_code=instructions.redirect.status_code,
            )
        else:
            response = await call_next(request)

        apply_instructions(response, instructions)
        return response


def _negotiation_request(request: Request) -> NegotiationRequest:
    return NegotiationRequest.from_url(
        str(request.url), request.headers.get(ACCEPT_LANGUAGE)
    )


def apply_instructions(response: Response, instructions: ResponseInstructions) -> None:
    """Set ``Content-Language`` and merge ``Vary`` into *response*."""
    if instructions.content_language is not None:
        response.headers["Content-Language"] = instructions.content_language
    if instructions.vary:
        vary = merge_vary(response.headers.get("Vary"), instructions.vary)
        response.headers["Vary"] = vary


def merge_vary(existing: str | None, tokens: tuple[str, ...]) -> str:
    """Add *tokens* to a ``Vary`` value, skipping ones already listed."""
    values = [v.strip() for v in (existing or "").split(",") if v.strip()]
    present = {v.lower() for v in values}
    if "*" in present:
        return "*"
    for token in tokens:
        if token.lower() not in present:
            values.append(token)
            present.add(token.lower())
    return ", ".join(values)
