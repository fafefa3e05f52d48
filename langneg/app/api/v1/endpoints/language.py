from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from langneg.app.api.deps import get_negotiation
from langneg.app.core.i18n import translate
from langneg.app.negotiation.types import NegotiationResult
from langneg.app.schemas.language import GreetingOut, NegotiationResultOut

router = APIRouter()


@router.get("/language", response_model=NegotiationResultOut)
def read_language(
    result: NegotiationResult = Depends(get_negotiation),
) -> NegotiationResultOut:
    return NegotiationResultOut.from_result(result)


@router.get("/greeting", response_model=GreetingOut)
def read_greeting(
    request: Request,
    name: str | None = None,
    result: NegotiationResult = Depends(get_negotiation),
) -> GreetingOut:
    fallback = getattr(request.app.state, "default_language", "en")
    if name:
        message = translate(result.language, "greeting_named", fallback, name=name)
    else:
        message = translate(result.language, "greeting", fallback)
    return GreetingOut(
        language=result.language,
        language_name=translate(result.language, "language_name", fallback),
        message=message,
    )
