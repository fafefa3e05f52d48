from __future__ import annotations

from pydantic import BaseModel

from langneg.app.negotiation.types import NegotiationMethod, NegotiationResult


class NegotiationResultOut(BaseModel):
    language: str
    method: NegotiationMethod
    quality: float

    @classmethod
    def from_result(cls, result: NegotiationResult) -> NegotiationResultOut:
        return cls(
            language=result.language,
            method=result.method,
            quality=result.quality,
        )


class GreetingOut(BaseModel):
    language: str
    language_name: str
    message: str
