from fastapi import APIRouter

from langneg.app.api.v1.endpoints import language

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(language.router, tags=["language"])
