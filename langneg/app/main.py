import logging

from fastapi import FastAPI

from langneg.app.api.routing import register_language_convertor
from langneg.app.api.v1.api import api_router
from langneg.app.core.config import build_language_config, settings
from langneg.app.middleware.language import LanguageNegotiationMiddleware
from langneg.app.negotiation.engine import NegotiationEngine
from langneg.app.negotiation.language_config import LanguageConfig
from langneg.app.negotiation.observer import NegotiationObserver
from langneg.app.negotiation.types import Method

logger = logging.getLogger(__name__)


def create_app(
    config: LanguageConfig, observer: NegotiationObserver | None = None
) -> FastAPI:
    app = FastAPI(title="Language Negotiation Service")
    app.state.language_config = config
    app.state.default_language = config.default_language

    # ─── Negotiation middleware ───────────────────────────────────────────────
    app.add_middleware(
        LanguageNegotiationMiddleware, engine=NegotiationEngine(config, observer)
    )

    app.include_router(api_router)
    # Same routes again behind a language segment, e.g. /ja/api/v1/language
    if Method.PATH_PREFIX in config.methods:
        app.include_router(api_router, prefix=register_language_convertor(config))

    logger.info(
        "Language negotiation: languages=%s methods=%s options=%s",
        ",".join(config.languages),
        config.methods,
        config.options,
    )
    return app


logging.getLogger("langneg").setLevel(settings.LOG_LEVEL)

app = create_app(build_language_config(settings))
