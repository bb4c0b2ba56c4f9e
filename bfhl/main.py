# bfhl/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from bfhl.api.operations import failure_response, router as operations_router
from bfhl.clients.gemini import GeminiClient
from bfhl.config import Settings, get_settings
from bfhl.core.operations import AnswerClient, BODY_REQUIRED
from bfhl.models.responses import HealthOut

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    ai_client: Optional[AnswerClient] = None,
) -> FastAPI:
    """
    Build the API around one immutable Settings instance.

    ai_client defaults to a GeminiClient built from the same settings; tests
    pass their own.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="BFHL API",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.ai_client = ai_client or GeminiClient.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def body_not_readable(request: Request, exc: RequestValidationError):
        # the only validated input is the raw JSON body
        logger.warning("Unreadable request body on %s", request.url.path)
        return failure_response(BODY_REQUIRED)

    @app.get("/health", response_model=HealthOut)
    def health_check() -> HealthOut:
        return HealthOut(official_email=settings.official_email)

    app.include_router(operations_router)

    logger.info("API created (gemini model: %s)", settings.gemini_model)
    return app
