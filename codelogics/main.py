"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers API routes.  The ``uvicorn`` ASGI server can point to
``codelogics.main:app`` to serve the application.
"""

import time
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config.app_config import get_app_config
from .controllers.code_controller import router as code_router
from .models.code_response import HealthResponse
from .utils.error_handler import (
    PromptValidationError,
    prompt_validation_exception_handler,
    request_validation_exception_handler,
)
from .utils.logger import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    app_config = get_app_config()
    setup_logging(app_config)
    started_at = time.monotonic()

    app = FastAPI(title="Code Logics Labs API", version="0.1.0")

    origins = app_config.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Wildcard origins cannot be combined with credentials
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PromptValidationError, prompt_validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.include_router(code_router)

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Liveness check with process uptime."""
        logger.debug("Health check invoked")
        return HealthResponse(
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime=round(time.monotonic() - started_at, 3),
        )

    return app


# Create an application instance for ASGI servers
app = create_app()
