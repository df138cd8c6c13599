"""
FastAPI application: REST API, web chat, Twilio webhook and static pages.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from salesbot.api.routes import register_routes
from salesbot.config import settings
from salesbot.core.errors import PaymentError, PaymentUnavailableError, ValidationError
from salesbot.core.facade import CommerceFacade, create_facade

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map core errors to `{ok: false, error}` responses."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug(f"Malformed request to {request.url.path}: {exc.errors()}")
        return _error(400, "Solicitud inválida")

    @app.exception_handler(PaymentUnavailableError)
    async def handle_payment_unavailable(
        request: Request, exc: PaymentUnavailableError
    ) -> JSONResponse:
        return _error(503, str(exc))

    @app.exception_handler(PaymentError)
    async def handle_payment_error(request: Request, exc: PaymentError) -> JSONResponse:
        return _error(502, "error de pago")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the facade on startup unless one was injected."""
    owns_facade = getattr(app.state, "facade", None) is None
    if owns_facade:
        app.state.facade = await create_facade()
        logger.info("Commerce facade initialized")

    yield

    if owns_facade:
        await app.state.facade.lead_store.close()
        app.state.facade = None


def create_app(
    facade: Optional[CommerceFacade] = None,
    public_dir: Optional[Path] = None,
) -> FastAPI:
    """
    Create the HTTP application.

    Args:
        facade: Prebuilt facade (tests, main entry point); built on startup if None
        public_dir: Static files served at '/', default settings.public_dir
    """
    app = FastAPI(
        title="Salesbot API",
        description="Catalog, leads, carts and checkout for the sales assistant",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.facade = facade

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)

    # Static PWA last so API routes take precedence
    public_dir = public_dir or settings.public_dir
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
    else:
        logger.info(f"Static directory {public_dir} not found, not serving pages")

    return app
