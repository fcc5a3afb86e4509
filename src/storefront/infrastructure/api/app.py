"""Storefront FastAPI application.

Usage:
    storefront serve
    uvicorn storefront.infrastructure.api.app:create_app --factory --port 3000
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from storefront.application.auth import AuthProvider
from storefront.config import Settings
from storefront.domain.exceptions import (
    AuthenticationError,
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure import bootstrap
from storefront.infrastructure.api.routes import admin_router, store_router

logger = structlog.get_logger(__name__)

_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 403),
    (EntityNotFoundError, 404),
    (StorageError, 500),
]


def _status_code_for(exc: DomainException) -> int:
    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = _status_code_for(exc)
    if status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=str(exc))
    else:
        logger.warning("Request rejected", path=request.url.path, status=status_code, error=str(exc))
    return JSONResponse(status_code=status_code, content={"message": str(exc)})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {field} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    logger.warning("Request rejected", path=request.url.path, status=400, error=message)
    return JSONResponse(status_code=400, content={"message": message})


def create_app(
    settings: Settings | None = None,
    *,
    order_repo: OrderRepository | None = None,
    product_repo: ProductRepository | None = None,
    auth_provider: AuthProvider | None = None,
) -> FastAPI:
    """Build the application.

    Stores not passed in explicitly are built from *settings* (or from the
    environment) by the composition root.
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Storefront API",
        description="Product catalog, customer orders and the admin surface",
    )
    app.state.settings = settings
    if order_repo is None:
        order_repo = bootstrap.order_repository(settings)
    if product_repo is None:
        product_repo = bootstrap.product_repository(settings)
    if auth_provider is None:
        auth_provider = bootstrap.auth_provider(settings)

    app.state.order_repo = order_repo
    app.state.product_repo = product_repo
    app.state.auth_provider = auth_provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(store_router)
    app.include_router(admin_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    # Mounted last so the API routes take precedence over the front-end.
    if settings.static_dir is not None and settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="frontend")

    logger.info(
        "Storefront app created",
        order_store=type(app.state.order_repo).__name__,
        data_dir=str(settings.data_dir),
    )
    return app
