"""Storefront FastAPI application.

The engine is created once per application and stored on ``app.state``;
routes reach it through a dependency.

Usage:
    uvicorn storefront.app:build_app --factory --host 0.0.0.0 --port 3001 --reload
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api import admin_router, cart_router, checkout_router, product_router
from storefront.api.schemas import HealthResponse
from storefront.config import StorefrontConfig
from storefront.domain import Storefront
from storefront.utils.logging import add_context, clear_context, configure_logging, get_logger

logger = get_logger(__name__)


def create_app(storefront: Storefront | None = None) -> FastAPI:
    storefront = storefront or Storefront(config=StorefrontConfig.from_env())

    app = FastAPI(
        title="Storefront API",
        description="Carts, checkout, discount codes and sales statistics",
    )
    app.state.storefront = storefront

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_context_middleware(request: Request, call_next):
        """Bind request details to every log line emitted while handling it."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_context()

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies get the same envelope and status as core validation failures
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.warning("Request rejected", path=request.url.path, error=message)
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": message, "kind": "validation", "code": "invalid_input"},
        )

    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(admin_router)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse()

    return app


def build_app() -> FastAPI:
    """Application factory for uvicorn: configures logging, then builds the app."""
    config = StorefrontConfig.from_env()
    configure_logging(config)
    logger.info("Starting storefront", environment=config.environment, nth_order=config.nth_order_for_discount)
    return create_app(Storefront(config=config))
