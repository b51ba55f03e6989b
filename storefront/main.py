# storefront/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.app.core.config import Settings, get_settings
from storefront.app.core.errors import StorefrontError
from storefront.app.core.logging import setup_logging
from storefront.app.core.metrics import StoreMetrics
from storefront.app.services.cart_store import CartStore
from storefront.app.services.catalog import Catalog
from storefront.app.services.order_log import OrderLogger

from storefront.app.api.routes_health import router as health_router
from storefront.app.api.routes_metrics import router as metrics_router
from storefront.routes.api_search import router as search_router
from storefront.routes.api_cart import router as cart_router
from storefront.routes.api_checkout import router as checkout_router

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    # StartupFatal propagates: no app, no serving
    order_logger = OrderLogger(settings.order_log_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("Server running on port %d...", settings.port)
        yield
        order_logger.close()

    app = FastAPI(
        title=settings.service_name or "storefront",
        version=settings.version or "0.1.0",
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if catalog is None:
        catalog = Catalog()
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.cart = CartStore(catalog)
    app.state.order_logger = order_logger
    app.state.metrics = StoreMetrics()

    @app.exception_handler(StorefrontError)
    async def _storefront_error(request: Request, exc: StorefrontError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        if request.url.path == "/checkout":
            app.state.metrics.checkout_rejected.inc({"reason": "invalid_body"})
        log.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    @app.exception_handler(Exception)
    async def _unhandled_exc_to_json(request: Request, exc: Exception):
        log.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal error",
                "detail": str(exc),
                "path": str(request.url),
                "method": request.method,
            },
        )

    app.include_router(search_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    @app.get("/")
    def root():
        return {
            "service": settings.service_name,
            "version": settings.version,
            "docs": "/docs",
            "tips": {
                "search": "GET /search?q=<prefix>&category=<name>",
                "add": "POST /add?id=<product id>&quantity=<n>",
                "checkout": "POST /checkout {payment_type, address}",
                "health": "/health",
                "metrics": "/metrics",
            },
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
