from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from catalog_browser.entrypoints.http.dependencies import build_browser
from catalog_browser.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_browser.entrypoints.http.routes.health import router as health_router
from catalog_browser.entrypoints.http.routes.view import router as view_router
from catalog_browser.infra.http.client import close_client
from catalog_browser.use_cases.browse_catalog import CatalogBrowser

logger = logging.getLogger(__name__)

BrowserFactory = Callable[[], CatalogBrowser]


def build_app(browser_factory: BrowserFactory | None = None) -> FastAPI:
    factory = browser_factory or build_browser

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            browser = factory()
            app.state.browser = browser
            # Off the event loop; no request is served until every page is in memory
            await run_in_threadpool(browser.load)
            logger.info(
                "Catalog browser ready",
                extra={"status": browser.status.value, "count": len(browser.products)},
            )
            yield
        finally:
            close_client()

    app = FastAPI(
        title="Catalog Browser API",
        description="""
        Client-side browser over a remotely paginated product catalog.

        ## Features
        - Loads the whole remote catalog once at startup
        - Free-text search across every product field
        - Sorting by title, brand, category, description, price or rating
        - Local pagination of the search result

        ## Authentication
        None.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(view_router, prefix="/v1")

    return app


app = build_app()
