"""
Dependency injection for FastAPI routes.

Key principle: one browser session per process. It is built and loaded
once by the app lifespan and read from app.state by every request.
"""

from __future__ import annotations

from fastapi import Request

from catalog_browser.adapters.http_catalog_source import HttpCatalogSource
from catalog_browser.domain.errors import InternalError
from catalog_browser.infra.config import catalog_url, display_page_size
from catalog_browser.infra.http.client import get_client
from catalog_browser.use_cases.browse_catalog import CatalogBrowser
from catalog_browser.use_cases.fetch_all_products import FetchAllProducts


def build_browser() -> CatalogBrowser:
    """
    Factory that returns a CatalogBrowser wired to the remote catalog.

    - Shared httpx client (lazily created)
    - Endpoint and display page size from the environment

    Returns:
        CatalogBrowser: Configured, not yet loaded, browser
    """
    source = HttpCatalogSource(client=get_client(), url=catalog_url())
    return CatalogBrowser(
        fetch_all_products=FetchAllProducts(catalog_source=source),
        page_size=display_page_size(),
    )


def get_browser(request: Request) -> CatalogBrowser:
    """
    Provides the browser session created at startup.

    Raises:
        InternalError: If the app was started without its lifespan
    """
    browser = getattr(request.app.state, "browser", None)
    if browser is None:
        raise InternalError("Catalog browser is not initialized")
    return browser
