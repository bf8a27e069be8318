"""
Test suite for the /v1/view routes.

- Route delegates to the browser obtained via dependency injection
- Route maps browser views to DTOs (price as string, enums as values)
- Query/sort changes reset the page, page changes do not
- Request validation errors return structured 422 responses
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_browser.adapters.in_memory_catalog_source import InMemoryCatalogSource
from catalog_browser.domain.product import Product, SortDirection, SortField, SortSpec
from catalog_browser.entrypoints.http.dependencies import get_browser
from catalog_browser.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_browser.entrypoints.http.routes.view import router
from catalog_browser.use_cases.browse_catalog import CatalogBrowser
from catalog_browser.use_cases.fetch_all_products import FetchAllProducts


@pytest.fixture
def catalog(make_product) -> list[Product]:
    return [
        make_product(
            i,
            title=f"Phone {i:02d}" if i % 3 == 0 else f"Laptop {i:02d}",
            price=Decimal(f"{i}.50"),
            rating=round(5 - i * 0.1, 2),
            category="smartphones" if i % 3 == 0 else "laptops",
        )
        for i in range(1, 31)
    ]


@pytest.fixture
def browser(catalog: list[Product]) -> CatalogBrowser:
    browser = CatalogBrowser(FetchAllProducts(InMemoryCatalogSource(catalog)), page_size=10)
    browser.load()
    return browser


@pytest.fixture
def app(browser: CatalogBrowser) -> FastAPI:
    """Create a test FastAPI app with the view router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_browser] = lambda: browser
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# GET /v1/view
# ==============================================================================


def test_get_view_returns_first_page(client: TestClient) -> None:
    response = client.get("/v1/view")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["loading"] is False
    assert data["total"] == 30
    assert data["page"] == 1
    assert data["page_size"] == 10
    assert data["page_count"] == 3
    assert data["query"] == ""
    assert data["sort_field"] == "title"
    assert data["direction"] == "asc"
    assert len(data["rows"]) == 10
    assert data["rows"][0]["title"] == "Laptop 01"


def test_get_view_serializes_price_as_string(client: TestClient) -> None:
    row = client.get("/v1/view").json()["rows"][0]

    assert row["price"] == "1.50"
    assert set(row) == {
        "id",
        "title",
        "description",
        "price",
        "rating",
        "brand",
        "category",
        "thumbnail",
    }


def test_get_view_reads_browser_without_changing_it(
    app: FastAPI, client: TestClient, browser: CatalogBrowser
) -> None:
    mock_browser = Mock(spec=CatalogBrowser)
    mock_browser.view.return_value = browser.view()
    app.dependency_overrides[get_browser] = lambda: mock_browser

    response = client.get("/v1/view")

    assert response.status_code == 200

    mock_browser.view.assert_called_once_with()
    mock_browser.set_query.assert_not_called()
    mock_browser.set_page.assert_not_called()


# ==============================================================================
# PUT /v1/view/query
# ==============================================================================


def test_update_query_filters_rows(client: TestClient) -> None:
    response = client.put("/v1/view/query", json={"query": "PHONE"})

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "PHONE"
    assert data["total"] == 10
    assert all(row["category"] == "smartphones" for row in data["rows"])


def test_update_query_resets_page(client: TestClient, browser: CatalogBrowser) -> None:
    client.put("/v1/view/page", json={"page": 3})

    data = client.put("/v1/view/query", json={"query": "xyz-nomatch"}).json()

    assert data["page"] == 1
    assert data["rows"] == []
    assert data["total"] == 0
    assert browser.page == 1


def test_empty_query_clears_search(client: TestClient) -> None:
    client.put("/v1/view/query", json={"query": "phone"})

    data = client.put("/v1/view/query", json={}).json()

    assert data["query"] == ""
    assert data["total"] == 30


def test_too_long_query_is_rejected(client: TestClient) -> None:
    response = client.put("/v1/view/query", json={"query": "x" * 201})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "query"


# ==============================================================================
# PUT /v1/view/sort and POST /v1/view/sort/toggle
# ==============================================================================


def test_update_sort_with_direction(client: TestClient, browser: CatalogBrowser) -> None:
    response = client.put("/v1/view/sort", json={"field": "price", "direction": "desc"})

    assert response.status_code == 200
    data = response.json()
    assert data["sort_field"] == "price"
    assert data["direction"] == "desc"
    assert [row["id"] for row in data["rows"]] == list(range(30, 20, -1))
    assert browser.sort == SortSpec(SortField.PRICE, SortDirection.DESC)


def test_update_sort_without_direction_acts_like_header_click(client: TestClient) -> None:
    first = client.put("/v1/view/sort", json={"field": "rating"}).json()
    second = client.put("/v1/view/sort", json={"field": "rating"}).json()

    assert (first["sort_field"], first["direction"]) == ("rating", "asc")
    assert (second["sort_field"], second["direction"]) == ("rating", "desc")
    assert first["rows"][0]["id"] == 30  # lowest rating
    assert second["rows"][0]["id"] == 1


def test_update_sort_resets_page(client: TestClient) -> None:
    client.put("/v1/view/page", json={"page": 2})

    data = client.put("/v1/view/sort", json={"field": "category", "direction": "asc"}).json()

    assert data["page"] == 1


def test_unknown_sort_field_is_rejected(client: TestClient) -> None:
    response = client.put("/v1/view/sort", json={"field": "stock"})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "field"


def test_toggle_direction(client: TestClient) -> None:
    data = client.post("/v1/view/sort/toggle").json()

    assert data["sort_field"] == "title"
    assert data["direction"] == "desc"
    assert data["rows"][0]["title"] == "Phone 30"


def test_toggle_twice_restores_ascending(client: TestClient) -> None:
    client.post("/v1/view/sort/toggle")

    data = client.post("/v1/view/sort/toggle").json()

    assert data["direction"] == "asc"


# ==============================================================================
# PUT /v1/view/page
# ==============================================================================


def test_update_page(client: TestClient) -> None:
    data = client.put("/v1/view/page", json={"page": 3}).json()

    assert data["page"] == 3
    assert len(data["rows"]) == 10
    assert data["total"] == 30


def test_page_past_the_end_is_empty(client: TestClient) -> None:
    data = client.put("/v1/view/page", json={"page": 7}).json()

    assert data["page"] == 7
    assert data["rows"] == []


@pytest.mark.parametrize("page", [0, -1])
def test_invalid_page_is_rejected(client: TestClient, page: int) -> None:
    response = client.put("/v1/view/page", json={"page": page})

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Invalid request parameters"
    assert data["errors"][0]["field"] == "page"


def test_missing_page_is_rejected(client: TestClient) -> None:
    response = client.put("/v1/view/page", json={})

    assert response.status_code == 422
