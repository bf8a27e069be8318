from fastapi import APIRouter, Depends

from catalog_browser.domain.product import SortSpec
from catalog_browser.entrypoints.http.dependencies import get_browser
from catalog_browser.entrypoints.http.dtos.view import (
    PageUpdateDTO,
    QueryUpdateDTO,
    SortUpdateDTO,
    ViewResponseDTO,
)
from catalog_browser.entrypoints.http.error_responses import ErrorResponse
from catalog_browser.entrypoints.http.mappers.view_mapper import ViewMapper
from catalog_browser.use_cases.browse_catalog import CatalogBrowser

# Async handlers: browser state is only touched from the event loop thread.

router = APIRouter(tags=["View"])


@router.get(
    "/view",
    response_model=ViewResponseDTO,
    summary="Current catalog view",
    description="""
    Returns the visible rows of the current display page together with the
    loading flag and the pagination metadata.

    The catalog is fetched once at startup. When that fetch fails the view
    stays empty with `status` set to `error`.
    """,
)
async def get_view(browser: CatalogBrowser = Depends(get_browser)) -> ViewResponseDTO:
    return ViewMapper.to_response(browser.view())


@router.put(
    "/view/query",
    response_model=ViewResponseDTO,
    summary="Search the catalog",
    description="""
    Filters the loaded catalog by a free-text query matched case-insensitively
    against every product field. The display page resets to 1.

    ## Example
    ```
    PUT /v1/view/query
    {"query": "phone"}
    ```
    """,
)
async def update_query(
    payload: QueryUpdateDTO,
    browser: CatalogBrowser = Depends(get_browser),
) -> ViewResponseDTO:
    browser.set_query(payload.query)
    return ViewMapper.to_response(browser.view())


@router.put(
    "/view/sort",
    response_model=ViewResponseDTO,
    summary="Sort the catalog",
    description="""
    Orders the filtered catalog by one column. The display page resets to 1.

    - String columns (title, brand, category, description): locale-aware order
    - Numeric columns (price, rating): numeric order
    - Without `direction` the request behaves like a column-header click
    """,
)
async def update_sort(
    payload: SortUpdateDTO,
    browser: CatalogBrowser = Depends(get_browser),
) -> ViewResponseDTO:
    if payload.direction is None:
        browser.sort_by(payload.field)
    else:
        browser.set_sort(SortSpec(field=payload.field, direction=payload.direction))
    return ViewMapper.to_response(browser.view())


@router.post(
    "/view/sort/toggle",
    response_model=ViewResponseDTO,
    summary="Flip the sort direction",
)
async def toggle_sort_direction(
    browser: CatalogBrowser = Depends(get_browser),
) -> ViewResponseDTO:
    browser.toggle_direction()
    return ViewMapper.to_response(browser.view())


@router.put(
    "/view/page",
    response_model=ViewResponseDTO,
    summary="Change the display page",
    description="""
    Selects a 1-based display page. Pages past the end are empty.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
async def update_page(
    payload: PageUpdateDTO,
    browser: CatalogBrowser = Depends(get_browser),
) -> ViewResponseDTO:
    browser.set_page(payload.page)
    return ViewMapper.to_response(browser.view())
