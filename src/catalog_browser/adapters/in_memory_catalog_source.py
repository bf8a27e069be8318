from __future__ import annotations

from catalog_browser.domain.errors import FetchError
from catalog_browser.domain.product import CatalogPage, Product
from catalog_browser.ports.catalog_source import CatalogSource

_UNSET = object()


class InMemoryCatalogSource(CatalogSource):
    """
    Canonical contract implementation for tests.

    - Serves products in insertion order
    - Applies limit/skip the way the remote endpoint does
    - Reports len(products) as total unless told otherwise (None = no total)
    - Records every (limit, skip) request
    - Can fail on the n-th request (1-based) to simulate network errors
    """

    def __init__(
        self,
        products: list[Product],
        total: int | None | object = _UNSET,
        fail_on_request: int | None = None,
    ) -> None:
        self._products = products
        self._total = len(products) if total is _UNSET else total
        self._fail_on_request = fail_on_request
        self.requests: list[tuple[int, int]] = []

    def fetch_page(self, limit: int, skip: int) -> CatalogPage:
        self.requests.append((limit, skip))

        if self._fail_on_request == len(self.requests):
            raise FetchError("Simulated network failure", limit=limit, skip=skip)

        return CatalogPage(
            products=self._products[skip : skip + limit],
            total=self._total,  # type: ignore[arg-type]
        )
