from __future__ import annotations

import logging

from catalog_browser.domain.errors import ValidationError
from catalog_browser.domain.product import Product
from catalog_browser.infra.config import FALLBACK_TOTAL, FETCH_PAGE_SIZE
from catalog_browser.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)

PROBE_LIMIT = 1


class FetchAllProducts:
    """
    Retrieve the whole remote catalog into one ordered list.

    Algorithm:
    1. Probe with limit=1 to learn the total record count T
       (FALLBACK_TOTAL when the probe does not report one)
    2. Request pages of page_size at skip = 0, L, 2L, ... while skip < T,
       strictly one after the other
    3. Concatenate page records in response order

    A FetchError from any request propagates unchanged; nothing gathered
    before the failure is returned. There is no retry.
    """

    def __init__(
        self,
        catalog_source: CatalogSource,
        page_size: int = FETCH_PAGE_SIZE,
        fallback_total: int = FALLBACK_TOTAL,
    ) -> None:
        if page_size <= 0:
            raise ValidationError("page_size must be > 0", page_size=page_size)
        self._source = catalog_source
        self._page_size = page_size
        self._fallback_total = fallback_total

    def execute(self) -> list[Product]:
        """
        Execute the full catalog fetch.

        Returns:
            Every product of the catalog, in remote order

        Raises:
            FetchError: If any page request fails
        """
        probe = self._source.fetch_page(limit=PROBE_LIMIT, skip=0)
        total = probe.total
        if total is None:
            logger.warning(
                "Catalog did not report a total, assuming fallback",
                extra={"fallback_total": self._fallback_total},
            )
            total = self._fallback_total

        offsets = range(0, total, self._page_size)
        logger.info(
            "Fetching catalog",
            extra={"total": total, "page_size": self._page_size, "pages": len(offsets)},
        )

        products: list[Product] = []
        for skip in offsets:
            page = self._source.fetch_page(limit=self._page_size, skip=skip)
            logger.debug(
                "Fetched catalog page",
                extra={"skip": skip, "received": len(page.products)},
            )
            products.extend(page.products)

        logger.info("Catalog fetched", extra={"count": len(products)})
        return products
