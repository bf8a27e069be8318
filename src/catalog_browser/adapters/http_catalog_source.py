"""HTTP implementation of CatalogSource."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from catalog_browser.domain.errors import FetchError
from catalog_browser.domain.product import MAX_RATING, MIN_RATING, CatalogPage, Product
from catalog_browser.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class HttpCatalogSource(CatalogSource):
    """
    HTTP implementation of CatalogSource.

    - Issues GET <url>?limit=<limit>&skip=<skip>
    - Expects a JSON object {"total": int, "products": [...]}
    - Converts raw product objects (transport) to Product (domain)
    - Translates every httpx/JSON/shape failure to FetchError
    """

    def __init__(self, client: httpx.Client, url: str) -> None:
        """
        Initialize source with an HTTP client.

        Args:
            client: httpx client used for every request
            url: Catalog endpoint, without query string
        """
        self._client = client
        self._url = url

    def fetch_page(self, limit: int, skip: int) -> CatalogPage:
        """
        Fetch one page of the remote catalog.

        Args:
            limit: Maximum number of records to return
            skip: Number of records to skip

        Returns:
            CatalogPage with the converted products and the reported total

        Raises:
            FetchError: On transport errors, non-2xx statuses or malformed bodies
        """
        context = {"url": self._url, "limit": limit, "skip": skip}

        try:
            response = self._client.get(self._url, params={"limit": limit, "skip": skip})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Catalog request failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
                **context,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Catalog request failed: {exc}", **context) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise FetchError("Catalog response is not valid JSON", **context) from exc

        if not isinstance(body, dict):
            raise FetchError("Catalog response must be a JSON object", **context)

        raw_products = body.get("products")
        if raw_products is None:
            # Missing records field counts as an empty page
            logger.warning("Catalog page without products", extra=context)
            raw_products = []
        elif not isinstance(raw_products, list):
            raise FetchError("Catalog 'products' must be a list", **context)

        try:
            products = [self._to_domain(raw) for raw in raw_products]
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise FetchError(f"Malformed product in catalog response: {exc}", **context) from exc

        return CatalogPage(products=products, total=self._total(body))

    @staticmethod
    def _total(body: dict[str, Any]) -> int | None:
        total = body.get("total")
        if isinstance(total, bool) or not isinstance(total, int):
            return None
        return total

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Product:
        """
        Convert a raw product object to the Product domain entity.

        Args:
            raw: Decoded JSON object for one product

        Returns:
            Product domain entity

        Raises:
            KeyError: If id, title, price, rating or category are missing
            TypeError/ValueError/InvalidOperation: If a value has the wrong shape
                or a price/rating is not a finite number in range
        """
        if not isinstance(raw, dict):
            raise TypeError(f"product must be an object, got {type(raw).__name__}")

        price = Decimal(str(raw["price"]))  # via str to keep the JSON digits exactly
        if not price.is_finite():
            raise ValueError(f"price must be a finite number, got {raw['price']!r}")

        rating = float(raw["rating"])
        # NaN fails both bounds
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(
                f"rating must be within {MIN_RATING}..{MAX_RATING}, got {raw['rating']!r}"
            )

        brand = raw.get("brand")
        return Product(
            id=int(raw["id"]),
            title=str(raw["title"]),
            description=str(raw.get("description") or ""),
            price=price,
            rating=rating,
            brand=str(brand) if brand is not None else None,
            category=str(raw["category"]),
            thumbnail=str(raw.get("thumbnail") or ""),
        )
