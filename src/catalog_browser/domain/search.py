from __future__ import annotations

from decimal import Decimal
from typing import Any

from catalog_browser.domain.product import Product


def _text(value: Any) -> str:
    """String form of a field value; integral numbers carry no fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return str(int(value))
    return str(value)


def searchable_text(product: Product) -> list[str]:
    """
    String form of every product attribute that carries a value.

    Identifier and thumbnail are included; a missing brand is skipped.
    Numbers read as they do in the catalog JSON, so a rating of 4 is "4".
    """
    values = (
        product.id,
        product.title,
        product.description,
        product.price,
        product.rating,
        product.brand,
        product.category,
        product.thumbnail,
    )
    return [_text(value) for value in values if value is not None]


def filter_products(products: list[Product], query: str) -> list[Product]:
    """
    Keep the products with at least one field containing the query.

    Matching is a case-insensitive substring test on the lowercase form of
    both sides. Input order is preserved. An empty query returns the input
    list itself.

    Args:
        products: Collection to filter
        query: Free-text query ("" means no filtering)

    Returns:
        Matching products in input order
    """
    if not query:
        return products

    needle = query.lower()
    return [
        product
        for product in products
        if any(needle in text.lower() for text in searchable_text(product))
    ]
