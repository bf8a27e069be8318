"""Stable, type-aware ordering of products by a selectable column."""

from __future__ import annotations

import math
import unicodedata
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Callable

from catalog_browser.domain.product import Product, SortDirection, SortField, SortSpec

Accessor = Callable[[Product], Any]

ACCESSORS: dict[SortField, Accessor] = {
    SortField.TITLE: lambda product: product.title,
    SortField.BRAND: lambda product: product.brand,
    SortField.CATEGORY: lambda product: product.category,
    SortField.DESCRIPTION: lambda product: product.description,
    SortField.PRICE: lambda product: product.price,
    SortField.RATING: lambda product: product.rating,
}

NUMERIC_TYPES = (int, float, Decimal)


def collation_key(value: str) -> str:
    """Accent- and case-insensitive key used for locale-aware ordering."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _sign_of_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _is_number(value: Any) -> bool:
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way comparison of two column values.

    Strings compare by collation key, falling back to the raw text so
    that distinct strings never tie. Numbers compare by value, exactly
    across int, float and Decimal. NaN and any other pairing are
    treated as equal.
    """
    if isinstance(a, str) and isinstance(b, str):
        primary = _sign_of_order(collation_key(a), collation_key(b))
        return primary or _sign_of_order(a, b)
    if _is_number(a) and _is_number(b):
        # Ordering a NaN Decimal raises InvalidOperation
        if _is_nan(a) or _is_nan(b):
            return 0
        return _sign_of_order(a, b)
    return 0


def sort_products(products: list[Product], spec: SortSpec) -> list[Product]:
    """
    Return a new list ordered by ``spec``; the input is left untouched.

    The underlying sort is stable, so products with equal keys keep their
    input order in both directions.
    """
    accessor = ACCESSORS[spec.field]
    sign = -1 if spec.direction is SortDirection.DESC else 1

    def compare(left: Product, right: Product) -> int:
        return sign * compare_values(accessor(left), accessor(right))

    return sorted(products, key=cmp_to_key(compare))
