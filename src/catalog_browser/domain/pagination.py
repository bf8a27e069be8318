from __future__ import annotations

from catalog_browser.domain.product import Product


def paginate(products: list[Product], page: int, page_size: int) -> list[Product]:
    """
    Slice the 1-based ``page`` out of ``products``.

    The window is clipped to the collection length; a page that starts
    past the end is empty.
    """
    start = (page - 1) * page_size
    if start >= len(products):
        return []
    return products[start : start + page_size]


def page_count(total: int, page_size: int) -> int:
    """Number of display pages needed for ``total`` rows (0 when empty)."""
    if total <= 0:
        return 0
    return -(-total // page_size)
