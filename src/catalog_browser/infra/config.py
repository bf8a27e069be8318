from __future__ import annotations

import os

DEFAULT_CATALOG_URL = "https://dummyjson.com/products"
DEFAULT_TIMEOUT_S = 10.0
DEFAULT_DISPLAY_PAGE_SIZE = 10

# Remote page size used by the fetcher; fixed for the process lifetime
FETCH_PAGE_SIZE = 30
# Assumed catalog size when the probe response carries no total
FALLBACK_TOTAL = 100


def catalog_url() -> str:
    return os.getenv("CATALOG_URL") or DEFAULT_CATALOG_URL


def request_timeout() -> float:
    raw = os.getenv("CATALOG_TIMEOUT_S")

    if not raw:
        return DEFAULT_TIMEOUT_S

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"CATALOG_TIMEOUT_S must be a number, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("CATALOG_TIMEOUT_S must be > 0")

    return timeout


def display_page_size() -> int:
    raw = os.getenv("CATALOG_PAGE_SIZE")

    if not raw:
        return DEFAULT_DISPLAY_PAGE_SIZE

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"CATALOG_PAGE_SIZE must be an integer, got {raw!r}")
