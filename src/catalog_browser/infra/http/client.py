from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import httpx

from catalog_browser.infra.config import request_timeout

# Lazy initialization - only create the client when needed
_client: httpx.Client | None = None


def build_client() -> httpx.Client:
    """
    Create an HTTP client for the catalog endpoint.

    - timeout: applies to connect, read, write and pool acquisition
    - follow_redirects: the public catalog redirects http -> https
    - headers: JSON only
    """
    return httpx.Client(
        timeout=request_timeout(),
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


def get_client() -> httpx.Client:
    """Get or create the shared HTTP client (lazy initialization)."""
    global _client
    if _client is None or _client.is_closed:
        _client = build_client()
    return _client


def close_client() -> None:
    """Close the shared HTTP client if it was created."""
    global _client
    if _client is not None:
        _client.close()
        _client = None


@contextmanager
def http_client() -> Iterator[httpx.Client]:
    """Get a dedicated HTTP client that is closed on exit."""
    client = build_client()

    try:
        yield client
    finally:
        client.close()
