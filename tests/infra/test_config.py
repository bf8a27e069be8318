from __future__ import annotations

import pytest

from catalog_browser.infra.config import (
    DEFAULT_CATALOG_URL,
    DEFAULT_DISPLAY_PAGE_SIZE,
    DEFAULT_TIMEOUT_S,
    catalog_url,
    display_page_size,
    request_timeout,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CATALOG_URL", "CATALOG_TIMEOUT_S", "CATALOG_PAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)


def test_catalog_url_default() -> None:
    assert catalog_url() == DEFAULT_CATALOG_URL == "https://dummyjson.com/products"


def test_catalog_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_URL", "http://localhost:9000/products")

    assert catalog_url() == "http://localhost:9000/products"


def test_request_timeout_default() -> None:
    assert request_timeout() == DEFAULT_TIMEOUT_S


def test_request_timeout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_TIMEOUT_S", "2.5")

    assert request_timeout() == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_request_timeout_invalid(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CATALOG_TIMEOUT_S", raw)

    with pytest.raises(RuntimeError, match="CATALOG_TIMEOUT_S"):
        request_timeout()


def test_display_page_size_default() -> None:
    assert display_page_size() == DEFAULT_DISPLAY_PAGE_SIZE


def test_display_page_size_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_PAGE_SIZE", "25")

    assert display_page_size() == 25


def test_display_page_size_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_PAGE_SIZE", "ten")

    with pytest.raises(RuntimeError, match="CATALOG_PAGE_SIZE"):
        display_page_size()
