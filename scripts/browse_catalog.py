#!/usr/bin/env python3
"""
Load the remote catalog and print one page of it as a table.

Features:
- Fetches every remote page once (same pipeline as the API)
- Optional search, sort column/direction and display page

Usage:
    python scripts/browse_catalog.py
    python scripts/browse_catalog.py --query phone --sort price --desc --page 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from catalog_browser.adapters.http_catalog_source import HttpCatalogSource
from catalog_browser.domain.product import SortDirection, SortField, SortSpec
from catalog_browser.infra.config import catalog_url, display_page_size
from catalog_browser.infra.http.client import http_client
from catalog_browser.use_cases.browse_catalog import BrowserStatus, BrowserView, CatalogBrowser
from catalog_browser.use_cases.fetch_all_products import FetchAllProducts


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse the remote product catalog")
    parser.add_argument("--query", default="", help="Free-text search")
    parser.add_argument(
        "--sort",
        default=SortField.TITLE.value,
        choices=[field.value for field in SortField],
        help="Column to sort by",
    )
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--page", type=int, default=1, help="1-based display page")
    return parser.parse_args()


def print_view(view: BrowserView) -> None:
    print(f"\n📦 {view.total} products - page {view.page}/{max(view.page_count, 1)}")
    for product in view.rows:
        print(
            f"   {product.id:>4}  {product.title[:32]:<32}  "
            f"{(product.brand or '-')[:16]:<16}  {product.category[:16]:<16}  "
            f"${product.price:>9,.2f}  ★{product.rating:.2f}"
        )
    if not view.rows:
        print("   (no rows)")


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    with http_client() as client:
        source = HttpCatalogSource(client=client, url=catalog_url())
        browser = CatalogBrowser(
            fetch_all_products=FetchAllProducts(catalog_source=source),
            page_size=display_page_size(),
        )

        print(f"🌐 Loading catalog from {catalog_url()}...")
        browser.load()

    if browser.status is BrowserStatus.ERROR:
        print("❌ Could not load the catalog (see log above)", file=sys.stderr)
        return 1

    direction = SortDirection.DESC if args.desc else SortDirection.ASC
    browser.set_query(args.query)
    browser.set_sort(SortSpec(field=SortField(args.sort), direction=direction))
    browser.set_page(args.page)

    print_view(browser.view())
    return 0


if __name__ == "__main__":
    sys.exit(main())
