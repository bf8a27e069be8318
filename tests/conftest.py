from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from catalog_browser.domain.product import Product

ProductFactory = Callable[..., Product]


@pytest.fixture()
def make_product() -> ProductFactory:
    """Build a Product with sensible defaults; override any field by keyword."""

    def factory(id: int = 1, **overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "title": f"Product {id}",
            "description": "A product",
            "price": Decimal("10.00"),
            "rating": 4.0,
            "brand": "Acme",
            "category": "misc",
            "thumbnail": f"https://cdn.example.com/{id}.png",
        }
        fields.update(overrides)
        return Product(id=id, **fields)

    return factory


@pytest.fixture()
def products(make_product: ProductFactory) -> list[Product]:
    return [
        make_product(
            1,
            title="iPhone 9",
            description="An apple mobile which is nothing like apple",
            price=Decimal("549"),
            rating=4.69,
            brand="Apple",
            category="smartphones",
        ),
        make_product(
            2,
            title="Essence Mascara Lash Princess",
            description="Popular mascara known for its volumizing effects",
            price=Decimal("9.99"),
            rating=2.56,
            brand="Essence",
            category="beauty",
        ),
        make_product(
            3,
            title="Apple",
            description="Fresh and crisp apples",
            price=Decimal("1.99"),
            rating=4.19,
            brand=None,
            category="groceries",
        ),
        make_product(
            4,
            title="Samsung Universe 9",
            description="Samsung's new variant which goes beyond Galaxy",
            price=Decimal("1249"),
            rating=4.09,
            brand="Samsung",
            category="smartphones",
        ),
        make_product(
            5,
            title="Éclair Box",
            description="Assorted pastries",
            price=Decimal("12.50"),
            rating=4.69,
            brand="Bakery Co",
            category="groceries",
        ),
    ]
