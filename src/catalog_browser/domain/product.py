from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from catalog_browser.domain.errors import PagingValidationError

MAX_PAGE_SIZE = 200
MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass(frozen=True)
class Product:
    id: int
    title: str
    description: str
    price: Decimal
    rating: float
    brand: str | None
    category: str
    thumbnail: str


class SortField(str, Enum):
    TITLE = "title"
    BRAND = "brand"
    CATEGORY = "category"
    DESCRIPTION = "description"
    PRICE = "price"
    RATING = "rating"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True, slots=True)
class SortSpec:
    field: SortField = SortField.TITLE
    direction: SortDirection = SortDirection.ASC

    def toggled(self) -> SortSpec:
        return SortSpec(field=self.field, direction=self.direction.toggled())


@dataclass(frozen=True, slots=True)
class PageState:
    page: int = 1
    page_size: int = 10

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1", page=self.page)
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0", page_size=self.page_size)
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(
                f"page_size must be <= {MAX_PAGE_SIZE}", page_size=self.page_size
            )


@dataclass(frozen=True)
class CatalogPage:
    """One remote response: the records it carried plus the advertised total."""

    products: list[Product]
    total: int | None = None  # None when the response did not report a total
