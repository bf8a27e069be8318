from pydantic import BaseModel, ConfigDict, Field

from catalog_browser.domain.product import SortDirection, SortField


class ProductResponseDTO(BaseModel):
    id: int
    title: str
    description: str
    price: str
    rating: float
    brand: str | None = None
    category: str
    thumbnail: str


class ViewResponseDTO(BaseModel):
    """Current display page plus what the pagination control needs."""

    rows: list[ProductResponseDTO]
    loading: bool
    status: str
    total: int = Field(description="Products matching the query across all pages")
    page: int
    page_size: int
    page_count: int
    query: str
    sort_field: SortField
    direction: SortDirection


class QueryUpdateDTO(BaseModel):
    """Free-text search applied across every product field."""

    query: str = Field(
        default="",
        description="Case-insensitive substring; empty string clears the search",
        examples=["phone"],
        max_length=200,
    )


class SortUpdateDTO(BaseModel):
    """Sort selection; omit direction to act like a column-header click."""

    field: SortField = Field(
        description="Column to sort by",
        examples=["price"],
    )
    direction: SortDirection | None = Field(
        default=None,
        description="Sort direction; when omitted the same column flips, a new column sorts ascending",
        examples=["desc"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "direction": "desc",
            }
        }
    )


class PageUpdateDTO(BaseModel):
    page: int = Field(
        description="1-based display page index",
        examples=[2],
        ge=1,
    )
