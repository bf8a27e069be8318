from __future__ import annotations

from catalog_browser.domain.product import Product
from catalog_browser.entrypoints.http.dtos.view import (
    ProductResponseDTO,
    ViewResponseDTO,
)
from catalog_browser.use_cases.browse_catalog import BrowserView


class ViewMapper:
    """Maps browser views to REST DTOs."""

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            title=product.title,
            description=product.description,
            price=str(product.price),  # Decimal → str at boundary
            rating=product.rating,
            brand=product.brand,
            category=product.category,
            thumbnail=product.thumbnail,
        )

    @staticmethod
    def to_response(view: BrowserView) -> ViewResponseDTO:
        """
        Converts a browser view snapshot to the REST response.

        Args:
            view: Snapshot returned by CatalogBrowser.view()

        Returns:
            ViewResponseDTO: Rows of the current page with pagination metadata
        """
        return ViewResponseDTO(
            rows=[ViewMapper.to_product_response(product) for product in view.rows],
            loading=view.loading,
            status=view.status.value,
            total=view.total,
            page=view.page,
            page_size=view.page_size,
            page_count=view.page_count,
            query=view.query,
            sort_field=view.sort.field,
            direction=view.sort.direction,
        )
