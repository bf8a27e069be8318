from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_browser.domain.product import CatalogPage


class CatalogSource(ABC):
    """
    Port for the remote, server-side paginated catalog.

    Implementations return one page per call. A response without a
    records field yields an empty page; a response without a total
    yields ``total=None``. Every transport or protocol failure must be
    raised as FetchError.

    Contract (Preconditions):
        - limit > 0 and skip >= 0 (guaranteed by the caller)
    """

    @abstractmethod
    def fetch_page(self, limit: int, skip: int) -> CatalogPage:
        """
        Retrieve one page of the catalog.

        Args:
            limit: Maximum number of records to return
            skip: Number of records to skip from the start of the catalog

        Returns:
            CatalogPage with the page records and the advertised total

        Raises:
            FetchError: On any network or protocol failure
        """
        ...
