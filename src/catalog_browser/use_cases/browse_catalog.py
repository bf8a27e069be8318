"""Browse session: owns the browser state and recomputes derived views."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from catalog_browser.domain.errors import FetchError, ValidationError
from catalog_browser.domain.pagination import page_count, paginate
from catalog_browser.domain.product import PageState, Product, SortField, SortSpec
from catalog_browser.domain.search import filter_products
from catalog_browser.domain.sorting import sort_products
from catalog_browser.use_cases.fetch_all_products import FetchAllProducts

logger = logging.getLogger(__name__)


class BrowserStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class BrowserView:
    """Everything a display collaborator needs to render the table."""

    rows: list[Product]
    loading: bool
    status: BrowserStatus
    total: int  # Rows matching the query, across all display pages
    page: int
    page_size: int
    page_count: int
    query: str
    sort: SortSpec


Listener = Callable[[BrowserView], None]


class CatalogBrowser:
    """
    Client-side catalog browser.

    State: raw collection, query, sort spec and page index. Derived views
    form a fixed chain, each recomputed only when something upstream of
    it changes:

        raw collection, query  -> filtered
        filtered, sort spec    -> sorted   (page index reset to 1)
        sorted, page index     -> rows

    Changing the page index never touches filtered/sorted, so it never
    resets itself. Listeners receive a fresh BrowserView after every
    state change.

    Lifecycle: idle -> loading -> ready, or loading -> error when the
    fetch fails. Both ready and error are terminal for the session.
    """

    def __init__(
        self,
        fetch_all_products: FetchAllProducts,
        page_size: int = 10,
        sort: SortSpec | None = None,
    ) -> None:
        PageState(page=1, page_size=page_size).validate()

        self._fetch_all_products = fetch_all_products
        self._page_size = page_size
        self._status = BrowserStatus.IDLE
        self._listeners: list[Listener] = []

        self._products: list[Product] = []
        self._query = ""
        self._sort = sort or SortSpec()
        self._page = 1

        self._filtered: list[Product] = []
        self._sorted: list[Product] = []
        self._rows: list[Product] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self) -> None:
        """
        Fetch the whole catalog once.

        A FetchError is logged and turns the browser into the error state
        with an empty collection; it is never re-raised.

        Raises:
            ValidationError: If the browser has already been loaded
        """
        if self._status is not BrowserStatus.IDLE:
            raise ValidationError(
                "Catalog can only be loaded once", status=self._status.value
            )

        self._status = BrowserStatus.LOADING
        self._notify()

        try:
            products = self._fetch_all_products.execute()
        except FetchError as exc:
            logger.error(
                "Catalog fetch failed",
                extra={
                    "error_code": exc.error_code,
                    "detail": exc.message,
                    "context": exc.context,
                },
            )
            products = []
            self._status = BrowserStatus.ERROR
        else:
            self._status = BrowserStatus.READY

        self._products = list(products)
        self._refilter()
        self._notify()

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> None:
        if query == self._query:
            return
        self._query = query
        self._refilter()
        self._notify()

    def set_sort(self, sort: SortSpec) -> None:
        if sort == self._sort:
            return
        self._sort = sort
        self._resort()
        self._notify()

    def sort_by(self, field: SortField) -> None:
        """Column-header click: same column flips direction, new column sorts ascending."""
        if field is self._sort.field:
            self.set_sort(self._sort.toggled())
        else:
            self.set_sort(SortSpec(field=field))

    def toggle_direction(self) -> None:
        self.set_sort(self._sort.toggled())

    def set_page(self, page: int) -> None:
        """
        Show another display page.

        Raises:
            PagingValidationError: If page < 1
        """
        PageState(page=page, page_size=self._page_size).validate()
        if page == self._page:
            return
        self._page = page
        self._repaginate()
        self._notify()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def view(self) -> BrowserView:
        return BrowserView(
            rows=list(self._rows),
            loading=self.loading,
            status=self._status,
            total=len(self._sorted),
            page=self._page,
            page_size=self._page_size,
            page_count=page_count(len(self._sorted), self._page_size),
            query=self._query,
            sort=self._sort,
        )

    @property
    def status(self) -> BrowserStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status is BrowserStatus.LOADING

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def query(self) -> str:
        return self._query

    @property
    def sort(self) -> SortSpec:
        return self._sort

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def _refilter(self) -> None:
        self._filtered = filter_products(self._products, self._query)
        self._resort()

    def _resort(self) -> None:
        self._sorted = sort_products(self._filtered, self._sort)
        # New result set: start over from the first page
        self._page = 1
        self._repaginate()

    def _repaginate(self) -> None:
        self._rows = paginate(self._sorted, self._page, self._page_size)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.view()
        for listener in list(self._listeners):
            listener(snapshot)
