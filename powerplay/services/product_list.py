"""
Product List Controller

Drives the product list screen:
1. Loads the first page and publishes Loading / Success / Error
2. Appends further pages for infinite scroll without touching the top-level state
3. Handles retry and pull-to-refresh

Every entry point applies its immediate state change synchronously and then
schedules the fetch as a task on the running event loop.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Coroutine, Optional

from ..core.observable import ObservableValue
from ..core.state import PaginationState, UiState
from ..models.product import Product, ProductsResponse
from ..network.errors import NETWORK_ERROR_MESSAGE
from ..network.result import NetworkResult
from .product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductListController:
    """
    State owner for the paginated product list.

    Published state:
    - products: accumulated products, page 0 first
    - ui_state: Loading, Success(products) or Error(message)
    - pagination_state: cursor and next-page flags
    - is_refreshing: True while a refresh is in flight

    Each page-0 load starts a new generation. Loads that resolve after a
    newer page-0 load was issued are discarded, so the most recently issued
    load always wins.
    """

    def __init__(self, repository: ProductRepository, autoload: bool = True):
        self.repository = repository

        self.products: ObservableValue[list[Product]] = ObservableValue([])
        self.ui_state: ObservableValue[UiState[list[Product]]] = ObservableValue()
        self.pagination_state: ObservableValue[PaginationState] = ObservableValue(PaginationState())
        self.is_refreshing: ObservableValue[bool] = ObservableValue(False)

        self._generation = 0
        self._next_page_request = 0
        self._tasks: set[asyncio.Task] = set()

        if autoload:
            self.load_page(0)

    # ==================== Operations ====================

    def load_page(self, page: int = 0) -> asyncio.Task:
        """Start loading a page; page 0 replaces the list, later pages append"""
        if page < 0:
            raise ValueError(f"Page must be >= 0, got {page}")

        if page == 0:
            self._generation += 1
            self.ui_state.set(UiState.loading())
        else:
            self._next_page_request += 1
            self.pagination_state.set(
                replace(self.pagination_state.value, is_loading_next_page=True)
            )

        logger.debug(f"Loading page {page} (generation {self._generation})")
        return self._launch(self._load(page, self._generation, self._next_page_request))

    def load_next_page(self) -> Optional[asyncio.Task]:
        """Load the page after the current one unless one is in flight or none is left"""
        state = self.pagination_state.value
        if not state.has_next_page or state.is_loading_next_page:
            return None
        return self.load_page(state.current_page + 1)

    def retry(self) -> asyncio.Task:
        return self.load_page(0)

    def refresh(self) -> asyncio.Task:
        """Reset pagination and reload from the first page"""
        self.is_refreshing.set(True)
        self.pagination_state.set(PaginationState())
        return self.load_page(0)

    async def wait_idle(self) -> None:
        """Wait until every scheduled load, including ones scheduled meanwhile, has finished"""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending)

    # ==================== Internals ====================

    def _launch(self, coro: Coroutine) -> asyncio.Task:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _load(self, page: int, generation: int, next_page_request: int) -> None:
        try:
            result = await self.repository.fetch_page(page)
        except Exception as e:
            logger.error(f"Repository raised while fetching page {page}: {e}", exc_info=True)
            result = NetworkResult.failure(e)

        if generation != self._generation:
            logger.debug(f"Discarding stale result for page {page} (generation {generation})")
            # Release the next-page guard unless a newer next-page load holds it.
            if page > 0 and next_page_request == self._next_page_request:
                self.pagination_state.set(
                    replace(self.pagination_state.value, is_loading_next_page=False)
                )
            return

        result.fold(
            on_success=lambda response: self._apply_page(page, response),
            on_error=lambda message, code: self._apply_failure(page, message),
            on_exception=lambda exception: self._apply_failure(page, NETWORK_ERROR_MESSAGE),
        )

        if page == 0:
            self.is_refreshing.set(False)

    def _apply_page(self, page: int, response: ProductsResponse) -> None:
        current = [] if page == 0 else self.products.value
        updated = current + list(response.products)

        self.products.set(updated)
        self.ui_state.set(UiState.success(updated))
        self.pagination_state.set(
            PaginationState(
                current_page=response.current_page,
                has_next_page=response.has_next_page,
                is_loading_next_page=False,
                total_pages=response.total_pages,
            )
        )
        logger.info(
            f"Page {response.current_page}/{response.total_pages} loaded, "
            f"{len(updated)} products listed"
        )

    def _apply_failure(self, page: int, message: str) -> None:
        if page == 0:
            logger.info(f"Initial page failed: {message}")
            self.ui_state.set(UiState.error(message))
        else:
            # Pagination failures leave the visible list alone.
            logger.warning(f"Page {page} failed: {message}")
            self.pagination_state.set(
                replace(self.pagination_state.value, is_loading_next_page=False)
            )
