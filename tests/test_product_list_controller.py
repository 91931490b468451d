"""Unit tests for ProductListController state transitions and pagination."""

import pytest

from powerplay.core.state import PaginationState, UiState
from powerplay.network.result import NetworkResult
from powerplay.services.product_list import ProductListController


@pytest.fixture
def first_page(product_factory, page_factory):
    products = [product_factory(1), product_factory(2, price=149.99)]
    return page_factory(products, current_page=0, next_page=1, total_pages=5, total=50)


@pytest.fixture
def second_page(product_factory, page_factory):
    products = [product_factory(3), product_factory(4)]
    return page_factory(products, current_page=1, next_page=2, total_pages=5, total=50)


class TestInitialLoad:

    @pytest.mark.asyncio
    async def test_publishes_loading_then_success(self, stub_repo, first_page):
        stub_repo.respond(0, NetworkResult.success(first_page))

        controller = ProductListController(stub_repo)
        states = []
        controller.ui_state.subscribe(states.append)
        await controller.wait_idle()

        assert states == [UiState.loading(), UiState.success(first_page.products)]
        assert controller.products.value == first_page.products
        pagination = controller.pagination_state.value
        assert pagination.has_next_page is True
        assert pagination.current_page == 0
        assert pagination.total_pages == 5
        assert pagination.is_loading_next_page is False

    @pytest.mark.asyncio
    async def test_error_publishes_message(self, stub_repo):
        stub_repo.respond(0, NetworkResult.error("Network error"))

        controller = ProductListController(stub_repo)
        states = []
        controller.ui_state.subscribe(states.append)
        await controller.wait_idle()

        assert states == [UiState.loading(), UiState.error("Network error")]
        assert controller.products.value == []

    @pytest.mark.asyncio
    async def test_exception_falls_back_to_generic_message(self, stub_repo):
        stub_repo.respond(0, NetworkResult.failure(RuntimeError("boom")))

        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        assert controller.ui_state.value == UiState.error("Network error occurred")

    @pytest.mark.asyncio
    async def test_raising_repository_does_not_break_controller(self, stub_repo):
        class Exploding(type(stub_repo)):
            async def fetch_page(self, page):
                raise RuntimeError("contract broken")

        controller = ProductListController(Exploding())
        await controller.wait_idle()

        assert controller.ui_state.value == UiState.error("Network error occurred")

    @pytest.mark.asyncio
    async def test_autoload_disabled(self, stub_repo):
        controller = ProductListController(stub_repo, autoload=False)

        assert stub_repo.calls == []
        assert controller.ui_state.has_value is False

    def test_autoload_outside_event_loop_raises(self, stub_repo):
        with pytest.raises(RuntimeError):
            ProductListController(stub_repo)


class TestPagination:

    @pytest.mark.asyncio
    async def test_next_page_appends_in_order(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        controller.load_next_page()
        await controller.wait_idle()

        expected = first_page.products + second_page.products
        assert controller.products.value == expected
        assert controller.ui_state.value == UiState.success(expected)
        assert controller.pagination_state.value.current_page == 1

    @pytest.mark.asyncio
    async def test_rapid_next_page_calls_fetch_once(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        gate = stub_repo.hold(1)
        first = controller.load_next_page()
        second = controller.load_next_page()

        assert first is not None
        assert second is None
        assert controller.pagination_state.value.is_loading_next_page is True

        gate.set()
        await controller.wait_idle()

        assert stub_repo.calls.count(1) == 1
        assert controller.pagination_state.value.is_loading_next_page is False

    @pytest.mark.asyncio
    async def test_next_page_does_not_touch_top_level_state(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        states = []
        controller.ui_state.subscribe(states.append)
        controller.load_next_page()
        await controller.wait_idle()

        assert all(not state.is_loading for state in states)

    @pytest.mark.asyncio
    async def test_next_page_failure_is_silent(self, stub_repo, first_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.error("Service unavailable", 503))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        controller.load_next_page()
        await controller.wait_idle()

        assert controller.ui_state.value == UiState.success(first_page.products)
        assert controller.products.value == first_page.products
        pagination = controller.pagination_state.value
        assert pagination.is_loading_next_page is False
        assert pagination.current_page == 0
        assert pagination.has_next_page is True

    @pytest.mark.asyncio
    async def test_next_page_can_be_retried_after_failure(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.failure(OSError("reset")), NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        controller.load_next_page()
        await controller.wait_idle()
        controller.load_next_page()
        await controller.wait_idle()

        assert stub_repo.calls == [0, 1, 1]
        assert len(controller.products.value) == 4

    @pytest.mark.asyncio
    async def test_no_next_page_is_noop(self, stub_repo, product_factory, page_factory):
        stub_repo.respond(0, NetworkResult.success(page_factory([product_factory(1)])))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        assert controller.pagination_state.value.has_next_page is False
        assert controller.load_next_page() is None
        assert stub_repo.calls == [0]


class TestRetryAndRefresh:

    @pytest.mark.asyncio
    async def test_retry_reloads_page_zero(self, stub_repo, first_page):
        stub_repo.respond(0, NetworkResult.error("Bad gateway", 502), NetworkResult.success(first_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()
        assert controller.ui_state.value.is_error

        controller.retry()
        await controller.wait_idle()

        assert stub_repo.calls == [0, 0]
        assert controller.ui_state.value == UiState.success(first_page.products)

    @pytest.mark.asyncio
    async def test_repeated_retry_does_not_duplicate(self, stub_repo, first_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        for _ in range(3):
            controller.retry()
            await controller.wait_idle()

        assert controller.products.value == first_page.products

    @pytest.mark.asyncio
    async def test_refresh_resets_pagination_before_reload(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()
        controller.load_next_page()
        await controller.wait_idle()

        pagination_states = []
        controller.pagination_state.subscribe(pagination_states.append)
        controller.refresh()

        assert controller.pagination_state.value == PaginationState(
            current_page=0, has_next_page=True, is_loading_next_page=False, total_pages=0
        )
        assert controller.is_refreshing.value is True
        assert controller.ui_state.value.is_loading

        await controller.wait_idle()

        assert pagination_states[1] == PaginationState()
        assert controller.is_refreshing.value is False
        assert controller.products.value == first_page.products
        assert controller.pagination_state.value.total_pages == 5

    @pytest.mark.asyncio
    async def test_refresh_flag_cleared_on_failure(self, stub_repo, first_page):
        stub_repo.respond(0, NetworkResult.success(first_page), NetworkResult.error("Request timeout", 408))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        refreshing = []
        controller.is_refreshing.subscribe(refreshing.append)
        controller.refresh()
        await controller.wait_idle()

        assert refreshing == [False, True, False]
        assert controller.ui_state.value == UiState.error("Request timeout")


class TestOverlappingLoads:

    @pytest.mark.asyncio
    async def test_latest_issued_page_zero_load_wins(self, stub_repo, product_factory, page_factory):
        stale = page_factory([product_factory(1)])
        fresh = page_factory([product_factory(2)])
        stub_repo.respond(0, NetworkResult.success(stale), NetworkResult.success(fresh))
        gate = stub_repo.hold(0)

        controller = ProductListController(stub_repo)
        retry_task = controller.retry()
        await retry_task
        assert controller.products.value == fresh.products

        # The initial load resolves last and must not overwrite the retry.
        gate.set()
        await controller.wait_idle()

        assert stub_repo.calls == [0, 0]

        assert controller.products.value == fresh.products
        assert controller.ui_state.value == UiState.success(fresh.products)

    @pytest.mark.asyncio
    async def test_next_page_landing_after_refresh_is_dropped(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        gate = stub_repo.hold(1)
        controller.load_next_page()
        refresh_task = controller.refresh()
        await refresh_task
        gate.set()
        await controller.wait_idle()

        assert controller.products.value == first_page.products
        assert controller.pagination_state.value.current_page == 0
        assert controller.pagination_state.value.is_loading_next_page is False

    @pytest.mark.asyncio
    async def test_failed_retry_releases_superseded_next_page_guard(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page), NetworkResult.error("Bad gateway", 502))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        gate = stub_repo.hold(1)
        controller.load_next_page()
        await controller.retry()
        gate.set()
        await controller.wait_idle()

        assert controller.ui_state.value == UiState.error("Bad gateway")
        assert controller.pagination_state.value.is_loading_next_page is False
        assert controller.products.value == first_page.products

        assert controller.load_next_page() is not None
        await controller.wait_idle()
        assert stub_repo.calls == [0, 1, 0, 1]

    @pytest.mark.asyncio
    async def test_successful_retry_releases_superseded_next_page_guard(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        gate = stub_repo.hold(1)
        controller.load_next_page()
        await controller.retry()
        gate.set()
        await controller.wait_idle()

        assert controller.products.value == first_page.products
        assert controller.pagination_state.value.is_loading_next_page is False

    @pytest.mark.asyncio
    async def test_stale_next_page_leaves_newer_guard_in_place(self, stub_repo, first_page, second_page):
        stub_repo.respond(0, NetworkResult.success(first_page))
        stub_repo.respond(1, NetworkResult.success(second_page))
        controller = ProductListController(stub_repo)
        await controller.wait_idle()

        stale_gate = stub_repo.hold(1)
        stale_task = controller.load_next_page()
        await controller.refresh()

        fresh_gate = stub_repo.hold(1)
        controller.load_next_page()
        stale_gate.set()
        await stale_task

        assert controller.pagination_state.value.is_loading_next_page is True
        assert controller.load_next_page() is None

        fresh_gate.set()
        await controller.wait_idle()

        assert controller.products.value == first_page.products + second_page.products
        assert controller.pagination_state.value.is_loading_next_page is False
        assert stub_repo.calls.count(1) == 2
