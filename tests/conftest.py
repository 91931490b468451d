"""Shared fixtures for catalog tests."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import pytest

from powerplay.models.product import Product, ProductsResponse
from powerplay.network.result import NetworkResult
from powerplay.services.product_repository import ProductRepository


class StubRepository(ProductRepository):
    """
    Scripted repository for controller tests.

    ``respond(page, *results)`` queues results for a page; the last one
    repeats once the queue runs dry. ``hold(page)`` makes the next call for
    that page wait until the returned event is set. A call takes its result
    from the queue before it waits.
    """

    def __init__(self):
        self.calls: list[int] = []
        self._responses: dict[int, list[NetworkResult]] = {}
        self._gates: dict[int, list[asyncio.Event]] = {}

    def respond(self, page: int, *results: NetworkResult) -> None:
        self._responses[page] = list(results)

    def hold(self, page: int) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates.setdefault(page, []).append(gate)
        return gate

    async def fetch_page(self, page: int) -> NetworkResult[ProductsResponse]:
        self.calls.append(page)
        queue = self._responses[page]
        result = queue.pop(0) if len(queue) > 1 else queue[0]
        gates = self._gates.get(page)
        if gates:
            await gates.pop(0).wait()
        return result

    async def fetch_by_id(self, product_id: int) -> NetworkResult[Product]:
        return NetworkResult.error("Product not found")


@pytest.fixture
def stub_repo() -> StubRepository:
    return StubRepository()


@pytest.fixture
def product_factory() -> Callable[..., Product]:
    def make(id: int, price: float = 99.99, title: Optional[str] = None) -> Product:
        return Product(
            id=id,
            title=title or f"Product {id}",
            description=f"Description {id}",
            category="Electronics",
            price=price,
            image=f"image{id}.jpg",
        )

    return make


@pytest.fixture
def page_factory() -> Callable[..., ProductsResponse]:
    def make(
        products: list[Product],
        current_page: int = 0,
        next_page: Optional[int] = None,
        total_pages: int = 1,
        total: Optional[int] = None,
    ) -> ProductsResponse:
        return ProductsResponse(
            products=products,
            current_page=current_page,
            next_page=next_page,
            total_pages=total_pages,
            total=len(products) if total is None else total,
        )

    return make
