"""
Product Repository

Owns the catalog call and the in-memory product cache, and turns raw
responses into NetworkResult values. Nothing here raises for runtime
failures; every outcome comes back as a result.
"""

import logging
from abc import ABC, abstractmethod

from ..models.product import Product, ProductsResponse
from ..network.errors import classify_http_status, classify_transport_failure
from ..network.result import NetworkResult
from .catalog_client import CatalogClient

logger = logging.getLogger(__name__)

EMPTY_BODY_MESSAGE = "Empty response body"
PRODUCT_NOT_FOUND_MESSAGE = "Product not found"


class ProductRepository(ABC):
    """Source of product pages and cached product lookups"""

    @abstractmethod
    async def fetch_page(self, page: int) -> NetworkResult[ProductsResponse]:
        """Fetch one page of products"""

    @abstractmethod
    async def fetch_by_id(self, product_id: int) -> NetworkResult[Product]:
        """Look up a product seen in an earlier page"""


class CachedProductRepository(ProductRepository):
    """
    Repository backed by the catalog API with a process-lifetime cache.

    The cache maps product id to the last-seen product. Only fetch_page
    writes to it; entries are never evicted.
    """

    def __init__(self, client: CatalogClient):
        self.client = client
        self._cache: dict[int, Product] = {}

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    async def close(self) -> None:
        """Close the underlying catalog client"""
        await self.client.close()

    async def fetch_page(self, page: int) -> NetworkResult[ProductsResponse]:
        if page < 0:
            raise ValueError(f"Page must be >= 0, got {page}")

        try:
            response = await self.client.get_products(page=page)

            if not response.is_success:
                logger.warning(f"Catalog returned {response.status_code} for page {page}")
                return classify_http_status(response.status_code)

            if not response.content.strip():
                return NetworkResult.error(EMPTY_BODY_MESSAGE)

            body = response.json()
            if body is None:
                return NetworkResult.error(EMPTY_BODY_MESSAGE)

            products_response = ProductsResponse.model_validate(body)

        except Exception as e:
            result = classify_transport_failure(e)
            if result.is_exception:
                logger.error(f"Unexpected failure fetching page {page}: {e}", exc_info=True)
            else:
                logger.warning(f"Transport failure fetching page {page}: {e!r} ({result.message})")
            return result

        for product in products_response.products:
            self._cache[product.id] = product

        logger.debug(
            f"Page {products_response.current_page} loaded: "
            f"{len(products_response.products)} products, {len(self._cache)} cached"
        )
        return NetworkResult.success(products_response)

    async def fetch_by_id(self, product_id: int) -> NetworkResult[Product]:
        # The catalog has no single-product endpoint, so only cached
        # products are reachable.
        product = self._cache.get(product_id)
        if product is None:
            return NetworkResult.error(PRODUCT_NOT_FOUND_MESSAGE)
        return NetworkResult.success(product)
