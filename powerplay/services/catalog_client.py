"""
Catalog API Client

HTTP client for the remote product catalog. Returns raw responses; status
handling and error classification belong to the product repository.
"""

import logging
from typing import Optional

import httpx

from ..core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_CATEGORY = "electronics"


class CatalogClientError(Exception):
    """Base exception for catalog client misconfiguration"""
    pass


class CatalogClient:
    """
    Client for the catalog's paginated products endpoint.

    Usage:
        async with CatalogClient("http://localhost:8001") as client:
            response = await client.get_products(page=0)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize catalog client.

        Args:
            base_url: Base URL of the catalog API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (mock or ASGI transports in tests)
        """
        if not base_url:
            raise CatalogClientError("Catalog base URL is required")

        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        logger.info(f"Catalog client initialized for {self.base_url}")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CatalogClient":
        return cls(
            base_url=settings.catalog_base_url,
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def get_products(
        self,
        page: int,
        limit: int = DEFAULT_PAGE_SIZE,
        category: str = DEFAULT_CATEGORY,
    ) -> httpx.Response:
        """
        Fetch one page of products.

        Transport failures propagate as httpx exceptions. Non-2xx responses
        are returned as-is.
        """
        params = {"page": page, "limit": limit, "category": category}
        logger.debug(f"GET /products {params}")

        response = await self._http_client.get("/products", params=params)

        logger.debug(f"GET /products page={page} -> {response.status_code}")
        return response
