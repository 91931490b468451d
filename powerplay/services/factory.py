"""Wiring for the catalog client, repository and list controller"""

from typing import Optional

import httpx

from ..core.config import Settings, get_settings
from .catalog_client import CatalogClient
from .product_list import ProductListController
from .product_repository import CachedProductRepository, ProductRepository


def create_repository(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CachedProductRepository:
    settings = settings or get_settings()
    return CachedProductRepository(CatalogClient.from_settings(settings, transport=transport))


def create_product_list_controller(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    autoload: bool = True,
    repository: Optional[ProductRepository] = None,
) -> ProductListController:
    """
    Build a controller, backed by a fresh repository unless one is given.

    Callers that need the repository afterwards (detail lookups, closing
    the HTTP client) should build it with create_repository and pass it in.

    With autoload the first page starts loading right away, so this must be
    called from inside a running event loop.
    """
    if repository is None:
        repository = create_repository(settings, transport=transport)
    return ProductListController(repository, autoload=autoload)
