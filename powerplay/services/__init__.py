# Catalog services

from .catalog_client import CatalogClient, CatalogClientError
from .product_repository import ProductRepository, CachedProductRepository
from .product_list import ProductListController
from .factory import create_repository, create_product_list_controller

__all__ = [
    "CatalogClient",
    "CatalogClientError",
    "ProductRepository",
    "CachedProductRepository",
    "ProductListController",
    "create_repository",
    "create_product_list_controller",
]
