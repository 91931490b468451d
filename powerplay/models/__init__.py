# Catalog Models

from .product import Product, ProductsResponse, ErrorResponse

__all__ = ["Product", "ProductsResponse", "ErrorResponse"]
