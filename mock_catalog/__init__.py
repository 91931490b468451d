# Mock catalog server

from .database import ProductDatabase, product_db

__all__ = ["ProductDatabase", "product_db"]
