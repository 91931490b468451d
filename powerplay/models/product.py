"""Product models for the catalog API"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Product(BaseModel):
    """Product in the catalog"""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str
    category: str
    price: float = Field(ge=0)
    image: Optional[str] = None

    @property
    def display_price(self) -> str:
        return f"${self.price:.2f}"


class ProductsResponse(BaseModel):
    """One page of products returned by GET /products"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    products: list[Product] = Field(alias="data")
    next_page: Optional[int] = None
    total_pages: int = Field(ge=1)
    current_page: int = Field(ge=0)
    total: int = Field(ge=0)

    @property
    def has_next_page(self) -> bool:
        return self.next_page is not None


class ErrorResponse(BaseModel):
    """Error body the catalog API may send with a non-2xx status"""
    error: Optional[str] = None
    message: Optional[str] = None
    code: Optional[int] = None
