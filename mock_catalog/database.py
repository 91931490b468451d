"""Mock product database"""

import math
from typing import Optional

from powerplay.models.product import Product, ProductsResponse


def _product(id: int, title: str, description: str, price: float, category: str = "electronics") -> Product:
    return Product(
        id=id,
        title=title,
        description=description,
        category=category,
        price=price,
        image=f"/static/images/product-{id}.jpg",
    )


# Mock product catalog
PRODUCTS: list[Product] = [
    _product(1, "Pixel 8 Smartphone", "6.2-inch Actua display, Tensor G3, 128GB.", 699.00),
    _product(2, "Galaxy Buds2 Pro Earbuds", "Intelligent ANC with 24-bit Hi-Fi audio.", 229.99),
    _product(3, "MacBook Air 13 Laptop", "M3 chip, 8GB unified memory, 256GB SSD.", 1099.00),
    _product(4, "Forerunner 265 Watch", "GPS running smartwatch with AMOLED display.", 449.99),
    _product(5, "MX Master 3S Mouse", "Quiet clicks, 8K DPI optical sensor.", 99.99),
    _product(6, "Anker 735 Charger", "65W GaN II three-port fast charger.", 59.99),
    _product(7, "WH-1000XM5 Headphones", "Industry-leading noise cancellation, 30-hour battery.", 349.99),
    _product(8, "iPad Air 11 Tablet", "M2 chip, Liquid Retina display, 128GB.", 599.00),
    _product(9, "Kindle Paperwhite", "6.8-inch glare-free display, 16GB.", 149.99),
    _product(10, "Echo Dot (5th Gen)", "Smart speaker with Alexa and improved audio.", 49.99),
    _product(11, "GoPro HERO12 Black", "5.3K60 video, HyperSmooth 6.0 stabilization.", 399.99),
    _product(12, "Switch OLED Console", "7-inch OLED screen, 64GB internal storage.", 349.99),
    _product(13, "Dell UltraSharp 27 Monitor", "4K USB-C hub monitor with IPS Black.", 579.99),
    _product(14, "Keychron K2 Keyboard", "Wireless mechanical keyboard, hot-swappable.", 89.00),
    _product(15, "Samsung T7 Portable SSD", "1TB USB 3.2 Gen 2, up to 1,050MB/s.", 109.99),
    _product(16, "Nest Learning Thermostat", "Energy-saving smart thermostat, 3rd gen.", 249.00),
    _product(17, "Ring Video Doorbell 4", "1080p HD video with quick replays.", 219.99),
    _product(18, "Bose SoundLink Flex", "Waterproof portable Bluetooth speaker.", 149.00),
    _product(19, "Logitech C920 Webcam", "Full HD 1080p video calling.", 69.99),
    _product(20, "AirTag 4 Pack", "Bluetooth item trackers with Precision Finding.", 99.00),
    _product(21, "Fitbit Charge 6", "Fitness tracker with built-in GPS.", 159.95),
    _product(22, "Belkin 3-in-1 MagSafe Charger", "Charging stand for phone, watch and earbuds.", 129.99),
    _product(23, "Raspberry Pi 5 Kit", "8GB board with case, power supply and cooler.", 119.99),
    _product(101, "Patagonia Better Sweater", "Classic fleece jacket made with recycled polyester.", 139.00, "clothing"),
    _product(102, "Nike Air Max 90", "Iconic design with Max Air cushioning.", 130.00, "clothing"),
    _product(201, "KitchenAid Stand Mixer", "5.5-Quart bowl-lift stand mixer.", 449.99, "home"),
    _product(301, "Atomic Habits", "An Easy & Proven Way to Build Good Habits. Hardcover.", 24.99, "books"),
]


class PageOutOfRangeError(Exception):
    """Requested page lies beyond the last page"""
    pass


class ProductDatabase:
    """In-memory product database for the mock catalog"""

    def __init__(self, products: Optional[list[Product]] = None):
        self.products = list(PRODUCTS if products is None else products)

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def get_page(
        self,
        page: int = 0,
        limit: int = 10,
        category: Optional[str] = None,
    ) -> ProductsResponse:
        """
        Get one zero-based page of products.

        Raises:
            PageOutOfRangeError: if page is past the last page
        """
        results = self.products
        if category:
            category_lower = category.lower()
            results = [p for p in results if p.category.lower() == category_lower]

        total = len(results)
        total_pages = max(1, math.ceil(total / limit))
        if page >= total_pages:
            raise PageOutOfRangeError(f"Page {page} out of range (total pages: {total_pages})")

        start = page * limit
        return ProductsResponse(
            products=results[start : start + limit],
            next_page=page + 1 if page + 1 < total_pages else None,
            total_pages=total_pages,
            current_page=page,
            total=total,
        )

    def get_categories(self) -> list[str]:
        """Distinct categories in catalog order"""
        return list(dict.fromkeys(p.category for p in self.products))


# Singleton instance
product_db = ProductDatabase()
