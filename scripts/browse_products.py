#!/usr/bin/env python3
"""
Terminal product browser.

Pages through the catalog with the product list controller, the same way
the list screen does on scroll, then shows one product's details.

Usage:
    python scripts/browse_products.py [--pages N] [--detail PRODUCT_ID]
"""

import argparse
import asyncio
import sys
from typing import Optional

from powerplay.core.config import get_settings
from powerplay.core.logging_config import configure_logging
from powerplay.core.state import UiState
from powerplay.models.product import Product
from powerplay.services.factory import create_product_list_controller, create_repository


def print_ui_state(state: UiState) -> None:
    if state.is_loading:
        print("… loading")
    elif state.is_error:
        print(f"✗ {state.message}")
    else:
        print(f"✓ {len(state.data)} products")


def print_detail(product: Product) -> None:
    print("\n" + "=" * 60)
    print(product.title)
    print("=" * 60)
    print(f"Category: {product.category}")
    print(f"Price:    {product.display_price}")
    print(f"\n{product.description}")


async def browse(max_pages: int, detail_id: Optional[int]) -> int:
    settings = get_settings()
    repository = create_repository(settings)
    controller = create_product_list_controller(repository=repository)
    controller.ui_state.subscribe(print_ui_state)

    try:
        await controller.wait_idle()
        if controller.ui_state.value.is_error:
            return 1

        for _ in range(max_pages - 1):
            if controller.load_next_page() is None:
                break
            await controller.wait_idle()

        state = controller.pagination_state.value
        print(f"\nLoaded page {state.current_page + 1} of {state.total_pages}")
        for product in controller.products.value:
            print(f"  [{product.id:>4}] {product.title:<40} {product.display_price:>10}")

        if detail_id is not None:
            result = await repository.fetch_by_id(detail_id)
            result.on_success(print_detail).on_error(
                lambda message, code: print(f"\n✗ {message}")
            )
    finally:
        await repository.close()

    return 0


def main():
    parser = argparse.ArgumentParser(description="Browse the product catalog")
    parser.add_argument("--pages", type=int, default=3, help="Maximum pages to load")
    parser.add_argument("--detail", type=int, default=None, help="Product ID to show")
    args = parser.parse_args()

    configure_logging(get_settings())
    sys.exit(asyncio.run(browse(args.pages, args.detail)))


if __name__ == "__main__":
    main()
