"""
Product View-Model

Holds the fetched product list for display.
"""

import logging
from concurrent.futures import Future
from typing import List, Optional

from ..api import Result
from ..models import Product
from ..services import ProductService
from .base import BaseViewModel
from .main_context import MainContext


logger = logging.getLogger(__name__)


class ProductViewModel(BaseViewModel):
    """
    Exposes products fetched through a ProductService.

    Concurrent fetches are not cancelled or ordered: whichever response
    completes last determines ``products``.
    """

    def __init__(self, product_service: ProductService, main_context: MainContext):
        super().__init__(main_context)
        self.product_service = product_service
        self.products: List[Product] = []
        self.selected_product: Optional[Product] = None

    def fetch_all_products(self) -> Future:
        """Start a fetch; results are applied on the main context."""
        logger.info("Fetching all products")
        return self.product_service.get_all_products(self._on_products)

    def select(self, product: Optional[Product]) -> None:
        self.selected_product = product

    def _on_products(self, result: Result) -> None:
        # Runs on a worker thread
        if result.is_success:
            logger.info(f"Fetched {len(result.value)} products")
            self.main_context.post(self._set_products, result.value)
        else:
            logger.error(f"Failed to fetch products: {result.error}")
            self.main_context.post(self._report_error, result.error)

    def _set_products(self, products: List[Product]) -> None:
        self.products = list(products)
        self._clear_error()
