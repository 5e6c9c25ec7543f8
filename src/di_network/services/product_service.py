"""
Product Service

Binds the products endpoint to an injected ApiService and unwraps the
response envelope.
"""

import logging
from concurrent.futures import Future
from typing import Optional

from ..api import ApiService, Completion, Result
from ..config import config
from ..models import ProductResponse


logger = logging.getLogger(__name__)


class ProductService:
    """
    Fetches products through whichever ApiService it was built with.

    Failures from the ApiService are forwarded unchanged.
    """

    def __init__(self, api_service: ApiService, endpoint: Optional[str] = None):
        self.api_service = api_service
        self.endpoint = endpoint or config.api.products_url
        logger.debug(f"ProductService initialized (endpoint: {self.endpoint})")

    def get_all_products(self, completion: Completion) -> Future:
        """
        Fetch every product.

        Args:
            completion: Called once with Success(List[Product]) or Failure.

        Returns:
            Future of the underlying request.
        """
        def unwrap(result: Result) -> None:
            completion(result.map(lambda response: response.products))

        return self.api_service.get(self.endpoint, ProductResponse, unwrap)
