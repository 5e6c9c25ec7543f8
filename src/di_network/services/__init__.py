"""
Services Module

Resource services that bind fixed endpoints to an injected ApiService.
"""

from .post_service import PostService
from .product_service import ProductService

__all__ = ["PostService", "ProductService"]
