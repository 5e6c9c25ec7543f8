"""
Models Module

Resource records decoded from API responses.
"""

from .post import Post
from .product import Product, ProductResponse

__all__ = ["Post", "Product", "ProductResponse"]
