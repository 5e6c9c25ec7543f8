"""
View-Models Module

Observable state for the UI layer, updated only on the main context.
"""

from .main_context import MainContext
from .post_viewmodel import PostViewModel
from .product_viewmodel import ProductViewModel

__all__ = ["MainContext", "PostViewModel", "ProductViewModel"]
