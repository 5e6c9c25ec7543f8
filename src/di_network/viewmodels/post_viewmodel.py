"""
Post View-Model

Holds the fetched post list and forwards new posts to the PostService.
"""

import logging
from concurrent.futures import Future
from typing import Any, List, Mapping, Optional

from ..api import Result
from ..models import Post
from ..services import PostService
from .base import BaseViewModel
from .main_context import MainContext


logger = logging.getLogger(__name__)


class PostViewModel(BaseViewModel):
    """Exposes posts fetched through a PostService."""

    def __init__(self, post_service: PostService, main_context: MainContext):
        super().__init__(main_context)
        self.post_service = post_service
        self.posts: List[Post] = []
        self.selected_post: Optional[Post] = None

    def fetch_all_posts(self, parameters: Optional[Mapping[str, Any]] = None) -> Future:
        """
        Start a fetch of posts.

        Args:
            parameters: Optional filter, e.g. ``{"userId": 3}``.
        """
        logger.info(f"Fetching posts (parameters: {parameters})")
        return self.post_service.get_all_posts(self._on_posts, parameters)

    def add_post(self, post: Post) -> Future:
        """Create ``post`` remotely and append it locally once accepted."""
        logger.info(f"Adding post {post.id}")

        def on_created(result: Result) -> None:
            if result.is_success:
                self.main_context.post(self._append_post, post)
            else:
                logger.error(f"Failed to add post {post.id}: {result.error}")
                self.main_context.post(self._report_error, result.error)

        return self.post_service.add_post(post, on_created)

    def select(self, post: Optional[Post]) -> None:
        self.selected_post = post

    def _on_posts(self, result: Result) -> None:
        if result.is_success:
            logger.info(f"Fetched {len(result.value)} posts")
            self.main_context.post(self._set_posts, result.value)
        else:
            logger.error(f"Failed to fetch posts: {result.error}")
            self.main_context.post(self._report_error, result.error)

    def _set_posts(self, posts: List[Post]) -> None:
        self.posts = list(posts)
        self._clear_error()

    def _append_post(self, post: Post) -> None:
        self.posts.append(post)
