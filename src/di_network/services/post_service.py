"""
Post Service

CRUD access to the posts endpoint through an injected ApiService.
"""

import logging
from concurrent.futures import Future
from typing import Any, List, Mapping, Optional

from ..api import ApiService, Completion
from ..config import config
from ..models import Post


logger = logging.getLogger(__name__)


class PostService:
    """Posts endpoint bound to an ApiService."""

    def __init__(self, api_service: ApiService, endpoint: Optional[str] = None):
        self.api_service = api_service
        self.endpoint = endpoint or config.api.posts_url
        logger.debug(f"PostService initialized (endpoint: {self.endpoint})")

    def get_all_posts(
        self,
        completion: Completion,
        parameters: Optional[Mapping[str, Any]] = None
    ) -> Future:
        """
        Fetch posts, optionally filtered.

        Args:
            completion: Called once with Success(List[Post]) or Failure.
            parameters: Query parameters, e.g. ``{"userId": 3}``.
        """
        return self.api_service.get(self.endpoint, List[Post], completion, parameters)

    def add_post(self, post: Post, completion: Completion) -> Future:
        return self.api_service.create(self.endpoint, post, completion)

    def update_post(self, post: Post, completion: Completion) -> Future:
        return self.api_service.update(self._item_url(post.id), post, completion)

    def delete_post(self, post_id: int, completion: Completion) -> Future:
        return self.api_service.delete(self._item_url(post_id), completion)

    def _item_url(self, post_id: int) -> str:
        return f"{self.endpoint.rstrip('/')}/{post_id}"
