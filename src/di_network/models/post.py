"""
Post Model

Post resource as served by JSONPlaceholder.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .fields import require_int, require_str


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    user_id: int
    id: int
    title: str
    body: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        return cls(
            user_id=require_int(data, "userId"),
            id=require_int(data, "id"),
            title=require_str(data, "title"),
            body=require_str(data, "body")
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, using the API's camelCase keys."""
        return {
            "userId": self.user_id,
            "id": self.id,
            "title": self.title,
            "body": self.body,
        }
