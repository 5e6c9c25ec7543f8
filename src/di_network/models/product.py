"""
Product Models

Product resource and the envelope the products endpoint wraps it in.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .fields import optional_float, optional_str, require_int, require_str


@dataclass(frozen=True)
class Product:
    """Represents a product from the API."""
    id: int
    name: str
    description: Optional[str] = None
    price: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """
        Build a Product from its JSON object.

        DummyJSON names the field ``title``; ``name`` wins when both exist.
        """
        return cls(
            id=require_int(data, "id"),
            name=require_str(data, "name" if "name" in data else "title"),
            description=optional_str(data, "description"),
            price=optional_float(data, "price")
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description is not None:
            out["description"] = self.description
        if self.price is not None:
            out["price"] = self.price
        return out


@dataclass(frozen=True)
class ProductResponse:
    """Envelope returned by the products endpoint: ``{"products": [...]}``."""
    products: List[Product] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductResponse":
        items = data["products"]
        if not isinstance(items, list):
            raise TypeError(f"'products' must be an array, got {type(items).__name__}")
        return cls(products=[Product.from_dict(item) for item in items])
