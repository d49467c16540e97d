"""Data models for catalog products and stored images."""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Product:
    """A catalog product.

    ``image_source_path`` points at the image to copy at call time. The
    stored location is never kept here; it is derived from the id.
    """

    id: int
    description: str
    price: float
    image_source_path: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "price": self.price,
            "image": self.image_source_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Build a product from a mapping, checking the non-image fields.

        Raises:
            KeyError: If ``id``, ``description`` or ``price`` is missing
            ValueError: If the id is not an integer or the price is not a
                finite non-negative number
        """
        if isinstance(data["price"], bool):
            raise ValueError(f"Price must be a number, got {data['price']!r}")
        price = float(data["price"])
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"Price must be non-negative, got {price}")
        raw_id = data["id"]
        if isinstance(raw_id, bool) or int(raw_id) != raw_id:
            raise ValueError(f"Product id must be an integer, got {raw_id!r}")
        return cls(
            id=int(raw_id),
            description=str(data["description"]),
            price=price,
            image_source_path=str(data.get("image") or ""),
        )


@dataclass
class StoredImage:
    """Metadata of an image held by the image store."""

    product_id: int
    path: Path
    size: int  # bytes
    mimetype: str
    sha256: str
    width: Optional[int] = None  # None when the file does not decode
    height: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "path": str(self.path),
            "size": self.size,
            "mimetype": self.mimetype,
            "sha256": self.sha256,
            "width": self.width,
            "height": self.height,
        }
