"""Storage layers - in-memory products and on-disk images."""

from .repository import ProductRepository
from .image_store import ImageStore

__all__ = ["ProductRepository", "ImageStore"]
