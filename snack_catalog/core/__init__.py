"""Core business logic - product models, errors and catalog coordination."""

from .errors import (
    CatalogError,
    ConfigError,
    DuplicateProductError,
    ImageNotFoundError,
    NotFoundError,
    ProductNotFoundError,
)
from .models import Product, StoredImage

__all__ = [
    "CatalogError",
    "ConfigError",
    "DuplicateProductError",
    "ImageNotFoundError",
    "NotFoundError",
    "ProductNotFoundError",
    "Product",
    "StoredImage",
]
