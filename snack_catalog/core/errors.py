"""Exceptions raised by the catalog layers."""


class CatalogError(Exception):
    """Base class for catalog errors."""
    pass


class NotFoundError(CatalogError, LookupError):
    """Raised when an id is required to exist but does not."""

    def __init__(self, product_id: int, message: str | None = None):
        self.product_id = product_id
        super().__init__(message or f"No entry for product id {product_id}")


class ProductNotFoundError(NotFoundError):
    """Raised by the product repository for an unknown id."""

    def __init__(self, product_id: int):
        super().__init__(product_id, f"Product not found: {product_id}")


class ImageNotFoundError(NotFoundError):
    """Raised by the image store when no stored image exists for an id."""

    def __init__(self, product_id: int):
        super().__init__(product_id, f"No stored image for product {product_id}")


class DuplicateProductError(CatalogError):
    """Raised when appending a product whose id is already present."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product id already exists: {product_id}")


class ConfigError(CatalogError):
    """Raised for invalid configuration or catalog files."""
    pass
