"""Keeps the product repository and the image store in step.

Each mutation touches the two stores one after the other, without rollback.
Failures from either store propagate unchanged, so the caller can tell which
side failed and what state was left behind:

append
    Repository first. A duplicate id fails before anything reaches disk. An
    unreadable image source leaves the product stored without an image and
    returns False.
update
    Repository first. An unknown id fails before any file is touched. The
    image is then replaced, or saved when the product had none. An unreadable
    new source leaves the product updated but without an image.
remove
    Image first, then repository. With neither a product nor an image for
    the id, ImageNotFoundError is raised and nothing changes.
"""

import logging

from .models import Product
from ..storage.image_store import ImageStore
from ..storage.repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Sequences repository and image store calls for each catalog operation."""

    def __init__(self, repository: ProductRepository, image_store: ImageStore):
        self.repository = repository
        self.image_store = image_store

    def get_all(self) -> list[Product]:
        return self.repository.get_all()

    def get_by_id(self, product_id: int) -> Product:
        return self.repository.get_by_id(product_id)

    def exists(self, product_id: int) -> bool:
        return self.repository.exists(product_id)

    def append(self, product: Product) -> bool:
        """Add a product and store its image.

        Returns:
            True if the image was stored, False if the product has no image
        """
        self.repository.append(product)
        stored = self.image_store.save(product)
        if not stored:
            logger.warning("Product %s added without an image", product.id)
        return stored

    def update(self, product_id: int, product: Product) -> bool:
        """Update a product's fields and replace its image.

        Returns:
            True if an image is stored for the product afterwards
        """
        self.repository.update(product_id, product)
        current = self.repository.get_by_id(product_id)
        if self.image_store.has_image(product_id):
            return self.image_store.update(current)
        return self.image_store.save(current)

    def remove(self, product_id: int) -> None:
        """Delete a product and its stored image."""
        if self.image_store.has_image(product_id) or not self.repository.exists(product_id):
            self.image_store.remove(product_id)
        self.repository.remove(product_id)
