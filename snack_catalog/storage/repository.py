"""In-memory product repository."""

import logging

from ..core.errors import DuplicateProductError, ProductNotFoundError
from ..core.models import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """Holds products keyed by id, in insertion order. No I/O."""

    def __init__(self):
        # dicts keep insertion order, which get_all relies on
        self._products: dict[int, Product] = {}

    def append(self, product: Product) -> None:
        """Insert a product.

        Raises:
            DuplicateProductError: If a product with the same id exists
        """
        if product.id in self._products:
            raise DuplicateProductError(product.id)
        self._products[product.id] = product
        logger.debug("Appended product %s", product.id)

    def get_by_id(self, product_id: int) -> Product:
        """Return the product with this id.

        The stored object itself is returned; changing its id desyncs the
        repository, use update instead.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        try:
            return self._products[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def exists(self, product_id: int) -> bool:
        return product_id in self._products

    def update(self, product_id: int, product: Product) -> None:
        """Overwrite description, price and image path of a stored product.

        The stored product keeps its id; ``product.id`` is ignored.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        current = self.get_by_id(product_id)
        current.description = product.description
        current.price = product.price
        current.image_source_path = product.image_source_path
        logger.debug("Updated product %s", product_id)

    def remove(self, product_id: int) -> None:
        """Delete a product. Unknown ids are ignored."""
        if self._products.pop(product_id, None) is not None:
            logger.debug("Removed product %s", product_id)

    def get_all(self) -> list[Product]:
        """List all products in insertion order (the stored objects, not copies)."""
        return list(self._products.values())

    def count(self) -> int:
        return len(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products
