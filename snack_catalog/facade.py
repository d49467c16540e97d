"""Entry point for presentation layers; forwards to the catalog."""

from .core.catalog import ProductCatalog
from .core.models import Product


class ProductFacade:
    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    def get_all(self) -> list[Product]:
        return self.catalog.get_all()

    def get_by_id(self, product_id: int) -> Product:
        return self.catalog.get_by_id(product_id)

    def exists(self, product_id: int) -> bool:
        return self.catalog.exists(product_id)

    def append(self, product: Product) -> bool:
        return self.catalog.append(product)

    def update(self, product_id: int, product: Product) -> bool:
        return self.catalog.update(product_id, product)

    def remove(self, product_id: int) -> None:
        self.catalog.remove(product_id)
