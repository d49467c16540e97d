"""Snack Catalog - products in memory, their images on disk.

Package structure:
    snack_catalog/
    ├── cli.py              # Command-line interface
    ├── config.py           # YAML / environment configuration
    ├── facade.py           # Pass-through entry point for front ends
    ├── core/               # Core business logic
    │   ├── models.py       # Data models (Product, StoredImage)
    │   ├── errors.py       # Exception hierarchy
    │   ├── catalog.py      # Repository + image store coordination
    │   ├── catalog_file.py # YAML catalog files
    │   └── monitor.py      # Consistency checks and orphan pruning
    ├── storage/            # Data persistence
    │   ├── repository.py   # In-memory product repository
    │   └── image_store.py  # Filesystem image store
    └── utils/
        └── logging.py      # Logging setup
"""

from .core.errors import (
    CatalogError,
    ConfigError,
    DuplicateProductError,
    ImageNotFoundError,
    NotFoundError,
    ProductNotFoundError,
)
from .core.models import Product, StoredImage
from .storage.repository import ProductRepository
from .storage.image_store import ImageStore
from .core.catalog import ProductCatalog
from .core.catalog_file import load_products
from .core.monitor import CatalogMonitor, ConsistencyReport, PruneReport
from .config import CatalogConfig, ensure_directories, load_config
from .facade import ProductFacade

__all__ = [
    # Core
    "Product",
    "StoredImage",
    "ProductCatalog",
    "CatalogMonitor",
    "ConsistencyReport",
    "PruneReport",
    "load_products",
    # Errors
    "CatalogError",
    "ConfigError",
    "DuplicateProductError",
    "ImageNotFoundError",
    "NotFoundError",
    "ProductNotFoundError",
    # Storage
    "ProductRepository",
    "ImageStore",
    # Front ends
    "ProductFacade",
    "CatalogConfig",
    "load_config",
    "ensure_directories",
]
