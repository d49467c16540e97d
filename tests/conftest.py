from pathlib import Path

import pytest

from snack_catalog.core.catalog import ProductCatalog
from snack_catalog.facade import ProductFacade
from snack_catalog.storage.image_store import ImageStore
from snack_catalog.storage.repository import ProductRepository


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    path = tmp_path / "store"
    path.mkdir()
    return path


@pytest.fixture
def make_source(source_dir: Path):
    """Create an (empty by default) source image file and return its path."""

    def _make(name: str, content: bytes = b"") -> Path:
        path = source_dir / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def repository() -> ProductRepository:
    return ProductRepository()


@pytest.fixture
def image_store(source_dir: Path, image_dir: Path) -> ImageStore:
    return ImageStore(source_dir, image_dir)


@pytest.fixture
def catalog(repository, image_store) -> ProductCatalog:
    return ProductCatalog(repository, image_store)


@pytest.fixture
def facade(catalog) -> ProductFacade:
    return ProductFacade(catalog)
