"""Filesystem storage for product images.

Each product owns at most one file under the image root, named
``<id><suffix>`` where the suffix is taken from the source image. The
location is always recomputed from the id, never stored.
"""

import hashlib
import logging
import mimetypes
import os
import shutil
from pathlib import Path

from PIL import Image

from ..core.errors import ImageNotFoundError
from ..core.models import Product, StoredImage

logger = logging.getLogger(__name__)


class ImageStore:
    """Copies source images into the image root and manages their lifetime."""

    def __init__(self, source_root: str | Path, image_root: str | Path):
        """Bind the store to its two directories.

        Args:
            source_root: Directory that relative source paths are resolved against
            image_root: Directory holding the stored images

        Raises:
            NotADirectoryError: If either path is not an existing directory
        """
        self.source_root = Path(source_root)
        self.image_root = Path(image_root)
        for root in (self.source_root, self.image_root):
            if not root.is_dir():
                raise NotADirectoryError(f"Image directory does not exist: {root}")

    # -- paths --

    def resolve_source(self, image_source_path: str) -> Path:
        """Return the source path, relative paths resolved against the source root."""
        path = Path(image_source_path)
        if path.is_absolute():
            return path
        return self.source_root / path

    def destination_path(self, product: Product) -> Path:
        """Return where the image of ``product`` is stored."""
        suffix = Path(product.image_source_path).suffix
        return self.image_root / f"{product.id}{suffix}"

    def _stored_files(self, product_id: int) -> list[Path]:
        """Find every stored file for an id, whatever its extension."""
        # "1.*" never matches "10.jpg"
        files = [p for p in self.image_root.glob(f"{product_id}.*") if p.is_file()]
        bare = self.image_root / str(product_id)
        if bare.is_file():
            files.append(bare)
        return sorted(files)

    def _is_readable(self, path: Path) -> bool:
        return path.is_file() and os.access(path, os.R_OK)

    # -- operations --

    def save(self, product: Product) -> bool:
        """Copy the product's source image into the store.

        Returns:
            False when the source cannot be read (nothing on disk changes),
            True once the image is stored
        """
        if not product.image_source_path:
            logger.warning("Product %s has no image source", product.id)
            return False
        source = self.resolve_source(product.image_source_path)
        if not self._is_readable(source):
            logger.warning("Image source unavailable for product %s: %s", product.id, source)
            return False

        dest = self.destination_path(product)
        if not (dest.exists() and dest.samefile(source)):
            shutil.copyfile(source, dest)
            logger.info("Stored image for product %s at %s", product.id, dest)

        for stale in self._stored_files(product.id):
            if stale != dest:
                stale.unlink()
                logger.info("Deleted stale image %s", stale)
        return True

    def update(self, product: Product) -> bool:
        """Replace the stored image of a product, whatever its old extension.

        Raises:
            ImageNotFoundError: If no image was stored for the product
        """
        previous = self._stored_files(product.id)
        if not previous:
            raise ImageNotFoundError(product.id)
        source = self.resolve_source(product.image_source_path) if product.image_source_path else None
        for path in previous:
            # the new source may be the stored file itself
            if source is not None and source.exists() and path.samefile(source):
                continue
            path.unlink()
            logger.info("Deleted image %s", path)
        return self.save(product)

    def remove(self, product_id: int) -> None:
        """Delete the stored image of a product.

        Raises:
            ImageNotFoundError: If no image is stored for the id
        """
        stored = self._stored_files(product_id)
        if not stored:
            raise ImageNotFoundError(product_id)
        for path in stored:
            path.unlink()
            logger.info("Deleted image %s", path)

    def get_image_path_by_id(self, product_id: int) -> Path:
        """Return the stored image path for an id.

        Raises:
            ImageNotFoundError: If no image is stored for the id
        """
        stored = self._stored_files(product_id)
        if not stored:
            raise ImageNotFoundError(product_id)
        return stored[0]

    def has_image(self, product_id: int) -> bool:
        return bool(self._stored_files(product_id))

    def list_image_ids(self) -> list[int]:
        """List the ids that currently have a stored image."""
        ids = set()
        for path in self.image_root.iterdir():
            if not path.is_file():
                continue
            head = path.name.split(".", 1)[0]
            try:
                product_id = int(head)
            except ValueError:
                continue
            if str(product_id) == head:
                ids.add(product_id)
        return sorted(ids)

    @staticmethod
    def compute_hash(filepath: str | Path) -> str:
        """Compute SHA-256 hash of file contents."""
        sha256 = hashlib.sha256()
        with open(filepath, "rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                sha256.update(chunk)
        return sha256.hexdigest()

    def describe(self, product_id: int) -> StoredImage:
        """Collect metadata of the stored image for an id.

        Width and height stay None when Pillow cannot decode the file.

        Raises:
            ImageNotFoundError: If no image is stored for the id
        """
        path = self.get_image_path_by_id(product_id)

        mimetype, _ = mimetypes.guess_type(str(path))
        if mimetype is None:
            mimetype = "application/octet-stream"

        width = height = None
        try:
            with Image.open(path) as img:
                width, height = img.size
        except OSError:
            logger.debug("Could not read dimensions of %s", path)

        return StoredImage(
            product_id=product_id,
            path=path,
            size=path.stat().st_size,
            mimetype=mimetype,
            sha256=self.compute_hash(path),
            width=width,
            height=height,
        )
