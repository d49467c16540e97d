"""Consistency checks between the product repository and the image store."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .catalog import ProductCatalog

logger = logging.getLogger(__name__)


@dataclass
class ConsistencyReport:
    """Divergences between products in memory and images on disk."""

    products_without_image: list[int] = field(default_factory=list)
    orphan_images: dict[int, str] = field(default_factory=dict)  # id -> path

    def has_issues(self) -> bool:
        return bool(self.products_without_image or self.orphan_images)

    def __str__(self) -> str:
        lines = []
        if self.products_without_image:
            lines.append(f"Products without a stored image: {len(self.products_without_image)}")
        if self.orphan_images:
            lines.append(f"Stored images without a product: {len(self.orphan_images)}")
        if not lines:
            lines.append("Catalog and image store are consistent")
        return "\n".join(lines)


@dataclass
class PruneReport:
    """Orphan images deleted (or, on a dry run, that would be)."""

    removed_images: list[int] = field(default_factory=list)
    skipped: bool = False  # deletion declined

    def __str__(self) -> str:
        if self.skipped:
            return f"Pruning declined, {len(self.removed_images)} orphan image(s) kept"
        if not self.removed_images:
            return "No orphan images"
        return f"Orphan images removed: {len(self.removed_images)}"


class CatalogMonitor:
    """Reports and repairs drift between the catalog and its image directory.

    Products live in memory while images persist, so images from an earlier
    process show up as orphans until their products are added again.
    """

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    def check_consistency(self) -> ConsistencyReport:
        """Compare product ids against stored image ids.

        Returns:
            ConsistencyReport with detected issues
        """
        report = ConsistencyReport()
        store = self.catalog.image_store

        product_ids = [p.id for p in self.catalog.get_all()]
        image_ids = set(store.list_image_ids())

        report.products_without_image = [i for i in product_ids if i not in image_ids]
        for image_id in sorted(image_ids - set(product_ids)):
            report.orphan_images[image_id] = str(store.get_image_path_by_id(image_id))
        return report

    def prune_orphans(
        self,
        dry_run: bool = False,
        auto_confirm: bool = False,
        confirm_callback: Optional[Callable[[list[int]], bool]] = None,
    ) -> PruneReport:
        """Delete stored images that no product refers to.

        Args:
            dry_run: If True, report what would be deleted without deleting
            auto_confirm: If True, skip the confirmation callback
            confirm_callback: Receives the orphan ids, returns True to delete

        Returns:
            PruneReport listing the affected ids
        """
        report = PruneReport()
        orphans = list(self.check_consistency().orphan_images)
        if not orphans:
            return report

        report.removed_images = orphans
        if dry_run:
            return report
        if not (auto_confirm or (confirm_callback and confirm_callback(orphans))):
            report.skipped = True
            return report

        for image_id in orphans:
            self.catalog.image_store.remove(image_id)
        logger.info("Pruned %d orphan image(s)", len(orphans))
        return report
