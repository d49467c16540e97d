"""Command-line interface for the product catalog.

Products only live for the duration of a command, so every command works
from the image directory plus, for ``import``, a YAML catalog file.

Environment variables:
    SNACK_SOURCE_ROOT: Directory relative image sources are resolved against
    SNACK_IMAGE_ROOT: Directory holding stored images
    SNACK_LOG_LEVEL: Logging level (default: INFO)
    SNACK_LOG_DIR: Directory for catalog.log
"""

import argparse
import sys
from typing import NoReturn

from tqdm import tqdm

from .config import CatalogConfig, ensure_directories, load_config
from .core.catalog import ProductCatalog
from .core.catalog_file import load_products
from .core.errors import CatalogError, DuplicateProductError, NotFoundError
from .core.monitor import CatalogMonitor
from .facade import ProductFacade
from .storage.image_store import ImageStore
from .storage.repository import ProductRepository
from .utils.logging import setup_logging


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def fail(message: str) -> NoReturn:
    print(f"Error: {message}")
    sys.exit(1)


def open_image_store(config: CatalogConfig) -> ImageStore:
    """Create the image store, exiting when its directories are missing."""
    try:
        return ImageStore(config.source_root, config.image_root)
    except NotADirectoryError as e:
        fail(f"{e} (run 'init' to create it)")


def build_facade(config: CatalogConfig) -> ProductFacade:
    catalog = ProductCatalog(ProductRepository(), open_image_store(config))
    return ProductFacade(catalog)


def confirm_deletion(orphan_ids: list[int]) -> bool:
    """Prompt user to confirm deletion of orphan images."""
    print(f"\nThe following {len(orphan_ids)} stored images have no product:")
    for image_id in orphan_ids[:10]:
        print(f"  {image_id}")
    if len(orphan_ids) > 10:
        print(f"  ... and {len(orphan_ids) - 10} more")

    while True:
        response = input("\nDelete them? [y/N] ").strip().lower()
        if response in ("y", "yes"):
            return True
        if response in ("n", "no", ""):
            return False
        print("Please enter 'y' or 'n'")


def _human_size(nbytes: int) -> str:
    """Format byte count as human-readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if abs(nbytes) < 1024:
            return f"{nbytes:.0f} {unit}"
        nbytes /= 1024
    return f"{nbytes:.1f} TB"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def init(args, config: CatalogConfig):
    """Create the configured image directories."""
    ensure_directories(config)
    print(f"Source root: {config.source_root}")
    print(f"Image root:  {config.image_root}")


def import_catalog(args, config: CatalogConfig):
    """Add the products of a catalog file and store their images."""
    try:
        products = load_products(args.catalog)
    except CatalogError as e:
        fail(str(e))

    facade = build_facade(config)
    with_image = without_image = duplicates = 0

    for product in tqdm(products, desc="Importing"):
        try:
            if facade.append(product):
                with_image += 1
            else:
                without_image += 1
                tqdm.write(f"Warning: no image stored for product {product.id}")
        except DuplicateProductError:
            duplicates += 1
            tqdm.write(f"Skipped (duplicate id): {product.id}")

    print(f"\nImported {with_image + without_image} product(s): "
          f"{with_image} with image, {without_image} without, {duplicates} duplicate(s) skipped")

    monitor = CatalogMonitor(facade.catalog)
    report = monitor.check_consistency()
    print("\n=== Consistency Report ===")
    print(report)

    if args.prune and report.orphan_images:
        if args.dry_run:
            print("\n=== DRY RUN (no images will be deleted) ===")
        prune = monitor.prune_orphans(
            dry_run=args.dry_run,
            auto_confirm=args.yes,
            confirm_callback=confirm_deletion,
        )
        print(prune)


def list_images(args, config: CatalogConfig):
    """List stored images."""
    store = open_image_store(config)
    ids = store.list_image_ids()

    if not ids:
        print("Image store is empty")
        return

    print(f"{'ID':>8}  {'File':<24} {'Size':>10} {'Dimensions':>12}")
    print("-" * 60)
    for image_id in ids:
        info = store.describe(image_id)
        dims = f"{info.width}x{info.height}" if info.width else "N/A"
        print(f"{image_id:>8}  {info.path.name:<24} {_human_size(info.size):>10} {dims:>12}")
    print(f"\nTotal: {len(ids)} image(s)")


def show(args, config: CatalogConfig):
    """Show the stored image of one product."""
    store = open_image_store(config)
    try:
        info = store.describe(args.id)
    except NotFoundError as e:
        fail(str(e))

    print(f"Product:  {info.product_id}")
    print(f"  Path:     {info.path}")
    print(f"  Bytes:    {info.size}")
    print(f"  Mimetype: {info.mimetype}")
    if info.width:
        print(f"  Size:     {info.width}x{info.height}")
    print(f"  SHA-256:  {info.sha256}")


def remove_image(args, config: CatalogConfig):
    """Delete the stored image of one product."""
    store = open_image_store(config)
    try:
        store.remove(args.id)
    except NotFoundError as e:
        fail(str(e))
    print(f"Removed image for product {args.id}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Snack Catalog - products with images kept in sync on disk",
        epilog="Environment variables: SNACK_SOURCE_ROOT, SNACK_IMAGE_ROOT, SNACK_LOG_LEVEL, SNACK_LOG_DIR",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML config file (default: environment only)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- init ---
    init_parser = subparsers.add_parser("init", help="Create the image directories")
    init_parser.set_defaults(func=init)

    # --- import ---
    import_parser = subparsers.add_parser(
        "import",
        help="Add products from a YAML catalog file and store their images",
    )
    import_parser.add_argument("catalog", help="Path to YAML catalog file")
    import_parser.add_argument("--prune", action="store_true", help="Delete stored images with no product")
    import_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask before deleting")
    import_parser.add_argument("--dry-run", action="store_true", help="Report what --prune would delete")
    import_parser.set_defaults(func=import_catalog)

    # --- images ---
    images_parser = subparsers.add_parser("images", help="List stored images")
    images_parser.set_defaults(func=list_images)

    # --- show ---
    show_parser = subparsers.add_parser("show", help="Describe the stored image of a product")
    show_parser.add_argument("id", type=int, help="Product id")
    show_parser.set_defaults(func=show)

    # --- remove-image ---
    remove_parser = subparsers.add_parser("remove-image", help="Delete the stored image of a product")
    remove_parser.add_argument("id", type=int, help="Product id")
    remove_parser.set_defaults(func=remove_image)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except CatalogError as e:
        fail(str(e))

    setup_logging(config)
    args.func(args, config)


if __name__ == "__main__":
    main()
