"""Reading product lists from YAML catalog files.

Expected layout::

    products:
      - id: 1
        description: Hot Dog
        price: 10.4
        image: hotdog.jpg
"""

from pathlib import Path

import yaml

from .errors import ConfigError
from .models import Product


def load_products(path: str | Path) -> list[Product]:
    """Parse a catalog file into products, in file order.

    Raises:
        ConfigError: If the file is missing or an entry is malformed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Catalog file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "products" not in data:
        raise ConfigError(f"Catalog file must contain a 'products' key: {path}")

    entries = data["products"] or []
    if not isinstance(entries, list):
        raise ConfigError(f"'products' must be a list: {path}")

    products = []
    for position, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise ConfigError(f"Entry {position} is not a mapping")
        try:
            products.append(Product.from_dict(entry))
        except KeyError as e:
            raise ConfigError(f"Entry {position} is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Entry {position} is invalid: {e}") from e
    return products
