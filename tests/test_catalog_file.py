import pytest

from snack_catalog.core.catalog_file import load_products
from snack_catalog.core.errors import ConfigError
from snack_catalog.core.models import Product


def write(tmp_path, text):
    path = tmp_path / "catalog.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_products(tmp_path):
    path = write(tmp_path, """
products:
  - id: 1
    description: Hot Dog
    price: 10.4
    image: fake1.jpg
  - id: 2
    description: Burger
    price: 15
""")
    assert load_products(path) == [
        Product(1, "Hot Dog", 10.4, "fake1.jpg"),
        Product(2, "Burger", 15.0, ""),
    ]


def test_empty_product_list(tmp_path):
    assert load_products(write(tmp_path, "products:\n")) == []


@pytest.mark.parametrize("text", [
    "items: []\n",
    "products: nope\n",
    "products:\n  - just a string\n",
    "products:\n  - {id: 1, price: 2}\n",
    "products:\n  - {id: 1, description: x, price: -2}\n",
    "products:\n  - {id: 1.5, description: x, price: 2}\n",
    "products:\n  - {id: abc, description: x, price: 2}\n",
])
def test_malformed_catalogs(tmp_path, text):
    with pytest.raises(ConfigError):
        load_products(write(tmp_path, text))


def test_missing_catalog(tmp_path):
    with pytest.raises(ConfigError):
        load_products(tmp_path / "absent.yaml")


def test_product_dict_round_trip():
    product = Product(3, "Soda", 4.5, "soda.png")
    assert Product.from_dict(product.to_dict()) == product


@pytest.mark.parametrize("price", [".nan", ".inf", "true"])
def test_non_numeric_prices_are_rejected(tmp_path, price):
    path = write(tmp_path, f"products:\n  - {{id: 1, description: x, price: {price}}}\n")
    with pytest.raises(ConfigError):
        load_products(path)
