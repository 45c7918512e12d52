import json

import pytest

from product_range.models import Product


@pytest.fixture
def scenario_catalog():
    return [
        Product(id=1, name="Base", price=10000, quality=80, rating=4.0, stock=50, display=6.1),
        Product(id=2, name="Step up", price=12000, quality=82, rating=4.2, stock=40, display=6.1),
        Product(id=3, name="Flagship", price=50000, quality=95, rating=4.8, stock=5, display=6.7),
    ]


@pytest.fixture
def catalog_records():
    return [
        {"id": 1, "name": "Galaxy A15", "category": "Smartphone", "brand": "Samsung",
         "processor": "Helio G99", "price": 10000, "quality": 80, "rating": 4.0, "stock": 50, "display": 6.5},
        {"id": 2, "name": "Redmi Note 13", "category": "Smartphone", "brand": "Xiaomi",
         "processor": "Snapdragon 685", "price": 12000, "quality": 82, "rating": 4.2, "stock": 40, "display": 6.67},
        {"id": 3, "name": "iPhone 15", "category": "Smartphone", "brand": "Apple",
         "processor": "A16 Bionic", "price": 50000, "quality": 95, "rating": 4.8, "stock": 5, "display": 6.1},
        {"id": 4, "name": "Moto G54", "category": "Smartphone", "brand": "Motorola",
         "processor": "Dimensity 7020", "price": 13000, "quality": 76, "rating": 4.0, "stock": 60, "display": 6.5},
    ]


@pytest.fixture
def catalog_file(tmp_path, catalog_records):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": catalog_records}))
    return path
