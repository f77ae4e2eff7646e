"""Shared fixtures: example catalog in the external record shape."""

import pytest

from src.core.domain import Product


EXAMPLE_PRODUCTS = [
    {"id": 1, "name": "Panel Headboard", "priceInCents": 12332},
    {"id": 2, "name": "Low Profile Sleigh Bed", "priceInCents": 22999},
    {"id": 3, "name": "Oval 100% Cotton Solid Bath Rug", "priceInCents": 1399},
    {"id": 4, "name": "Abstract Light Gray Area Rug", "priceInCents": 33999},
    {"id": 5, "name": "Multi Game Table", "priceInCents": 81743},
]


@pytest.fixture
def catalog() -> list[dict]:
    """Каталог из 5 товаров (dict-записи), свежая копия на каждый тест."""
    return [dict(record) for record in EXAMPLE_PRODUCTS]


@pytest.fixture
def product_catalog() -> list[Product]:
    """Тот же каталог в виде моделей Product."""
    return [Product.from_record(record) for record in EXAMPLE_PRODUCTS]
