from unittest.mock import Mock

import pytest

from cart import Cart
from customer import Customer
from inventory import InMemoryProductDao, Product
from shopping_service import ShoppingService


@pytest.fixture
def product() -> Product:
    return Product("123", 5)


@pytest.fixture
def store(product) -> InMemoryProductDao:
    return InMemoryProductDao([product])


@pytest.fixture
def product_dao(store):
    # Records calls while reading and writing the real in-memory store.
    return Mock(spec=InMemoryProductDao, wraps=store)


@pytest.fixture
def shopping_service(product_dao) -> ShoppingService:
    return ShoppingService(product_dao)


@pytest.fixture
def customer() -> Customer:
    return Customer(1, "customer")


@pytest.fixture
def cart(customer) -> Cart:
    return Cart(customer)
