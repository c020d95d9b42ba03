"""Per-customer cart accumulating requested product quantities."""
from __future__ import annotations

from typing import Dict

from customer import Customer
from inventory import Product


class Cart:
    def __init__(self, customer: Customer) -> None:
        self._customer = customer
        self._products: Dict[Product, int] = {}

    @property
    def customer(self) -> Customer:
        return self._customer

    def add(self, product: Product, quantity: int) -> None:
        """Accumulate ``quantity`` for ``product``; no validation happens here."""
        self._products[product] = self._products.get(product, 0) + quantity

    def get_products(self) -> Dict[Product, int]:
        return dict(self._products)

    def remove(self, product: Product) -> None:
        self._products.pop(product, None)

    def clear(self) -> None:
        self._products.clear()

    def is_empty(self) -> bool:
        return not self._products

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product: object) -> bool:
        return product in self._products
