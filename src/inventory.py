"""Product domain objects and storage access."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol


@dataclass(eq=False)
class Product:
    code: str
    count: int
    name: Optional[str] = None

    # Keyed by code so a product stays usable as a mapping key while count changes.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


class ProductDao(Protocol):
    def get(self, code: str) -> Product:
        ...

    def save(self, product: Product) -> None:
        ...

    def get_all(self) -> List[Product]:
        ...

    def get_product_name(self, code: str) -> str:
        ...


class InMemoryProductDao:
    """In-memory product store used by the shopping service demo."""

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self._products: Dict[str, Product] = {}
        self._saves: Dict[str, int] = {}
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> None:
        self._products[product.code] = product

    def save(self, product: Product) -> None:
        self._products[product.code] = product
        self._saves[product.code] = self._saves.get(product.code, 0) + 1

    def get(self, code: str) -> Product:
        if code not in self._products:
            raise KeyError(f"Unknown product: {code}")
        return self._products[code]

    def get_all(self) -> List[Product]:
        return list(self._products.values())

    def get_product_name(self, code: str) -> str:
        product = self.get(code)
        return product.name or product.code

    def save_count(self, code: str) -> int:
        return self._saves.get(code, 0)
