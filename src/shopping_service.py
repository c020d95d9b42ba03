"""Purchase workflow: turns a customer's cart into inventory decrements."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from audit import AuditLogger
from cart import Cart
from customer import Customer
from inventory import Product, ProductDao

logger = logging.getLogger(__name__)


class BuyException(Exception):
    """Raised when a cart cannot be purchased."""


class InsufficientStockError(BuyException):
    def __init__(self, code: str, requested: int, available: int) -> None:
        super().__init__(f"В наличии нет необходимого количества товара '{code}'")
        self.code = code
        self.requested = requested
        self.available = available


class ShoppingService:
    """Coordinates carts, inventory updates, and the purchase audit trail."""

    def __init__(self, product_dao: ProductDao, audit: Optional[AuditLogger] = None) -> None:
        self._product_dao = product_dao
        self._audit = audit or AuditLogger()
        self._carts: Dict[Customer, Cart] = {}

    @property
    def audit(self) -> AuditLogger:
        return self._audit

    def get_cart(self, customer: Customer) -> Cart:
        cart = self._carts.get(customer)
        if cart is None:
            cart = Cart(customer)
            self._carts[customer] = cart
        return cart

    def get_all_products(self) -> List[Product]:
        return self._product_dao.get_all()

    def get_product_name(self, code: str) -> str:
        return self._product_dao.get_product_name(code)

    def buy(self, cart: Optional[Cart]) -> bool:
        """Fulfil every cart entry against current stock.

        Entries are committed one by one: each fulfilled product is saved and
        removed from the cart before the next one is looked at. Negative
        quantities are skipped and stay in the cart. Raises
        InsufficientStockError on the first entry asking for more than is
        available; entries handled before it stay committed. Stock is always
        read from and written to the store's record for the product code.

        Returns True when the cart ends up empty.
        """
        if cart is None or cart.is_empty():
            return False

        customer_id = cart.customer.id
        for product, quantity in cart.get_products().items():
            if quantity < 0:
                logger.debug("Skipping %s: negative quantity %d", product.code, quantity)
                self._audit.log("purchase_rejected", customer_id, product.code, f"quantity={quantity}")
                continue

            record = self._product_dao.get(product.code)
            if quantity > record.count:
                self._audit.log(
                    "insufficient_stock",
                    customer_id,
                    product.code,
                    f"requested={quantity}, available={record.count}",
                )
                raise InsufficientStockError(product.code, quantity, record.count)

            previous = record.count
            record.count = previous - quantity
            try:
                self._product_dao.save(record)
            except Exception:
                record.count = previous
                logger.warning("Saving %s failed, stock restored to %d", record.code, previous)
                raise
            cart.remove(product)
            self._audit.log(
                "purchase_committed",
                customer_id,
                product.code,
                f"bought={quantity}, remaining={record.count}",
            )

        if not cart.is_empty():
            logger.info("Cart of customer %s left with %d unfulfilled entries", customer_id, len(cart))
            return False

        self._audit.log("purchase_completed", customer_id, None, "cart emptied")
        return True
