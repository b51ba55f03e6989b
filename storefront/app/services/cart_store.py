# storefront/app/services/cart_store.py
from __future__ import annotations

import logging
import threading
from typing import List, Optional

from storefront.app.core.errors import CheckoutValidationError, ProductNotFound
from storefront.app.models.shop import MAX_QUANTITY, CartItem, Order, Product
from storefront.app.services.catalog import Catalog

log = logging.getLogger(__name__)


def parse_quantity(raw: Optional[str]) -> int:
    """
    Plain ASCII decimal digits in 1..MAX_QUANTITY. Anything else (empty,
    signed, "1_000", non-ASCII digits, zero, too large) falls back to 1.
    """
    text = (raw or "").strip()
    if not (text.isascii() and text.isdigit()):
        return 1
    if len(text) > len(str(MAX_QUANTITY)):
        return 1
    qty = int(text)
    return qty if 1 <= qty <= MAX_QUANTITY else 1


def _sum_items(items: List[CartItem]) -> float:
    total = 0.0
    for it in items:
        total += it.subtotal
    return total


class CartStore:
    """
    The shared cart. Every read or write of the item list happens under
    ``self._lock``; callers only get copies.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._items: List[CartItem] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def items(self) -> List[CartItem]:
        with self._lock:
            return list(self._items)

    def total(self) -> float:
        with self._lock:
            return _sum_items(self._items)

    def add(self, product_id: int, quantity: int = 1) -> CartItem:
        product: Optional[Product] = self._catalog.get(product_id)
        if product is None:
            raise ProductNotFound()
        # CartItem validates quantity >= 1 before we touch the list
        item = CartItem(product=product.model_copy(), quantity=quantity)
        with self._lock:
            self._items.append(item)
        log.info("Added %d of %s to the cart", item.quantity, product.name)
        return item

    def checkout(self, payment_type: str, address: str) -> Order:
        """
        Snapshot, total and clear in one critical section. The cart is left
        untouched when either field is empty.
        """
        if not payment_type or not address:
            raise CheckoutValidationError()
        with self._lock:
            snapshot = list(self._items)
            order = Order(
                items=snapshot,
                total_amount=_sum_items(snapshot),
                payment_type=payment_type,
                address=address,
            )
            self._items.clear()
        return order
