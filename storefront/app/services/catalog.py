# storefront/app/services/catalog.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from storefront.app.models.shop import Product

SEED_PRODUCTS: Tuple[Product, ...] = (
    Product(id=1, name="Laptop", category="Electronics", price=1000.0),
    Product(id=2, name="Phone", category="Electronics", price=500.0),
    Product(id=3, name="Shoes", category="Fashion", price=50.0),
)


class Catalog:
    """Read-only product list. Safe to share across request threads."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: Tuple[Product, ...] = tuple(SEED_PRODUCTS if products is None else products)
        ids = [p.id for p in self._products]
        if len(set(ids)) != len(ids):
            raise ValueError("catalog product ids must be unique")

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> List[Product]:
        return list(self._products)

    def search(self, query: Optional[str] = None, category: Optional[str] = None) -> List[Product]:
        """
        Case-sensitive name prefix match ANDed with exact category match.
        An empty or missing filter matches everything; order is preserved.
        """
        return [
            p
            for p in self._products
            if (not query or p.name.startswith(query))
            and (not category or p.category == category)
        ]

    def get(self, product_id: int) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def lookup(self, raw_id: Optional[str]) -> Optional[Product]:
        # Only the canonical decimal form matches: "1" yes, "01" / " 1" no
        if not raw_id:
            return None
        for p in self._products:
            if str(p.id) == raw_id:
                return p
        return None
