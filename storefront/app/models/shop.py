# storefront/app/models/shop.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A purchasable item. Frozen: the catalog never changes after startup."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: str
    price: float = Field(ge=0)


# Largest quantity a single cart line may carry; keeps totals finite
MAX_QUANTITY = 2**31 - 1


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(ge=1, le=MAX_QUANTITY)

    @property
    def subtotal(self) -> float:
        return self.product.price * self.quantity


class Order(BaseModel):
    """A finalized cart. Built once at checkout, logged, then dropped."""
    model_config = ConfigDict(frozen=True)

    items: List[CartItem] = Field(default_factory=list)
    total_amount: float = 0.0
    payment_type: str
    address: str


class CheckoutIn(BaseModel):
    # Missing fields bind as "" so they fail the emptiness check, not parsing
    model_config = ConfigDict(extra="ignore")

    payment_type: str = ""
    address: str = ""
