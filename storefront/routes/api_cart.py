from typing import Optional

from fastapi import APIRouter, Depends, Query

from storefront.app.api.deps import get_cart, get_catalog, get_metrics
from storefront.app.core.errors import ProductNotFound
from storefront.app.core.metrics import StoreMetrics
from storefront.app.services.cart_store import CartStore, parse_quantity
from storefront.app.services.catalog import Catalog

router = APIRouter(tags=["cart"])


@router.post("/add")
def add_to_cart(
    product_id: Optional[str] = Query(default=None, alias="id"),
    quantity: Optional[str] = Query(default=None),
    catalog: Catalog = Depends(get_catalog),
    cart: CartStore = Depends(get_cart),
    metrics: StoreMetrics = Depends(get_metrics),
):
    product = catalog.lookup(product_id)
    if product is None:
        metrics.cart_adds.inc({"result": "not_found"})
        raise ProductNotFound()
    item = cart.add(product.id, parse_quantity(quantity))
    metrics.cart_adds.inc({"result": "ok"})
    metrics.cart_items.set(len(cart))
    return {"message": f"Added {item.quantity} of {item.product.name} to the cart"}
