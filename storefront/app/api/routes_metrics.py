from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from storefront.app.api.deps import get_cart, get_metrics
from storefront.app.core.metrics import StoreMetrics
from storefront.app.services.cart_store import CartStore

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def metrics(
    store_metrics: StoreMetrics = Depends(get_metrics),
    cart: CartStore = Depends(get_cart),
) -> Response:
    store_metrics.cart_items.set(len(cart))
    return Response(content=store_metrics.render(), media_type="text/plain; version=0.0.4")
