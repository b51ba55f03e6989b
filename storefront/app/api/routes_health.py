from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from storefront.app.api.deps import get_cart, get_catalog
from storefront.app.services.cart_store import CartStore
from storefront.app.services.catalog import Catalog

router = APIRouter(tags=["health"])


@router.get("/health")
def health(
    request: Request,
    catalog: Catalog = Depends(get_catalog),
    cart: CartStore = Depends(get_cart),
):
    settings = request.app.state.settings
    return {
        "service": settings.service_name,
        "version": settings.version,
        "catalog_size": len(catalog),
        "cart_items": len(cart),
        "status": "ok",
    }
