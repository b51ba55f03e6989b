from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from storefront.app.api.deps import get_catalog
from storefront.app.models.shop import Product
from storefront.app.services.catalog import Catalog

router = APIRouter(tags=["products"])


@router.get("/search", response_model=List[Product])
def search_products(
    q: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    catalog: Catalog = Depends(get_catalog),
):
    return catalog.search(q, category)
