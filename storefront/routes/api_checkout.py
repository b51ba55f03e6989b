from fastapi import APIRouter, Depends

from storefront.app.api.deps import get_cart, get_metrics, get_order_logger
from storefront.app.core.errors import CheckoutValidationError
from storefront.app.core.metrics import StoreMetrics
from storefront.app.models.shop import CheckoutIn
from storefront.app.services.cart_store import CartStore
from storefront.app.services.order_log import OrderLogger

router = APIRouter(tags=["checkout"])


@router.post("/checkout")
def checkout(
    body: CheckoutIn,
    cart: CartStore = Depends(get_cart),
    order_logger: OrderLogger = Depends(get_order_logger),
    metrics: StoreMetrics = Depends(get_metrics),
):
    try:
        order = cart.checkout(body.payment_type, body.address)
    except CheckoutValidationError:
        metrics.checkout_rejected.inc({"reason": "missing_fields"})
        raise
    # cart lock is already released here
    order_logger.record(order)
    metrics.orders.inc()
    metrics.order_amount.inc(by=order.total_amount)
    metrics.cart_items.set(len(cart))
    return {"message": "Order placed successfully!", "total": order.total_amount}
