# storefront/app/services/order_log.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from storefront.app.core.errors import StartupFatal
from storefront.app.core.logging import make_order_log_handler
from storefront.app.models.shop import Order

ORDER_LOGGER_NAME = "storefront.orders"


def format_order(order: Order) -> str:
    """
    Human-readable, multi-line order record. Operational only; nothing
    parses it back.
    """
    lines: List[str] = [
        f"Order Details: total={order.total_amount:.2f} "
        f"payment_type={order.payment_type!r} address={order.address!r} "
        f"items={len(order.items)}"
    ]
    for it in order.items:
        p = it.product
        lines.append(
            f"  - {it.quantity} x {p.name} (id={p.id}, category={p.category}) "
            f"@ {p.price:.2f} = {it.subtotal:.2f}"
        )
    return "\n".join(lines)


class OrderLogger:
    """
    Appends one record per completed order to its own text file. Each
    instance has a private, non-propagating logger, so two apps in one
    process never share a sink.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            self._handler = make_order_log_handler(self.path)
        except OSError as exc:
            raise StartupFatal(f"Failed to open log file {self.path}: {exc}") from exc
        # unregistered Logger: no parent, nothing kept in logging's manager
        self._logger = logging.Logger(ORDER_LOGGER_NAME, level=logging.INFO)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    def record(self, order: Order) -> None:
        # FileHandler.handleError swallows write failures; the request never sees them
        self._logger.info(format_order(order))

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()
