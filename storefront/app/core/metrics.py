from __future__ import annotations
import threading
from collections import defaultdict
from typing import Dict, Iterable as IterableT, Optional, Tuple

# ---------- Primitives ----------

_LabelKey = Tuple[Tuple[str, str], ...]


def _label_str(labels: _LabelKey) -> str:
    return ",".join(f'{k}="{v_}"' for k, v_ in labels)


class _Counter:
    def __init__(self, name: str, help_: str = ""):
        self.name = name
        self.help = help_
        self._lock = threading.Lock()
        self._values: Dict[_LabelKey, float] = defaultdict(float)

    def inc(self, labels: Optional[Dict[str, str]] = None, by: float = 1) -> None:
        key = tuple(sorted((labels or {}).items()))
        with self._lock:
            self._values[key] += by

    def render(self) -> IterableT[str]:
        if self.help:
            yield f"# HELP {self.name} {self.help}\n# TYPE {self.name} counter\n"
        with self._lock:
            items = sorted(self._values.items())
        for labels, v in items:
            if labels:
                yield f"{self.name}{{{_label_str(labels)}}} {v}\n"
            else:
                yield f"{self.name} {v}\n"


class _Gauge:
    def __init__(self, name: str, help_: str = ""):
        self.name = name
        self.help = help_
        self._lock = threading.Lock()
        self._values: Dict[_LabelKey, float] = defaultdict(float)

    def set(self, value: float, labels: Optional[Dict[str, str]] = None) -> None:
        key = tuple(sorted((labels or {}).items()))
        with self._lock:
            self._values[key] = value

    def render(self) -> IterableT[str]:
        if self.help:
            yield f"# HELP {self.name} {self.help}\n# TYPE {self.name} gauge\n"
        with self._lock:
            items = sorted(self._values.items())
        for labels, v in items:
            if labels:
                yield f"{self.name}{{{_label_str(labels)}}} {v}\n"
            else:
                yield f"{self.name} {v}\n"


# ---------- Registry ----------

class MetricsRegistry:
    def __init__(self):
        self._items: list[object] = []

    def counter(self, name: str, help_: str = "") -> _Counter:
        c = _Counter(name, help_)
        self._items.append(c)
        return c

    def gauge(self, name: str, help_: str = "") -> _Gauge:
        g = _Gauge(name, help_)
        self._items.append(g)
        return g

    def render_prometheus(self) -> str:
        out: list[str] = []
        for it in self._items:
            out.extend(it.render())
        return "".join(out)


# ---------- App metrics ----------

class StoreMetrics:
    """Per-app metric set; each ``create_app`` call gets a fresh one."""

    def __init__(self, registry: Optional[MetricsRegistry] = None):
        self.registry = registry or MetricsRegistry()
        self.cart_adds = self.registry.counter("storefront_cart_adds_total", "Add-to-cart attempts by result")
        self.orders = self.registry.counter("storefront_orders_total", "Orders placed")
        self.checkout_rejected = self.registry.counter(
            "storefront_checkout_rejected_total", "Checkouts rejected by reason"
        )
        self.order_amount = self.registry.counter("storefront_order_amount_total", "Sum of order totals")
        self.cart_items = self.registry.gauge("storefront_cart_items", "Items currently in the cart")

    def render(self) -> str:
        return self.registry.render_prometheus()
