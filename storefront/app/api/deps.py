# storefront/app/api/deps.py
from __future__ import annotations

from fastapi import Request

from storefront.app.core.metrics import StoreMetrics
from storefront.app.services.cart_store import CartStore
from storefront.app.services.catalog import Catalog
from storefront.app.services.order_log import OrderLogger

# create_app() puts one of each on app.state


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_cart(request: Request) -> CartStore:
    return request.app.state.cart


def get_order_logger(request: Request) -> OrderLogger:
    return request.app.state.order_logger


def get_metrics(request: Request) -> StoreMetrics:
    return request.app.state.metrics
