# storefront/app/core/errors.py
from __future__ import annotations


class StorefrontError(Exception):
    """Request-level failure; mapped to a JSON ``{"error": ...}`` body."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ProductNotFound(StorefrontError):
    status_code = 404
    default_message = "Product not found"


class CheckoutValidationError(StorefrontError):
    status_code = 400
    default_message = "Payment type and address are required"


class StartupFatal(RuntimeError):
    """The service cannot start (e.g. the order log cannot be opened)."""
