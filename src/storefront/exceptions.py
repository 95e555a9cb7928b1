"""Storefront failures that are not domain validation.

Missing order fields are reported with protean's ``ValidationError`` and
unknown ids with ``ObjectNotFoundError``; the types below cover the rest.
"""

GENERIC_RETRY_MESSAGE = "Something went wrong. Please try again."


class StorefrontError(Exception):
    """Base class for storefront failures shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CapacityExceeded(StorefrontError):
    """Requested quantity is above the product's stock."""

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__("Not enough stock available")
        self.product_id = product_id
        self.requested = requested
        self.available = available


class AuthFailure(StorefrontError):
    """Admin credentials were rejected or the admin session is not active."""


class TransportFailure(StorefrontError):
    """The remote backend could not be reached or answered with an error."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(GENERIC_RETRY_MESSAGE)
        self.detail = detail
        self.status_code = status_code
