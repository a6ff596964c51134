# exceptions raised by the storefront core

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from shop.models import Product

_FIELD_LABELS = {
    "zip_code": "ZIP code",
    "card_number": "Card number",
}


class ShopError(Exception):
    """Base class, carries a message fit for showing to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ShopError):
    """A required field was empty (or named something that does not exist)."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        if message is None:
            label = _FIELD_LABELS.get(field, field.replace("_", " ").capitalize())
            message = f"{label} is required"
        super().__init__(message)
        self.field = field


class InvalidCredentialsError(ShopError):
    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class OutOfStockError(ShopError):
    def __init__(self, product: "Product") -> None:
        super().__init__(f"{product.name} is currently out of stock.")
        self.product = product


class InvalidScreenError(ShopError):
    """
    Navigation ended up on a screen id nobody knows how to show.
    Never reaches the user, the navigator resets to the splash screen instead.
    """

    def __init__(self, screen: object) -> None:
        super().__init__(f"Unknown screen: {screen!r}")
        self.screen = screen
