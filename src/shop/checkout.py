from __future__ import annotations

import random
from typing import Optional

from shop.cart import Cart
from shop.errors import ValidationError
from shop.models import OrderSummary, PaymentDraft, ShippingDraft
from utils.logger import get_logger
from utils.validators import require_text

_logger = get_logger(__name__)

MAX_ORDER_NUMBER = 999_999


class CheckoutFlow:
    """
    Accumulates the checkout drafts (shipping, then payment) and turns the
    cart into an OrderSummary once payment is submitted.

    Drafts only ever move forward here. Going back a step is the
    navigator's business and leaves the drafts alone.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self.shipping: Optional[ShippingDraft] = None
        self.payment: Optional[PaymentDraft] = None

    def submit_address(self, address: str, city: str, zip_code: str) -> ShippingDraft:
        draft = ShippingDraft(
            address=require_text(address, "address"),
            city=require_text(city, "city"),
            zip_code=require_text(zip_code, "zip_code"),
        )
        self.shipping = draft
        _logger.debug(f"Shipping draft stored for {draft.city} {draft.zip_code}")
        return draft

    def submit_payment(self, card_number: str, cart: Cart) -> OrderSummary:
        """
        Store the payment draft and summarize the cart.
        The cart is read, not modified.
        """
        card_number = require_text(card_number, "card_number")
        if self.shipping is None:
            raise ValidationError("address", "Shipping address is required")

        self.payment = PaymentDraft(card_number)
        summary = OrderSummary(
            total=cart.total(),
            item_count=cart.item_count(),
            order_number=self._rng.randint(0, MAX_ORDER_NUMBER),
        )
        _logger.info(
            f"Order #{summary.order_number} placed: "
            f"{summary.item_count} item(s), ${summary.total:.2f}"
        )
        return summary

    def reset(self) -> None:
        self.shipping = None
        self.payment = None
