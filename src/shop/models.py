# provide dataclass models

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class User:
    username: str
    password: str
    email: str


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    description: str
    category: str
    rating: float
    in_stock: bool = True

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"price of {self.id} must be >= 0")


@dataclass
class CartItem:
    product: Product
    quantity: int = 1

    @property
    def id(self) -> str:
        return self.product.id

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def price(self) -> Decimal:
        return self.product.price

    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class ShippingDraft:
    address: str
    city: str
    zip_code: str


@dataclass(frozen=True)
class PaymentDraft:
    card_number: str

    @property
    def masked(self) -> str:
        return "•••• " + self.card_number[-4:]


@dataclass(frozen=True)
class OrderSummary:
    total: Decimal
    item_count: int
    order_number: int
