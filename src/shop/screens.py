"""
What the navigator can be showing. Each page variant carries exactly the
data its screen needs, so e.g. a detail page without a product can't exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Union

from shop.catalog import ALL_CATEGORIES
from shop.models import OrderSummary, Product

ScreenId = Literal[
    "splash",
    "login",
    "products",
    "detail",
    "cart",
    "address",
    "payment",
    "checkout_success",
]

SCREEN_IDS = (
    "splash",
    "login",
    "products",
    "detail",
    "cart",
    "address",
    "payment",
    "checkout_success",
)

# screens reachable only with a logged-in user
AUTHENTICATED_SCREENS = frozenset(SCREEN_IDS) - {"splash", "login"}


@dataclass(frozen=True)
class SplashPage:
    screen: ClassVar[ScreenId] = "splash"


@dataclass(frozen=True)
class LoginPage:
    screen: ClassVar[ScreenId] = "login"


@dataclass(frozen=True)
class ProductsPage:
    """
    search_text is what has been typed, query is what the list is filtered
    by (search_text once the debounce settles).
    """

    screen: ClassVar[ScreenId] = "products"
    search_text: str = ""
    query: str = ""
    category: str = ALL_CATEGORIES


@dataclass(frozen=True)
class DetailPage:
    screen: ClassVar[ScreenId] = "detail"
    product: Product


@dataclass(frozen=True)
class CartPage:
    screen: ClassVar[ScreenId] = "cart"


@dataclass(frozen=True)
class AddressPage:
    screen: ClassVar[ScreenId] = "address"


@dataclass(frozen=True)
class PaymentPage:
    screen: ClassVar[ScreenId] = "payment"


@dataclass(frozen=True)
class SuccessPage:
    screen: ClassVar[ScreenId] = "checkout_success"
    summary: OrderSummary


Page = Union[
    SplashPage,
    LoginPage,
    ProductsPage,
    DetailPage,
    CartPage,
    AddressPage,
    PaymentPage,
    SuccessPage,
]
