from __future__ import annotations

import functools
import random
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence

from shop.auth import AuthGate
from shop.cart import Cart
from shop.catalog import ALL_CATEGORIES, Catalog
from shop.checkout import CheckoutFlow
from shop.errors import InvalidScreenError, ShopError, ValidationError
from shop.models import OrderSummary, PaymentDraft, Product, ShippingDraft, User
from shop.screens import (
    AUTHENTICATED_SCREENS,
    SCREEN_IDS,
    AddressPage,
    CartPage,
    DetailPage,
    LoginPage,
    Page,
    PaymentPage,
    ProductsPage,
    SplashPage,
    SuccessPage,
)
from shop.seed import PRODUCTS, USERS
from shop.timers import AsyncioScheduler, Scheduler, TimerSlot
from utils.config import Settings, settings
from utils.logger import get_logger

_logger = get_logger(__name__)

Listener = Callable[[str, str], None]


def _records_errors(method):
    """Keep a user-facing error in last_error before letting it propagate."""

    @functools.wraps(method)
    def wrapper(self: "Navigator", *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ShopError as exc:
            _logger.info(f"{method.__name__} rejected on '{self.screen}': {exc.message}")
            self.last_error = exc
            self._notify(self.screen)
            raise

    return wrapper


class Navigator:
    """
    Centralized application state, and the only way to change it.

    Fields:
      - page: what is on screen, plus that screen's own data (see shop.screens)
      - user: logged-in user, None before login and after logout
      - cart: the session cart
      - checkout_flow: shipping/payment drafts
      - last_error: the most recent rejected intent, cleared once input changes

    Screens own their timers: splash owns the splash delay, login the
    simulated auth latency, products the search debounce. Leaving a
    screen cancels its timer.
    """

    def __init__(
        self,
        users: Sequence[User] = USERS,
        products: Sequence[Product] = PRODUCTS,
        scheduler: Optional[Scheduler] = None,
        config: Settings = settings,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._auth = AuthGate(users)
        self.catalog = Catalog(products)
        self._config = config
        scheduler = scheduler or AsyncioScheduler()
        self._timers: Dict[str, TimerSlot] = {
            "splash": TimerSlot(scheduler, "splash"),
            "login": TimerSlot(scheduler, "auth"),
            "products": TimerSlot(scheduler, "search-debounce"),
        }

        self.cart = Cart()
        self.checkout_flow = CheckoutFlow(rng)
        self.user: Optional[User] = None
        self.last_error: Optional[ShopError] = None
        self._page: Page = SplashPage()
        self._listeners: List[Listener] = []

    # ---------------------------
    # Reads
    # ---------------------------

    @property
    def page(self) -> Page:
        return self._page

    @property
    def screen(self) -> str:
        return self._page.screen

    @property
    def selected_product(self) -> Optional[Product]:
        return self._page.product if isinstance(self._page, DetailPage) else None

    @property
    def order_summary(self) -> Optional[OrderSummary]:
        return self._page.summary if isinstance(self._page, SuccessPage) else None

    @property
    def shipping_draft(self) -> Optional[ShippingDraft]:
        return self.checkout_flow.shipping

    @property
    def payment_draft(self) -> Optional[PaymentDraft]:
        return self.checkout_flow.payment

    @property
    def authenticating(self) -> bool:
        return self._timers["login"].pending

    @property
    def search_text(self) -> str:
        return self._page.search_text if isinstance(self._page, ProductsPage) else ""

    @property
    def category(self) -> str:
        if isinstance(self._page, ProductsPage):
            return self._page.category
        return ALL_CATEGORIES

    @property
    def categories(self) -> List[str]:
        return self.catalog.categories()

    def visible_products(self) -> List[Product]:
        if isinstance(self._page, ProductsPage):
            return self.catalog.search(self._page.query, self._page.category)
        return list(self.catalog)

    def cart_total(self) -> Decimal:
        return self.cart.total()

    def cart_item_count(self) -> int:
        return self.cart.item_count()

    # ---------------------------
    # Listeners
    # ---------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """listener(old_screen, new_screen) runs after every state change."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _notify(self, old_screen: str) -> None:
        for listener in list(self._listeners):
            listener(old_screen, self.screen)

    # ---------------------------
    # Transitions
    # ---------------------------

    def _check(self, page: Page) -> None:
        screen = getattr(page, "screen", None)
        if screen not in SCREEN_IDS:
            raise InvalidScreenError(screen)
        if screen in AUTHENTICATED_SCREENS and self.user is None:
            raise InvalidScreenError(screen)

    def _show(self, page: Page) -> None:
        old_screen = self.screen
        try:
            self._check(page)
        except InvalidScreenError as exc:
            _logger.error(f"{exc.message}, resetting to splash.")
            self._reset_session()
            page = SplashPage()
            self._timers["splash"].start(self._config.splash_delay, self._leave_splash)

        if page.screen != old_screen:
            timer = self._timers.get(old_screen)
            if timer:
                timer.cancel()
            _logger.debug(f"Screen: {old_screen} -> {page.screen}")

        self._page = page
        self.last_error = None
        self._notify(old_screen)

    def _expect(self, intent: str, *screens: str) -> bool:
        if self.screen in screens:
            return True
        _logger.warning(f"Ignored '{intent}' on screen '{self.screen}'")
        return False

    def _reset_session(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self.user = None
        self.cart.clear()
        self.checkout_flow.reset()

    # ---------------------------
    # Intents
    # ---------------------------

    def start(self) -> None:
        """Arm the splash timer. Call once the event loop is running."""
        if not self._expect("start", "splash"):
            return
        self._timers["splash"].start(self._config.splash_delay, self._leave_splash)

    def _leave_splash(self) -> None:
        self._show(LoginPage())

    @_records_errors
    def login(self, username: str, password: str) -> None:
        """
        Validate the fields now, resolve the credentials after the
        simulated auth delay. A wrong password shows up in last_error.
        """
        if not self._expect("login", "login"):
            return
        self._auth.check_fields(username, password)
        self.last_error = None
        self._timers["login"].start(
            self._config.auth_delay, self._finish_login, username, password
        )
        self._notify(self.screen)

    def _finish_login(self, username: str, password: str) -> None:
        try:
            user = self._auth.authenticate(username, password)
        except ShopError as exc:
            self.last_error = exc
            self._notify(self.screen)
            return
        self.user = user
        self._show(ProductsPage())

    def logout(self, confirmed: bool = False) -> bool:
        """Only acts when confirmed. Returns True if the user was logged out."""
        if not self._expect("logout", *AUTHENTICATED_SCREENS):
            return False
        if not confirmed:
            _logger.debug("Logout not confirmed.")
            return False

        username = self.user.username
        self._reset_session()
        self._show(LoginPage())
        _logger.info(f"User '{username}' logged out.")
        return True

    @_records_errors
    def select_product(self, product_id: str) -> None:
        if not self._expect("select_product", "products"):
            return
        self._show(DetailPage(self.catalog.get(product_id)))

    @_records_errors
    def add_to_cart(self, product_id: str) -> int:
        if not self._expect("add_to_cart", "products", "detail", "cart"):
            return self.cart.quantity_of(product_id)
        qty = self.cart.add(self.catalog.get(product_id))
        self.last_error = None
        self._notify(self.screen)
        return qty

    @_records_errors
    def remove_from_cart(self, product_id: str) -> int:
        if not self._expect("remove_from_cart", "products", "detail", "cart"):
            return self.cart.quantity_of(product_id)
        qty = self.cart.remove(self.catalog.get(product_id))
        self.last_error = None
        self._notify(self.screen)
        return qty

    def set_search_query(self, text: str) -> None:
        """Record the typed text now; filter by it once typing pauses."""
        if not self._expect("set_search_query", "products"):
            return
        self._show(replace(self._page, search_text=text))
        self._timers["products"].start(
            self._config.search_debounce, self._apply_query, text
        )

    def _apply_query(self, text: str) -> None:
        if isinstance(self._page, ProductsPage):
            self._show(replace(self._page, query=text))

    @_records_errors
    def set_category(self, name: str) -> None:
        if not self._expect("set_category", "products"):
            return
        if name not in self.categories:
            raise ValidationError("category", f"Unknown category: {name}")
        self._show(replace(self._page, category=name))

    def go_to_cart(self) -> None:
        if not self._expect("go_to_cart", "products", "detail"):
            return
        self._show(CartPage())

    def go_back(self) -> None:
        screen = self.screen
        if screen in ("detail", "cart"):
            # back at the catalog, any half-done checkout starts over
            self.checkout_flow.reset()
            self._show(ProductsPage())
        elif screen == "address":
            self._show(CartPage())
        elif screen == "payment":
            self._show(AddressPage())
        elif screen == "checkout_success":
            self.continue_shopping()
        else:
            _logger.debug(f"Back is a no-op on '{screen}'")

    @_records_errors
    def checkout(self) -> None:
        if not self._expect("checkout", "cart"):
            return
        if self.cart.is_empty:
            raise ValidationError("cart", "Cart is empty.")
        self._show(AddressPage())

    @_records_errors
    def submit_address(self, address: str, city: str, zip_code: str) -> None:
        if not self._expect("submit_address", "address"):
            return
        self.checkout_flow.submit_address(address, city, zip_code)
        self._show(PaymentPage())

    @_records_errors
    def submit_payment(self, card_number: str) -> Optional[OrderSummary]:
        if not self._expect("submit_payment", "payment"):
            return None
        summary = self.checkout_flow.submit_payment(card_number, self.cart)
        self.cart.clear()
        self._show(SuccessPage(summary))
        return summary

    def continue_shopping(self) -> None:
        if not self._expect("continue_shopping", "checkout_success"):
            return
        self.cart.clear()
        self.checkout_flow.reset()
        self._show(ProductsPage())

    def clear_error(self) -> None:
        """Input changed: forget the last rejection."""
        if self.last_error is None:
            return
        self.last_error = None
        self._notify(self.screen)
