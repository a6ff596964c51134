from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import LoadingIndicator

from shop.errors import InvalidScreenError
from shop.navigator import Navigator
from utils.logger import get_logger
from utils.messages import QuitRequestedMessage, StateChangedMessage, UserLogoutMessage
from views.base_screen import BaseScreen
from views.scr_address import AddressScreen
from views.scr_cart import CartScreen
from views.scr_detail import DetailScreen
from views.scr_login import LoginScreen
from views.scr_payment import PaymentScreen
from views.scr_products import ProductsScreen
from views.scr_splash import SplashScreen
from views.scr_success import SuccessScreen

_logger = get_logger(__name__)


class StorefrontApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
    ]

    # navigator screen id -> textual screen, a fresh instance per visit
    PAGE_SCREENS = {
        "splash": SplashScreen,
        "login": LoginScreen,
        "products": ProductsScreen,
        "detail": DetailScreen,
        "cart": CartScreen,
        "address": AddressScreen,
        "payment": PaymentScreen,
        "checkout_success": SuccessScreen,
    }

    CSS_PATH = "views/styles/shop.tcss"

    TITLE = "RobusTest Shop"

    state: Navigator

    def __init__(self, state: Optional[Navigator] = None):
        super().__init__()
        self.state = state or Navigator()
        self.state.subscribe(self._on_state_change)
        self._page_screen: Optional[BaseScreen] = None

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        self._page_screen = self._build_screen(self.state.screen)
        await self.push_screen(self._page_screen)
        self.state.start()

    def _build_screen(self, screen_id: str) -> BaseScreen:
        try:
            return self.PAGE_SCREENS[screen_id]()
        except KeyError:
            raise InvalidScreenError(screen_id) from None

    def _on_state_change(self, old_screen: str, new_screen: str) -> None:
        self.post_message(StateChangedMessage(old_screen, new_screen))

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    @on(StateChangedMessage)
    async def handle_state_changed(self, message: StateChangedMessage) -> None:
        # messages can queue up, so compare against what is actually shown
        if self._page_screen is None:
            return
        screen_id = self.state.screen
        if not isinstance(self._page_screen, self.PAGE_SCREENS[screen_id]):
            _logger.debug(f"Showing '{screen_id}'")
            # dialogs belong to the screen being left, close them first
            while isinstance(self.screen, ModalScreen):
                await self.screen.dismiss(None)
            self._page_screen = self._build_screen(screen_id)
            await self.switch_screen(self._page_screen)
        else:
            self._page_screen.post_message(
                StateChangedMessage(message.old_screen, message.new_screen)
            )

    @on(UserLogoutMessage)
    def handle_user_logout(self):
        if self.state.logout(confirmed=True):
            self.notify("Logout successful.")

    @on(QuitRequestedMessage)
    def handle_quit(self):
        self.exit()


def main():
    app = StorefrontApp()
    app.run()


if __name__ == "__main__":
    main()
