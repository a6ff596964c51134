from typing import Any, Callable, Optional

from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label

from shop.errors import ShopError
from utils.messages import StateChangedMessage, UserLogoutMessage
from utils.pure import format_price
from views.modal_dialog import DialogModal, QuitDialogModal


class Sidebar(Container):
    """User info, cart badge and the logout button."""

    def compose(self) -> ComposeResult:
        yield Label("User Info", id="label-info-1")
        yield Label("", id="label-userinfo")
        yield Button("Log out", id="btn-logout", variant="error")
        yield Label("Cart", id="label-info-2")
        yield Label("", id="label-cart-badge")

    def on_mount(self):
        self.refresh_info()

    def refresh_info(self) -> None:
        state = self.app.state
        if state.user:
            self.query_one("#label-userinfo", Label).update(
                f"Hello, {state.user.username}!\n{state.user.email}"
            )

        count = state.cart_item_count()
        self.query_one("#label-cart-badge", Label).update(
            f"{count} item(s), {format_price(state.cart_total())}"
        )

    @on(Button.Pressed, "#btn-logout")
    @work()
    async def handle_logout(self):
        if not await self.app.push_screen_wait(
            DialogModal(
                "Are you sure you want to logout?",
                primary_text="Logout",
                secondary_text="Cancel",
                tone="warning",
            )
        ):
            return

        self.post_message(UserLogoutMessage())


class BaseScreen(Screen):
    """
    Inherited by all screens, contains common elements like
    headers, footers, sidebar, and keybindings.

    Subclasses override render_state(), which runs whenever the
    navigator reports a change while this screen is showing.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Quit App", show=True),
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self):
        super().__init__()
        self.configure()

    def configure(
        self,
        header_sub_title: str = "",
        show_sidebar: bool = True,
    ) -> None:
        self.sub_title = header_sub_title
        self._show_sidebar = show_sidebar

    def compose(self) -> ComposeResult:
        if self._show_sidebar:
            yield Sidebar()
        yield Header()
        yield Footer(show_command_palette=False)

    def render_state(self) -> None:
        pass

    def run_intent(self, intent: Callable[..., Any], *args: Any) -> Optional[Any]:
        """Call a navigator intent, turning a rejection into a notification."""
        try:
            return intent(*args)
        except ShopError as exc:
            self.notify(exc.message, severity="error")
            return None

    @on(StateChangedMessage)
    def handle_state_changed(self) -> None:
        if self._show_sidebar:
            self.query_one(Sidebar).refresh_info()
        self.render_state()

    def action_go_back(self) -> None:
        self.app.state.go_back()

    @work()
    async def action_quit(self):
        await self.app.push_screen_wait(QuitDialogModal())
