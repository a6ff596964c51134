from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, HorizontalGroup, VerticalScroll
from textual.widgets import Button, Label, Rule

from shop.models import CartItem
from utils.pure import format_price
from views.base_screen import BaseScreen


class CartItemWidget(HorizontalGroup):
    """One cart line with its own -/+ stepper."""

    def __init__(self, item: CartItem):
        super().__init__()
        self.item = item

    def compose(self):
        with Container(id="div-item"):
            yield Label(self.item.name, id="label-item-name")
            yield Label(
                f"{format_price(self.item.price)} × {self.item.quantity} = "
                f"{format_price(self.item.subtotal())}",
                id="label-item-price",
            )
        with Container(id="div-actions"):
            yield Button("-", id="btn-item-sub")
            yield Label(str(self.item.quantity), id="label-item-qty")
            yield Button("+", id="btn-item-add")

    @on(Button.Pressed, "#btn-item-add")
    def handle_add(self) -> None:
        self.screen.run_intent(self.app.state.add_to_cart, self.item.id)

    @on(Button.Pressed, "#btn-item-sub")
    def handle_sub(self) -> None:
        self.screen.run_intent(self.app.state.remove_from_cart, self.item.id)


class CartScreen(BaseScreen):
    """
    Cart contents, running total, and the way into checkout.
    """

    def __init__(self) -> None:
        super().__init__()
        self.configure(header_sub_title="Cart")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield VerticalScroll(id="vertscroll-content")
        yield Label("Total: $0.00", id="label-cart-total")
        yield Rule(line_style="dashed")
        with Horizontal(id="hort-buttons"):
            yield Button("Back", id="btn-back")
            yield Button("Checkout", id="btn-checkout", variant="primary")

    def on_mount(self):
        self.render_state()

    def render_state(self) -> None:
        # queued on the screen, so rebuilds run one after another
        self.call_later(self.rebuild_items)

    async def rebuild_items(self) -> None:
        cart = self.app.state.cart
        items = cart.items

        content = self.query_one("#vertscroll-content")
        await content.remove_children()
        if items:
            await content.mount_all([CartItemWidget(item) for item in items])
            content.remove_class("no-items")
        else:
            await content.mount(
                Label("Your cart is empty. Add some testing frameworks to get started.")
            )
            content.add_class("no-items")

        self.query_one("#label-cart-total", Label).update(
            f"Total ({cart.item_count()} items): {format_price(cart.total())}"
        )
        self.query_one("#btn-checkout", Button).disabled = cart.is_empty

    @on(Button.Pressed, "#btn-back")
    def handle_back(self) -> None:
        self.app.state.go_back()

    @on(Button.Pressed, "#btn-checkout")
    def handle_checkout(self) -> None:
        self.run_intent(self.app.state.checkout)
