from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, MarkdownViewer

from utils.pure import format_price, generate_markdown_table
from views.base_screen import BaseScreen


def order_summary_markdown(cart) -> str:
    headers = ["Product Name", "Unit Price", "Quantity", "Total Price"]
    rows = [
        [
            item.name,
            format_price(item.price),
            item.quantity,
            format_price(item.subtotal()),
        ]
        for item in cart
    ]
    md = "### Order Summary\n\n"
    md += generate_markdown_table(headers, rows, ["l", "c", "c", "c"])
    md += f"\n\n**Subtotal:** {format_price(cart.total())}"
    return md


class AddressScreen(BaseScreen):
    """
    Shipping address step. Next stays disabled until every field has text.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Shipping Address")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical():
            yield MarkdownViewer("", show_table_of_contents=False)
            yield Label("Street Address")
            yield Input(placeholder="123 Main St", id="input-address")
            yield Label("City")
            yield Input(placeholder="San Francisco", id="input-city")
            yield Label("ZIP Code")
            yield Input(placeholder="94105", id="input-zip", restrict=r"[0-9 -]*")
            with Horizontal():
                yield Button("Back to Cart", id="btn-back")
                yield Button("Next", id="btn-submit", variant="primary", disabled=True)

    async def on_mount(self):
        await self.query_one(MarkdownViewer).document.update(
            order_summary_markdown(self.app.state.cart)
        )

        draft = self.app.state.shipping_draft
        if draft:
            self.query_one("#input-address", Input).value = draft.address
            self.query_one("#input-city", Input).value = draft.city
            self.query_one("#input-zip", Input).value = draft.zip_code
        self.query_one("#input-address").focus()

    def _values(self):
        return [
            self.query_one(f"#input-{name}", Input).value
            for name in ("address", "city", "zip")
        ]

    @on(Input.Changed)
    def handle_input_changed(self) -> None:
        self.query_one("#btn-submit", Button).disabled = not all(
            v.strip() for v in self._values()
        )
        self.app.state.clear_error()

    @on(Input.Submitted, "#input-zip")
    @on(Button.Pressed, "#btn-submit")
    def handle_submit(self) -> None:
        self.run_intent(self.app.state.submit_address, *self._values())

    @on(Button.Pressed, "#btn-back")
    def handle_back(self) -> None:
        self.app.state.go_back()
