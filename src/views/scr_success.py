from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Label, Markdown

from utils.pure import format_price, generate_markdown_table
from views.base_screen import BaseScreen


class SuccessScreen(BaseScreen):
    """
    Order confirmation. Continue Shopping empties the cart and returns to products.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Order Placed")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-success"):
            yield Label("Order Successful!", id="label-success-title")
            yield Label(
                "Thank you for your purchase. "
                "Your order has been placed successfully."
            )
            yield Markdown("", id="md-order")
            yield Button("Continue Shopping", id="btn-continue", variant="primary")

    async def on_mount(self):
        summary = self.app.state.order_summary
        if summary is None:
            return
        table_rows = [
            ["Order Number", f"#{summary.order_number}"],
            ["Items", summary.item_count],
            ["Total", format_price(summary.total)],
        ]
        payment = self.app.state.payment_draft
        if payment:
            table_rows.append(["Paid with", payment.masked])
        await self.query_one(Markdown).update(
            generate_markdown_table(None, table_rows, ["l", "r"])
        )
        self.query_one("#btn-continue").focus()

    @on(Button.Pressed, "#btn-continue")
    def handle_continue(self) -> None:
        self.app.state.continue_shopping()
