from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label

from utils.pure import format_price
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal


class PaymentScreen(BaseScreen):
    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Payment")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical():
            yield Label("", id="label-ship-to")
            yield Label("", id="label-amount")
            yield Label("Card Number")
            yield Input(
                placeholder="•••• •••• •••• ••••",
                id="input-card",
                restrict=r"[0-9 ]*",
                password=True,
            )
            with Horizontal():
                yield Button("Back to Address", id="btn-back")
                yield Button("Pay Now", id="btn-pay", variant="primary", disabled=True)

    def on_mount(self):
        state = self.app.state
        draft = state.shipping_draft
        if draft:
            self.query_one("#label-ship-to", Label).update(
                f"Ship to: {draft.address}, {draft.city} {draft.zip_code}"
            )
        self.query_one("#label-amount", Label).update(
            f"Amount due: {format_price(state.cart_total())}"
        )
        self.query_one("#input-card").focus()

    @on(Input.Changed, "#input-card")
    def handle_input_changed(self, message: Input.Changed) -> None:
        self.query_one("#btn-pay", Button).disabled = not message.value.strip()
        self.app.state.clear_error()

    @on(Input.Submitted, "#input-card")
    @on(Button.Pressed, "#btn-pay")
    @work(exclusive=True)
    async def handle_pay(self) -> None:
        card = self.query_one("#input-card", Input).value
        if not card.strip():
            self.notify("Card number is required", severity="error")
            return

        if not await self.app.push_screen_wait(
            DialogModal(
                "Place order? This cannot be undone.",
                primary_text="Yes",
                secondary_text="No",
                tone="positive",
            )
        ):
            return

        self.run_intent(self.app.state.submit_payment, card)

    @on(Button.Pressed, "#btn-back")
    def handle_back(self) -> None:
        self.app.state.go_back()
