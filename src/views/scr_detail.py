import dataclasses

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Label, MarkdownViewer

from utils.pure import format_price, generate_markdown_table
from views.base_screen import BaseScreen


class DetailScreen(BaseScreen):
    """
    One product, with a quantity stepper once it is in the cart.
    """

    def __init__(self) -> None:
        super().__init__()
        self.configure(header_sub_title="Product Details")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Horizontal(id="hort-prod-detail"):
            yield MarkdownViewer("", show_table_of_contents=False)
            with Vertical():
                yield Label("In Cart")
                with Horizontal():
                    yield Button("-", id="btn-sub-qty")
                    yield Label("0", id="label-order-qty")
                    yield Button("+", id="btn-add-qty")
                with Horizontal():
                    yield Button("Go Back", id="btn-back")
                    yield Button("Add to Cart", id="btn-addcart", variant="primary")
                yield Button("View Cart", id="btn-cart")

    async def on_mount(self):
        product = self.app.state.selected_product
        if product is None:
            return

        fields = dataclasses.asdict(product)
        fields["price"] = format_price(product.price)
        fields["in_stock"] = "✓ In Stock" if product.in_stock else "✗ Out of Stock"
        table_rows = [[k, v] for k, v in fields.items()]
        md = f"### {product.name}\n\n" + generate_markdown_table(
            ["Attribute", "Value"], table_rows, ["l", "l"]
        )
        await self.query_one(MarkdownViewer).document.update(md)
        self.render_state()

    def render_state(self) -> None:
        product = self.app.state.selected_product
        if product is None:
            return
        qty = self.app.state.cart.quantity_of(product.id)

        self.query_one("#label-order-qty", Label).update(str(qty))
        self.query_one("#btn-sub-qty", Button).disabled = qty == 0

        btn_add = self.query_one("#btn-add-qty", Button)
        btn_add.disabled = not product.in_stock

        order_btn = self.query_one("#btn-addcart", Button)
        if not product.in_stock:
            order_btn.label = "Out of Stock"
            order_btn.variant = "warning"
            order_btn.disabled = True

    @on(Button.Pressed, "#btn-add-qty")
    @on(Button.Pressed, "#btn-addcart")
    def handle_add(self) -> None:
        product = self.app.state.selected_product
        if self.run_intent(self.app.state.add_to_cart, product.id) == 1:
            self.notify(f"{product.name} added to cart.")

    @on(Button.Pressed, "#btn-sub-qty")
    def handle_sub(self) -> None:
        product = self.app.state.selected_product
        self.run_intent(self.app.state.remove_from_cart, product.id)

    @on(Button.Pressed, "#btn-back")
    def handle_back(self) -> None:
        self.app.state.go_back()

    @on(Button.Pressed, "#btn-cart")
    def handle_cart(self) -> None:
        self.app.state.go_to_cart()
