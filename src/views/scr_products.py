from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, DataTable, Input, Label, Select

from utils.pure import format_price
from views.base_screen import BaseScreen


class ProductsScreen(BaseScreen):
    """
    Catalog browser: free-text search, category filter, and +/- cart keys.
    """

    BINDINGS = [
        Binding("enter", "noop", "View Product", show=True, key_display="⏎"),
        Binding("plus,a", "add_selected", "Add", show=True, key_display="+"),
        Binding("minus,r", "remove_selected", "Remove", show=True, key_display="-"),
        Binding("ctrl+o", "go_to_cart", "Cart", show=True),
    ]

    COLUMNS = ["ID", "Name", "Price", "Category", "Rating", "Stock", "In Cart"]

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Products")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        categories = self.app.state.categories
        with Horizontal(id="hort-search"):
            yield Input(
                id="input-search", placeholder="Search frameworks..."
            )
            yield Select(
                [(c, c) for c in categories],
                value=categories[0],
                allow_blank=False,
                id="select-category",
            )
        yield DataTable(id="table-products")
        yield Label("", id="label-no-results")
        with Horizontal(id="hort-buttons"):
            yield Button("View Cart", id="btn-cart", variant="primary")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns(*self.COLUMNS)

        self.render_state()
        self.query_one("#input-search").focus()

    def render_state(self) -> None:
        state = self.app.state
        products = state.visible_products()

        table = self.query_one(DataTable)
        cursor_row = table.cursor_row
        table.clear()
        for p in products:
            table.add_row(
                p.id,
                p.name,
                format_price(p.price),
                p.category,
                f"★ {p.rating}",
                "In Stock" if p.in_stock else "Unavailable",
                state.cart.quantity_of(p.id) or "",
                key=p.id,
            )
        if products:
            table.move_cursor(row=min(cursor_row, len(products) - 1))

        self.query_one("#label-no-results", Label).update(
            "" if products else "No products found. Try adjusting your search or filter"
        )

    def _selected_id(self):
        table = self.query_one(DataTable)
        if not table.row_count:
            return None
        return table.coordinate_to_cell_key(table.cursor_coordinate).row_key.value

    @on(Input.Changed, "#input-search")
    def handle_search_changed(self, message: Input.Changed) -> None:
        self.app.state.set_search_query(message.value)

    @on(Select.Changed, "#select-category")
    def handle_category_changed(self, message: Select.Changed) -> None:
        if message.value != self.app.state.category:
            self.run_intent(self.app.state.set_category, str(message.value))

    @on(DataTable.RowSelected)
    def handle_row_selected(self, message: DataTable.RowSelected) -> None:
        self.run_intent(self.app.state.select_product, message.row_key.value)

    def action_add_selected(self) -> None:
        pid = self._selected_id()
        if pid is not None:
            self.run_intent(self.app.state.add_to_cart, pid)

    def action_remove_selected(self) -> None:
        pid = self._selected_id()
        if pid is not None:
            self.run_intent(self.app.state.remove_from_cart, pid)

    def action_noop(self) -> None:
        pass

    @on(Button.Pressed, "#btn-cart")
    def action_go_to_cart(self) -> None:
        self.app.state.go_to_cart()
