from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, LoadingIndicator

from views.base_screen import BaseScreen


class SplashScreen(BaseScreen):
    """
    Shown at startup, the navigator moves on to login by itself.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Welcome", show_sidebar=False)

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-splash"):
            yield Label("RobusTest Shop", id="label-app-title")
            yield Label("Testing frameworks, by the unit", id="label-app-subtitle")
            yield LoadingIndicator()
