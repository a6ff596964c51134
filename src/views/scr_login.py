from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label

from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal, QuitDialogModal


class LoginScreen(BaseScreen):
    """
    Username/password form. The navigator resolves the attempt after a
    short delay; until then the form is locked.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Login", show_sidebar=False)

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-login"):
            yield Label("Username")
            yield Input(placeholder="Username", id="input-login-user")
            yield Label("Password")
            yield Input(placeholder="*********", password=True, id="input-login-pwd")
            yield Label("", id="label-login-error")
            with Horizontal(id="div-login-btns"):
                yield Button("Quit", id="btn-quit")
                yield Button("Forgot Password?", id="btn-forgot")
                yield Button("Login", id="btn-login", variant="primary")

    def on_mount(self):
        self.query_one("#input-login-user").focus()
        self.render_state()

    def render_state(self) -> None:
        state = self.app.state
        busy = state.authenticating

        error_label = self.query_one("#label-login-error", Label)
        error_label.update(state.last_error.message if state.last_error else "")

        btn_login = self.query_one("#btn-login", Button)
        btn_login.disabled = busy
        btn_login.label = "Signing in..." if busy else "Login"
        self.query_one("#btn-forgot", Button).disabled = busy
        for input_ in self.query(Input):
            input_.disabled = busy

        if state.last_error:
            input_login_pwd = self.query_one("#input-login-pwd", Input)
            input_login_pwd.add_class("-invalid")

    @on(Input.Changed)
    def handle_input_changed(self) -> None:
        self.query_one("#input-login-pwd", Input).remove_class("-invalid")
        self.app.state.clear_error()

    @on(Input.Submitted, "#input-login-pwd")
    @on(Button.Pressed, "#btn-login")
    def handle_login_submit(self) -> None:
        username = self.query_one("#input-login-user", Input).value
        # passwords are matched exactly as typed
        pwd = self.query_one("#input-login-pwd", Input).value
        self.run_intent(self.app.state.login, username, pwd)

    @on(Button.Pressed, "#btn-forgot")
    def handle_forgot(self) -> None:
        self.app.push_screen(
            DialogModal("Password reset is not available in this demo.")
        )

    @on(Button.Pressed, "#btn-quit")
    def handle_quit_(self) -> None:
        self.app.push_screen(QuitDialogModal())
