from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class UserLogoutMessage(Message):
    """
    broadcasted once the user confirmed they want to log out
    """

    bubble = True


class StateChangedMessage(Message):
    """
    Fired by the app whenever the navigator reports a change.
    Posted to the active screen, which re-renders from app.state.

    If old_screen != new_screen the app swaps screens first.
    """

    bubble = False

    def __init__(self, old_screen: str, new_screen: str) -> None:
        super().__init__()
        self.old_screen = old_screen
        self.new_screen = new_screen
