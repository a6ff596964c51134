from __future__ import annotations

from typing import Sequence, Tuple

from shop.errors import InvalidCredentialsError
from shop.models import User
from utils.logger import get_logger
from utils.validators import require_text

_logger = get_logger(__name__)


class AuthGate:
    """
    Checks (username, password) against a fixed credential list.
    Passwords are compared as typed; only the username is trimmed.
    """

    def __init__(self, users: Sequence[User]) -> None:
        self._users = tuple(users)

    def check_fields(self, username: str, password: str) -> Tuple[str, str]:
        """Raise ValidationError for the first empty field, username first."""
        return require_text(username, "username"), require_text(password, "password")

    def authenticate(self, username: str, password: str) -> User:
        username, _ = self.check_fields(username, password)

        for user in self._users:
            if user.username == username and user.password == password:
                _logger.info(f"User '{username}' authenticated.")
                return user

        _logger.info(f"Failed login for '{username}'.")
        raise InvalidCredentialsError()
