"""Sign-up, login and file actions for the file-sharing window."""

from __future__ import annotations

from typing import Callable, Optional

from ggshare.model import (
    OWNED_HEADER,
    SHARED_HEADER,
    FileManager,
    UploadOperation,
    User,
)


class AuthError(Exception):
    """Raised when a login, sign-up or action needing a user fails."""


class Session:
    """Keeps the registered users and acts for whoever is logged in."""

    def __init__(self, file_manager: FileManager) -> None:
        self.file_manager = file_manager
        self._users: dict[str, str] = {}

    @staticmethod
    def _credentials(username: str, password: str) -> tuple[str, str]:
        username, password = username.strip(), password.strip()
        if not username or not password:
            raise AuthError("Please enter both username and password.")
        return username, password

    def _start(self, username: str) -> None:
        self.file_manager.set_user(User(username))
        self.file_manager.refresh_file_list()

    def _require_user(self) -> User:
        user = self.file_manager.current_user
        if user is None:
            raise AuthError("Please log in first.")
        return user

    def login(self, username: str, password: str) -> str:
        """Log a registered user in and return the status message."""
        username, password = self._credentials(username, password)
        if self._users.get(username) != password:
            raise AuthError("Incorrect username or password.")
        self._start(username)
        return "Login successful!"

    def signup(self, username: str, password: str) -> str:
        """Register a new user, log them in and return the status message."""
        username, password = self._credentials(username, password)
        if username in self._users:
            raise AuthError("User already exists.")
        self._users[username] = password
        self._start(username)
        return "Signup successful! You are now logged in."

    def upload(
        self,
        choose_file: Callable[[], Optional[str]],
        notify: Callable[[str, str], object],
    ) -> Optional[str]:
        """Upload a file for the current user; returns its name or None."""
        user = self._require_user()
        try:
            return UploadOperation(user, choose_file, notify).execute()
        finally:
            self.file_manager.refresh_file_list()

    def delete(self, item_text: str) -> bool:
        """Delete the listed file; header lines are ignored and give False.

        Raises NotOwnedError when the file is not among the owned files.
        """
        name = item_text.strip()
        if name.startswith(OWNED_HEADER) or name.startswith(SHARED_HEADER):
            return False
        user = self._require_user()
        try:
            user.remove_file(name)
        finally:
            self.file_manager.refresh_file_list()
        return True