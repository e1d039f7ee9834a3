"""Users, their files and the list view that shows them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Callable, Optional, Protocol


OWNED_HEADER = "Owned Files:"
SHARED_HEADER = "Shared With You:"
ITEM_INDENT = "  "


class NotOwnedError(LookupError):
    """Raised when a user tries to remove a file they do not own."""


class FileView(Protocol):
    """Anything that can show a list of text lines."""

    def clear(self) -> None: ...

    def add_item(self, text: str) -> None: ...


class FileOperation(ABC):
    """An action performed on a user's files."""

    @abstractmethod
    def execute(self):
        """Carry out the operation."""


class User:
    """A user with the files they own and the files shared with them."""

    def __init__(self, name: str) -> None:
        self.username = name
        self._owned: list[str] = []
        self._shared: list[str] = []

    def add_file(self, file: str) -> None:
        self._owned.append(file)

    def remove_file(self, file: str) -> None:
        """Remove every entry of ``file`` from the owned files."""
        if file not in self._owned:
            raise NotOwnedError(file)
        self._owned = [name for name in self._owned if name != file]

    @property
    def owned_files(self) -> tuple[str, ...]:
        return tuple(self._owned)

    @property
    def shared_files(self) -> tuple[str, ...]:
        return tuple(self._shared)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.username!r})"


class AdminUser(User):
    """A user with administrative rights."""

    def add_file(self, file: str) -> None:
        super().add_file(file)


class FileManager:
    """Holds the logged-in user and keeps a file view in step with them."""

    def __init__(self, file_list: FileView) -> None:
        self._file_list = file_list
        self._current_user: Optional[User] = None

    def set_user(self, user: Optional[User]) -> None:
        self._current_user = user

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    def listing(self) -> list[str]:
        """The lines the file view shows for the current user."""
        user = self._current_user
        if user is None:
            return []
        return [
            OWNED_HEADER,
            *(ITEM_INDENT + name for name in user.owned_files),
            SHARED_HEADER,
            *(ITEM_INDENT + name for name in user.shared_files),
        ]

    def refresh_file_list(self) -> None:
        """Redraw the file view; leaves it untouched when nobody is logged in."""
        if self._current_user is None:
            return
        self._file_list.clear()
        for line in self.listing():
            self._file_list.add_item(line)


class UploadOperation(FileOperation):
    """Adds a file picked by the user to their owned files."""

    def __init__(
        self,
        user: User,
        choose_file: Callable[[], Optional[str]],
        notify: Callable[[str, str], object],
    ) -> None:
        self._user = user
        self._choose_file = choose_file
        self._notify = notify

    def execute(self) -> Optional[str]:
        """Ask for a file and add its name; returns the name, or None if cancelled."""
        path = self._choose_file()
        if not path:
            return None
        name = PurePath(path).name
        self._user.add_file(name)
        self._notify("Uploaded", f"File uploaded: {name}")
        return name