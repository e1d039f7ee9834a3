import pytest

from ggshare.model import FileManager, NotOwnedError
from ggshare.session import AuthError, Session


class RecordingView:
    def __init__(self):
        self.items = []

    def clear(self):
        self.items.clear()

    def add_item(self, text):
        self.items.append(text)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def session(view):
    return Session(FileManager(view))


def test_signup_logs_in(session, view):
    password = "password"
    assert session.signup("alice", password) == "Signup successful! You are now logged in."
    assert session.file_manager.current_user.username == "alice"
    assert view.items == ["Owned Files:", "Shared With You:"]


def test_signup_twice_fails(session):
    password = "password"
    session.signup("alice", password)
    with pytest.raises(AuthError, match="User already exists."):
        session.signup("alice", password)


@pytest.mark.parametrize("username,password", [("", "password"), ("alice", "   "), (" ", "")])
def test_blank_credentials_rejected(session, username, password):
    with pytest.raises(AuthError, match="Please enter both username and password."):
        session.login(username, password)
    with pytest.raises(AuthError, match="Please enter both username and password."):
        session.signup(username, password)


def test_login_after_signup(session):
    password = "password"
    session.signup("alice", password)
    assert session.login("  alice ", f" {password} ") == "Login successful!"


def test_login_wrong_password(session):
    password = "password"
    wrong_password = "secret"
    session.signup("alice", password)
    with pytest.raises(AuthError, match="Incorrect username or password."):
        session.login("alice", wrong_password)


def test_login_unknown_user(session):
    password = "password"
    with pytest.raises(AuthError, match="Incorrect username or password."):
        session.login("bob", password)
    assert session.file_manager.current_user is None


def test_upload_requires_login(session):
    with pytest.raises(AuthError):
        session.upload(lambda: "/tmp/a.txt", lambda t, m: None)


def test_upload_and_delete(session, view):
    password = "password"
    session.signup("alice", password)
    assert session.upload(lambda: "/home/alice/notes.md", lambda t, m: None) == "notes.md"
    assert "  notes.md" in view.items
    assert session.delete("  notes.md") is True
    assert "  notes.md" not in view.items


def test_delete_header_is_ignored(session, view):
    password = "password"
    session.signup("alice", password)
    assert session.delete("Owned Files:") is False
    assert session.delete("Shared With You:") is False


def test_delete_unowned_raises(session, view):
    password = "password"
    session.signup("alice", password)
    with pytest.raises(NotOwnedError):
        session.delete("  other.txt")
    assert view.items == ["Owned Files:", "Shared With You:"]


def test_login_starts_with_fresh_file_list(session):
    password = "password"
    session.signup("alice", password)
    session.upload(lambda: "a.txt", lambda t, m: None)
    session.login("alice", password)
    assert session.file_manager.current_user.owned_files == ()