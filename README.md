# ggshare

ggshare is a small desktop application for keeping track of your files. Its window, built with Tkinter, has two tabs:

- **Login**: sign up with a username and password, or log in to an account you made earlier in the same run. Signing up logs you in straight away. Leading and trailing spaces are trimmed from both fields, and both must be filled in.
- **Files**: lists your files under "Owned Files:" and the files shared with you under "Shared With You:". **Upload** lets you pick a file from disk and adds its name to your owned files. **Delete** removes the selected file if you own it. Selecting a header line and pressing Delete does nothing.

## Installing

```
pip install .
```

Tkinter ships with most Python installations. The package has no other dependencies.

## Running

```
ggshare
```

## Using the model from code

The modules can be used without the window:

- `ggshare.model` has `User`, `AdminUser`, `FileManager`, `UploadOperation`, the abstract `FileOperation` and `NotOwnedError`.
- `ggshare.session` has `Session` and `AuthError`.
- `ggshare.ui` has `MainWindow`, `ListboxView` and `main`.

`FileManager` takes a view: any object with `clear()` and `add_item(text)` methods. `refresh_file_list()` redraws that view from the current user. `listing()` returns the same lines as a list.

```python
from ggshare.model import FileManager
from ggshare.session import Session


class PrintView:
    def clear(self):
        print("---")

    def add_item(self, text):
        print(text)


manager = FileManager(PrintView())
session = Session(manager)

password = "password"
session.signup("alice", password)
session.upload(choose_file=lambda: "/tmp/report.txt", notify=print)
print(manager.listing())   # ['Owned Files:', '  report.txt', 'Shared With You:']
session.delete("  report.txt")
```

- `Session.login` and `Session.signup` return a status message. They raise `AuthError` when a field is empty, when the username or password is wrong, or when the user already exists.
- `Session.upload` and `Session.delete` raise `AuthError` when nobody is logged in.
- `Session.upload` returns the uploaded file's name, or `None` if `choose_file` returned nothing.
- `Session.delete` returns `False` for a header line and `True` once the file is removed. It raises `NotOwnedError` for a file the user does not own.

## What it does not do

- Accounts and file lists are kept in memory only. Nothing is saved to disk, and they are lost when the application closes.
- Uploading records only the file's name. The file's contents are not copied or stored anywhere.
- The **Download**, **Share** and **Revoke Access** buttons have no action. Nothing ever adds a file to a user's "Shared With You:" list.
- Logging in again creates a fresh user with an empty file list. Files uploaded in an earlier login are not kept.
- There is no network side. Files are not exchanged between users or machines.

## Tests

```
pip install .[test]
pytest
```