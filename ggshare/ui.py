"""The desktop window for logging in and managing files."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Optional, Sequence

from ggshare.model import FileManager, NotOwnedError
from ggshare.session import AuthError, Session

_BACKGROUND = "#f9f9f9"
_ACCENT = "#4A90E2"
_MASK_CHAR = "*"


class ListboxView:
    """Adapts a Tk listbox to the file view the file manager draws on."""

    def __init__(self, listbox) -> None:
        self._listbox = listbox

    def clear(self) -> None:
        self._listbox.delete(0, tk.END)

    def add_item(self, text: str) -> None:
        self._listbox.insert(tk.END, text)


class MainWindow:
    """Login and file tabs wired to a session."""

    def __init__(self, root: tk.Misc) -> None:
        self.root = root
        root.title("GG File Sharing")
        root.geometry("700x450")
        root.configure(background=_BACKGROUND)

        self.tabs = ttk.Notebook(root)
        self.tabs.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.auth_tab = self._build_auth_tab()
        self.file_tab = self._build_file_tab()
        self.tabs.add(self.auth_tab, text="Login")
        self.tabs.add(self.file_tab, text="Files")

        self.session = Session(FileManager(ListboxView(self.file_list)))

    def _build_auth_tab(self) -> tk.Frame:
        tab = tk.Frame(self.tabs, background=_BACKGROUND, padx=40, pady=30)
        tk.Label(
            tab, text="Login / Signup", font=("TkDefaultFont", 18, "bold"),
            background=_BACKGROUND,
        ).pack(pady=(0, 15))

        form = tk.Frame(tab, background=_BACKGROUND)
        form.pack(pady=(0, 15))
        tk.Label(form, text="Username:", background=_BACKGROUND).grid(
            row=0, column=0, sticky=tk.E, padx=(0, 15), pady=5)
        tk.Label(form, text="Password:", background=_BACKGROUND).grid(
            row=1, column=0, sticky=tk.E, padx=(0, 15), pady=5)
        self.username_entry = tk.Entry(form, width=30)
        self.password_entry = tk.Entry(form, width=30, show=_MASK_CHAR)
        self.username_entry.grid(row=0, column=1, pady=5)
        self.password_entry.grid(row=1, column=1, pady=5)

        buttons = tk.Frame(tab, background=_BACKGROUND)
        buttons.pack(pady=(0, 15))
        self.login_button = tk.Button(
            buttons, text="Login", width=12, background=_ACCENT, foreground="white",
            font=("TkDefaultFont", 10, "bold"), command=self.on_login,
        )
        self.signup_button = tk.Button(
            buttons, text="Sign Up", width=12, background="#7B8D93", foreground="white",
            font=("TkDefaultFont", 10, "bold"), command=self.on_signup,
        )
        self.login_button.pack(side=tk.LEFT, padx=15)
        self.signup_button.pack(side=tk.LEFT, padx=15)

        self.status_label = tk.Label(
            tab, text="", foreground="red", font=("TkDefaultFont", 10, "bold"),
            background=_BACKGROUND,
        )
        self.status_label.pack()
        return tab

    def _build_file_tab(self) -> tk.Frame:
        tab = tk.Frame(self.tabs, background=_BACKGROUND, padx=30, pady=20)
        tk.Label(
            tab, text="Your Files:", font=("TkDefaultFont", 14, "bold"),
            background=_BACKGROUND,
        ).pack(anchor=tk.W, pady=(0, 15))

        self.file_list = tk.Listbox(
            tab, background="white", selectbackground=_ACCENT,
            selectforeground="white", exportselection=False,
        )
        self.file_list.pack(fill=tk.BOTH, expand=True, pady=(0, 15))

        buttons = tk.Frame(tab, background=_BACKGROUND)
        buttons.pack(fill=tk.X)
        actions = [
            ("Upload", self.on_upload),
            ("Download", None),
            ("Share", None),
            ("Revoke Access", None),
            ("Delete", self.on_delete),
        ]
        for label, command in actions:
            button = tk.Button(
                buttons, text=label, background=_ACCENT, foreground="white",
                font=("TkDefaultFont", 10, "bold"), command=command,
            )
            button.pack(side=tk.LEFT, expand=True, fill=tk.X, padx=7)
        return tab

    def _authenticate(self, action) -> None:
        try:
            message = action(self.username_entry.get(), self.password_entry.get())
        except AuthError as error:
            self.status_label.configure(text=str(error))
            return
        self.status_label.configure(text=message)
        self.tabs.select(self.file_tab)

    def on_login(self) -> None:
        self._authenticate(self.session.login)

    def on_signup(self) -> None:
        self._authenticate(self.session.signup)

    def on_upload(self) -> None:
        def choose_file() -> str:
            return filedialog.askopenfilename(
                parent=self.root, title="Select File to Upload")

        def notify(title: str, message: str) -> None:
            messagebox.showinfo(title, message, parent=self.root)

        try:
            self.session.upload(choose_file, notify)
        except AuthError as error:
            messagebox.showwarning("Upload", str(error), parent=self.root)

    def on_delete(self) -> None:
        selection = self.file_list.curselection()
        if not selection:
            messagebox.showwarning("Delete", "Please select a file.", parent=self.root)
            return
        item_text = self.file_list.get(selection[0])
        try:
            deleted = self.session.delete(item_text)
        except NotOwnedError:
            messagebox.showwarning(
                "Failed", "You can only delete owned files.", parent=self.root)
        except AuthError as error:
            messagebox.showwarning("Delete", str(error), parent=self.root)
        else:
            if deleted:
                messagebox.showinfo("Deleted", "File removed.", parent=self.root)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run until it is closed."""
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0