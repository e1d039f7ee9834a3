from ggshare.model import FileManager, User
from ggshare.ui import ListboxView


class FakeListbox:
    """Stands in for a Tk listbox, following its index conventions."""

    def __init__(self):
        self.items = []

    def delete(self, first, last=None):
        if last == "end":
            del self.items[first:]
        else:
            del self.items[first]

    def insert(self, index, text):
        if index == "end":
            self.items.append(text)
        else:
            self.items.insert(index, text)


def test_add_item_appends_in_order():
    box = FakeListbox()
    view = ListboxView(box)
    view.add_item("first")
    view.add_item("second")
    assert box.items == ["first", "second"]


def test_clear_empties_listbox():
    box = FakeListbox()
    box.items.extend(["a", "b", "c"])
    view = ListboxView(box)
    view.clear()
    assert box.items == []


def test_file_manager_draws_on_listbox():
    box = FakeListbox()
    manager = FileManager(ListboxView(box))
    user = User("alice")
    user.add_file("a.txt")
    manager.set_user(user)
    manager.refresh_file_list()
    manager.refresh_file_list()
    assert box.items == ["Owned Files:", "  a.txt", "Shared With You:"]