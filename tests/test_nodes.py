import gc

import pytest

from bookmark_observer.events import EventReceiver
from bookmark_observer.node import BookmarkKind, BookmarkNodeVisitor, NameChangedRecursive
from bookmark_observer.nodes import FolderNode, RootNode, UrlChanged, UrlNode


class Log(EventReceiver):
    def __init__(self):
        self.entries = []

    def receive_event(self, event):
        self.entries.append(event)


def listen(sender):
    log = Log()
    sender.connect(log)
    return log


class KindVisitor(BookmarkNodeVisitor):
    def __init__(self):
        self.seen = []

    def visit_root(self, node):
        self.seen.append(("root", node))

    def visit_folder(self, node):
        self.seen.append(("folder", node))

    def visit_url(self, node):
        self.seen.append(("url", node))


@pytest.mark.parametrize(
    "make, kind, label",
    [
        (RootNode, BookmarkKind.ROOT, "root"),
        (lambda: FolderNode("f"), BookmarkKind.FOLDER, "folder"),
        (lambda: UrlNode("n", "u"), BookmarkKind.URL, "url"),
    ],
)
def test_kind_and_visit(make, kind, label):
    node = make()
    assert node.kind is kind
    visitor = KindVisitor()
    node.accept(visitor)
    assert visitor.seen == [(label, node)]


def test_root_has_no_name_and_cannot_be_renamed():
    root = RootNode()
    log = listen(root)
    assert root.name == ""
    assert root.set_name("x") is False
    assert root.name == ""
    assert log.entries == []


def test_root_never_has_parent():
    root = RootNode()
    RootNode().push_child(root)
    assert root.parent is None


def test_rename_of_descendant_reaches_root():
    root = RootNode()
    folder = FolderNode("f")
    root.push_child(folder)
    log = listen(root)
    assert folder.set_name("g") is True
    assert folder.name == "g"
    assert log.entries == [NameChangedRecursive(folder, "g")]


def test_insert_keeps_order_and_parents():
    root = RootNode()
    folder = FolderNode("a")
    link = UrlNode("b", "http://example.com")
    assert root.push_child(folder)
    assert root.insert_child(link, 0)
    assert [root.child(i) for i in range(3)] == [link, folder, None]
    assert folder.parent is root
    assert link.parent is root


def test_folder_insert_out_of_range_fails():
    folder = FolderNode("f")
    child = FolderNode("c")
    assert folder.insert_child(child, 1) is False
    assert folder.children_size() == 0
    assert child.parent is None


@pytest.mark.parametrize("index", [0, -1])
def test_empty_folder_erase_out_of_range(index):
    assert FolderNode("f").erase_child_at(index) is None


def test_erase_child_by_node():
    root = RootNode()
    a, b = FolderNode("a"), FolderNode("b")
    root.push_child(a)
    root.push_child(b)
    assert root.erase_child(a) is True
    assert root.child(0) is b
    assert a.parent is None
    assert root.erase_child(a) is False


def test_url_node_holds_no_children():
    link = UrlNode("n", "u")
    other = FolderNode("f")
    assert link.is_insertable(other) is False
    assert link.push_child(other) is False
    assert link.children_size() == 0
    assert link.child(0) is None
    assert link.erase_child_at(0) is None
    assert other.parent is None


@pytest.mark.parametrize("holder", [FolderNode("f"), RootNode()])
def test_folder_and_root_accept_anything(holder):
    assert holder.is_insertable(UrlNode("n", "u")) is True
    assert holder.is_insertable(FolderNode("g")) is True


def test_set_url_sends_on_url_events():
    link = UrlNode("n", "old")
    url_log = listen(link.url_events)
    node_log = listen(link)
    assert link.set_url("new") is True
    assert link.url == "new"
    assert url_log.entries == [UrlChanged("new")]
    assert node_log.entries == []


def test_set_same_url_is_no_change():
    link = UrlNode("n", "same")
    log = listen(link.url_events)
    assert link.set_url("same") is False
    assert log.entries == []


def test_parent_is_weak():
    folder = FolderNode("f")
    child = UrlNode("n", "u")
    folder.push_child(child)
    assert child.parent is folder
    del folder
    gc.collect()
    assert child.parent is None