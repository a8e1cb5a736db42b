"""Concrete bookmark nodes: the root, folders and URLs."""

from __future__ import annotations

import weakref
from dataclasses import dataclass

from bookmark_observer.events import EventSender
from bookmark_observer.node import BookmarkKind, BookmarkNode, BookmarkNodeVisitor


@dataclass(frozen=True)
class UrlChanged:
    """The URL of the sending URL node changed."""

    url: str


class _TreeNode(BookmarkNode):
    """Shared storage for name, weak parent link and ordered children.

    Subclasses tune it with three class flags: whether the name may change,
    whether a parent is remembered and whether children are held.
    """

    _renamable = True
    _has_parent = True
    _holds_children = True

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name
        self._parent_ref: weakref.ref[BookmarkNode] | None = None
        self._children: list[BookmarkNode] = []

    @property
    def name(self) -> str:
        return self._name

    def _assign_name(self, name: str) -> bool:
        if not self._renamable or name == self._name:
            return False
        self._name = name
        return True

    def _get_parent(self) -> BookmarkNode | None:
        return self._parent_ref() if self._parent_ref is not None else None

    def _assign_parent(self, parent: BookmarkNode | None) -> None:
        if parent is not None and self._has_parent:
            self._parent_ref = weakref.ref(parent)
        else:
            self._parent_ref = None

    def _child_at(self, index: int) -> BookmarkNode | None:
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def _accepts(self, node: BookmarkNode) -> bool:
        return self._holds_children

    def _insert(self, child: BookmarkNode, index: int) -> bool:
        if not self._holds_children or not 0 <= index <= len(self._children):
            return False
        self._children.insert(index, child)
        return True

    def _remove(self, index: int) -> BookmarkNode | None:
        if 0 <= index < len(self._children):
            return self._children.pop(index)
        return None

    def _count(self) -> int:
        return len(self._children)


class RootNode(_TreeNode):
    """The top of a bookmark tree: no name, no parent, any children."""

    kind = BookmarkKind.ROOT
    _renamable = False
    _has_parent = False

    def __init__(self) -> None:
        super().__init__("")

    def _accept(self, visitor: BookmarkNodeVisitor) -> None:
        visitor.visit_root(self)


class FolderNode(_TreeNode):
    """A named node that holds other nodes."""

    kind = BookmarkKind.FOLDER

    def _accept(self, visitor: BookmarkNodeVisitor) -> None:
        visitor.visit_folder(self)


class UrlNode(_TreeNode):
    """A named link; it holds no children.

    URL changes go to the receivers of ``url_events``, apart from the
    node's own tree events.
    """

    kind = BookmarkKind.URL
    _holds_children = False

    def __init__(self, name: str, url: str) -> None:
        super().__init__(name)
        self._url = url
        self.url_events = EventSender()

    @property
    def url(self) -> str:
        """The address this bookmark points at."""
        return self._url

    def set_url(self, url: str) -> bool:
        """Change the URL; return whether it changed."""
        if url == self._url:
            return False
        self._url = url
        self.url_events.send(UrlChanged(url))
        return True

    def _accept(self, visitor: BookmarkNodeVisitor) -> None:
        visitor.visit_url(self)