"""The bookmark tree node, its kinds, events and visitor."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from bookmark_observer.events import EventSender


class BookmarkKind(enum.Enum):
    """What a bookmark node is."""

    ROOT = enum.auto()
    FOLDER = enum.auto()
    URL = enum.auto()


@dataclass(frozen=True)
class NameChanged:
    """The name of the sending node changed."""

    name: str


@dataclass(frozen=True)
class NameChangedRecursive:
    """The name of ``node``, the sender or one of its descendants, changed."""

    node: BookmarkNode
    name: str


@dataclass(frozen=True)
class ChildInserted:
    """``child`` was inserted into the sending node at ``index``."""

    child: BookmarkNode
    index: int


@dataclass(frozen=True)
class ChildInsertedRecursive:
    """``child`` was inserted into ``node`` at ``index``."""

    node: BookmarkNode
    child: BookmarkNode
    index: int


@dataclass(frozen=True)
class ChildErased:
    """``child`` was removed from the sending node at ``index``."""

    child: BookmarkNode
    index: int


@dataclass(frozen=True)
class ChildErasedRecursive:
    """``child`` was removed from ``node`` at ``index``."""

    node: BookmarkNode
    child: BookmarkNode
    index: int


class BookmarkNodeVisitor(ABC):
    """Operation dispatched on the concrete kind of a node."""

    @abstractmethod
    def visit_root(self, node: BookmarkNode) -> None:
        """Handle a root node."""

    @abstractmethod
    def visit_folder(self, node: BookmarkNode) -> None:
        """Handle a folder node."""

    @abstractmethod
    def visit_url(self, node: BookmarkNode) -> None:
        """Handle a URL node."""


class BookmarkNode(EventSender, ABC):
    """A node of the bookmark tree that reports its changes as events.

    Changes made through the public methods are sent to the node's own
    receivers; the recursive variants also go to every ancestor.
    Subclasses supply the storage through the underscored hooks.
    """

    @property
    @abstractmethod
    def kind(self) -> BookmarkKind:
        """The kind of this node."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The display name of this node."""

    @property
    def parent(self) -> BookmarkNode | None:
        """The node holding this one, if any."""
        return self._get_parent()

    @parent.setter
    def parent(self, parent: BookmarkNode | None) -> None:
        self._assign_parent(parent)

    def set_name(self, name: str) -> bool:
        """Rename the node; return whether the name changed."""
        if not self._assign_name(name):
            return False
        self.send(NameChanged(name))
        self._send_recursive(NameChangedRecursive(self, name))
        return True

    def child(self, index: int) -> BookmarkNode | None:
        """Return the child at ``index``, or None when there is none."""
        if index < 0:
            return None
        return self._child_at(index)

    def is_insertable(self, node: BookmarkNode) -> bool:
        """Return whether ``node`` may become a child of this node."""
        return self._accepts(node)

    def insert_child(self, child: BookmarkNode, index: int) -> bool:
        """Insert ``child`` at ``index``; return whether it was inserted."""
        if index < 0 or not self._insert(child, index):
            return False
        child.parent = self
        self.send(ChildInserted(child, index))
        self._send_recursive(ChildInsertedRecursive(self, child, index))
        return True

    def push_child(self, child: BookmarkNode) -> bool:
        """Append ``child``; return whether it was inserted."""
        return self.insert_child(child, self.children_size())

    def erase_child_at(self, index: int) -> BookmarkNode | None:
        """Remove and return the child at ``index``, or None if there is none."""
        if index < 0:
            return None
        child = self._remove(index)
        if child is None:
            return None
        child.parent = None
        self.send(ChildErased(child, index))
        self._send_recursive(ChildErasedRecursive(self, child, index))
        return child

    def erase_child(self, child: BookmarkNode) -> bool:
        """Remove ``child`` from this node; return whether it was a child."""
        for index, existing in enumerate(self._iter_children()):
            if existing is child:
                return self.erase_child_at(index) is not None
        return False

    def children_size(self) -> int:
        """Return the number of children."""
        return self._count()

    def accept(self, visitor: BookmarkNodeVisitor) -> None:
        """Dispatch ``visitor`` on the kind of this node."""
        self._accept(visitor)

    def _iter_children(self) -> Iterator[BookmarkNode | None]:
        for index in range(self._count()):
            yield self._child_at(index)

    def _send_recursive(self, event: object) -> None:
        node: BookmarkNode | None = self
        while node is not None:
            node.send(event)
            node = node.parent

    @abstractmethod
    def _assign_name(self, name: str) -> bool:
        """Store ``name``; return whether it differs from the old one."""

    @abstractmethod
    def _get_parent(self) -> BookmarkNode | None:
        """Return the stored parent."""

    @abstractmethod
    def _assign_parent(self, parent: BookmarkNode | None) -> None:
        """Store the parent."""

    @abstractmethod
    def _child_at(self, index: int) -> BookmarkNode | None:
        """Return the child at a non-negative ``index`` or None."""

    @abstractmethod
    def _accepts(self, node: BookmarkNode) -> bool:
        """Return whether ``node`` may be a child."""

    @abstractmethod
    def _insert(self, child: BookmarkNode, index: int) -> bool:
        """Store ``child`` at a non-negative ``index``; return success."""

    @abstractmethod
    def _remove(self, index: int) -> BookmarkNode | None:
        """Drop and return the child at a non-negative ``index`` or None."""

    @abstractmethod
    def _count(self) -> int:
        """Return the number of stored children."""

    @abstractmethod
    def _accept(self, visitor: BookmarkNodeVisitor) -> None:
        """Call the visitor method matching this node."""