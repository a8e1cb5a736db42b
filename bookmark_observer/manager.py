"""Bookmark manager: the tree, the current node and the selection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bookmark_observer.events import EventSender
from bookmark_observer.node import BookmarkNode
from bookmark_observer.nodes import RootNode


@dataclass(frozen=True)
class CurrentChanged:
    """The current node changed."""

    current_node: BookmarkNode | None


@dataclass(frozen=True)
class SelectChanged:
    """The selected nodes changed."""

    select_nodes: tuple[BookmarkNode, ...]


def _same_nodes(a: tuple[BookmarkNode, ...], b: tuple[BookmarkNode, ...]) -> bool:
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))


class BookmarkManager(EventSender):
    """Owns the bookmark tree and tracks the current and selected nodes."""

    def __init__(self) -> None:
        super().__init__()
        self._root = RootNode()
        self._current: BookmarkNode | None = None
        self._selected: tuple[BookmarkNode, ...] = ()

    @property
    def root_bookmark(self) -> RootNode:
        """The root of the tree."""
        return self._root

    @property
    def current_node(self) -> BookmarkNode | None:
        """The node being worked on, if any."""
        return self._current

    @property
    def select_nodes(self) -> tuple[BookmarkNode, ...]:
        """The selected nodes, in selection order."""
        return self._selected

    def set_current_node(self, node: BookmarkNode | None) -> bool:
        """Make ``node`` current; return whether it changed."""
        if node is self._current:
            return False
        self._current = node
        self.send(CurrentChanged(node))
        return True

    def set_select_nodes(self, nodes: Iterable[BookmarkNode]) -> bool:
        """Replace the selection; return whether it changed."""
        selected = tuple(nodes)
        if _same_nodes(selected, self._selected):
            return False
        self._selected = selected
        self.send(SelectChanged(selected))
        return True

    def delete_current_node(self) -> bool:
        """Remove the current node from its parent; return whether it was removed."""
        current = self._current
        if current is None:
            return False
        parent = current.parent
        if parent is None:
            return False
        erased = parent.erase_child(current)
        if erased:
            self.set_current_node(None)
        return erased

    def delete_select_nodes(self) -> int:
        """Clear the selection and remove its nodes; return how many were removed."""
        if not self._selected:
            return 0
        selected, self._selected = self._selected, ()
        self.send(SelectChanged(self._selected))
        removed = 0
        for node in selected:
            parent = node.parent
            if parent is not None and parent.erase_child(node):
                removed += 1
        return removed

    def call_receive_event(self, receiver) -> None:
        """Hand ``receiver`` the current state as change events."""
        receiver.receive_event(CurrentChanged(self._current))
        receiver.receive_event(SelectChanged(self._selected))


class System:
    """Application state holder."""

    def __init__(self) -> None:
        self._bookmark_manager = BookmarkManager()

    @property
    def bookmark_manager(self) -> BookmarkManager:
        """The single bookmark manager."""
        return self._bookmark_manager