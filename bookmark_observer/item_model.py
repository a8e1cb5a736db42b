"""Table-tree view model over a bookmark tree, kept in step with its events."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from bookmark_observer.events import EventReceiver, EventSender
from bookmark_observer.node import (
    BookmarkKind,
    BookmarkNode,
    ChildErasedRecursive,
    ChildInsertedRecursive,
    NameChangedRecursive,
)
from bookmark_observer.nodes import UrlNode

FOLDER_ICON = "folder"


class Column(enum.IntEnum):
    """Columns shown by the model."""

    NAME = 0
    URL = 1


COLUMN_COUNT = len(Column)


class Role(enum.IntEnum):
    """What kind of data a view asks for."""

    DISPLAY = 0
    DECORATION = 1
    EDIT = 2


class Orientation(enum.IntEnum):
    """Header orientation."""

    HORIZONTAL = 1
    VERTICAL = 2


class ItemFlag(enum.IntFlag):
    """What a view may do with an item."""

    NONE = 0
    SELECTABLE = 1
    EDITABLE = 2
    ENABLED = 32


@dataclass(frozen=True)
class ModelIndex:
    """Position of an item: row and column under its parent, plus its node id.

    The default index is invalid and stands for the top of the tree.
    """

    row: int = -1
    column: int = -1
    internal_id: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.row >= 0 and self.column >= 0 and self.internal_id is not None


@dataclass(frozen=True)
class DataChanged:
    """Items from ``top_left`` to ``bottom_right`` show new data."""

    top_left: ModelIndex
    bottom_right: ModelIndex


@dataclass(frozen=True)
class RowsInserted:
    """Rows ``first`` to ``last`` were inserted under ``parent``."""

    parent: ModelIndex
    first: int
    last: int


@dataclass(frozen=True)
class RowsRemoved:
    """Rows ``first`` to ``last`` were removed from under ``parent``."""

    parent: ModelIndex
    first: int
    last: int


@dataclass
class _ItemNode:
    bookmark_node: BookmarkNode | None = None
    children: list[int] = field(default_factory=list)


class BookmarkItemModelTree(EventSender, EventReceiver):
    """Presents a bookmark tree as rows and columns.

    The model follows the tree through the recursive events of its root
    and reports its own changes to its receivers as ``DataChanged``,
    ``RowsInserted`` and ``RowsRemoved``.
    """

    def __init__(self, root_node: BookmarkNode) -> None:
        EventSender.__init__(self)
        self._node_map: dict[int, _ItemNode] = {}
        self._root = _ItemNode(
            children=[self._make_item_node(child) for child in self._children_of(root_node)]
        )
        self._root.bookmark_node = root_node
        self._connection = root_node.connect(self)

    @property
    def root_node(self) -> BookmarkNode:
        """The bookmark node at the top of the model."""
        return self._root.bookmark_node

    def close(self) -> None:
        """Stop following the bookmark tree."""
        self._connection.disconnect()

    def model_index(self, node: BookmarkNode | None, column: int = 0) -> ModelIndex:
        """Return the index of ``node``; invalid for the root or unknown nodes."""
        item, row = self._find(node)
        if item is None or item is self._root:
            return ModelIndex()
        return ModelIndex(row, column, id(node))

    def bookmark_node(self, index: ModelIndex | None) -> BookmarkNode | None:
        """Return the node at ``index``; the root for an invalid index."""
        return self._item_node(index).bookmark_node

    def index(self, row: int, column: int, parent: ModelIndex | None = None) -> ModelIndex:
        """Return the index of the item at ``row`` and ``column`` under ``parent``."""
        if not self._has_index(row, column, parent):
            return ModelIndex()
        item = self._item_node(parent)
        return ModelIndex(row, column, item.children[row])

    def parent(self, index: ModelIndex | None) -> ModelIndex:
        """Return the index of the parent of the item at ``index``."""
        node = self.bookmark_node(index)
        if node is not None:
            node = node.parent
        return self.model_index(node)

    def row_count(self, parent: ModelIndex | None = None) -> int:
        """Return the number of children under ``parent``."""
        return len(self._item_node(parent).children)

    def column_count(self, parent: ModelIndex | None = None) -> int:
        """Return the number of columns."""
        return COLUMN_COUNT

    def header_data(
        self, section: int, orientation: Orientation, role: Role = Role.DISPLAY
    ) -> str | None:
        """Return the header title of a column."""
        if orientation == Orientation.VERTICAL or role != Role.DISPLAY:
            return None
        if section == Column.NAME:
            return "Name"
        if section == Column.URL:
            return "Url"
        return None

    def data(self, index: ModelIndex | None, role: Role = Role.DISPLAY) -> Any:
        """Return what the item at ``index`` shows for ``role``."""
        if index is None or not index.is_valid:
            return None
        node = self.bookmark_node(index)
        if node is None:
            return None
        if index.column == Column.NAME:
            if role in (Role.DISPLAY, Role.EDIT):
                return node.name
            if role == Role.DECORATION and node.kind is BookmarkKind.FOLDER:
                return FOLDER_ICON
        elif index.column == Column.URL:
            if isinstance(node, UrlNode) and role in (Role.DISPLAY, Role.EDIT):
                return node.url
        return None

    def set_data(self, index: ModelIndex | None, value: Any, role: Role = Role.EDIT) -> bool:
        """Edit the item at ``index``; return whether anything changed."""
        if index is None or not index.is_valid:
            return False
        node = self.bookmark_node(index)
        if node is None:
            return False
        if index.column == Column.NAME:
            return node.set_name(str(value))
        if index.column == Column.URL and isinstance(node, UrlNode):
            return node.set_url(str(value))
        return False

    def flags(self, index: ModelIndex | None) -> ItemFlag:
        """Return what a view may do with the item at ``index``."""
        result = ItemFlag.SELECTABLE | ItemFlag.ENABLED
        node = self.bookmark_node(index)
        if node is not None and index is not None:
            if index.column == Column.NAME:
                result |= ItemFlag.EDITABLE
            elif index.column == Column.URL and node.kind is BookmarkKind.URL:
                result |= ItemFlag.EDITABLE
        return result

    def receive_event(self, event: Any) -> None:
        """Follow a change of the bookmark tree."""
        if isinstance(event, NameChangedRecursive):
            index = self.model_index(event.node, Column.NAME)
            self.send(DataChanged(index, index))
        elif isinstance(event, ChildInsertedRecursive):
            parent_index = self.model_index(event.node)
            item, _ = self._find(event.node)
            if item is None:
                return
            item.children.insert(event.index, self._make_item_node(event.child))
            self.send(RowsInserted(parent_index, event.index, event.index))
        elif isinstance(event, ChildErasedRecursive):
            parent_index = self.model_index(event.node)
            item, _ = self._find(event.node)
            if item is None or event.index >= len(item.children):
                return
            del item.children[event.index]
            self._forget(id(event.child))
            self.send(RowsRemoved(parent_index, event.index, event.index))

    @staticmethod
    def _children_of(node: BookmarkNode) -> list[BookmarkNode]:
        children = (node.child(i) for i in range(node.children_size()))
        return [child for child in children if child is not None]

    def _make_item_node(self, bookmark_node: BookmarkNode) -> int:
        node_id = id(bookmark_node)
        item = _ItemNode(bookmark_node=bookmark_node)
        self._node_map[node_id] = item
        item.children = [self._make_item_node(child) for child in self._children_of(bookmark_node)]
        return node_id

    def _forget(self, node_id: int) -> None:
        item = self._node_map.pop(node_id, None)
        if item is not None:
            for child_id in item.children:
                self._forget(child_id)

    def _item_node(self, index: ModelIndex | None) -> _ItemNode:
        if index is None or index.internal_id is None:
            return self._root
        return self._node_map.get(index.internal_id, self._root)

    def _has_index(self, row: int, column: int, parent: ModelIndex | None) -> bool:
        if row < 0 or column < 0:
            return False
        return row < self.row_count(parent) and column < self.column_count(parent)

    def _find(self, node: BookmarkNode | None) -> tuple[_ItemNode | None, int]:
        if node is None:
            return None, -1
        if node is self._root.bookmark_node:
            return self._root, -1
        parent_item, _ = self._find(node.parent)
        if parent_item is None:
            return None, -1
        node_id = id(node)
        try:
            row = parent_item.children.index(node_id)
        except ValueError:
            return None, -1
        item = self._node_map.get(node_id)
        if item is None:
            return None, -1
        return item, row