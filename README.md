# bookmark-observer

This is a small bookmark library. Its parts talk to each other through typed events and observers.

## Modules

### `bookmark_observer.events`

- `EventSender` delivers events to its receivers. It calls them in the order they were connected.
  - `connect(receiver)` returns a `Connection`.
  - `send(event)` delivers an event.
  - `receiver_count()` returns the number of live connections.
- `EventReceiver` handles an event in `receive_event`. By default, an event of class `SomeEvent` is routed to the receiver's `on_some_event` method, if it has one.
- `Connection` has `connected()` and `disconnect()`. It can also be used as a context manager, which disconnects on exit.
- `auto_connect(sender, receiver, key)` keeps one connection per receiver and key. It drops the old connection first. Passing `None` as the sender just drops it.

### `bookmark_observer.node`

- `BookmarkKind` is an enum with the values `ROOT`, `FOLDER` and `URL`.
- `BookmarkNode` is the abstract tree node. It is an `EventSender`. It has:
  - the properties `kind`, `name` and `parent`;
  - the methods `set_name`, `child`, `is_insertable`, `insert_child`, `push_child`, `erase_child_at`, `erase_child`, `children_size` and `accept`.
- Events sent to the changed node itself:
  - `NameChanged`
  - `ChildInserted`
  - `ChildErased`
- `NameChangedRecursive`, `ChildInsertedRecursive` and `ChildErasedRecursive` are sent to the changed node and to every one of its ancestors.
- `BookmarkNodeVisitor` declares `visit_root`, `visit_folder` and `visit_url`. `BookmarkNode.accept` calls the one that matches the node.

### `bookmark_observer.nodes`

- `RootNode` has no name and no parent. Its name cannot be changed.
- `FolderNode(name)` holds children.
- `UrlNode(name, url)` holds no children.
  - `set_url(url)` sends `UrlChanged` through the node's separate `url_events` sender, not through the node itself.

### `bookmark_observer.manager`

- `BookmarkManager` owns a `RootNode` (`root_bookmark`) and tracks `current_node` and `select_nodes`.
  - `set_current_node` sends `CurrentChanged`.
  - `set_select_nodes` sends `SelectChanged`.
  - `delete_current_node` and `delete_select_nodes` remove nodes from the tree.
  - `call_receive_event(receiver)` hands a receiver the current state as events.
- `System` holds one `BookmarkManager` as `bookmark_manager`.

### `bookmark_observer.item_model`

- `BookmarkItemModelTree(root_node)` is a headless row/column model (`Column.NAME`, `Column.URL`). It mirrors the tree and follows its recursive events.
  - `model_index`, `bookmark_node`, `index`, `parent`, `row_count`, `column_count`, `header_data`, `data`, `set_data` and `flags` work with `ModelIndex`, `Role`, `Orientation` and `ItemFlag`.
  - The model is itself an `EventSender`. It reports its own changes as `DataChanged`, `RowsInserted` and `RowsRemoved`.
  - `close()` stops following the tree.
  - For folders, the decoration role returns the string `"folder"`.

## Install

```
pip install .
```

## Example

```python
from bookmark_observer.manager import System
from bookmark_observer.nodes import FolderNode, UrlNode
from bookmark_observer.item_model import BookmarkItemModelTree, Column, Role

system = System()
manager = system.bookmark_manager
root = manager.root_bookmark

model = BookmarkItemModelTree(root)

folder = FolderNode("News")
root.push_child(folder)
folder.push_child(UrlNode("Example", "https://example.com"))

top = model.index(0, Column.NAME, None)
print(model.data(top, Role.DISPLAY))  # "News"
print(model.row_count(top))           # 1

manager.set_current_node(folder)
manager.delete_current_node()
print(model.row_count(None))          # 0
```

## What it does not do

This is a library only. It does not provide:

- a command;
- windows, tool bars, editors or dialogs for the tree;
- a way to open a URL;
- storage. Bookmarks live in memory and are not saved or loaded.

## Tests

```
pip install .[test]
pytest
```