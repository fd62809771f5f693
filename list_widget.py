"""List widgets for the sidebar of list names and the items of one list."""

from PySide6.QtWidgets import (
    QListWidget, QListWidgetItem, QAbstractItemView, QSizePolicy
)
from PySide6.QtCore import Qt, Signal

import style
from data import Item, ListCollection
from item_widget import ItemWidget, ListNameWidget
from ordering import display_order


_INDEX_ROLE = Qt.ItemDataRole.UserRole


def _list_stylesheet() -> str:
    return (
        f"QListWidget {{ border: none; background: {style.LIST_BG}; }}"
        f"QListWidget::item {{ background: {style.ITEM_BG}; border: 1px solid {style.ITEM_BORDER};"
        "  border-radius: 4px; margin: 1px; }"
        f"QListWidget::item:selected {{ background: {style.ITEM_SELECTED_BG};"
        f"  border-color: {style.ITEM_SELECTED_BORDER}; }}"
    )


class TodoListWidget(QListWidget):
    """
    Displays the items of one list as ItemWidgets, in display order
    (unchecked first). Each row stores the item's storage index so a toggle
    maps back to the stored position.
    """
    item_toggled = Signal(int)   # storage index

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setSpacing(2)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setStyleSheet(_list_stylesheet())

    def set_items(self, items: tuple[Item, ...]) -> None:
        self.clear()
        for storage_index, item in display_order(items):
            self._append_row(storage_index, item)

    def storage_indices(self) -> list[int]:
        return [self.item(i).data(_INDEX_ROLE) for i in range(self.count())]

    def texts(self) -> list[str]:
        return [self.itemWidget(self.item(i)).text() for i in range(self.count())]

    def _append_row(self, storage_index: int, item: Item) -> QListWidgetItem:
        row = QListWidgetItem()
        row.setData(_INDEX_ROLE, storage_index)
        self.addItem(row)
        w = ItemWidget(item.text, item.checked, self)
        w.toggled.connect(lambda i=storage_index: self.item_toggled.emit(i))
        self.setItemWidget(row, w)
        row.setSizeHint(w.sizeHint())
        return row


class ListNamesWidget(QListWidget):
    """Sidebar listing every list by name, in collection order."""
    list_selected = Signal(int)
    list_delete_requested = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setSpacing(2)
        self.setStyleSheet(_list_stylesheet())
        self.currentRowChanged.connect(self._on_current_row_changed)

    def set_lists(self, collection: ListCollection, selected: int | None) -> None:
        self.blockSignals(True)
        try:
            self.clear()
            for index, lst in enumerate(collection):
                self._append_row(index, lst.name)
            self.setCurrentRow(-1 if selected is None else selected)
        finally:
            self.blockSignals(False)

    def names(self) -> list[str]:
        return [self.itemWidget(self.item(i)).name() for i in range(self.count())]

    def _append_row(self, index: int, name: str) -> None:
        row = QListWidgetItem()
        row.setData(_INDEX_ROLE, index)
        self.addItem(row)
        w = ListNameWidget(name, self)
        w.delete_requested.connect(lambda i=index: self.list_delete_requested.emit(i))
        self.setItemWidget(row, w)
        row.setSizeHint(w.sizeHint())

    def _on_current_row_changed(self, row: int) -> None:
        if row >= 0:
            self.list_selected.emit(row)
