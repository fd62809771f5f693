"""Main application window: list names on the left, selected list on the right."""

import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
    QInputDialog, QLabel, QLineEdit
)
from PySide6.QtCore import QTimer

import style
from config import Settings
from controller import ListsController
from list_widget import ListNamesWidget, TodoListWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: ListsController, settings: Settings | None = None,
                 on_close=None):
        super().__init__()
        self.setWindowTitle(style.WINDOW_TITLE)
        self.resize(*style.WINDOW_SIZE)

        self._controller = controller
        self._settings = settings
        self._on_close = on_close

        self._build_ui()
        self._refresh()

    # ------------------------------------------------------------------ #
    # UI construction                                                      #
    # ------------------------------------------------------------------ #

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        # Sidebar
        sidebar = QVBoxLayout()
        btn_new_list = QPushButton("+ New list")
        btn_new_list.setFixedHeight(28)
        btn_new_list.clicked.connect(self._on_new_list)
        sidebar.addWidget(btn_new_list)

        self._names = ListNamesWidget()
        self._names.setFixedWidth(style.SIDEBAR_WIDTH)
        self._names.list_selected.connect(self._on_list_selected)
        self._names.list_delete_requested.connect(self.delete_list)
        sidebar.addWidget(self._names)
        root.addLayout(sidebar)

        # Detail pane
        self._details = QWidget()
        details = QVBoxLayout(self._details)
        details.setContentsMargins(0, 0, 0, 0)
        details.setSpacing(6)

        self._header = QLabel()
        font = self._header.font()
        font.setPointSize(style.HEADER_POINT_SIZE)
        font.setBold(True)
        self._header.setFont(font)
        details.addWidget(self._header)

        input_row = QHBoxLayout()
        self._item_input = QLineEdit()
        self._item_input.setPlaceholderText("Enter task")
        self._item_input.returnPressed.connect(self._on_add_item)
        btn_add = QPushButton("Add Task")
        btn_add.setFixedHeight(28)
        btn_add.clicked.connect(self._on_add_item)
        input_row.addWidget(self._item_input)
        input_row.addWidget(btn_add)
        details.addLayout(input_row)

        self._items = TodoListWidget()
        self._items.item_toggled.connect(self.toggle_item)
        details.addWidget(self._items)

        root.addWidget(self._details, 1)

    # ------------------------------------------------------------------ #
    # Rendering                                                            #
    # ------------------------------------------------------------------ #

    def _refresh(self):
        state = self._controller.state
        self._names.set_lists(state.collection, state.selected)
        self._refresh_details()

    def _refresh_details(self):
        selected = self._controller.state.selected_list()
        self._details.setVisible(selected is not None)
        if selected is None:
            self._items.clear()
            return
        self._header.setText(selected.name)
        self._items.set_items(selected.items)

    # ------------------------------------------------------------------ #
    # Actions                                                              #
    # ------------------------------------------------------------------ #

    def create_list(self, name: str) -> None:
        if not self._controller.create_list(name):
            logger.info("List %r was not created: blank or already exists", name)
            return
        self._refresh()
        self._item_input.setFocus()

    # Delete and toggle are triggered from row widgets that _refresh rebuilds,
    # so the re-render waits until the emitting widget is back in the event
    # loop.

    def delete_list(self, index: int) -> None:
        if self._controller.delete_list(index):
            QTimer.singleShot(0, self._refresh)

    def add_item(self, text: str) -> None:
        state = self._controller.state
        if state.selected is None:
            return
        if self._controller.add_item(state.selected, text):
            self._item_input.clear()
            self._refresh()

    def toggle_item(self, storage_index: int) -> None:
        state = self._controller.state
        if state.selected is None:
            return
        if self._controller.toggle_item(state.selected, storage_index):
            QTimer.singleShot(0, self._refresh)

    # ------------------------------------------------------------------ #
    # Signal handlers                                                      #
    # ------------------------------------------------------------------ #

    def _on_new_list(self):
        name, ok = QInputDialog.getText(self, "New list", "Enter list name:")
        if ok:
            self.create_list(name)

    def _on_list_selected(self, index: int) -> None:
        if self._controller.select_list(index):
            self._refresh_details()
            self._item_input.setFocus()

    def _on_add_item(self):
        self.add_item(self._item_input.text())

    # ------------------------------------------------------------------ #
    # Save on close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        selected = self._controller.state.selected_list()
        if self._settings is not None:
            self._settings.last_list = selected.name if selected else ""
        if self._on_close is not None:
            self._on_close()
        event.accept()
