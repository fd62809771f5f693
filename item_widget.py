"""Row widgets: a checkable todo item and a list name with a delete button."""

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QCheckBox, QLabel, QToolButton, QSizePolicy
)
from PySide6.QtCore import Signal, QSize
from PySide6.QtGui import QPalette

import style


class ItemWidget(QWidget):
    """A single todo item row: [checkbox + text]."""
    toggled = Signal()

    def __init__(self, text: str, checked: bool, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(4)

        self.checkbox = QCheckBox(text, self)
        self.checkbox.setChecked(checked)
        # Emit on user clicks only; the model decides the new state
        self.checkbox.clicked.connect(lambda _checked: self.toggled.emit())
        layout.addWidget(self.checkbox)
        layout.addStretch()

        if checked:
            font = self.checkbox.font()
            font.setStrikeOut(True)
            self.checkbox.setFont(font)
            palette = self.checkbox.palette()
            palette.setColor(QPalette.ColorRole.WindowText, style.CHECKED_TEXT_COLOR)
            self.checkbox.setPalette(palette)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Minimum)

    def text(self) -> str:
        return self.checkbox.text()

    def sizeHint(self) -> QSize:
        hint = super().sizeHint()
        return QSize(hint.width(), max(hint.height(), style.ITEM_ROW_HEIGHT))


class ListNameWidget(QWidget):
    """Sidebar row: [name | × delete button]."""
    delete_requested = Signal()

    def __init__(self, name: str, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 2, 2)
        layout.setSpacing(4)

        self.label = QLabel(name, self)
        self.delete_button = QToolButton(self)
        self.delete_button.setText("×")
        self.delete_button.setToolTip("Delete list")
        self.delete_button.setAutoRaise(True)
        self.delete_button.setStyleSheet(
            f"QToolButton {{ color: {style.DELETE_BUTTON_COLOR}; border: none; }}"
            f"QToolButton:hover {{ color: {style.DELETE_BUTTON_HOVER_COLOR}; }}"
        )
        self.delete_button.clicked.connect(lambda _checked=False: self.delete_requested.emit())

        layout.addWidget(self.label)
        layout.addStretch()
        layout.addWidget(self.delete_button)

    def name(self) -> str:
        return self.label.text()

    def sizeHint(self) -> QSize:
        hint = super().sizeHint()
        return QSize(hint.width(), max(hint.height(), style.ITEM_ROW_HEIGHT))
