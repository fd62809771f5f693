"""Visual style constants: edit here to tweak the app's appearance."""

from PySide6.QtGui import QColor

# ── Window ────────────────────────────────────────────────────────────────────
WINDOW_TITLE = "Checklists"
WINDOW_SIZE = (700, 500)
SIDEBAR_WIDTH = 200

# ── List names (sidebar) ──────────────────────────────────────────────────────
LIST_BG = "#f5f5f5"
ITEM_BG = "white"
ITEM_BORDER = "#ddd"
ITEM_SELECTED_BG = "#e3f2fd"
ITEM_SELECTED_BORDER = "#90caf9"
DELETE_BUTTON_COLOR = "#b0b0b0"
DELETE_BUTTON_HOVER_COLOR = "#d32f2f"

# ── Items ─────────────────────────────────────────────────────────────────────
ITEM_ROW_HEIGHT = 28
CHECKED_TEXT_COLOR = QColor("#9e9e9e")    # greyed out + struck through

# ── Header ────────────────────────────────────────────────────────────────────
HEADER_POINT_SIZE = 14
