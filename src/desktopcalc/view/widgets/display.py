from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QSizePolicy

from desktopcalc.config import EMPTY_ENTRY_TEXT


class DisplayPanel(QWidget):
    """Two right-aligned rows: the expression on top, the current entry below."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(2)

        self.top_row = QLabel("", self)
        self.top_row.setObjectName("screenTopRow")
        self.bottom_row = QLabel(EMPTY_ENTRY_TEXT, self)
        self.bottom_row.setObjectName("screenBottomRow")

        for label in (self.top_row, self.bottom_row):
            label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            layout.addWidget(label)

    def set_top_text(self, text: str) -> None:
        self.top_row.setText(text)

    def set_bottom_text(self, text: str) -> None:
        self.bottom_row.setText(text)
