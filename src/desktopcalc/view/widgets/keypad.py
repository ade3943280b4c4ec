from __future__ import annotations

import logging

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy

from desktopcalc.controller.dispatch import KEYPAD_LAYOUT, KeySpec, KeyType, POINT_VALUE, command_for_key

logger = logging.getLogger(__name__)


class Keypad(QWidget):
    """
    Button grid built from KEYPAD_LAYOUT.

    Each button carries its KeySpec; a click is resolved to a Command and
    emitted through `command_triggered`.
    """
    command_triggered = Signal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.grid = QGridLayout(self)
        self.grid.setSpacing(4)
        self._buttons: dict[KeySpec, QPushButton] = {}

        for key in KEYPAD_LAYOUT:
            btn = QPushButton(key.label, self)
            btn.setProperty("keyType", key.type.value)
            btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            btn.clicked.connect(lambda _checked=False, k=key: self._on_key_clicked(k))
            self.grid.addWidget(btn, key.row, key.column, 1, key.column_span)
            self._buttons[key] = btn

    def button_for(self, key: KeySpec) -> QPushButton:
        return self._buttons[key]

    def point_button(self) -> QPushButton:
        for key, btn in self._buttons.items():
            if key.type is KeyType.DIGIT and key.value == POINT_VALUE:
                return btn
        raise KeyError("Keypad has no decimal point key.")

    def _on_key_clicked(self, key: KeySpec) -> None:
        command = command_for_key(key)
        if command is None:
            logger.debug(f"Ignoring key '{key.label}'.")
            return
        self.command_triggered.emit(command)
