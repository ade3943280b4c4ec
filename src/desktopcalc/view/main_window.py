"""
Main Application Window
=======================
The GUI container holding the two-row display and the keypad.

Why is this file needed?
------------------------
1. Layout: It stacks the display above the keypad.
2. Routing: It forwards keypad commands to the ExpressionEngine and acts as
   the engine's Display, applying every render request to the widgets.
"""
import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from desktopcalc.config import VISIBLE_APP_NAME, WINDOW_SIZE
from desktopcalc.model.commands import Command
from desktopcalc.model.engine import ExpressionEngine
from desktopcalc.view.widgets.display import DisplayPanel
from desktopcalc.view.widgets.keypad import Keypad

logger = logging.getLogger(__name__)


class CalculatorWindow(QMainWindow):
    def __init__(self, engine: ExpressionEngine) -> None:
        super().__init__()
        self.engine: ExpressionEngine = engine

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.display_panel = DisplayPanel(main_widget)
        main_layout.addWidget(self.display_panel, 0)

        self.keypad = Keypad(main_widget)
        main_layout.addWidget(self.keypad, 1)

        # --- SIGNAL CONNECTIONS ---
        self.keypad.command_triggered.connect(self.on_command)

        # Initial Render
        self.engine.attach_display(self)

    @Slot(object)
    def on_command(self, command: Command) -> None:
        self.engine.handle(command)

    # --- Display protocol ---

    def render_top_line(self, text: str) -> None:
        self.display_panel.set_top_text(text)

    def render_bottom_line(self, text: str) -> None:
        self.display_panel.set_bottom_text(text)

    def set_decimal_point_available(self, enabled: bool) -> None:
        self.keypad.point_button().setEnabled(enabled)
