"""
Expression Engine
=================
Interprets user commands against the CalculatorState and decides how the
operands, the pending operator and the result flag evolve.

The engine is strictly left-to-right: an operator pressed while another one
is pending with a freshly typed right operand evaluates the pending operation
first ("chaining"). Division by zero is intercepted before any arithmetic
runs, resets the calculator and shows a distinguished error state instead of
a number.

Rendering is delegated to a `Display`; the engine never reads text back from
it.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from desktopcalc.config import (
    DIV_BY_ZERO_BOTTOM_TEXT,
    DIV_BY_ZERO_TOP_TEXT,
    EMPTY_ENTRY_TEXT,
)
from desktopcalc.model.commands import Command, CommandKind
from desktopcalc.model.input_buffer import DECIMAL_POINT
from desktopcalc.model.operators import Operator, compute, format_number, is_division_by_zero
from desktopcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class Display(Protocol):
    """Receiver of render requests (the two display lines and the point key)."""
    def render_top_line(self, text: str) -> None: ...
    def render_bottom_line(self, text: str) -> None: ...
    def set_decimal_point_available(self, enabled: bool) -> None: ...


class DivisionByZeroError(ArithmeticError):
    """Raised internally when a divide is about to run with a zero divisor."""


class ExpressionEngine:
    def __init__(self, display: Optional[Display] = None, state: Optional[CalculatorState] = None) -> None:
        self.state: CalculatorState = state if state is not None else CalculatorState()
        self.display: Optional[Display] = display
        self._bottom_text: str = EMPTY_ENTRY_TEXT

    @property
    def bottom_text(self) -> str:
        """Text most recently sent to the bottom line."""
        return self._bottom_text

    def attach_display(self, display: Display) -> None:
        """Connect a display and bring it up to date with the current state."""
        self.display = display
        self.refresh()

    def refresh(self) -> None:
        self._render_entry()
        self._render_expression()

    # ---- inbound commands ----

    def handle(self, command: Command) -> None:
        logger.debug(f"Handling {command}")
        match command.kind:
            case CommandKind.DIGIT:
                if command.digit is None:
                    raise ValueError("Digit command without a digit.")
                self.digit(command.digit)
            case CommandKind.DECIMAL_POINT:
                self.decimal_point()
            case CommandKind.OPERATOR:
                if command.operator is None:
                    raise ValueError("Operator command without an operator.")
                self.operator(command.operator)
            case CommandKind.EQUALS:
                self.equals()
            case CommandKind.CLEAR:
                self.clear()
            case CommandKind.BACKSPACE:
                self.backspace()
            case _:
                raise ValueError(f"Unknown command kind: {command.kind!r}")

    def digit(self, value: int) -> None:
        self._start_fresh_after_result()
        if not self.state.buffer.append_digit(value):
            return
        self.refresh()

    def decimal_point(self) -> None:
        self._start_fresh_after_result()
        if not self.state.buffer.append_decimal_point():
            return
        self.refresh()

    def backspace(self) -> None:
        if not self.state.buffer.backspace():
            return
        self.refresh()

    def operator(self, op: Operator) -> None:
        s = self.state

        if s.num1 is not None and s.operator is not None and s.buffer and not s.has_result:
            # Chaining: evaluate the pending operation, keep the result as accumulator
            s.num2 = s.buffer.value()
            try:
                result = self._evaluate()
            except DivisionByZeroError:
                self._show_division_by_zero()
                return

            s.num1 = result
            s.num2 = None
            s.buffer.clear()
            self._render_bottom(format_number(result))
        else:
            self._capture_operand()

        s.operator = op
        s.has_result = False
        s.buffer.clear()
        self._render_expression()

    def equals(self) -> None:
        s = self.state
        if s.num1 is None or s.operator is None:
            return

        if s.buffer:
            s.num2 = s.buffer.value()
        elif s.num2 is None:
            return

        try:
            result = self._evaluate()
        except DivisionByZeroError:
            self._show_division_by_zero()
            return

        # Snapshot the full expression before num1 is overwritten
        self._render_top(f"{format_number(s.num1)} {s.operator.symbol} {format_number(s.num2)}")
        logger.debug(f"{s.num1} {s.operator} {s.num2} = {result}")

        s.num1 = result
        s.has_result = True
        s.buffer.clear()
        s.operator = None
        s.num2 = None
        self._render_bottom(format_number(result))

    def clear(self) -> None:
        self.state.reset()
        self.refresh()

    # ---- helpers ----

    def _start_fresh_after_result(self) -> None:
        if self.state.has_result:
            self.state.reset()

    def _capture_operand(self) -> None:
        s = self.state
        parsed = s.buffer.value()
        if parsed is None:
            return
        if s.num1 is None:
            s.num1 = parsed
        elif s.operator is not None and not s.has_result:
            s.num2 = parsed

    def _evaluate(self) -> float:
        s = self.state
        if s.num1 is None or s.num2 is None or s.operator is None:
            raise ValueError("Cannot evaluate an incomplete expression.")
        if is_division_by_zero(s.num2, s.operator):
            raise DivisionByZeroError(f"{s.num1} / 0")
        return compute(s.num1, s.num2, s.operator)

    def _show_division_by_zero(self) -> None:
        logger.warning("Division by zero, resetting calculator.")
        self.state.reset()
        self._render_top(DIV_BY_ZERO_TOP_TEXT)
        self._render_bottom(DIV_BY_ZERO_BOTTOM_TEXT)

    # ---- outbound render requests ----

    def _render_entry(self) -> None:
        s = self.state
        if s.buffer:
            text = s.buffer.text
        elif s.num1 is not None and s.has_result:
            text = format_number(s.num1)
        else:
            text = EMPTY_ENTRY_TEXT
        self._render_bottom(text)

    def _render_expression(self) -> None:
        s = self.state
        text = ""
        if s.num1 is not None:
            text += format_number(s.num1)
        if s.operator is not None:
            text += f" {s.operator.symbol} "
            if not s.has_result:
                if s.buffer:
                    text += s.buffer.text
                elif s.num2 is not None:
                    text += format_number(s.num2)
        self._render_top(text)

    def _render_top(self, text: str) -> None:
        if self.display is not None:
            self.display.render_top_line(text)

    def _render_bottom(self, text: str) -> None:
        self._bottom_text = text
        if self.display is not None:
            self.display.render_bottom_line(text)
            self.display.set_decimal_point_available(self.decimal_point_available())

    def decimal_point_available(self) -> bool:
        return not (self.state.buffer.has_decimal_point() or DECIMAL_POINT in self._bottom_text)
