"""
Calculator State (Data Model)
=============================
This module defines the central data structure of a running calculator.

Why is this file needed?
------------------------
1. State Management: It holds the typed digits, both operands, the pending
   operator and the "result is displayed" flag in one place.
2. Decoupling: The engine writes to this object; nothing else mutates it.

Classes:
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from desktopcalc.model.input_buffer import InputBuffer
from desktopcalc.model.operators import Operator

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    Everything the engine needs to evaluate a running left-to-right expression.

    num1 is the left operand (or the accumulator after a computation),
    num2 the right operand of the pending operator.
    """
    buffer: InputBuffer = field(default_factory=InputBuffer)
    num1: Optional[float] = None
    num2: Optional[float] = None
    operator: Optional[Operator] = None
    has_result: bool = False

    def reset(self) -> None:
        """Return to the initial state."""
        self.buffer.clear()
        self.num1 = None
        self.num2 = None
        self.operator = None
        self.has_result = False
        logger.info("Calculator state has been reset.")

    def is_initial(self) -> bool:
        return (
            not self.buffer
            and self.num1 is None
            and self.num2 is None
            and self.operator is None
            and not self.has_result
        )
