"""
Keypad Dispatch
===============
Describes every key of the keypad and resolves a pressed key into a Command.

Why is this file needed?
------------------------
1. Layout: The view builds its button grid from KEYPAD_LAYOUT instead of
   hardcoding buttons, so rows and labels live in one table.
2. Routing: `command_for` turns the (type, action, value) description of a
   key into the engine's Command, without any Qt involvement.
"""
from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from desktopcalc.model.commands import Command
from desktopcalc.model.operators import Operator

logger = logging.getLogger(__name__)

POINT_VALUE = "point"


class KeyType(StrEnum):
    DIGIT = "digit"
    OPERATOR = "operator"
    COMMAND = "command"


@dataclass(frozen=True)
class KeySpec:
    """One keypad button: what it sends and where it sits in the grid."""
    type: KeyType
    action: str
    value: str
    label: str
    row: int
    column: int
    column_span: int = 1


def _digit(value: int, row: int, column: int, column_span: int = 1) -> KeySpec:
    return KeySpec(KeyType.DIGIT, "digit", str(value), str(value), row, column, column_span)


def _operator(op: Operator, row: int, column: int) -> KeySpec:
    return KeySpec(KeyType.OPERATOR, op.value, op.value, op.symbol, row, column)


KEYPAD_LAYOUT: tuple[KeySpec, ...] = (
    KeySpec(KeyType.COMMAND, "clear", "", "C", 0, 0, column_span=2),
    KeySpec(KeyType.COMMAND, "backspace", "", "⌫", 0, 2),
    _operator(Operator.DIVIDE, 0, 3),
    _digit(7, 1, 0), _digit(8, 1, 1), _digit(9, 1, 2),
    _operator(Operator.MULTIPLY, 1, 3),
    _digit(4, 2, 0), _digit(5, 2, 1), _digit(6, 2, 2),
    _operator(Operator.SUBTRACT, 2, 3),
    _digit(1, 3, 0), _digit(2, 3, 1), _digit(3, 3, 2),
    _operator(Operator.ADD, 3, 3),
    _digit(0, 4, 0, column_span=2),
    KeySpec(KeyType.DIGIT, "digit", POINT_VALUE, ".", 4, 2),
    KeySpec(KeyType.COMMAND, "equals", "", "=", 4, 3),
)


def command_for(key_type: str, action: str, value: str = "") -> Optional[Command]:
    """
    Resolve a key description into a Command.

    Returns None for descriptions that do not map to any command; the
    caller ignores those.
    """
    match key_type:
        case KeyType.DIGIT:
            if value == POINT_VALUE:
                return Command.decimal_point()
            if len(value) == 1 and value in string.digits:
                return Command.of_digit(int(value))
        case KeyType.OPERATOR:
            try:
                op = Operator(action)
            except ValueError:
                logger.debug(f"Unknown operator action '{action}', using add.")
                op = Operator.ADD
            return Command.of_operator(op)
        case KeyType.COMMAND:
            match action:
                case "clear":
                    return Command.clear()
                case "backspace":
                    return Command.backspace()
                case "equals":
                    return Command.equals()

    logger.debug(f"No command for key ({key_type!r}, {action!r}, {value!r}).")
    return None


def command_for_key(key: KeySpec) -> Optional[Command]:
    return command_for(key.type, key.action, key.value)
