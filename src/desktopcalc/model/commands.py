"""Inbound commands handed from the dispatch layer to the engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from desktopcalc.model.operators import Operator


class CommandKind(StrEnum):
    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    BACKSPACE = "backspace"


@dataclass(frozen=True)
class Command:
    """A discriminated user action with its optional payload."""
    kind: CommandKind
    digit: Optional[int] = None
    operator: Optional[Operator] = None

    @classmethod
    def of_digit(cls, value: int) -> Command:
        return cls(CommandKind.DIGIT, digit=value)

    @classmethod
    def decimal_point(cls) -> Command:
        return cls(CommandKind.DECIMAL_POINT)

    @classmethod
    def of_operator(cls, op: Operator) -> Command:
        return cls(CommandKind.OPERATOR, operator=op)

    @classmethod
    def equals(cls) -> Command:
        return cls(CommandKind.EQUALS)

    @classmethod
    def clear(cls) -> Command:
        return cls(CommandKind.CLEAR)

    @classmethod
    def backspace(cls) -> Command:
        return cls(CommandKind.BACKSPACE)
