from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DECIMAL_POINT = "."


@dataclass
class InputBuffer:
    """
    Characters of the operand currently being typed.

    Holds digits and at most one decimal point. Every mutator returns
    whether the contents actually changed, so callers can skip redrawing
    for refused input.
    """
    _chars: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def append_digit(self, digit: int) -> bool:
        if not 0 <= digit <= 9:
            raise ValueError(f"Digit must be between 0 and 9, got {digit!r}")

        if self._chars == ["0"]:
            if digit == 0:
                return False
            self._chars.pop()

        self._chars.append(str(digit))
        return True

    def append_decimal_point(self) -> bool:
        if self.has_decimal_point():
            return False

        if not self._chars:
            self._chars.append("0")
        self._chars.append(DECIMAL_POINT)
        return True

    def backspace(self) -> bool:
        if not self._chars:
            return False
        self._chars.pop()
        return True

    def clear(self) -> None:
        self._chars.clear()

    def has_decimal_point(self) -> bool:
        return DECIMAL_POINT in self._chars

    def value(self) -> Optional[float]:
        """Parsed value of the contents, or None when nothing has been typed."""
        if not self._chars:
            return None
        return float(self.text)
