"""Binary operators, arithmetic and number formatting."""
import math
from decimal import Context, Decimal, ROUND_HALF_UP
from enum import StrEnum

from desktopcalc.config import RESULT_DECIMAL_PLACES

# Wide enough to quantize any finite float
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Operator(StrEnum):
    """The four binary operators the keypad offers."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        """Glyph shown on the expression line."""
        match self:
            case Operator.DIVIDE:
                return "÷"
            case Operator.MULTIPLY:
                return "×"
            case Operator.SUBTRACT:
                return "−"
            case Operator.ADD:
                return "+"


# ------------------------------------------------------------------------------
# Arithmetic
# ------------------------------------------------------------------------------
def operate(a: float, b: float, op: Operator) -> float:
    """
    Apply `op` to the two operands.

    The caller is responsible for refusing a zero divisor; this function
    does not implement any division-by-zero policy.
    """
    match op:
        case Operator.ADD:
            return a + b
        case Operator.SUBTRACT:
            return a - b
        case Operator.MULTIPLY:
            return a * b
        case Operator.DIVIDE:
            return a / b
    raise ValueError(f"Unknown operator: {op!r}")


def round_result(value: float, places: int = RESULT_DECIMAL_PLACES) -> float:
    """
    Round half away from zero to `places` fractional digits.

    Works on the shortest decimal representation of the float, so 1.0005
    becomes 1.001 even though its binary value is slightly below the tie.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, context=_ROUNDING_CONTEXT))


def compute(a: float, b: float, op: Operator) -> float:
    """Operate and round, as surfaced to the user and reused as accumulator."""
    return round_result(operate(a, b, op))


def is_division_by_zero(b: float, op: Operator) -> bool:
    return op is Operator.DIVIDE and b == 0


# ------------------------------------------------------------------------------
# Formatting
# ------------------------------------------------------------------------------
def format_number(value: float) -> str:
    """Display text of a value: `20` rather than `20.0`, `0` for negative zero."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
