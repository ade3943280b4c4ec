from desktopcalc.controller.dispatch import KEYPAD_LAYOUT, KeyType, command_for, command_for_key
from desktopcalc.model.commands import Command, CommandKind
from desktopcalc.model.operators import Operator


def test_digit_keys_resolve_to_digit_commands():
    assert command_for("digit", "digit", "7") == Command.of_digit(7)


def test_point_key_resolves_to_decimal_point():
    assert command_for("digit", "digit", "point") == Command.decimal_point()


def test_operator_keys_resolve_by_action():
    assert command_for("operator", "divide") == Command.of_operator(Operator.DIVIDE)


def test_unknown_operator_action_falls_back_to_add():
    assert command_for("operator", "modulo") == Command.of_operator(Operator.ADD)


def test_command_keys():
    assert command_for("command", "clear").kind is CommandKind.CLEAR
    assert command_for("command", "backspace").kind is CommandKind.BACKSPACE
    assert command_for("command", "equals").kind is CommandKind.EQUALS


def test_unknown_descriptions_resolve_to_none():
    assert command_for("command", "memory-recall") is None
    assert command_for("digit", "digit", "12") is None
    assert command_for("slider", "x") is None


def test_layout_covers_every_command_once():
    commands = [command_for_key(key) for key in KEYPAD_LAYOUT]
    assert None not in commands
    assert len(set(commands)) == len(commands)
    digits = {c.digit for c in commands if c.kind is CommandKind.DIGIT}
    assert digits == set(range(10))
    operators = {c.operator for c in commands if c.kind is CommandKind.OPERATOR}
    assert operators == set(Operator)


def test_layout_cells_do_not_overlap():
    cells = set()
    for key in KEYPAD_LAYOUT:
        for column in range(key.column, key.column + key.column_span):
            assert (key.row, column) not in cells
            cells.add((key.row, column))


def test_operator_keys_are_labelled_with_symbols():
    labels = {key.action: key.label for key in KEYPAD_LAYOUT if key.type is KeyType.OPERATOR}
    assert labels == {op.value: op.symbol for op in Operator}
