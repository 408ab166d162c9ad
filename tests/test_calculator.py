import pytest

from distcalc.calculator import Calculator
from distcalc.errors import DivisionByZero
from distcalc.operation import OpKind, Operation, parse_operation


def add(n):
    return Operation(OpKind.ADD, n)


def sub(n):
    return Operation(OpKind.SUB, n)


def mul(n):
    return Operation(OpKind.MUL, n)


def div(n):
    return Operation(OpKind.DIV, n)


def run(*ops):
    calculator = Calculator()
    for op in ops:
        calculator.apply(op)
    return calculator.value


def test_create_calculator():
    assert Calculator().value == 0


def test_apply_add():
    assert run(add(10)) == 10


def test_apply_sub_10_current_value_10():
    assert run(add(10), sub(10)) == 0


def test_apply_sub_0_current_value_0():
    assert run(sub(0)) == 0


def test_apply_sub_0_current_value_10():
    assert run(add(10), sub(0)) == 10


def test_apply_sub_10_current_value_0():
    assert run(sub(10)) == 246


def test_apply_mul():
    assert run(add(10), mul(2)) == 20


def test_apply_mul_1():
    assert run(add(10), mul(1)) == 10


def test_apply_mul_0():
    assert run(add(10), mul(0)) == 0


def test_apply_div():
    assert run(add(10), div(2)) == 5


def test_apply_div_division_by_zero():
    calculator = Calculator()
    with pytest.raises(DivisionByZero):
        calculator.apply(div(0))


def test_division_by_zero_keeps_value():
    calculator = Calculator()
    calculator.apply(add(10))
    with pytest.raises(DivisionByZero):
        calculator.apply(div(0))
    assert calculator.value == 10


def test_apply_div_current_value_10_divisor_1():
    assert run(add(10), div(1)) == 10


def test_apply_div_current_value_0_divisor_10():
    assert run(div(10)) == 0


def test_apply_div_current_value_10_divisor_10():
    assert run(add(10), div(10)) == 1


def test_combined_operations():
    assert run(add(10), add(5), sub(3), mul(2), div(4)) == 6


def test_get_returns_value_and_others_return_none():
    calculator = Calculator()
    assert calculator.apply(add(10)) is None
    assert calculator.apply(Operation(OpKind.GET)) == 10


def parsed(*lines):
    return run(*(parse_operation(line) for line in lines))


@pytest.mark.parametrize(
    "lines, expected",
    [
        (["OP + 10"], 10),
        (["OP - 10"], 246),
        (["OP * 10"], 0),
        (["OP / 10"], 0),
        (["OP + 255"], 255),
        (["OP + 250", "OP + 10"], 4),
        (["OP - 1"], 255),
        (["OP + 200", "OP * 0"], 0),
        (["OP + 200", "OP * 2"], 144),
        (["OP + 100", "OP / 25"], 4),
        (["OP + 7", "OP / 2"], 3),
        (["OP + 50", "OP - 20", "OP * 3", "OP / 2"], 45),
    ],
)
def test_parse_and_apply(lines, expected):
    assert parsed(*lines) == expected


def test_parse_and_get():
    calculator = Calculator()
    calculator.apply(parse_operation("OP + 255"))
    calculator.apply(parse_operation("OP + 1"))
    assert calculator.apply(parse_operation("GET")) == 0