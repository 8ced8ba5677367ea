"""Test class ExpressionParser."""
import pytest

from object_arithmetic.common.errors import (
    DivisionByZero,
    InvalidExpression,
    InvalidOperand,
    InvalidOperator,
    OperationError,
)
from object_arithmetic.common.operations import OperationMode
from object_arithmetic.common.parser import ExpressionParser


@pytest.mark.parametrize("expr,expected", [
    ("3 + 4", ["3", "+", "4"]),
    ("3\t*\t4", ["3", "*", "4"]),
    ("  3    -  \t 4 ", ["3", "-", "4"]),
    ("", []),
])
def test_tokenize(expr: str, expected: list) -> None:
    """Tokenize splits on runs of spaces and tabs and drops empty tokens."""
    assert ExpressionParser.tokenize(expr) == expected


@pytest.mark.parametrize("token,expected", [
    ("123", True),
    ("45.67", True),
    ("-8.9", True),
    ("1e3", True),
    ("inf", True),
    ("abc", False),
    ("+", False),
])
def test_is_number(token: str, expected: bool) -> None:
    """_is_number correctly identifies numbers."""
    assert ExpressionParser._is_number(token) == expected


@pytest.mark.parametrize("expr,expected", [
    ("3 + 4", (3.0, OperationMode.ADDITION, 4.0)),
    ("10 - 2", (10.0, OperationMode.SUBTRACTION, 2.0)),
    ("3 * 5", (3.0, OperationMode.MULTIPLICATION, 5.0)),
    ("8 / 2", (8.0, OperationMode.DIVISION, 2.0)),
    ("8 % 3", (8.0, OperationMode.MODULO, 3.0)),
    ("-2.5 * 1e2", (-2.5, OperationMode.MULTIPLICATION, 100.0)),
    ("0 / 5", (0.0, OperationMode.DIVISION, 5.0)),
])
def test_parse_valid(expr: str, expected: tuple) -> None:
    """Parse returns operands and kind for valid expressions."""
    assert ExpressionParser.parse(expr) == expected


@pytest.mark.parametrize("expr", [
    "",
    "1 2",
    "3 +",
    "1 + 2 + 3",
    "1+2",
])
def test_parse_invalid_expression(expr: str) -> None:
    """Anything other than three tokens raises InvalidExpression."""
    with pytest.raises(InvalidExpression):
        ExpressionParser.parse(expr)


@pytest.mark.parametrize("expr,token", [
    ("x + 2", "x"),
    ("1 + two", "two"),
    ("1,5 * 2", "1,5"),
])
def test_parse_invalid_operand(expr: str, token: str) -> None:
    """Operands that float() rejects raise InvalidOperand naming the token."""
    with pytest.raises(InvalidOperand) as exc_info:
        ExpressionParser.parse(expr)
    assert exc_info.value.token == token


@pytest.mark.parametrize("token", ["$", "^", "//", "x"])
def test_parse_invalid_operator(token: str) -> None:
    """Unknown operators raise InvalidOperator naming the token."""
    with pytest.raises(InvalidOperator) as exc_info:
        ExpressionParser.parse(f"1 {token} 2")
    assert exc_info.value.token == token
    assert token in str(exc_info.value)


@pytest.mark.parametrize("expr", ["1 / 0", "1 / 0.0", "1 / -0", "0 / 0"])
def test_parse_division_by_zero(expr: str) -> None:
    """A literal zero divisor is rejected."""
    with pytest.raises(DivisionByZero):
        ExpressionParser.parse(expr)


def test_modulo_by_zero_is_accepted() -> None:
    """Only division checks for a zero divisor."""
    assert ExpressionParser.parse("1 % 0") == (1.0, OperationMode.MODULO, 0.0)


def test_errors_are_value_errors() -> None:
    """Parse errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        ExpressionParser.parse("1 $ 2")
    assert issubclass(DivisionByZero, OperationError)
