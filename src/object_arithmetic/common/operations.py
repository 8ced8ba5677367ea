"""Supported operation kinds and the floating-point arithmetic behind them."""
from enum import Enum
import math
from typing import Callable, Dict, Union


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class OperationMode(str, Enum):
    """
    Closed set of binary operation kinds.

    Declaration order defines the ordinal of each member; the value is the name used on the wire.
    """

    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    DIVISION = "division"
    MULTIPLICATION = "multiplication"
    MODULO = "modulo"

    @classmethod
    def coerce(cls, value: Union["OperationMode", str, int]) -> "OperationMode":
        """
        Resolve a mode from a member, its name (any case) or its ordinal.

        :param value: Mode member, name such as "Addition", or ordinal such as 0

        :return: Matching operation mode
        :rtype: OperationMode
        :raises ValueError: If no mode matches
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass, but True is not an ordinal
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Operation mode ordinal out of range: {value}")
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown operation mode: {value!r}")

    @property
    def symbol(self) -> str:
        """Single-character operator symbol of this mode."""
        return SYMBOLS[self]


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields +-inf or nan instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _modulo(a: float, b: float) -> float:
    """Floating-point remainder carrying the sign of the dividend."""
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


SYMBOLS: Dict[OperationMode, str] = {
    OperationMode.ADDITION: "+",
    OperationMode.SUBTRACTION: "-",
    OperationMode.DIVISION: "/",
    OperationMode.MULTIPLICATION: "*",
    OperationMode.MODULO: "%",
}

FUNCTIONS: Dict[OperationMode, OperatorFn] = {
    OperationMode.ADDITION: lambda a, b: a + b,
    OperationMode.SUBTRACTION: lambda a, b: a - b,
    OperationMode.DIVISION: _divide,
    OperationMode.MULTIPLICATION: lambda a, b: a * b,
    OperationMode.MODULO: _modulo,
}

# Reverse lookup used by the parser
MODES_BY_SYMBOL: Dict[str, OperationMode] = {symbol: mode for mode, symbol in SYMBOLS.items()}

UNKNOWN_SYMBOL = "?"


def symbol_of(mode: OperationMode) -> str:
    """Return the operator symbol of a mode, or "?" for anything outside the closed set."""
    return SYMBOLS.get(mode, UNKNOWN_SYMBOL)


def evaluate(a: float, mode: OperationMode, b: float) -> float:
    """
    Apply an operation kind to two operands.

    :param float a: First operand
    :param OperationMode mode: Operation kind
    :param float b: Second operand

    :return: Result, or nan if the mode is not a known kind
    :rtype: float
    """
    function = FUNCTIONS.get(mode)
    if function is None:
        return math.nan
    return function(a, b)
