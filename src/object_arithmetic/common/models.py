"""Immutable value type for a single binary arithmetic operation."""
import math
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator

from object_arithmetic.common.operations import OperationMode, evaluate, symbol_of
from object_arithmetic.common.parser import ExpressionParser


def format_number(value: float) -> str:
    """
    Render a float the way operations are printed: shortest round-trip form, no trailing ".0".

    :param float value: Number to render

    :return: Rendered number, e.g. "6", "2.5", "-0", "1e+16", "inf"
    :rtype: str
    """
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


class Operation(BaseModel):
    """
    One binary arithmetic fact: two operands, an operation kind, and the derived result.

    Construction:
        - Operation("3 + 3") parses an expression and validates it
        - Operation(1, OperationMode.DIVISION, 0) takes the fields as given, without a zero-divisor check
        - Operation() is the empty value 0 + 0

    Equality and hashing use (a, b, mode). Ordering uses the result only, so two
    unequal operations with the same result compare as neither less nor greater.
    """

    # Make the Pydantic instance immutable (read-only)
    # Write inf and nan as JSON constants instead of null so operands survive a round trip
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    a: float = Field(default=0.0, description="First operand")
    b: float = Field(default=0.0, description="Second operand")
    mode: OperationMode = Field(
        default=OperationMode.ADDITION,
        validation_alias=AliasChoices("mode", "Mode"),
        description="Operation kind",
    )

    def __init__(self, *args: Any, **data: Any) -> None:
        if len(args) == 1 and isinstance(args[0], str) and not data:
            a, mode, b = ExpressionParser.parse(args[0])
            super().__init__(a=a, mode=mode, b=b)
        elif len(args) == 3 and not data:
            a, mode, b = args
            super().__init__(a=a, mode=mode, b=b)
        elif not args:
            super().__init__(**data)
        else:
            raise TypeError(
                "Operation() takes an expression string, (a, mode, b), or keyword fields"
            )

    @classmethod
    def from_expression(cls, expression: str) -> "Operation":
        """
        Build an operation from an expression such as "2.5 * 4".

        :param str expression: Expression in the form "<number> <operator> <number>"

        :return: Parsed operation
        :rtype: Operation
        :raises OperationError: If the expression is malformed or divides by a literal zero
        """
        return cls(expression)

    @field_validator("mode", mode="before")
    @classmethod
    def mode_from_name_or_ordinal(cls, v: Any) -> OperationMode:
        """Accept a mode member, its name in any case, or its ordinal."""
        return OperationMode.coerce(v)

    @computed_field
    @property
    def symbol(self) -> str:
        """Operator symbol, "?" if the mode is outside the known set."""
        return symbol_of(self.mode)

    @computed_field
    @property
    def result(self) -> float:
        """Result of applying the operation kind to both operands."""
        return evaluate(self.a, self.mode, self.b)

    def compare_to(self, other: Optional["Operation"]) -> int:
        """
        Compare two operations by result.

        A missing operation sorts before any present one. A nan result sorts before
        every number and equal to another nan, so the order stays total.

        :param Optional[Operation] other: Operation to compare with

        :return: -1, 0 or 1
        :rtype: int
        """
        if other is None:
            return 1

        mine, theirs = self.result, other.result
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        if mine == theirs:
            return 0

        # At least one side is nan
        if math.isnan(mine):
            return 0 if math.isnan(theirs) else -1
        return 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return self.a == other.a and self.b == other.b and self.mode == other.mode

    def __hash__(self) -> int:
        value = 17
        value = value * 23 + hash(self.a)
        value = value * 23 + hash(self.b)
        value = value * 23 + hash(self.mode)
        return value

    def __lt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Operation):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Operation):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Operation):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Operation):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"{format_number(self.a)} {self.symbol} {format_number(self.b)} = {format_number(self.result)}"
