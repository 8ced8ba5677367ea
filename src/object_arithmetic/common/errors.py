"""Errors raised when an arithmetic expression cannot be turned into an Operation."""


class OperationError(ValueError):
    """Base class for every expression parsing error."""


class InvalidExpression(OperationError):
    """The expression does not split into exactly three tokens."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(
            f"Expression must be in the format: [number] [operator] [number], got {expression!r}"
        )


class InvalidOperand(OperationError):
    """An operand token is not a valid floating-point number."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Both operands must be valid numbers, got {token!r}")


class InvalidOperator(OperationError):
    """The operator token is not one of the supported symbols."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid operator: {token}")


class DivisionByZero(OperationError):
    """A division expression has a literal zero as its second operand."""

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")
