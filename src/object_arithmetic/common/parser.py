"""Parse single binary arithmetic expressions such as "3 + 4"."""
import re
from typing import List, Tuple

from object_arithmetic.common.errors import (
    DivisionByZero,
    InvalidExpression,
    InvalidOperand,
    InvalidOperator,
)
from object_arithmetic.common.logger import logger
from object_arithmetic.common.operations import MODES_BY_SYMBOL, OperationMode


# Tokens are separated by one or more spaces or tabs
_SEPARATOR = re.compile(r"[ \t]+")


class ExpressionParser:
    """
    Parse an arithmetic expression made of exactly one operator and two operands.

    Design constraints:
        - No eval(), no dynamic code execution
        - Operands are parsed with float(), so "1e3", "-2.5", "inf" and "nan" are accepted
        - Division by a literal zero is rejected before anything is computed

    Examples:
        - "3 + 4"    -> (3.0, ADDITION, 4.0)
        - "9\t/\t3"  -> (9.0, DIVISION, 3.0)
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split an arithmetic expression into tokens.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[str]
        """
        return [token for token in _SEPARATOR.split(expr) if token]

    @staticmethod
    def _is_number(token: str) -> bool:
        """
        Determine if a token represents a numeric value.

        :param str token: Token string

        :return: True if token can be converted to float, else False
        :rtype: bool
        """
        try:
            float(token)
            return True
        except ValueError:
            return False

    @staticmethod
    def _to_operand(token: str) -> float:
        """
        Convert an operand token to float.

        :param str token: Operand token

        :return: Parsed operand
        :rtype: float
        :raises InvalidOperand: If the token is not a number
        """
        if not ExpressionParser._is_number(token):
            raise InvalidOperand(token)
        return float(token)

    @staticmethod
    def parse(expr: str) -> Tuple[float, OperationMode, float]:
        """
        Parse an expression into its operands and operation kind.

        :param str expr: Expression in the form "<number> <operator> <number>"

        :return: Tuple of (first operand, operation mode, second operand)
        :rtype: Tuple[float, OperationMode, float]
        :raises InvalidExpression: If the expression does not have exactly three tokens
        :raises InvalidOperand: If an operand is not a number
        :raises InvalidOperator: If the operator is not one of + - * / %
        :raises DivisionByZero: If a division has a zero second operand
        """
        tokens: List[str] = ExpressionParser.tokenize(expr)

        try:
            if len(tokens) != 3:
                raise InvalidExpression(expr)

            left, symbol, right = tokens
            a: float = ExpressionParser._to_operand(left)
            b: float = ExpressionParser._to_operand(right)

            mode = MODES_BY_SYMBOL.get(symbol)
            if mode is None:
                raise InvalidOperator(symbol)

            if mode is OperationMode.DIVISION and b == 0:
                raise DivisionByZero()

        except ValueError as exc:
            logger.debug(f"Could not parse expression {expr!r}: {exc}")
            raise

        return a, mode, b
