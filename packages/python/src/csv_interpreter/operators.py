import logging
from enum import Enum

from csv_interpreter.errors import DivisionByZero


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)
SIGN_SYMBOLS = frozenset({"+", "-"})


def operator_from_symbol(symbol: str) -> Operator | None:
    """Return the operator spelled by a single character, if any."""
    if symbol not in OPERATOR_SYMBOLS:
        return None
    return Operator(symbol)


def add(left: int, right: int) -> int:
    return left + right


def subtract(left: int, right: int) -> int:
    return left - right


def multiply(left: int, right: int) -> int:
    return left * right


def divide(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise DivisionByZero()
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    if left % right != 0:
        logging.debug(f"Truncated {left} / {right} to {quotient}")
    return quotient


def apply(operator: Operator, left: int, right: int) -> int:
    match operator:
        case Operator.ADD:
            return add(left, right)
        case Operator.SUBTRACT:
            return subtract(left, right)
        case Operator.MULTIPLY:
            return multiply(left, right)
        case Operator.DIVIDE:
            return divide(left, right)
        case _:
            raise ValueError(f"Unknown operator: {operator}")
