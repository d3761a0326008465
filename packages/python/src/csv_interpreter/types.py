import re
from enum import IntEnum, auto

from csv_interpreter.errors import NumberOutOfRange

# Literals are bounded to a signed 32-bit integer, results of formulas are not
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

INTEGER_REGEX = re.compile(r"[+-]?[0-9]+")


class CellState(IntEnum):
    UNVISITED = auto()
    IN_PROGRESS = auto()
    DONE = auto()


def is_integer(token: str) -> bool:
    """Return True if the token is an optionally signed run of ASCII digits."""
    return INTEGER_REGEX.fullmatch(token) is not None


def parse_integer(token: str) -> int:
    """Convert an integer literal, failing when it does not fit in 32 bits.

    The caller is expected to have checked the token with `is_integer`.
    """
    value = int(token)
    if value < INT_MIN or value > INT_MAX:
        raise NumberOutOfRange(token)
    return value
