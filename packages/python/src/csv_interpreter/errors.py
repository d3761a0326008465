from enum import Enum, auto


class ErrorKind(Enum):
    MALFORMED_GRID = auto()
    INVALID_HEADER_NAME = auto()
    INVALID_ROW_ID = auto()
    INVALID_FORMULA_FORMAT = auto()
    INVALID_OPERAND = auto()
    NUMBER_OUT_OF_RANGE = auto()
    DIVISION_BY_ZERO = auto()
    CIRCULAR_REFERENCE = auto()
    UNRESOLVED_CELL = auto()


class InterpreterError(Exception):
    """Base class of every error raised while interpreting a table."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedGrid(InterpreterError):
    kind = ErrorKind.MALFORMED_GRID

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Invalid row size. Expected: {expected}. Actual size: {actual}."
        )
        self.expected = expected
        self.actual = actual


class InvalidHeaderName(InterpreterError):
    kind = ErrorKind.INVALID_HEADER_NAME

    def __init__(self, name: str):
        super().__init__(
            f'Invalid name of column "{name}". '
            "Column name must consist of English alphabet letters and be unique."
        )
        self.name = name


class InvalidRowId(InterpreterError):
    kind = ErrorKind.INVALID_ROW_ID

    def __init__(self, token: str):
        super().__init__(
            f'Invalid number of row "{token}". '
            "Row number must be a positive integer and be unique."
        )
        self.token = token


class InvalidFormulaFormat(InterpreterError):
    kind = ErrorKind.INVALID_FORMULA_FORMAT

    def __init__(self, token: str):
        super().__init__(f'Invalid formula: {token}. Expected: "= ARG1 OP ARG2".')
        self.token = token


class InvalidOperand(InterpreterError):
    kind = ErrorKind.INVALID_OPERAND

    def __init__(self, token: str, suggestion: str | None = None):
        message = (
            f'Invalid argument "{token}" in formula. '
            "Argument must be an integer or a cell address: Column_name Row_number."
        )
        if suggestion is not None:
            message += f' Did you mean "{suggestion}"?'
        super().__init__(message)
        self.token = token
        self.suggestion = suggestion


class NumberOutOfRange(InterpreterError):
    kind = ErrorKind.NUMBER_OUT_OF_RANGE

    def __init__(self, token: str):
        super().__init__(f"Number entered was out of range: {token}.")
        self.token = token


class DivisionByZero(InterpreterError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, cell: str | None = None):
        location = f" in {cell}" if cell else ""
        super().__init__(f"Trying to divide by zero{location}.")
        self.cell = cell


class CircularReference(InterpreterError):
    kind = ErrorKind.CIRCULAR_REFERENCE

    def __init__(self, path: list[str]):
        super().__init__(
            "Could not compute a cell value. "
            f"Cell formulas must not refer to each other in a loop: {' -> '.join(path)}."
        )
        self.path = path


class UnresolvedCell(InterpreterError):
    kind = ErrorKind.UNRESOLVED_CELL

    def __init__(self, header: str, row_id: int):
        super().__init__(f"Value in {header}{row_id} is not calculated.")
        self.header = header
        self.row_id = row_id
