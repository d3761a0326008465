from csv_interpreter.errors import ErrorKind, InterpreterError
from csv_interpreter.grid import Grid
from csv_interpreter.interpreter import CsvInterpreter, Evaluator, interpret

__all__ = [
    "CsvInterpreter",
    "ErrorKind",
    "Evaluator",
    "Grid",
    "InterpreterError",
    "interpret",
]
