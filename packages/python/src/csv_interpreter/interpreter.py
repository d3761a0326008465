import logging
from pathlib import Path

from csv_interpreter.ast import CellAddress, Formula, Literal, Operand
from csv_interpreter.errors import CircularReference, DivisionByZero
from csv_interpreter.grid import Grid
from csv_interpreter.operators import apply
from csv_interpreter.reader import read_file, read_table
from csv_interpreter.types import CellState
from csv_interpreter.writer import render


class EvaluationStack:
    """Addresses of the formulas currently being evaluated, outermost first."""

    def __init__(self, grid: Grid):
        self.grid = grid
        self.stack: list[CellAddress] = []

    def __len__(self) -> int:
        return len(self.stack)

    def push(self, address: CellAddress) -> None:
        self.stack.append(address)
        self.grid.mark(address, CellState.IN_PROGRESS)

    def pop(self) -> CellAddress:
        return self.stack.pop()

    def top(self) -> CellAddress:
        return self.stack[-1]

    def cycle_path(self, address: CellAddress) -> list[str]:
        """Labels of the cycle that closes on `address`, which is on the stack."""
        start = self.stack.index(address)
        return [self.grid.label(a) for a in self.stack[start:]] + [
            self.grid.label(address)
        ]

    def unwind(self) -> None:
        """Forget every in-progress cell, leaving it UNVISITED."""
        while self.stack:
            self.grid.mark(self.stack.pop(), CellState.UNVISITED)


class Evaluator:
    """Resolves every formula of a grid to an integer, in place.

    Evaluation is a depth-first traversal driven by an explicit stack of
    in-progress cells. A cell referenced while it is IN_PROGRESS closes a
    cycle.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def evaluate(self, address: CellAddress) -> int:
        grid = self.grid
        if grid.state(address) is CellState.DONE:
            return self._value(address)

        stack = EvaluationStack(grid)
        stack.push(address)
        try:
            while stack:
                current = stack.top()
                formula = grid.cell(current)
                assert isinstance(formula, Formula)

                pending = self._next_pending(formula)
                if pending is not None:
                    if grid.state(pending) is CellState.IN_PROGRESS:
                        raise CircularReference(stack.cycle_path(pending))
                    stack.push(pending)
                    continue

                left = self._operand_value(formula.left)
                right = self._operand_value(formula.right)
                try:
                    value = apply(formula.operator, left, right)
                except DivisionByZero:
                    raise DivisionByZero(grid.label(current)) from None
                grid.resolve(current, value)
                stack.pop()
                logging.debug(f"{grid.label(current)} = {value}")
        except Exception:
            stack.unwind()
            raise

        return self._value(address)

    def compute_all(self) -> None:
        """Evaluate every cell in row-major order, failing on the first error."""
        for address in self.grid.addresses():
            if self.grid.state(address) is not CellState.DONE:
                self.evaluate(address)

    def _next_pending(self, formula: Formula) -> CellAddress | None:
        """The first referenced cell that still needs evaluating."""
        for reference in formula.references():
            if self.grid.state(reference) is not CellState.DONE:
                return reference
        return None

    def _operand_value(self, operand: Operand) -> int:
        if isinstance(operand, Literal):
            return operand.value
        return self._value(operand.address)

    def _value(self, address: CellAddress) -> int:
        value = self.grid.value(address)
        assert value is not None
        return value


class CsvInterpreter:
    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter
        self.grid: Grid | None = None

    def load(self, text: str) -> Grid:
        self.grid = Grid.from_table(read_table(text, delimiter=self.delimiter))
        return self.grid

    def load_file(self, path: str | Path) -> Grid:
        self.grid = Grid.from_table(read_file(path, delimiter=self.delimiter))
        return self.grid

    def compute(self) -> Grid:
        if self.grid is None:
            raise ValueError("No table loaded")
        Evaluator(self.grid).compute_all()
        return self.grid

    def render(self) -> str:
        if self.grid is None:
            raise ValueError("No table loaded")
        return render(self.grid, delimiter=self.delimiter)


def interpret(text: str, delimiter: str = ",") -> str:
    """Read, validate, evaluate and render a table in one go."""
    interpreter = CsvInterpreter(delimiter=delimiter)
    interpreter.load(text)
    interpreter.compute()
    return interpreter.render()
