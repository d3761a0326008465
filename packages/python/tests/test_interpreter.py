import pytest

from csv_interpreter.ast import CellAddress
from csv_interpreter.errors import (
    CircularReference,
    DivisionByZero,
    ErrorKind,
    InvalidFormulaFormat,
    InvalidOperand,
)
from csv_interpreter.grid import Grid
from csv_interpreter.interpreter import CsvInterpreter, Evaluator, interpret
from csv_interpreter.reader import read_table
from csv_interpreter.types import CellState


def load(text: str) -> Grid:
    return Grid.from_table(read_table(text))


def compute(text: str) -> Grid:
    grid = load(text)
    Evaluator(grid).compute_all()
    return grid


@pytest.fixture
def grid():
    return load(",A,B\n1,5,10\n2,=A1+B1,3\n")


class TestBasicOperations:
    def test_end_to_end(self, grid):
        Evaluator(grid).compute_all()
        assert grid.value_at("A", 2) == 15
        assert grid.value_at("B", 2) == 3

    @pytest.mark.parametrize(
        "formula, expected",
        [
            ("=6/2", 3),
            ("=5/2", 2),
            ("=-5/2", -2),
            ("=5/-2", -2),
            ("=-6/-4", 1),
            ("=2*3", 6),
            ("=2-7", -5),
            ("=-3+4", 1),
            ("=4--3", 7),
        ],
    )
    def test_literal_formulas(self, formula, expected):
        assert compute(f",A\n1,{formula}\n").value_at("A", 1) == expected

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero) as exc_info:
            compute(",A\n1,=5/0\n")
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO
        assert exc_info.value.cell == "A1"

    def test_division_by_zero_valued_cell(self):
        with pytest.raises(DivisionByZero) as exc_info:
            compute(",A,B\n1,0,=7/A1\n")
        assert exc_info.value.cell == "B1"
        assert exc_info.value.__suppress_context__
        assert exc_info.value.__cause__ is None

    def test_literals_unchanged(self):
        text = ",A,B,C\n1,1,-2,3\n5,0,+7,2147483647\n"
        grid = compute(text)
        assert [grid.value(a) for a in grid.addresses()] == [1, -2, 3, 0, 7, 2**31 - 1]


class TestCellReferences:
    def test_forward_references(self):
        grid = compute(",A,B\n1,=B1*2,=A2+1\n2,10,=A1-B1\n")
        assert grid.value_at("B", 1) == 11
        assert grid.value_at("A", 1) == 22
        assert grid.value_at("B", 2) == 11

    def test_row_ids_are_labels_not_positions(self):
        grid = compute(",Cost\n30,4\n7,=Cost30*Cost30\n")
        assert grid.value_at("Cost", 7) == 16

    def test_long_chain_does_not_hit_recursion_limit(self):
        rows = [",A", "1,1"] + [f"{i},=A{i - 1}+1" for i in range(2, 5001)]
        # Evaluate from the end of the chain first
        grid = load("\n".join([rows[0]] + rows[:0:-1]))
        Evaluator(grid).compute_all()
        assert grid.value_at("A", 5000) == 5000
        assert all(state is CellState.DONE for state in grid.states)

    def test_value_at_unknown_cell(self, grid):
        with pytest.raises(KeyError):
            grid.value_at("C", 1)
        with pytest.raises(KeyError):
            grid.value_at("A", 3)

    def test_evaluate_single_cell(self, grid):
        evaluator = Evaluator(grid)
        assert evaluator.evaluate(CellAddress(row=1, column=0)) == 15
        assert grid.state(CellAddress(row=1, column=0)) is CellState.DONE


class TestCycles:
    def test_self_reference(self):
        with pytest.raises(CircularReference) as exc_info:
            compute(",A\n1,=A1+1\n")
        assert exc_info.value.kind is ErrorKind.CIRCULAR_REFERENCE
        assert exc_info.value.path == ["A1", "A1"]

    def test_indirect_cycle(self):
        with pytest.raises(CircularReference) as exc_info:
            compute(",A,B,C\n1,=B1+1,=C1+1,=A1*2\n")
        assert exc_info.value.path == ["A1", "B1", "C1", "A1"]
        assert "A1 -> B1 -> C1 -> A1" in str(exc_info.value)

    def test_cycle_reached_through_acyclic_prefix(self):
        with pytest.raises(CircularReference) as exc_info:
            compute(",A,B,C\n1,=B1+1,=C1+1,=B1*2\n")
        assert exc_info.value.path == ["B1", "C1", "B1"]

    def test_cycle_in_right_operand(self):
        with pytest.raises(CircularReference):
            compute(",A,B\n1,=1+A1,5\n")

    def test_first_error_in_row_major_order(self):
        # A1 divides by zero, B1 is a cycle: A1 is evaluated first
        with pytest.raises(DivisionByZero):
            compute(",A,B\n1,=1/0,=B1+1\n")
        with pytest.raises(CircularReference):
            compute(",A,B\n1,=A1+1,=1/0\n")

    def test_left_operand_evaluated_first(self):
        with pytest.raises(CircularReference):
            compute(",A,B,C\n1,=C1+B1,=1/0,=A1+1\n")
        with pytest.raises(DivisionByZero):
            compute(",A,B,C\n1,=B1+C1,=1/0,=A1+1\n")

    def test_failure_is_repeatable(self):
        grid = load(",A,B,C\n1,1,=C1+1,=B1*2\n")
        evaluator = Evaluator(grid)
        for _ in range(2):
            with pytest.raises(CircularReference) as exc_info:
                evaluator.compute_all()
            assert exc_info.value.path == ["B1", "C1", "B1"]
        assert grid.state(CellAddress(row=0, column=1)) is CellState.UNVISITED
        assert grid.state(CellAddress(row=0, column=0)) is CellState.DONE


class TestDeterminism:
    def test_compute_twice(self):
        text = ",A,B\n1,=B1*3,=B2-1\n2,=A1/2,9\n"
        first = compute(text)
        second = compute(text)
        assert first.values == second.values

    def test_compute_all_is_idempotent(self):
        grid = load(",A,B\n1,=B1*3,4\n")
        evaluator = Evaluator(grid)
        evaluator.compute_all()
        values = list(grid.values)
        evaluator.compute_all()
        assert grid.values == values


class TestCsvInterpreter:
    def test_interpret(self):
        assert interpret(",A,B\n1,5,10\n2,=A1+B1,3\n") == ",A,B\n1,5,10\n2,15,3\n"

    def test_whitespace_around_tokens(self):
        assert interpret(" , A , B \n 1 , 5 , =A1*2 \n") == ",A,B\n1,5,10\n"

    def test_custom_delimiter(self):
        assert interpret(";A;B\n1;2;=A1*B1\n", delimiter=";") == ";A;B\n1;2;4\n"

    def test_empty_input(self):
        assert interpret("") == ""

    def test_header_only(self):
        assert interpret(",A,B\n") == ",A,B\n"

    def test_parse_errors_abort(self):
        with pytest.raises(InvalidFormulaFormat):
            interpret(",A\n1,=A1\n")
        with pytest.raises(InvalidOperand):
            interpret(",A\n1,=A2+1\n")

    def test_load_file(self, tmp_path):
        path = tmp_path / "table.csv"
        path.write_text(",A,B\n1,1,=A1+1\n")
        interpreter = CsvInterpreter()
        interpreter.load_file(path)
        interpreter.compute()
        assert interpreter.render() == ",A,B\n1,1,2\n"

    def test_compute_before_load(self):
        with pytest.raises(ValueError):
            CsvInterpreter().compute()
