from typing import Iterator

from csv_interpreter.ast import Cell, CellAddress, Value
from csv_interpreter.parser import parse_body
from csv_interpreter.resolver import AddressResolver
from csv_interpreter.types import CellState
from csv_interpreter.utils import format_address
from csv_interpreter.validator import validate_table


class Grid:
    """Owns the cells of a table along with their evaluation state.

    Cells live in a flat list indexed by `row * width + column`. A literal
    cell starts out DONE, a formula cell starts out UNVISITED and only moves
    to DONE once, when its value is stored.
    """

    def __init__(
        self,
        header: list[str],
        row_ids: list[int],
        cells: list[list[Cell]],
        resolver: AddressResolver | None = None,
    ):
        self.header = header
        self.row_ids = row_ids
        self.resolver = resolver or AddressResolver(header, row_ids)
        self.height = len(row_ids)
        self.width = max(len(header) - 1, 0)
        self.cells: list[Cell] = [cell for row in cells for cell in row]
        self.states: list[CellState] = []
        self.values: list[int | None] = []
        for cell in self.cells:
            if isinstance(cell, Value):
                self.states.append(CellState.DONE)
                self.values.append(cell.value)
            else:
                self.states.append(CellState.UNVISITED)
                self.values.append(None)

    @classmethod
    def from_table(cls, table: list[list[str]]) -> "Grid":
        """Validate and parse a raw table of trimmed tokens."""
        validated = validate_table(table)
        resolver = AddressResolver(validated.header, validated.row_ids)
        cells = parse_body(validated.body, resolver)
        return cls(validated.header, validated.row_ids, cells, resolver)

    def index(self, address: CellAddress) -> int:
        return address.row * self.width + address.column

    def addresses_in_row(self, row: int) -> Iterator[CellAddress]:
        for column in range(self.width):
            yield CellAddress(row=row, column=column)

    def addresses(self) -> Iterator[CellAddress]:
        """Every address in row-major order."""
        for row in range(self.height):
            yield from self.addresses_in_row(row)

    def cell(self, address: CellAddress) -> Cell:
        return self.cells[self.index(address)]

    def state(self, address: CellAddress) -> CellState:
        return self.states[self.index(address)]

    def mark(self, address: CellAddress, state: CellState) -> None:
        self.states[self.index(address)] = state

    def resolve(self, address: CellAddress, value: int) -> None:
        index = self.index(address)
        self.values[index] = value
        self.states[index] = CellState.DONE

    def value(self, address: CellAddress) -> int | None:
        """The resolved value, or None if the cell is not DONE yet."""
        return self.values[self.index(address)]

    def column_name(self, column: int) -> str:
        return self.header[column + 1]

    def label(self, address: CellAddress) -> str:
        return format_address(
            self.column_name(address.column), self.row_ids[address.row]
        )

    def value_at(self, name: str, row_id: int) -> int | None:
        address = self.resolver.address(name, row_id)
        if address is None:
            raise KeyError(format_address(name, row_id))
        return self.value(address)

