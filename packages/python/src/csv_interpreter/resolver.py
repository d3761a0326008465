from csv_interpreter.ast import CellAddress, Literal, Operand, Reference
from csv_interpreter.errors import InvalidOperand
from csv_interpreter.types import is_integer, parse_integer
from csv_interpreter.utils import split_address, suggest_name


class AddressResolver:
    """Maps column names and row ids of a validated table to cell addresses."""

    def __init__(self, header: list[str], row_ids: list[int]):
        # The first header slot is reserved for the row id column
        self.column_indexes: dict[str, int] = {
            name: index for index, name in enumerate(header[1:])
        }
        self.row_indexes: dict[int, int] = {
            row_id: index for index, row_id in enumerate(row_ids)
        }

    def address(self, name: str, row_id: int) -> CellAddress | None:
        column = self.column_indexes.get(name)
        row = self.row_indexes.get(row_id)
        if column is None or row is None:
            return None
        return CellAddress(row=row, column=column)

    def resolve(self, token: str) -> Operand:
        """Resolve a formula operand into a literal or a cell reference."""
        if is_integer(token):
            return Literal(parse_integer(token))

        parts = split_address(token)
        if parts is None:
            raise InvalidOperand(token)
        name, row_id = parts
        address = self.address(name, row_id)
        if address is None:
            suggestion = None
            if name not in self.column_indexes and row_id in self.row_indexes:
                suggestion = suggest_name(name, self.column_indexes)
                if suggestion is not None:
                    suggestion = f"{suggestion}{row_id}"
            raise InvalidOperand(token, suggestion)
        return Reference(address)
