from typing import NamedTuple

from csv_interpreter.operators import Operator


class CellAddress(NamedTuple):
    # Zero-based; column 0 is the first named column, not the row id column
    row: int
    column: int


class Literal(NamedTuple):
    value: int


class Reference(NamedTuple):
    address: CellAddress


Operand = Literal | Reference


class Value(NamedTuple):
    value: int


class Formula(NamedTuple):
    left: Operand
    operator: Operator
    right: Operand

    def references(self) -> tuple[CellAddress, ...]:
        """Addresses of the cells this formula reads, left operand first."""
        return tuple(
            operand.address
            for operand in (self.left, self.right)
            if isinstance(operand, Reference)
        )


Cell = Value | Formula
