import logging

from csv_interpreter.ast import Cell, Formula, Value
from csv_interpreter.resolver import AddressResolver
from csv_interpreter.tokenizer import tokenize_formula
from csv_interpreter.types import is_integer, parse_integer


def parse_cell(token: str, resolver: AddressResolver) -> Cell:
    """Parse a body cell into a literal value or a two-operand formula."""
    if is_integer(token):
        return Value(parse_integer(token))

    tokens = tokenize_formula(token)
    left = resolver.resolve(tokens.left)
    right = resolver.resolve(tokens.right)
    return Formula(left=left, operator=tokens.operator, right=right)


def parse_body(body: list[list[str]], resolver: AddressResolver) -> list[list[Cell]]:
    """Parse every body cell in row-major order, stopping at the first error."""
    cells: list[list[Cell]] = []
    for row in body:
        cells.append([parse_cell(token, resolver) for token in row])
    logging.debug(f"Parsed {sum(len(row) for row in cells)} cells")
    return cells
