import logging
from typing import NamedTuple

from csv_interpreter.errors import InvalidHeaderName, InvalidRowId, MalformedGrid
from csv_interpreter.types import is_integer, parse_integer
from csv_interpreter.utils import is_header_name


class ValidatedTable(NamedTuple):
    header: list[str]
    row_ids: list[int]
    # Data rows without their row id
    body: list[list[str]]


def check_dimensions(table: list[list[str]]) -> None:
    expected = len(table[0])
    for row in table:
        if len(row) != expected:
            raise MalformedGrid(expected, len(row))


def check_header(header: list[str]) -> None:
    """Check every column name after the reserved first slot."""
    if header and header[0]:
        logging.warning(f'Ignoring the reserved header cell "{header[0]}"')
    seen: set[str] = set()
    for name in header[1:]:
        if not is_header_name(name) or name in seen:
            raise InvalidHeaderName(name)
        seen.add(name)


def check_row_ids(tokens: list[str]) -> list[int]:
    row_ids: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not is_integer(token):
            raise InvalidRowId(token)
        row_id = parse_integer(token)
        if row_id <= 0 or row_id in seen:
            raise InvalidRowId(token)
        seen.add(row_id)
        row_ids.append(row_id)
    return row_ids


def validate_table(table: list[list[str]]) -> ValidatedTable:
    """Validate the shape, column names and row ids of a raw table.

    Row 0 holds the column names and column 0 of every other row holds the
    row id. The body cells are returned untouched.
    """
    if not table:
        return ValidatedTable(header=[], row_ids=[], body=[])

    check_dimensions(table)
    header = table[0]
    check_header(header)
    row_ids = check_row_ids([row[0] if row else "" for row in table[1:]])
    body = [row[1:] for row in table[1:]]
    return ValidatedTable(header=list(header), row_ids=row_ids, body=body)
