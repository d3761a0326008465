import logging
from pathlib import Path

from csv_interpreter.utils import split_line


def read_table(text: str, delimiter: str = ",") -> list[list[str]]:
    """Split delimited text into rows of trimmed tokens.

    A trailing newline does not start a new row. Blank lines elsewhere are
    kept as rows without tokens so that validation reports them.
    """
    table = [split_line(line, delimiter) for line in text.splitlines()]
    logging.debug(f"Read {len(table)} rows")
    return table


def read_file(path: str | Path, delimiter: str = ",") -> list[list[str]]:
    with open(path, "r", encoding="utf-8") as file:
        return read_table(file.read(), delimiter=delimiter)
