from pathlib import Path

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from csv_interpreter.errors import UnresolvedCell
from csv_interpreter.grid import Grid


def resolved_rows(grid: Grid) -> list[list[int]]:
    """Values of every data row, failing on the first cell that is not DONE."""
    rows: list[list[int]] = []
    for row in range(grid.height):
        values: list[int] = []
        for address in grid.addresses_in_row(row):
            value = grid.value(address)
            if value is None:
                raise UnresolvedCell(
                    grid.column_name(address.column), grid.row_ids[row]
                )
            values.append(value)
        rows.append(values)
    return rows


def render(grid: Grid, delimiter: str = ",") -> str:
    """Render the header line followed by one line per row id."""
    if not grid.header:
        return ""
    lines = [delimiter.join(grid.header)]
    for row_id, values in zip(grid.row_ids, resolved_rows(grid)):
        lines.append(delimiter.join([str(row_id)] + [str(v) for v in values]))
    return "\n".join(lines) + "\n"


def to_dataframe(grid: Grid) -> pd.DataFrame:
    """Resolved values indexed by row id, with the column names as columns."""
    df = pd.DataFrame(
        resolved_rows(grid),
        index=pd.Index(grid.row_ids, name=grid.header[0] or None if grid.header else None),
        columns=grid.header[1:],
        dtype="int64",
    )
    return df


class ExcelWriter:
    ws: Worksheet
    row: int
    col: int

    def __init__(self, ws: Worksheet, row: int = 1, col: int = 1) -> None:
        self.ws = ws
        self.row = row
        self.col = col

    def write_row(self, values: list[int | str]) -> None:
        for offset, value in enumerate(values):
            # Leave blank cells empty rather than writing an empty string
            if value == "":
                continue
            self.ws.cell(row=self.row, column=self.col + offset, value=value)
        self.row += 1

    def write_grid(self, grid: Grid) -> None:
        rows = resolved_rows(grid)
        self.write_row(list(grid.header))
        for row_id, values in zip(grid.row_ids, rows):
            self.write_row([row_id, *values])


def write_xlsx(grid: Grid, path: str | Path, title: str = "Sheet1") -> None:
    wb = Workbook()
    ws = wb.active
    assert ws is not None
    ws.title = title
    ExcelWriter(ws).write_grid(grid)
    wb.save(path)
