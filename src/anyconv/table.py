"""Plain-text and markdown rendering of small result tables."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .config.settings import config
from .formatting import pretty_string
from .logging.setup import get_logger
from .values import Kind, is_plain_int, wrap

logger = get_logger(__name__)


def pad(rows: list[list[str]], padding: int) -> str:
    """Left-align cells so columns line up, separated by padding spaces.

    Surrounding spaces in cells are dropped. Each row ends with a newline.
    """
    cleaned = [[cell.strip(" ") for cell in row] for row in rows]
    n_cols = max((len(row) for row in cleaned), default=0)

    widths = [0] * n_cols
    for row in cleaned:
        for col, cell in enumerate(row):
            widths[col] = max(widths[col], len(cell))

    out = ""
    for row in cleaned:
        out += "".join(cell + " " * (widths[col] + padding - len(cell)) for col, cell in enumerate(row))
        out += "\n"

    return out


def _has_content(cell: Any) -> bool:
    if is_plain_int(cell):
        return True

    v = wrap(cell)
    if v.kind.is_numeric or v.kind is Kind.DATE:
        return True
    return v.kind is Kind.STRING and v.value != ""


class Table(BaseModel):
    """A table of dynamic values with named rows and columns.

    ``data`` is stored by column: ``data[col][row]``. ``col_names`` either
    names just the data columns or also has a leading label for the
    row-name column.
    """

    row_names: list[str] = Field(default_factory=list)
    col_names: list[str] = Field(default_factory=list)
    data: list[list[Any]] = Field(default_factory=list, description="Cells stored by column")

    @model_validator(mode="after")
    def _check_shape(self) -> "Table":
        for ind, column in enumerate(self.data):
            if len(column) != len(self.row_names):
                raise ValueError(
                    f"column {ind} has {len(column)} cells, expected {len(self.row_names)}"
                )
        return self

    @property
    def n_rows(self) -> int:
        return len(self.row_names)

    def clean_up(self) -> None:
        """Remove rows with no number, date or non-empty string."""
        keep = [
            row for row in range(self.n_rows)
            if any(_has_content(column[row]) for column in self.data)
        ]

        self.row_names = [self.row_names[row] for row in keep]
        self.data = [[column[row] for row in keep] for column in self.data]

    def _rows(self) -> list[list[str]]:
        header = list(self.col_names)
        if len(header) == len(self.data):
            header.insert(0, "")

        rows = [header]
        for row in range(self.n_rows):
            rows.append([self.row_names[row]] + [pretty_string(column[row]) for column in self.data])

        return rows

    def render(self, markdown: bool = False, padding: int | None = None) -> str:
        """Render the table as aligned text or as a markdown table."""
        if not self.data:
            return ""

        padding = config.table_padding if padding is None else padding
        rows = self._rows()

        if not markdown:
            return pad(rows, padding)

        n_cols = max(len(row) for row in rows)
        rows = [row + [""] * (n_cols - len(row)) for row in rows]
        widths = [max(len(row[col]) for row in rows) for col in range(n_cols)]

        def line(cells: list[str]) -> str:
            return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |\n"

        out = line(rows[0])
        out += "|" + "|".join("-" * (w + 2) for w in widths) + "|\n"
        for row in rows[1:]:
            out += line(row)

        return out

    def __str__(self) -> str:
        return self.render()

    def write(self, path: str | Path, markdown: bool = False) -> Path:
        """Write the rendered table to path, replacing any existing file."""
        path = Path(path)
        path.write_text(self.render(markdown=markdown), encoding="utf-8")
        logger.debug(f"Wrote {self.n_rows} row table to {path}")
        return path
