"""Pure grid rendering: a GridState in, styled text out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from rich.text import Text

from longdiv.division.steps import GridState, HighlightKind, RowReason, WorkRowKind

PREVIEW = "preview"
ACTIVE = "active"
RESULT = "result"

EMPHASIS_STYLES: Dict[str, str] = {
    PREVIEW: "bold black on yellow",
    ACTIVE: "bold white on blue",
    RESULT: "bold black on green",
}

_ROW_EMPHASIS = {
    RowReason.PRODUCT_WRITTEN: ACTIVE,
    RowReason.SUBTRACT_PREVIEW: PREVIEW,
    RowReason.REMAINDER_SHOWN: RESULT,
}

RULE = "─"


@dataclass
class Cell:
    text: str = " "
    prefix: str = " "
    emphasis: Optional[str] = None


@dataclass
class GridLine:
    gutter: str
    cells: List[Cell] = field(default_factory=list)
    kind: str = "row"


def quotient_start_column(dividend: str, divisor: str) -> int:
    """Column above which the first quotient digit is written."""
    divisor_num = int(divisor)
    for position in range(len(dividend)):
        if int(dividend[: position + 1]) >= divisor_num:
            return position
    return len(dividend)


def layout_grid(grid: GridState) -> List[GridLine]:
    """Lay the grid out as lines of one cell per dividend column."""
    width = len(grid.dividend)
    gutter_width = len(grid.divisor) + 2
    blank = " " * gutter_width
    q_start = quotient_start_column(grid.dividend, grid.divisor)

    quotient_line = GridLine(blank, [Cell() for _ in range(width)], kind="quotient")
    for index, digit in enumerate(grid.quotient):
        column = q_start + index
        if column < width:
            quotient_line.cells[column].text = digit

    bar_line = GridLine(blank, [Cell(RULE, RULE) for _ in range(width)], kind="bar")
    dividend_line = GridLine(
        f"{grid.divisor} )",
        [Cell(digit) for digit in grid.dividend],
        kind="dividend",
    )

    row_lines: List[GridLine] = []
    for row in grid.work_rows:
        line = GridLine(blank, [Cell() for _ in range(width)], kind=row.kind.value)
        if row.kind == WorkRowKind.LINE:
            for column in range(row.start_col, row.end_col + 1):
                line.cells[column] = Cell(RULE, RULE)
        else:
            for offset, digit in enumerate(row.value or ""):
                line.cells[row.start_col + offset].text = digit
            if row.kind == WorkRowKind.PRODUCT:
                line.cells[row.start_col].prefix = "-"
        row_lines.append(line)

    _apply_highlight(grid, q_start, quotient_line, dividend_line, row_lines)
    return [quotient_line, bar_line, dividend_line, *row_lines]


def _apply_highlight(
    grid: GridState,
    q_start: int,
    quotient_line: GridLine,
    dividend_line: GridLine,
    row_lines: List[GridLine],
) -> None:
    highlight = grid.highlight
    if highlight is None:
        return
    width = len(grid.dividend)

    def mark(line: GridLine, column: int, emphasis: str) -> None:
        if 0 <= column < width:
            line.cells[column].emphasis = emphasis

    kind = highlight.kind
    if kind == HighlightKind.BRING_DOWN:
        mark(dividend_line, highlight.column, PREVIEW)
    elif kind == HighlightKind.WORKING:
        mark(dividend_line, highlight.end_col, ACTIVE)
        if row_lines:
            for column, cell in enumerate(row_lines[-1].cells):
                if cell.text.strip():
                    mark(row_lines[-1], column, ACTIVE)
        else:
            for column in range(highlight.start_col, highlight.end_col + 1):
                mark(dividend_line, column, ACTIVE)
    elif kind in (HighlightKind.DIVIDE_PREVIEW, HighlightKind.ZERO_PREVIEW):
        column = q_start + highlight.quotient_pos
        if 0 <= column < width:
            quotient_line.cells[column].text = "?"
        mark(quotient_line, column, PREVIEW)
    elif kind == HighlightKind.QUOTIENT_DIGIT:
        mark(quotient_line, q_start + highlight.quotient_pos, RESULT)
    elif kind == HighlightKind.MULTIPLY_PREVIEW:
        mark(quotient_line, q_start + len(grid.quotient) - 1, ACTIVE)
    elif kind == HighlightKind.ROW:
        if 0 <= highlight.row_index < len(row_lines):
            line = row_lines[highlight.row_index]
            for column, cell in enumerate(line.cells):
                if cell.text.strip():
                    mark(line, column, _ROW_EMPHASIS[highlight.reason])
    elif kind == HighlightKind.COMPLETE:
        for index in range(len(grid.quotient)):
            mark(quotient_line, q_start + index, RESULT)


def render_text(grid: GridState) -> Text:
    text = Text()
    for index, line in enumerate(layout_grid(grid)):
        if index:
            text.append("\n")
        text.append(line.gutter, style="bold cyan" if line.kind == "dividend" else None)
        for cell in line.cells:
            text.append(cell.prefix)
            text.append(cell.text, style=EMPHASIS_STYLES.get(cell.emphasis))
    return text


def render_plain(grid: GridState) -> str:
    lines = []
    for line in layout_grid(grid):
        body = "".join(cell.prefix + cell.text for cell in line.cells)
        lines.append((line.gutter + body).rstrip())
    return "\n".join(lines)
