"""Step types and grid snapshot schema for long division."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class StepKind(Enum):
    INITIAL = "initial"
    PREVIEW_BRING_DOWN = "preview_bring_down"
    EXECUTE_BRING_DOWN = "execute_bring_down"
    PREVIEW_DIVIDE = "preview_divide"
    EXECUTE_DIVIDE = "execute_divide"
    PREVIEW_MULTIPLY = "preview_multiply"
    EXECUTE_MULTIPLY = "execute_multiply"
    PREVIEW_SUBTRACT = "preview_subtract"
    EXECUTE_SUBTRACT = "execute_subtract"
    PREVIEW_ZERO = "preview_zero"
    EXECUTE_ZERO = "execute_zero"
    COMPLETE = "complete"

    @property
    def is_preview(self) -> bool:
        return self.value.startswith("preview_")


class WorkRowKind(Enum):
    PRODUCT = "product"
    LINE = "line"
    REMAINDER = "remainder"


@dataclass(frozen=True)
class WorkRow:
    """One line of scratch work beneath the dividend.

    ``start_col`` and ``end_col`` are inclusive dividend column indices.
    """

    kind: WorkRowKind
    start_col: int
    end_col: int
    value: Optional[str] = None

    @property
    def width(self) -> int:
        return self.end_col - self.start_col + 1


class HighlightKind(Enum):
    BRING_DOWN = "bring_down"
    WORKING = "working"
    DIVIDE_PREVIEW = "divide_preview"
    QUOTIENT_DIGIT = "quotient_digit"
    MULTIPLY_PREVIEW = "multiply_preview"
    ROW = "row"
    ZERO_PREVIEW = "zero_preview"
    COMPLETE = "complete"


class RowReason(Enum):
    PRODUCT_WRITTEN = "product_written"
    SUBTRACT_PREVIEW = "subtract_preview"
    REMAINDER_SHOWN = "remainder_shown"


@dataclass(frozen=True)
class BringDownHighlight:
    """The dividend digit about to be brought down."""

    column: int
    kind: HighlightKind = field(init=False, default=HighlightKind.BRING_DOWN)


@dataclass(frozen=True)
class WorkingHighlight:
    """The current working number and the columns it spans."""

    value: int
    start_col: int
    end_col: int
    kind: HighlightKind = field(init=False, default=HighlightKind.WORKING)


@dataclass(frozen=True)
class DividePreviewHighlight:
    working_number: int
    divisor: int
    quotient_digit: int
    quotient_pos: int
    kind: HighlightKind = field(init=False, default=HighlightKind.DIVIDE_PREVIEW)


@dataclass(frozen=True)
class QuotientDigitHighlight:
    quotient_pos: int
    kind: HighlightKind = field(init=False, default=HighlightKind.QUOTIENT_DIGIT)


@dataclass(frozen=True)
class MultiplyPreviewHighlight:
    quotient_digit: int
    divisor: int
    product: int
    kind: HighlightKind = field(init=False, default=HighlightKind.MULTIPLY_PREVIEW)


@dataclass(frozen=True)
class RowHighlight:
    """A specific work row, emphasized for ``reason``."""

    row_index: int
    reason: RowReason
    kind: HighlightKind = field(init=False, default=HighlightKind.ROW)


@dataclass(frozen=True)
class ZeroPreviewHighlight:
    working_number: int
    divisor: int
    quotient_pos: int
    kind: HighlightKind = field(init=False, default=HighlightKind.ZERO_PREVIEW)


@dataclass(frozen=True)
class CompleteHighlight:
    final_remainder: int
    kind: HighlightKind = field(init=False, default=HighlightKind.COMPLETE)


Highlight = Union[
    BringDownHighlight,
    WorkingHighlight,
    DividePreviewHighlight,
    QuotientDigitHighlight,
    MultiplyPreviewHighlight,
    RowHighlight,
    ZeroPreviewHighlight,
    CompleteHighlight,
]


@dataclass(frozen=True)
class GridState:
    """Everything a renderer needs to draw the grid at one step."""

    dividend: str
    divisor: str
    quotient: str = ""
    work_rows: Tuple[WorkRow, ...] = ()
    highlight: Optional[Highlight] = None

    @property
    def quotient_value(self) -> int:
        return int(self.quotient) if self.quotient else 0


@dataclass(frozen=True)
class Step:
    """One atomic unit of the narrated algorithm."""

    kind: StepKind
    description: str
    grid: GridState


@dataclass(frozen=True)
class Division:
    """A generated problem: operands plus its immutable step sequence."""

    dividend: str
    divisor: str
    steps: Tuple[Step, ...] = ()

    @property
    def title(self) -> str:
        return f"{self.dividend} ÷ {self.divisor}"

    @property
    def ready_description(self) -> str:
        return (
            f"Ready to divide {self.dividend} by {self.divisor}. "
            'Press "Forward" to begin.'
        )

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    @property
    def quotient(self) -> int:
        step = self.final_step
        return step.grid.quotient_value if step else 0

    @property
    def remainder(self) -> int:
        step = self.final_step
        if step and isinstance(step.grid.highlight, CompleteHighlight):
            return step.grid.highlight.final_remainder
        return 0

    @property
    def result_text(self) -> str:
        text = f"{self.title} = {self.quotient}"
        if self.remainder > 0:
            text += f" R{self.remainder}"
        return text
