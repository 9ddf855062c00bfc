"""Long-division step generation and navigation."""

from .steps import (
    BringDownHighlight,
    CompleteHighlight,
    DividePreviewHighlight,
    Division,
    GridState,
    Highlight,
    HighlightKind,
    MultiplyPreviewHighlight,
    QuotientDigitHighlight,
    RowHighlight,
    RowReason,
    Step,
    StepKind,
    WorkingHighlight,
    WorkRow,
    WorkRowKind,
    ZeroPreviewHighlight,
)
from .generator import StepGenerator, generate_division, generate_steps
from .navigation import NavigationController
from .render import layout_grid, render_plain, render_text

__all__ = [
    "BringDownHighlight",
    "CompleteHighlight",
    "DividePreviewHighlight",
    "Division",
    "GridState",
    "Highlight",
    "HighlightKind",
    "MultiplyPreviewHighlight",
    "NavigationController",
    "QuotientDigitHighlight",
    "RowHighlight",
    "RowReason",
    "Step",
    "StepGenerator",
    "StepKind",
    "WorkingHighlight",
    "WorkRow",
    "WorkRowKind",
    "ZeroPreviewHighlight",
    "generate_division",
    "generate_steps",
    "layout_grid",
    "render_plain",
    "render_text",
]
