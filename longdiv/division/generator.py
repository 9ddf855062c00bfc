"""Step generation for narrated long division."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from longdiv.division.steps import (
    BringDownHighlight,
    CompleteHighlight,
    DividePreviewHighlight,
    Division,
    GridState,
    Highlight,
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

logger = logging.getLogger(__name__)


def generate_steps(dividend: str, divisor: str) -> Tuple[Step, ...]:
    """Generate the full step sequence for ``dividend ÷ divisor``.

    Both operands must be non-empty digit strings and the divisor must be
    non-zero; behavior outside that precondition is undefined.
    """
    return StepGenerator(dividend, divisor).run()


def generate_division(dividend: str, divisor: str) -> Division:
    return Division(
        dividend=dividend,
        divisor=divisor,
        steps=generate_steps(dividend, divisor),
    )


def working_span(working_number: int, position: int) -> Tuple[int, int]:
    """Columns covered by ``working_number`` when its last digit sits at ``position``."""
    start = position - len(str(working_number)) + 1
    return max(0, start), position


class StepGenerator:
    """Walks the dividend left to right and records a snapshot per action."""

    def __init__(self, dividend: str, divisor: str) -> None:
        self.dividend = dividend
        self.divisor = divisor
        self.divisor_num = int(divisor)
        self.working_number = 0
        self.quotient = ""
        self.work_rows: List[WorkRow] = []
        self.steps: List[Step] = []

    def run(self) -> Tuple[Step, ...]:
        self._emit(StepKind.INITIAL, "Starting long division", None)

        for position, char in enumerate(self.dividend):
            digit = int(char)
            self.working_number = self.working_number * 10 + digit
            if position > 0 or self.quotient:
                self._bring_down(position, digit)

            if self.working_number >= self.divisor_num:
                self._divide_cycle(position)
            elif self.quotient:
                self._write_zero()

        self._complete()
        logger.debug(
            "Generated %d steps for %s / %s",
            len(self.steps),
            self.dividend,
            self.divisor,
        )
        return tuple(self.steps)

    def _bring_down(self, position: int, digit: int) -> None:
        self._emit(
            StepKind.PREVIEW_BRING_DOWN,
            f"We bring down the digit {digit} to make {self.working_number}",
            BringDownHighlight(column=position),
        )
        start, end = working_span(self.working_number, position)
        self._emit(
            StepKind.EXECUTE_BRING_DOWN,
            f"Now we have {self.working_number} to work with",
            WorkingHighlight(value=self.working_number, start_col=start, end_col=end),
        )

    def _divide_cycle(self, position: int) -> None:
        working = self.working_number
        quotient_digit = working // self.divisor_num
        product = quotient_digit * self.divisor_num
        difference = working - product

        self._emit(
            StepKind.PREVIEW_DIVIDE,
            f"How many times does {self.divisor_num} go into {working}? "
            f"Answer: {quotient_digit}",
            DividePreviewHighlight(
                working_number=working,
                divisor=self.divisor_num,
                quotient_digit=quotient_digit,
                quotient_pos=len(self.quotient),
            ),
        )
        self.quotient += str(quotient_digit)
        self._emit(
            StepKind.EXECUTE_DIVIDE,
            f"Write {quotient_digit} in the quotient",
            QuotientDigitHighlight(quotient_pos=len(self.quotient) - 1),
        )

        self._emit(
            StepKind.PREVIEW_MULTIPLY,
            f"Multiply: {quotient_digit} × {self.divisor_num} = {product}",
            MultiplyPreviewHighlight(
                quotient_digit=quotient_digit,
                divisor=self.divisor_num,
                product=product,
            ),
        )
        product_text = str(product)
        product_start = position - len(product_text) + 1
        self.work_rows.append(
            WorkRow(WorkRowKind.PRODUCT, product_start, position, product_text)
        )
        product_index = len(self.work_rows) - 1
        self._emit(
            StepKind.EXECUTE_MULTIPLY,
            f"Write {product} below",
            RowHighlight(row_index=product_index, reason=RowReason.PRODUCT_WRITTEN),
        )

        self._emit(
            StepKind.PREVIEW_SUBTRACT,
            f"Subtract: {working} - {product} = {difference}",
            RowHighlight(row_index=product_index, reason=RowReason.SUBTRACT_PREVIEW),
        )
        difference_text = str(difference)
        self.work_rows.append(WorkRow(WorkRowKind.LINE, product_start, position))
        self.work_rows.append(
            WorkRow(
                WorkRowKind.REMAINDER,
                position - len(difference_text) + 1,
                position,
                difference_text,
            )
        )
        self.working_number = difference
        self._emit(
            StepKind.EXECUTE_SUBTRACT,
            f"The remainder is {difference}",
            RowHighlight(
                row_index=len(self.work_rows) - 1,
                reason=RowReason.REMAINDER_SHOWN,
            ),
        )

    def _write_zero(self) -> None:
        self._emit(
            StepKind.PREVIEW_ZERO,
            f"{self.divisor_num} doesn't go into {self.working_number}, so write 0",
            ZeroPreviewHighlight(
                working_number=self.working_number,
                divisor=self.divisor_num,
                quotient_pos=len(self.quotient),
            ),
        )
        self.quotient += "0"
        self._emit(
            StepKind.EXECUTE_ZERO,
            "Wrote 0 in the quotient",
            QuotientDigitHighlight(quotient_pos=len(self.quotient) - 1),
        )

    def _complete(self) -> None:
        remainder = self.working_number
        description = (
            f"Division complete! {self.dividend} ÷ {self.divisor} = "
            f"{self.quotient or '0'}"
        )
        if remainder > 0:
            description += f" R{remainder}"
        self._emit(
            StepKind.COMPLETE,
            description,
            CompleteHighlight(final_remainder=remainder),
        )

    def _emit(self, kind: StepKind, description: str, highlight: Optional[Highlight]) -> None:
        grid = GridState(
            dividend=self.dividend,
            divisor=self.divisor,
            quotient=self.quotient,
            work_rows=tuple(self.work_rows),
            highlight=highlight,
        )
        self.steps.append(Step(kind=kind, description=description, grid=grid))
