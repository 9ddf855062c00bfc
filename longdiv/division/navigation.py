"""Cursor navigation over a generated step sequence."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from longdiv.division.generator import generate_division
from longdiv.division.steps import Division, Step
from longdiv.problems import parse_problem

logger = logging.getLogger(__name__)

IDLE_DESCRIPTION = "Enter a dividend and divisor to begin."


class NavigationController:
    """Owns the current problem and a read cursor into its steps.

    The cursor starts at -1 ("ready, nothing shown yet"). Every derived
    value is computed from ``(division, cursor)`` on access.
    """

    def __init__(self) -> None:
        self.division: Optional[Division] = None
        self.cursor = -1

    # ===== Problem lifecycle =====

    def load(self, dividend: str, divisor: str) -> Division:
        """Validate the operands and start a fresh problem."""
        dividend, divisor = parse_problem(dividend, divisor)
        self.division = generate_division(dividend, divisor)
        self.cursor = -1
        logger.debug("Loaded %s with %d steps", self.division.title, len(self.steps))
        return self.division

    def new_problem(self) -> None:
        self.division = None
        self.cursor = -1

    def reset(self) -> None:
        self.cursor = -1

    # ===== Movement =====

    def step_forward(self) -> Optional[Step]:
        if not self.can_step_forward:
            return None
        self.cursor += 1
        logger.debug("Cursor -> %d", self.cursor)
        return self.steps[self.cursor]

    def step_backward(self) -> Optional[Step]:
        # Index 0 is the floor; the pre-start position is only reachable via reset().
        if not self.can_step_backward:
            return None
        self.cursor -= 1
        logger.debug("Cursor -> %d", self.cursor)
        return self.steps[self.cursor]

    def seek(self, index: int) -> Optional[Step]:
        """Jump to ``index``, clamped into the sequence. Returns None if nothing moved."""
        if not self.steps:
            return None
        target = max(0, min(index, len(self.steps) - 1))
        if target == self.cursor:
            return None
        self.cursor = target
        logger.debug("Cursor -> %d", self.cursor)
        return self.steps[self.cursor]

    def first(self) -> Optional[Step]:
        return self.seek(0)

    def last(self) -> Optional[Step]:
        return self.seek(len(self.steps) - 1)

    # ===== Derived values =====

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self.division.steps if self.division else ()

    @property
    def is_active(self) -> bool:
        return self.division is not None

    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.cursor < len(self.steps):
            return self.steps[self.cursor]
        return None

    @property
    def can_step_forward(self) -> bool:
        return self.cursor < len(self.steps) - 1

    @property
    def can_step_backward(self) -> bool:
        return self.cursor > 0

    @property
    def step_counter(self) -> str:
        return f"Step {self.cursor + 1} of {len(self.steps)}"

    @property
    def description(self) -> str:
        if self.division is None:
            return IDLE_DESCRIPTION
        step = self.current_step
        if step is None:
            return self.division.ready_description
        return step.description

    @property
    def history(self) -> List[str]:
        return [step.description for step in self.steps[: self.cursor + 1]]
