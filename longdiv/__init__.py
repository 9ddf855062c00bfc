"""Step-by-step long division."""

from .division import (
    Division,
    GridState,
    NavigationController,
    Step,
    StepKind,
    WorkRow,
    WorkRowKind,
    generate_division,
    generate_steps,
)
from .problems import EXAMPLES, ProblemError, parse_problem

__all__ = [
    "Division",
    "EXAMPLES",
    "GridState",
    "NavigationController",
    "ProblemError",
    "Step",
    "StepKind",
    "WorkRow",
    "WorkRowKind",
    "generate_division",
    "generate_steps",
    "parse_problem",
]
