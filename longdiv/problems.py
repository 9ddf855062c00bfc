"""Input handling: sanitize, validate, and preset example problems."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

_NON_DIGIT = re.compile(r"[^0-9]")


class ProblemError(ValueError):
    """Raised when a dividend/divisor pair cannot be divided."""


@dataclass(frozen=True)
class ExampleProblem:
    label: str
    dividend: str
    divisor: str

    @property
    def value(self) -> str:
        return f"{self.dividend},{self.divisor}"


EXAMPLES: List[ExampleProblem] = [
    ExampleProblem("Simple: 84 ÷ 4", "84", "4"),
    ExampleProblem("Easy: 125 ÷ 5", "125", "5"),
    ExampleProblem("With remainder: 7 ÷ 2", "7", "2"),
    ExampleProblem("Repeating: 100 ÷ 3", "100", "3"),
    ExampleProblem("Zero in quotient: 408 ÷ 4", "408", "4"),
    ExampleProblem("Two-digit divisor: 1234 ÷ 12", "1234", "12"),
    ExampleProblem("Larger: 9876 ÷ 32", "9876", "32"),
]


def sanitize_digits(text: str) -> str:
    """Drop every character that is not a decimal digit."""
    return _NON_DIGIT.sub("", text or "")


def parse_problem(dividend: str, divisor: str) -> Tuple[str, str]:
    """Validate raw operands and return them as normalized digit strings."""
    dividend = sanitize_digits(dividend.strip() if dividend else "")
    divisor = sanitize_digits(divisor.strip() if divisor else "")

    if not dividend or not divisor:
        raise ProblemError("Please enter both dividend and divisor")
    if int(divisor) == 0:
        raise ProblemError("Cannot divide by zero")
    if int(dividend) == 0:
        raise ProblemError("Dividend cannot be zero")

    return str(int(dividend)), str(int(divisor))


def load_example(value: str) -> Tuple[str, str]:
    """Split an example picker value of the form ``"dividend,divisor"``."""
    if "," not in value:
        raise ProblemError(f"Invalid example: {value!r}")
    dividend, divisor = value.split(",", 1)
    return dividend.strip(), divisor.strip()


def example_by_index(index: int) -> ExampleProblem:
    if index < 0 or index >= len(EXAMPLES):
        raise ProblemError(f"Example index out of range (0-{len(EXAMPLES) - 1})")
    return EXAMPLES[index]


def resolve_example(value: str) -> Tuple[str, str]:
    """Accept either a preset index ("3") or a picker value ("84,4")."""
    value = value.strip()
    if "," in value:
        return load_example(value)
    if not value.isdigit():
        raise ProblemError(f"Invalid example: {value!r}")
    example = example_by_index(int(value))
    return example.dividend, example.divisor
