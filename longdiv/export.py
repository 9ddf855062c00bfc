"""Save a generated division as JSON or Markdown."""

from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

from longdiv.division.render import render_plain
from longdiv.division.steps import Division, Step


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def step_to_dict(step: Step) -> Dict[str, Any]:
    return _jsonable(asdict(step))


def division_to_dict(division: Division) -> Dict[str, Any]:
    return {
        "dividend": division.dividend,
        "divisor": division.divisor,
        "quotient": division.quotient,
        "remainder": division.remainder,
        "result": division.result_text,
        "steps": [step_to_dict(step) for step in division.steps],
    }


def save_json(division: Division, path: Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(division_to_dict(division), indent=2), encoding="utf-8")
    return path


def to_markdown(division: Division) -> str:
    lines: List[str] = [f"# Long division: {division.title}", "", division.result_text, ""]
    for number, step in enumerate(division.steps, start=1):
        lines.append(f"## Step {number}: {step.kind.value}")
        lines.append("")
        lines.append(step.description)
        lines.append("")
        lines.append("```")
        lines.append(render_plain(step.grid))
        lines.append("```")
        lines.append("")
    return "\n".join(lines)


def save_markdown(division: Division, path: Path) -> Path:
    path = Path(path)
    path.write_text(to_markdown(division), encoding="utf-8")
    return path
