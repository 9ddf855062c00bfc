from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt

from .division.navigation import NavigationController
from .division.render import render_text
from .export import save_json, save_markdown
from .problems import EXAMPLES, ProblemError, resolve_example


def main(argv: list[str] | None = None, console: Optional[Console] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="longdiv",
        description="Step through long division one action at a time",
    )
    parser.add_argument("dividend", nargs="?", help="Number to divide")
    parser.add_argument("divisor", nargs="?", help="Number to divide by")
    parser.add_argument(
        "--example",
        default=None,
        help="Preset example index (see --list-examples) or DIVIDEND,DIVISOR",
    )
    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List preset example problems and exit",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Run the interactive terminal UI",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not pause between steps",
    )
    parser.add_argument("--json", default=None, help="Write all steps to a JSON file")
    parser.add_argument(
        "--markdown", default=None, help="Write all steps to a Markdown file"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args(argv)
    console = console or Console()
    _configure_logging(args.verbose, console)

    if args.list_examples:
        for index, example in enumerate(EXAMPLES):
            console.print(f"{index}: {example.label}")
        return 0

    controller = NavigationController()
    try:
        if args.example is not None:
            controller.load(*resolve_example(args.example))
        elif args.dividend is not None:
            if args.divisor is None:
                raise ProblemError("Please enter both dividend and divisor")
            controller.load(args.dividend, args.divisor)

        if args.tui:
            from .tui import run_tui

            if not _attach_tty():
                console.print(
                    "Error: Interactive UI requires a TTY for input. Run from a terminal."
                )
                return 1
            run_tui(controller, console=console, debug=args.verbose)
            return 0

        if not controller.is_active:
            dividend = Prompt.ask("Dividend", console=console)
            divisor = Prompt.ask("Divisor", console=console)
            controller.load(dividend, divisor)

        if args.json:
            path = save_json(controller.division, args.json)
            console.print(f"Saved {path}")
        if args.markdown:
            path = save_markdown(controller.division, args.markdown)
            console.print(f"Saved {path}")
        if args.json or args.markdown:
            return 0

        walk_steps(controller, console, pause=not args.no_pause)
        return 0
    except KeyboardInterrupt:
        console.print("\nInterrupted.")
        return 1
    except ProblemError as exc:
        console.print(f"\nError: {exc}")
        return 1
    except Exception as exc:
        console.print(f"\nError: {exc}")
        return 1


def walk_steps(controller: NavigationController, console: Console, pause: bool = True) -> None:
    """Print every step in order, optionally waiting for Enter in between."""
    console.print(controller.description)
    while controller.step_forward() is not None:
        step = controller.current_step
        console.print()
        console.print(f"[bold]{controller.step_counter}[/] ({step.kind.value})")
        console.print(Panel(render_text(step.grid), border_style="green", expand=False))
        console.print(step.description)
        if pause and controller.can_step_forward:
            console.input("Press Enter to continue...")


def _configure_logging(verbose: bool, console: Console) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _attach_tty() -> bool:
    """Make stdin a terminal, reopening the controlling tty when input is piped."""
    if sys.stdin.isatty():
        return True
    for candidate in (getattr(os, "ctermid", lambda: "/dev/tty")(), "/dev/tty"):
        try:
            fd = os.open(candidate, os.O_RDWR)
        except OSError:
            continue
        try:
            os.dup2(fd, sys.stdin.fileno())
        finally:
            os.close(fd)
        return True
    return False


if __name__ == "__main__":
    raise SystemExit(main())
