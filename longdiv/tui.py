from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import select
import sys
import termios
import tty

from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from .division.navigation import NavigationController
from .division.render import render_text
from .export import save_json, save_markdown
from .problems import ProblemError


@dataclass
class UIState:
    show_history: bool = False
    show_help: bool = False
    status_message: str = ""
    last_key: str = ""


def run_tui(
    controller: NavigationController,
    console: Optional[Console] = None,
    debug: bool = False,
) -> None:
    tui = LongDivisionTUI(controller=controller, console=console, debug=debug)
    tui.run()


class LongDivisionTUI:
    def __init__(
        self,
        controller: NavigationController,
        console: Optional[Console] = None,
        debug: bool = False,
    ):
        self.controller = controller
        self.console = console or Console()
        self.debug = debug
        self.state = UIState()

    def run(self) -> None:
        while True:
            if not self.controller.is_active and not self._prompt_problem():
                return
            action = self._loop()
            if action != "new":
                return

    def _loop(self) -> Optional[str]:
        with Live(self.render(), console=self.console, refresh_per_second=10, screen=True) as live:
            while True:
                key = self._get_key()
                if not key:
                    continue
                if key in ("q", "\x03"):
                    return "quit"
                action = self.handle_key(key)
                if action:
                    return action
                live.update(self.render())

    def _prompt_problem(self) -> bool:
        while True:
            dividend = Prompt.ask("Dividend (blank to quit)", console=self.console, default="")
            if not dividend.strip():
                return False
            divisor = Prompt.ask("Divisor", console=self.console, default="")
            try:
                self.controller.load(dividend, divisor)
            except ProblemError as exc:
                self.console.print(f"[red]Error:[/] {exc}")
                continue
            self.state.status_message = ""
            return True

    # ===== Rendering =====

    def render(self) -> Layout:
        layout = Layout()
        history_height = 10 if self.state.show_history else 3
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="main", ratio=1),
            Layout(name="history", size=history_height),
            Layout(name="footer", size=3),
        )
        layout["header"].update(self._render_header())
        if self.state.show_help:
            layout["main"].update(self._render_help())
        else:
            layout["main"].split_row(
                Layout(name="grid", ratio=1),
                Layout(name="description", ratio=1),
            )
            layout["main"]["grid"].update(self._render_grid())
            layout["main"]["description"].update(self._render_description())
        layout["history"].update(self._render_history(history_height))
        layout["footer"].update(self._render_footer())
        return layout

    def _render_header(self) -> Panel:
        title = Text()
        title.append("Long Division", style="bold cyan")
        division = self.controller.division
        if division is not None:
            title.append("  |  ", style="dim")
            title.append(division.title, style="green")
        title.append("  |  ", style="dim")
        title.append(self.controller.step_counter, style="bold yellow")
        return Panel(title, style="bold")

    def _render_grid(self) -> Panel:
        step = self.controller.current_step
        if step is None:
            body = Text('Press "Forward" (→) to begin the division process', style="dim")
        else:
            body = render_text(step.grid)
        return Panel(body, title="Work", border_style="green", padding=(1, 2))

    def _render_description(self) -> Panel:
        step = self.controller.current_step
        parts = [Text(self.controller.description, style="bold")]
        if step is not None:
            label = "Preview" if step.kind.is_preview else step.kind.value.replace("_", " ").title()
            parts.append(Text(""))
            parts.append(Text(label, style="dim"))
        return Panel(Group(*parts), title="Explanation", border_style="blue", padding=(1, 2))

    def _render_history(self, height: int) -> Panel:
        history = self.controller.history
        if not self.state.show_history:
            return Panel(
                Text(f"History: {len(history)} entries [H to expand]", style="cyan"),
                border_style="cyan",
                height=height,
            )
        table = Table(show_header=False, box=None, padding=(0, 1))
        visible = max(1, height - 2)
        start = max(0, len(history) - visible)
        for number, entry in enumerate(history[start:], start=start + 1):
            table.add_row(Text(str(number), style="dim"), Text(entry))
        return Panel(table, title="History [H to collapse]", border_style="cyan", height=height)

    def _render_help(self) -> Panel:
        lines = [
            "Navigation:",
            "  Right or l  - Forward",
            "  Left or h   - Backward",
            "  g/G         - First/Last step",
            "  r           - Reset to the start",
            "  n           - New problem",
            "",
            "View:",
            "  H           - Toggle history",
            "  ?           - Toggle this help",
            "",
            "General:",
            "  s           - Save steps as JSON",
            "  e           - Export Markdown",
            "  q           - Quit",
        ]
        return Panel(Text("\n".join(lines)), title="Help", border_style="bright_cyan")

    def _render_footer(self) -> Panel:
        shortcuts = Text()
        for key, label in (
            ("[<-] ", "Back  "),
            ("[->] ", "Forward  "),
            ("[r] ", "Reset  "),
            ("[n] ", "New  "),
            ("[H] ", "History  "),
            ("[?] ", "Help  "),
            ("[q] ", "Quit"),
        ):
            shortcuts.append(key, style="bold")
            shortcuts.append(label, style="dim")
        if self.state.status_message:
            shortcuts.append("  |  ", style="dim")
            shortcuts.append(self.state.status_message, style="yellow")
        if self.debug:
            shortcuts.append("  |  ", style="dim")
            shortcuts.append(
                f"cursor={self.controller.cursor} key={self.state.last_key}", style="dim"
            )
        return Panel(shortcuts, style="dim")

    # ===== Input Handling =====

    def handle_key(self, key: str) -> Optional[str]:
        key = self._normalize_key(key)
        self.state.last_key = key
        self.state.status_message = ""

        if key in ("l", "RIGHT", " "):
            if self.controller.step_forward() is None:
                self.state.status_message = "Already at the last step"
        elif key in ("h", "LEFT"):
            if self.controller.step_backward() is None:
                self.state.status_message = "Already at the first step"
        elif key == "g":
            self.controller.first()
        elif key == "G":
            self.controller.last()
        elif key == "r":
            self.controller.reset()
        elif key == "n":
            self.controller.new_problem()
            return "new"
        elif key == "H":
            self.state.show_history = not self.state.show_history
        elif key == "?":
            self.state.show_help = not self.state.show_help
        elif key == "s":
            self._save("json")
        elif key == "e":
            self._save("md")
        return None

    def _save(self, fmt: str) -> None:
        division = self.controller.division
        if division is None:
            return
        stem = f"longdiv_{division.dividend}_{division.divisor}"
        if fmt == "json":
            path = save_json(division, Path.cwd() / f"{stem}.json")
        else:
            path = save_markdown(division, Path.cwd() / f"{stem}.md")
        self.state.status_message = f"Saved {path.name}"

    def _get_key(self) -> str:
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
        try:
            key = sys.stdin.read(1)
            if key == "\x1b":
                key += self._read_escape_tail()
            return key
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def _read_escape_tail(self, limit: int = 8) -> str:
        """Collect the rest of an arrow/home/end escape sequence, if one follows."""
        tail = ""
        while len(tail) < limit and select.select([sys.stdin], [], [], 0.02)[0]:
            char = sys.stdin.read(1)
            tail += char
            if char.isalpha() or char == "~":
                break
        return tail

    def _normalize_key(self, key: str) -> str:
        if key.startswith("\x1b[") or key.startswith("\x1bO"):
            last = key[-1]
            if last == "C":
                return "RIGHT"
            if last == "D":
                return "LEFT"
            if last == "H":
                return "g"
            if last == "F":
                return "G"
            return "ESC"
        if key.startswith("\x1b"):
            return "ESC"
        return key
