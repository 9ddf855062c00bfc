import io
import sys
import tempfile
import os
from pathlib import Path
import unittest

from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from longdiv.division.navigation import NavigationController
from longdiv.tui import LongDivisionTUI


class TestTuiKeys(unittest.TestCase):
    def setUp(self):
        self.controller = NavigationController()
        self.controller.load("125", "5")
        console = Console(file=io.StringIO(), width=120, height=40, color_system=None)
        self.tui = LongDivisionTUI(controller=self.controller, console=console)

    def test_arrow_keys_move_cursor(self):
        self.tui.handle_key("\x1b[C")
        self.tui.handle_key("l")
        self.assertEqual(self.controller.cursor, 1)
        self.tui.handle_key("\x1b[D")
        self.assertEqual(self.controller.cursor, 0)
        self.tui.handle_key("h")
        self.assertEqual(self.controller.cursor, 0)
        self.assertEqual(self.tui.state.status_message, "Already at the first step")

    def test_first_last_and_reset(self):
        self.tui.handle_key("G")
        self.assertEqual(self.controller.cursor, len(self.controller.steps) - 1)
        self.tui.handle_key("l")
        self.assertEqual(self.tui.state.status_message, "Already at the last step")
        self.tui.handle_key("g")
        self.assertEqual(self.controller.cursor, 0)
        self.tui.handle_key("r")
        self.assertEqual(self.controller.cursor, -1)

    def test_new_problem_requests_prompt(self):
        self.assertEqual(self.tui.handle_key("n"), "new")
        self.assertFalse(self.controller.is_active)

    def test_toggles_and_render(self):
        self.tui.handle_key("H")
        self.tui.handle_key("l")
        self.assertTrue(self.tui.state.show_history)
        self.tui.console.print(self.tui.render())
        self.tui.handle_key("?")
        self.tui.console.print(self.tui.render())
        self.assertTrue(self.tui.state.show_help)

    def test_save_writes_files(self):
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmpdir:
            os.chdir(tmpdir)
            try:
                self.tui.handle_key("s")
                self.tui.handle_key("e")
                self.assertTrue((Path(tmpdir) / "longdiv_125_5.json").exists())
                self.assertTrue((Path(tmpdir) / "longdiv_125_5.md").exists())
            finally:
                os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
