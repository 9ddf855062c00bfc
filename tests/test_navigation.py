import sys
from pathlib import Path
import unittest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from longdiv.division.navigation import IDLE_DESCRIPTION, NavigationController
from longdiv.division.steps import StepKind
from longdiv.problems import ProblemError


class TestNavigationController(unittest.TestCase):
    def setUp(self):
        self.controller = NavigationController()
        self.controller.load("84", "4")
        self.total = len(self.controller.steps)

    def test_load_starts_before_first_step(self):
        self.assertEqual(self.controller.cursor, -1)
        self.assertIsNone(self.controller.current_step)
        self.assertEqual(self.controller.step_counter, f"Step 0 of {self.total}")
        self.assertEqual(
            self.controller.description,
            'Ready to divide 84 by 4. Press "Forward" to begin.',
        )
        self.assertTrue(self.controller.can_step_forward)
        self.assertFalse(self.controller.can_step_backward)
        self.assertEqual(self.controller.history, [])

    def test_step_forward_walks_to_end_and_stops(self):
        first = self.controller.step_forward()
        self.assertEqual(first.kind, StepKind.INITIAL)
        self.assertEqual(self.controller.description, "Starting long division")
        while self.controller.can_step_forward:
            self.assertIsNotNone(self.controller.step_forward())
        self.assertEqual(self.controller.cursor, self.total - 1)
        self.assertEqual(self.controller.current_step.kind, StepKind.COMPLETE)
        self.assertIsNone(self.controller.step_forward())
        self.assertEqual(self.controller.cursor, self.total - 1)
        self.assertEqual(self.controller.step_counter, f"Step {self.total} of {self.total}")

    def test_step_backward_stops_at_first_step(self):
        self.assertIsNone(self.controller.step_backward())
        self.assertEqual(self.controller.cursor, -1)
        self.controller.step_forward()
        self.assertIsNone(self.controller.step_backward())
        self.assertEqual(self.controller.cursor, 0)

    def test_forward_then_backward_round_trip(self):
        self.controller.step_forward()
        while self.controller.can_step_forward:
            before = self.controller.cursor
            before_step = self.controller.current_step
            self.controller.step_forward()
            back = self.controller.step_backward()
            self.assertEqual(self.controller.cursor, before)
            self.assertIs(back, before_step)
            self.controller.step_forward()

    def test_history_tracks_cursor(self):
        for _ in range(3):
            self.controller.step_forward()
        steps = self.controller.steps
        self.assertEqual(self.controller.history, [s.description for s in steps[:3]])
        self.controller.step_backward()
        self.assertEqual(self.controller.history, [s.description for s in steps[:2]])

    def test_reset_keeps_steps(self):
        steps = self.controller.steps
        for _ in range(4):
            self.controller.step_forward()
        self.controller.reset()
        self.assertEqual(self.controller.cursor, -1)
        self.assertIs(self.controller.steps, steps)
        self.assertEqual(self.controller.history, [])
        self.assertTrue(self.controller.description.startswith("Ready to divide 84 by 4"))

    def test_new_problem_clears_everything(self):
        self.controller.step_forward()
        self.controller.new_problem()
        self.assertEqual(self.controller.steps, ())
        self.assertEqual(self.controller.cursor, -1)
        self.assertFalse(self.controller.is_active)
        self.assertFalse(self.controller.can_step_forward)
        self.assertIsNone(self.controller.step_forward())
        self.assertEqual(self.controller.description, IDLE_DESCRIPTION)
        self.assertEqual(self.controller.step_counter, "Step 0 of 0")

    def test_seek_clamps(self):
        step = self.controller.seek(1000)
        self.assertEqual(step.kind, StepKind.COMPLETE)
        self.assertEqual(self.controller.cursor, self.total - 1)
        self.assertIsNone(self.controller.last())
        self.assertEqual(self.controller.first().kind, StepKind.INITIAL)
        self.assertEqual(self.controller.seek(-5), None)
        self.assertEqual(self.controller.cursor, 0)

    def test_steps_are_not_mutated_by_navigation(self):
        snapshot = list(self.controller.steps)
        self.controller.last()
        self.controller.first()
        self.controller.reset()
        self.assertEqual(list(self.controller.steps), snapshot)

    def test_invalid_load_keeps_previous_problem(self):
        self.controller.step_forward()
        with self.assertRaises(ProblemError):
            self.controller.load("12", "0")
        self.assertEqual(self.controller.division.dividend, "84")
        self.assertEqual(self.controller.cursor, 0)

    def test_load_normalizes_input(self):
        division = self.controller.load(" 0125 ", "5")
        self.assertEqual(division.dividend, "125")
        self.assertEqual(division.quotient, 25)


if __name__ == "__main__":
    unittest.main()
