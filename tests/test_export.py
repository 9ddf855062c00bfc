import json
import sys
import tempfile
from pathlib import Path
import unittest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from longdiv.division.generator import generate_division
from longdiv.export import division_to_dict, save_json, save_markdown, to_markdown


class TestExport(unittest.TestCase):
    def test_division_to_dict(self):
        data = division_to_dict(generate_division("7", "2"))
        self.assertEqual(data["quotient"], 3)
        self.assertEqual(data["remainder"], 1)
        self.assertEqual(data["result"], "7 ÷ 2 = 3 R1")
        self.assertEqual(data["steps"][0]["kind"], "initial")
        last = data["steps"][-1]
        self.assertEqual(last["kind"], "complete")
        self.assertEqual(last["grid"]["highlight"], {"final_remainder": 1, "kind": "complete"})
        self.assertEqual(last["grid"]["work_rows"][0]["kind"], "product")

    def test_save_json_round_trips_through_json(self):
        division = generate_division("408", "4")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_json(division, Path(tmpdir) / "out.json")
            data = json.loads(path.read_text(encoding="utf-8"))
        self.assertEqual(len(data["steps"]), len(division.steps))
        self.assertEqual(data["steps"][-1]["grid"]["quotient"], "102")

    def test_markdown(self):
        division = generate_division("84", "4")
        text = to_markdown(division)
        self.assertIn("# Long division: 84 ÷ 4", text)
        self.assertIn(f"## Step {len(division.steps)}: complete", text)
        self.assertIn("4 ) 8 4", text)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_markdown(division, Path(tmpdir) / "out.md")
            self.assertEqual(path.read_text(encoding="utf-8"), text)


if __name__ == "__main__":
    unittest.main()
