import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import yaml

from cooler_core.main import main


def run_dir(base):
    runs = [d for d in os.listdir(base) if d.startswith("run_")]
    assert len(runs) == 1
    return os.path.join(base, runs[0])


class TestMain(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.out = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_wood_sheet_only(self):
        code = main(["--preset", "five_mm", "--mode", "wood", "--out", self.out])
        self.assertEqual(code, 0)

        files = set(os.listdir(run_dir(self.out)))
        self.assertIn("wood.svg", files)
        self.assertNotIn("plastic.svg", files)
        self.assertNotIn("assembly.glb", files)
        self.assertIn("cut_list.csv", files)
        self.assertIn("params_snapshot.yaml", files)

    def test_everything(self):
        code = main(["--mode", "all", "--png", "--out", self.out])
        self.assertEqual(code, 0)

        files = set(os.listdir(run_dir(self.out)))
        for name in ("assembly.glb", "wood.svg", "plastic.svg", "wood.png", "plastic.png"):
            self.assertIn(name, files)

    def test_config_file(self):
        config = os.path.join(self.out, "tall.yaml")
        with open(config, 'w') as f:
            yaml.safe_dump({'preset': 'quarter_inch', 'exterior_height': '24 in'}, f)

        code = main(["--config", config, "--mode", "plastic", "--out", os.path.join(self.out, "o")])
        self.assertEqual(code, 0)

        snapshot = os.path.join(run_dir(os.path.join(self.out, "o")), "params_snapshot.yaml")
        with open(snapshot) as f:
            saved = yaml.safe_load(f)
        self.assertEqual(saved['name'], 'tall')
        self.assertAlmostEqual(saved['exterior_height'], 609.6)

    def _write(self, name, text):
        path = os.path.join(self.out, name)
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_malformed_config_exits_1(self):
        config = self._write("broken.yaml", "exterior_width: [23 in\n")
        out = os.path.join(self.out, "o")
        self.assertEqual(main(["--config", config, "--out", out]), 1)
        self.assertFalse(os.path.exists(out))

    def test_config_must_be_a_mapping(self):
        config = self._write("list.yaml", "- 1\n- 2\n")
        self.assertEqual(main(["--config", config, "--out", os.path.join(self.out, "o")]), 1)

    def test_misspelled_key_exits_1(self):
        config = self._write("typo.yaml", "duct_diamter: 4 in\n")
        self.assertEqual(main(["--config", config, "--out", os.path.join(self.out, "o")]), 1)

    def test_summary_and_run_log(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(["--mode", "plastic", "-vv", "--out", self.out])
        self.assertEqual(code, 0)

        summary = buf.getvalue()
        self.assertIn("wood cut list: 10 panels", summary)
        self.assertIn("plastic cut list: 8 panels", summary)

        with open(os.path.join(run_dir(self.out), "run.log")) as f:
            log = f.read()
        self.assertIn("Built 18 panels", log)

    def test_unknown_preset(self):
        self.assertEqual(main(["--preset", "nope", "--out", self.out]), 1)
        self.assertEqual(os.listdir(self.out), [])


if __name__ == '__main__':
    unittest.main()
