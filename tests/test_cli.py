import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import main


class CliTests(unittest.TestCase):
    def run_cli(self, *argv: str):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main.main(list(argv) + ["--log-level", "ERROR"])
        return code, buffer.getvalue()

    def test_solves_inline_hints(self) -> None:
        code, out = self.run_cli("--rows", "1;1", "--cols", "1;1")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("# .   1\n. #   1\n"))
        self.assertIn("Trials:        3", out)

    def test_writes_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.json"
            code, _ = self.run_cli("--rows", "5", "--cols", "1;1;1;1;1", "--output", str(output))
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(code, 0)
        self.assertEqual(payload["grid"], [[1, 1, 1, 1, 1]])
        self.assertEqual(payload["backend"], "search")

    def test_cp_sat_backend(self) -> None:
        code, out = self.run_cli("--rows", "1 1;3", "--cols", "2;1;2", "--backend", "cp-sat")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("# . #   1 1\n# # #   3\n"))

    def test_invalid_hints_exit_nonzero(self) -> None:
        code, out = self.run_cli("--rows", "3", "--cols", "1")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_declared_size_mismatch(self) -> None:
        code, _ = self.run_cli("--rows", "1", "--cols", "1", "--height", "2")
        self.assertEqual(code, 1)

    def test_puzzle_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "p.json"
            path.write_text(json.dumps({"rows": [[1]], "columns": [[1]]}), encoding="utf-8")
            code, out = self.run_cli("--puzzle", str(path))
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("#   1\n"))

    def test_malformed_puzzle_files_exit_nonzero(self) -> None:
        contents = {
            "list.json": "[1, 2]",
            "number_hint.json": json.dumps({"rows": [3], "columns": [[3]]}),
            "broken.json": "{\"rows\": [[1]",
        }
        with tempfile.TemporaryDirectory() as tmpdir:
            for name, text in contents.items():
                with self.subTest(name=name):
                    path = Path(tmpdir) / name
                    path.write_text(text, encoding="utf-8")
                    code, out = self.run_cli("--puzzle", str(path))
                    self.assertEqual(code, 1)
                    self.assertEqual(out, "")
            code, _ = self.run_cli("--puzzle", str(Path(tmpdir) / "missing.json"))
        self.assertEqual(code, 1)

    def test_progress_prints_partial_grids(self) -> None:
        errors = io.StringIO()
        with redirect_stderr(errors):
            code, out = self.run_cli("--rows", "1;1;1;1", "--cols", "1;1;1;1", "--progress", "--partial-interval", "1")
        self.assertEqual(code, 0)
        self.assertIn("trials]\n# . . .\n", errors.getvalue())
        self.assertIn("Progress:", out)

    def test_requires_hints(self) -> None:
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()):
                main.main(["--rows", "1"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
