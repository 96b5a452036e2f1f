from __future__ import annotations

from contextlib import redirect_stdout
import io
import json
import os
from pathlib import Path
import tempfile
import unittest
from unittest import mock

from main import main


def _run(argv: list[str]) -> dict:
    out = io.StringIO()
    with mock.patch.dict(os.environ, {}, clear=True), redirect_stdout(out):
        main(argv)
    return json.loads(out.getvalue())


class CliTests(unittest.TestCase):
    def test_fonts_lists_catalog_and_selection(self) -> None:
        payload = _run(["fonts"])
        self.assertIn("Bravura", payload["music"])
        self.assertIn("Academico", payload["text"])
        self.assertEqual(payload["selected"]["family_stack"], "Bravura, Academico, serif")

    def test_measure_with_explicit_font(self) -> None:
        payload = _run(["measure", "Hello", "--font", "12pt Arial"])
        self.assertEqual(payload["font"], "12pt Arial")
        self.assertAlmostEqual(payload["width"], 5 * 12 * 1.333 * 0.52)
        self.assertEqual(payload["x"], 0.0)

    def test_config_file_selects_fonts(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "scene.toml"
            path.write_text('[context]\nmusic_font = "Gonville"\n', encoding="utf-8")
            payload = _run(["--config", str(path), "fonts"])
        self.assertEqual(payload["selected"]["music_font"], "Gonville")

    def test_unknown_command_exits(self) -> None:
        with self.assertRaises(SystemExit), redirect_stdout(io.StringIO()), mock.patch("sys.stderr", io.StringIO()):
            main(["render"])


if __name__ == "__main__":
    unittest.main()
