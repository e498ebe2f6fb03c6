import tempfile
import unittest
from pathlib import Path

from wcwidth import list_versions

from scripts.generate_cell_widths import codepoint_width, iter_ranges, main, render


class TestGenerateCellWidths(unittest.TestCase):
    def test_codepoint_width(self):
        self.assertEqual(codepoint_width(0), 0)
        self.assertEqual(codepoint_width(0x07), -1)
        self.assertEqual(codepoint_width(0x9F), -1)
        self.assertEqual(codepoint_width(ord("A")), 1)
        self.assertEqual(codepoint_width(0x0301), 0)
        self.assertEqual(codepoint_width(0x200B), 0)
        self.assertEqual(codepoint_width(0x4E2D), 2)
        self.assertEqual(codepoint_width(0xFF21), 2)

    def test_iter_ranges_merges_runs(self):
        ranges = list(iter_ranges(0x3FF))
        self.assertEqual(ranges[:3], [(0, 0, 0), (1, 31, -1), (127, 159, -1)])
        self.assertIn((0x300, 0x36F, 0), ranges)
        self.assertTrue(all(width != 1 for _, _, width in ranges))

    def test_render(self):
        source = render([(0, 0, 0), (1, 31, -1)], "9.9.9")
        namespace = {}
        exec(source, namespace)
        self.assertEqual(namespace["CELL_WIDTHS"], [(0, 0, 0), (1, 31, -1)])
        self.assertEqual(namespace["UNICODE_VERSION"], "9.9.9")

    def test_render_defaults_to_wcwidth_version(self):
        namespace = {}
        exec(render([]), namespace)
        self.assertEqual(namespace["UNICODE_VERSION"], list_versions()[-1])

    def test_check_reports_drift(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "_cell_widths.py"
            output.write_text(render([(0, 0, 0)]), encoding="utf-8")
            self.assertEqual(main([str(output), "--check"]), 1)


if __name__ == "__main__":
    unittest.main()
