import unittest

from termcells.errors import CellsError, format_error


class TestErrors(unittest.TestCase):
    def test_format_with_detail(self):
        msg = format_error("E001", "cells.check_cell_widths", "range 3 overlaps")
        self.assertEqual(
            msg,
            "Error [E001]: Malformed width table. Stage: cells.check_cell_widths. Details: range 3 overlaps",
        )

    def test_format_without_detail_or_stage(self):
        self.assertEqual(format_error("E002", ""), "Error [E002]: Unreachable split state. Stage: -.")

    def test_unknown_code(self):
        self.assertIn("Unknown error", format_error("E999", "x"))

    def test_exception_str(self):
        err = CellsError("E003", "ratio.ratio_distribute", "sum of ratios is 0")
        self.assertIsInstance(err, Exception)
        self.assertEqual(str(err), format_error("E003", "ratio.ratio_distribute", "sum of ratios is 0"))


if __name__ == "__main__":
    unittest.main()
