import unittest

from termcells.control import Control, strip_control_codes
from termcells.segment import Segment


class TestControl(unittest.TestCase):
    def test_control_segment(self):
        control = Control("\x1b[2J", "\x1b[H")
        self.assertEqual(str(control), "\x1b[2J\x1b[H")
        self.assertEqual(control.segments(), [Segment.control("\x1b[2J\x1b[H")])
        self.assertEqual(control.segment.cell_len(), 0)
        self.assertEqual(repr(control), "Control('\\x1b[2J\\x1b[H')")

    def test_strip_control_codes(self):
        self.assertEqual(strip_control_codes("a\rb\bc\vd\fe\n"), "abcde\n")
        self.assertEqual(strip_control_codes("a\tb", codes=["\t"]), "ab")
        self.assertEqual(strip_control_codes(""), "")


if __name__ == "__main__":
    unittest.main()
