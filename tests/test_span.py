import unittest

from termcells.span import Span
from termcells.style import Style


BOLD = Style.create(bold=True)


class TestSpan(unittest.TestCase):
    def test_bool(self):
        self.assertTrue(Span(10, 11))
        self.assertFalse(Span(5, 5))

    def test_split(self):
        self.assertEqual(Span(5, 10).split(2), (Span(5, 10), None))
        self.assertEqual(Span(5, 10).split(15), (Span(5, 10), None))
        self.assertEqual(Span(5, 10).split(10), (Span(5, 10), None))
        self.assertEqual(Span(0, 10, BOLD).split(5), (Span(0, 5, BOLD), Span(5, 10, BOLD)))

    def test_with_offset(self):
        self.assertEqual(Span(5, 10, BOLD).with_offset(2), Span(7, 12, BOLD))

    def test_right_crop(self):
        self.assertEqual(Span(5, 10).right_crop(15), Span(5, 10))
        self.assertEqual(Span(5, 10).right_crop(7), Span(5, 7))


if __name__ == "__main__":
    unittest.main()
