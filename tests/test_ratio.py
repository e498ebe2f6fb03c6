import unittest

from termcells.errors import CellsError
from termcells.ratio import ratio_distribute, ratio_reduce


class TestRatio(unittest.TestCase):
    def test_ratio_reduce(self):
        cases = [
            (20, [2, 4], [20, 20], [5, 5], [-2, -8]),
            (20, [2, 4], [1, 1], [5, 5], [4, 4]),
            (20, [2, 4], [1, 1], [2, 2], [1, 1]),
            (3, [2, 4], [3, 3], [2, 2], [1, 0]),
            (3, [2, 4], [3, 3], [0, 0], [-1, -2]),
            (3, [0, 0], [3, 3], [4, 4], [4, 4]),
        ]
        for total, ratios, maximums, values, expected in cases:
            with self.subTest(total=total, ratios=ratios, maximums=maximums, values=values):
                self.assertEqual(ratio_reduce(total, ratios, maximums, values), expected)

    def test_ratio_reduce_skips_zero_maximum(self):
        self.assertEqual(ratio_reduce(4, [1, 1], [0, 4], [5, 5]), [5, 1])

    def test_ratio_distribute(self):
        self.assertEqual(ratio_distribute(10, [1]), [10])
        self.assertEqual(ratio_distribute(10, [1, 1]), [5, 5])
        self.assertEqual(ratio_distribute(12, [1, 3]), [3, 9])
        self.assertEqual(ratio_distribute(0, [1, 3]), [0, 0])
        self.assertEqual(ratio_distribute(0, [1, 3], [1, 1]), [1, 1])
        self.assertEqual(ratio_distribute(10, [1, 0]), [10, 0])

    def test_ratio_distribute_needs_positive_ratios(self):
        with self.assertRaises(CellsError) as ctx:
            ratio_distribute(10, [0, 0])
        self.assertEqual(ctx.exception.code, "E003")


if __name__ == "__main__":
    unittest.main()
