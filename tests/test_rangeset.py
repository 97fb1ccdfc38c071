import unittest

from repeatsum import RepeatSum, EXAMPLE_RANGES
from repeatsum.typing import IntRange, RangeSet
from utils import backends

class TestRangeSet(unittest.TestCase):

    def setUp(self):
        self.repeatsum = [RepeatSum(backend) for backend in backends]

    def test_construction(self):
        for rs in self.repeatsum:
            ranges = rs.range_set(EXAMPLE_RANGES)
            self.assertEqual(len(ranges), len(EXAMPLE_RANGES))
            self.assertEqual(ranges[0], IntRange(11, 22))
            self.assertEqual(list(ranges[1:3]), [IntRange(95, 115), IntRange(998, 1012)])
            self.assertIn(IntRange(998, 1012), ranges)
            self.assertRaises(ValueError, rs.range_set, [(3, 1)])

    def test_eq(self):
        ranges1 = RangeSet([(1, 2), (5, 9)])
        ranges2 = RangeSet([IntRange(1, 2), IntRange(5, 9)])
        ranges3 = RangeSet([(5, 9), (1, 2)])
        self.assertEqual(ranges1, ranges2)
        self.assertNotEqual(ranges1, ranges3)
        self.assertEqual(len({ranges1, ranges2}), 1)

if __name__ == '__main__':
    unittest.main()
