import unittest
from itertools import product

from repeatsum.duppattern import DupPattern, power_dup, power_dup_range
from repeatsum.intrange import IntRange

class TestDupPattern(unittest.TestCase):

    def setUp(self) -> None:
        self.widths = [1, 2, 3, 4]
        self.counts = [1, 2, 3, 5]

    def test_construction(self):
        self.assertRaises(ValueError, DupPattern, 0, 2)
        self.assertRaises(ValueError, DupPattern, 1, 2)
        self.assertRaises(ValueError, DupPattern, 20, 2)
        self.assertRaises(ValueError, DupPattern, 110, 2)
        self.assertRaises(ValueError, DupPattern, 10, 0)
        self.assertRaises(ValueError, DupPattern, 10, -1)
        pattern = DupPattern(1000, 2)
        self.assertEqual(pattern.width, 3)
        self.assertEqual(pattern.digits, 6)
        self.assertEqual(pattern.multiplier, 1001)
        self.assertEqual(pattern.range, IntRange(100100, 999999))
        self.assertEqual(pattern, DupPattern(1000, 2))
        self.assertNotEqual(pattern, DupPattern(1000, 3))

    def test_power_dup(self):
        self.assertEqual(power_dup(10, 1), 1)
        self.assertEqual(power_dup(10, 2), 11)
        self.assertEqual(power_dup(100, 3), 10101)
        self.assertEqual(power_dup(1000, 2), 1001)
        self.assertRaises(ValueError, power_dup, 0, 2)
        self.assertRaises(ValueError, power_dup, 10, 0)
        for width, count in product(self.widths, self.counts):
            self.assertEqual(power_dup(10**width, count), int(("0" * (width - 1) + "1") * count))

    def test_power_dup_range(self):
        self.assertEqual(power_dup_range(10, 11), IntRange(11, 99))
        self.assertEqual(power_dup_range(100, 101), IntRange(1010, 9999))
        self.assertRaises(ValueError, power_dup_range, 1, 11)
        self.assertRaises(ValueError, power_dup_range, 10, 0)

    def test_generate(self):
        for width, count in product(self.widths, self.counts):
            pattern = DupPattern(10**width, count)
            for block in [10**(width - 1), 10**width - 1]:
                num = pattern.generate(block)
                self.assertEqual(str(num), str(block) * count)
                self.assertEqual(len(str(num)), pattern.digits)
                self.assertIn(num, pattern.range)
        self.assertRaises(ValueError, DupPattern(100, 2).generate, 9)
        self.assertRaises(ValueError, DupPattern(100, 2).generate, 100)

if __name__ == '__main__':
    unittest.main()
