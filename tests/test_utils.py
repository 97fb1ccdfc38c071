import unittest

from repeatsum.utils import check_pos, check_non_neg, check_power_of_ten, digit_count, strict_divisors

class TestUtils(unittest.TestCase):

    def test_checks(self):
        self.assertRaises(ValueError, check_pos, "Value", 0)
        self.assertRaises(ValueError, check_non_neg, "Value", -1)
        check_pos("Value", 1)
        check_non_neg("Value", 0)
        for power in [10, 100, 10**12]:
            check_power_of_ten("Power", power)
        for power in [-10, 0, 1, 5, 20, 101, 1010]:
            self.assertRaises(ValueError, check_power_of_ten, "Power", power)

    def test_digit_count(self):
        self.assertEqual(digit_count(0), 0)
        self.assertEqual(digit_count(1), 1)
        self.assertEqual(digit_count(9), 1)
        self.assertEqual(digit_count(10), 2)
        self.assertEqual(digit_count(999), 3)
        self.assertEqual(digit_count(2121212124), 10)
        for num in range(1, 2000):
            self.assertEqual(digit_count(num), len(str(num)))
        self.assertRaises(ValueError, digit_count, -1)

    def test_strict_divisors(self):
        self.assertEqual(list(strict_divisors(1)), [])
        self.assertEqual(list(strict_divisors(7)), [1])
        self.assertEqual(list(strict_divisors(8)), [1, 2, 4])
        self.assertEqual(list(strict_divisors(12)), [1, 2, 3, 4, 6])
        self.assertRaises(ValueError, list, strict_divisors(0))

if __name__ == '__main__':
    unittest.main()
