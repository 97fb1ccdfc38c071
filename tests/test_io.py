import unittest
import os
import h5py

from repeatsum import RepeatSum, EXAMPLE_RANGES
from repeatsum.typing import IntRange, DupPattern, RangeSet
from utils import backends

path = os.path.dirname(__file__)
class TestIO(unittest.TestCase):

    def setUp(self) -> None:
        self.repeatsum = [RepeatSum(backend) for backend in backends]

        os.mkdir(f"{path}/data")
        self.file = h5py.File(f"{path}/data/test_io.h5", "w")

    def tearDown(self) -> None:
        self.file.close()
        os.remove(f"{path}/data/test_io.h5")
        os.rmdir(f"{path}/data")

    def test_range(self) -> None:
        for rs in self.repeatsum:
            for start, end in EXAMPLE_RANGES:
                name = f"range_{start}_{end}"
                group = self.file.create_group(name)
                ref = rs.range(start, end)
                rs.write(group, ref)
                self.assertEqual(rs.read(group, IntRange), ref)
                del self.file[name]

    def test_pattern(self) -> None:
        for rs in self.repeatsum:
            for width, count in [(1, 2), (3, 2), (2, 5)]:
                name = f"pattern_{width}_{count}"
                group = self.file.create_group(name)
                ref = rs.pattern(width, count)
                rs.write(group, ref)
                self.assertEqual(rs.read(group, DupPattern), ref)
                del self.file[name]

    def test_range_set(self) -> None:
        for rs in self.repeatsum:
            group = self.file.create_group("ranges")
            ref = rs.range_set(EXAMPLE_RANGES)
            rs.write(group, ref)
            ranges = rs.read(group, RangeSet)
            self.assertEqual(ranges, ref)
            self.assertEqual(rs.part2(ranges), 4174379265)
            del self.file["ranges"]

    def test_invalid(self) -> None:
        for rs in self.repeatsum:
            group = self.file.create_group("invalid")
            self.assertRaises(TypeError, rs.write, group, (1, 2))
            self.assertRaises(TypeError, rs.read, group, tuple)
            self.assertRaises(KeyError, rs.read, group, IntRange)
            del self.file["invalid"]

if __name__ == "__main__":
    unittest.main()
