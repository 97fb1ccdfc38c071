# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Self, Iterator, Optional
from numbers import Integral
from dataclasses import dataclass

from .utils import check_pos

@dataclass(frozen=True, init=False)
class IntRange:
    """
    Closed interval of integers [start, end]. Both bounds belong to the range,
    so a range always holds at least one integer.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: First integer of the range.
    start: int

    #: Last integer of the range.
    end: int

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, start: int, end: int) -> None:
        self._check_input(start, end)
        object.__setattr__(self, "start", int(start))
        object.__setattr__(self, "end", int(end))

    def _check_input(self, start: int, end: int) -> None:
        if start > end:
            raise ValueError(f"Range start must not exceed its end, but got [{start}, {end}]")

    #-------------------------------------------------------------------------
    #methods

    def size(self) -> int:
        """Number of integers in the range."""
        return self.end - self.start + 1

    def total(self) -> int:
        """Sum of all integers in the range."""
        return sum_of_range(self)

    def intersect(self, other: "IntRange | tuple[int, int]") -> Optional["IntRange"]:
        """Intersection with another range, None if both are disjoint."""
        return intersect_ranges(self, other)

    #-------------------------------------------------------------------------
    #some magic

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Integral) and self.start <= item <= self.end

    def __lt__(self, other: Self) -> bool:
        if self.start != other.start:
            return self.start < other.start
        return self.end < other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __str__(self) -> str:
        return f"IntRange({self.start}, {self.end})"

RangeLike = IntRange | tuple[int, int]

def as_range(rng: RangeLike) -> IntRange:
    if isinstance(rng, IntRange):
        return rng
    start, end = rng
    return IntRange(start, end)

def _bounds(rng: RangeLike) -> tuple[int, int]:
    # tuples may be inverted, callers of multiples_in_range guard against it
    if isinstance(rng, IntRange):
        return rng.start, rng.end
    start, end = rng
    return start, end

#------------------------------------------------------------------------------------
#closed form interval arithmetic

def multiples_in_range(n: int, rng: RangeLike) -> int:
    """
    Number of multiples of n in [start, end]. For an inverted pair with start > end
    the result is zero or negative.
    """
    check_pos("Divisor", n)
    start, end = _bounds(rng)
    return end // n - (start - 1) // n

def least_multiple_in_range(f: int, rng: RangeLike) -> Optional[int]:
    """Multiplier of the smallest multiple of f in the range, None if there is none."""
    if multiples_in_range(f, rng) <= 0:
        return None
    start, _ = _bounds(rng)
    return -(-start // f)

def greatest_multiple_in_range(f: int, rng: RangeLike) -> Optional[int]:
    """Multiplier of the largest multiple of f in the range, None if there is none."""
    if multiples_in_range(f, rng) <= 0:
        return None
    _, end = _bounds(rng)
    return end // f

def sum_of_range(rng: RangeLike) -> int:
    start, end = _bounds(rng)
    return (end - start + 1) * (start + end) // 2

def intersect_ranges(a: RangeLike, b: RangeLike) -> Optional[IntRange]:
    a_start, a_end = _bounds(a)
    b_start, b_end = _bounds(b)
    start = max(a_start, b_start)
    end = min(a_end, b_end)
    if start > end:
        return None
    return IntRange(start, end)
