# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .intrange import IntRange
from .utils import check_pos, check_power_of_ten

@dataclass(frozen=True, init=False)
class DupPattern:
    """
    A block of width digits repeated count times. Multiplying any block by the
    multiplier of the pattern writes the block once at every block boundary, e.g.
    123 * 1001 = 123123 for power=1000 and count=2.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: Power of ten defining the block width, i.e. 10**width.
    power: int

    #: Number of repetitions of the block.
    count: int

    @property
    def width(self) -> int:
        """Number of digits of a single block."""
        return len(str(self.power)) - 1

    @property
    def digits(self) -> int:
        """Number of digits of every number generated by the pattern."""
        return self.width * self.count

    @property
    def multiplier(self) -> int:
        return power_dup(self.power, self.count)

    @property
    def range(self) -> IntRange:
        """All numbers generated by the pattern lie within this range."""
        return power_dup_range(self.power, self.multiplier)

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, power: int, count: int) -> None:
        self._check_input(power, count)
        object.__setattr__(self, "power", power)
        object.__setattr__(self, "count", count)

    def _check_input(self, power: int, count: int) -> None:
        check_power_of_ten("Power", power)
        check_pos("Count", count)

    #-------------------------------------------------------------------------
    #methods

    def generate(self, block: int) -> int:
        """Repeat the given block, which has to have exactly width digits."""
        if not self.power // 10 <= block < self.power:
            raise ValueError(f"Block must have {self.width} digits, got {block}")
        return block * self.multiplier

    def __hash__(self) -> int:
        return hash((self.power, self.count))

    def __str__(self) -> str:
        return f"DupPattern(power={self.power},count={self.count})"

def power_dup(power: int, count: int) -> int:
    """1 + power + power**2 + ... + power**(count-1)."""
    check_pos("Power", power)
    check_pos("Count", count)
    dup = 0
    for _ in range(count):
        dup = 1 + dup * power
    return dup

def power_dup_range(power: int, dup: int) -> IntRange:
    """
    Range of multiples of dup whose multiplier is a block of exactly log10(power) digits.
    Smaller multipliers under-fill the pattern, larger ones carry into the next block.
    """
    if power < 10:
        raise ValueError(f"Power must be at least 10, got {power}")
    check_pos("Dup", dup)
    return IntRange((power // 10) * dup, (power - 1) * dup)
