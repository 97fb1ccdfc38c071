# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Closed form sums of invalid ids. An id is invalid if its decimal representation
is a block of digits repeated at least twice, e.g. 55, 6464 or 123123.
"""

import logging
from typing import Iterable, Sequence

from .intrange import (
    RangeLike,
    as_range,
    intersect_ranges,
    least_multiple_in_range,
    greatest_multiple_in_range,
    sum_of_range,
)
from .duppattern import power_dup, power_dup_range
from .utils import check_pos, digit_count, strict_divisors

logger = logging.getLogger(__name__)

#: Query ranges of the puzzle example.
EXAMPLE_RANGES: Sequence[tuple[int, int]] = (
    (11, 22),
    (95, 115),
    (998, 1012),
    (1188511880, 1188511890),
    (222220, 222224),
    (1698522, 1698528),
    (446443, 446449),
    (38593856, 38593862),
    (565653, 565659),
    (824824821, 824824827),
    (2121212118, 2121212124),
)

def sum_of_invalid_ids_in_range_for_power(power: int, dup: int, query: RangeLike) -> int:
    """
    Sum of all numbers block*dup within the query range, where block has
    exactly log10(power) digits.
    """
    overlap = intersect_ranges(power_dup_range(power, dup), query)
    if overlap is None:
        return 0
    least = least_multiple_in_range(dup, overlap)
    greatest = greatest_multiple_in_range(dup, overlap)
    if least is None or greatest is None:
        return 0
    return dup * sum_of_range((least, greatest))

#------------------------------------------------------------------------------------
#part 1: ids made of two equal halves

def sum_of_invalid_ids_for_range(query: RangeLike) -> int:
    """
    Sum of all ids consisting of two repetitions of a block. Every block width
    contributes separately.
    """
    query = as_range(query)
    total = 0
    power = 10
    dup = power_dup(power, 2)
    dup_range = power_dup_range(power, dup)
    while dup_range.start <= query.end:
        value = sum_of_invalid_ids_in_range_for_power(power, dup, query)
        logger.debug("%s: power=%d dup=%d contributes %d", query, power, dup, value)
        total += value
        power *= 10
        dup = power_dup(power, 2)
        dup_range = power_dup_range(power, dup)
    return total

def sum_of_invalid_ids(ranges: Iterable[RangeLike]) -> int:
    return sum(sum_of_invalid_ids_for_range(rng) for rng in ranges)

#------------------------------------------------------------------------------------
#part 2: ids made of any number of repeated blocks, every id counted once

def group_size_contributions(query: RangeLike, total_digits: int) -> list[int]:
    """
    Sums of the ids with total_digits digits in the query range, built from blocks of
    1, 2, ..., total_digits//2 digits. Group sizes not dividing total_digits contribute 0.
    """
    check_pos("Total digits", total_digits)
    contributions = []
    for group_size in range(1, total_digits // 2 + 1):
        if total_digits % group_size != 0:
            contributions.append(0)
            continue
        power = 10 ** group_size
        dup = power_dup(power, total_digits // group_size)
        contributions.append(sum_of_invalid_ids_in_range_for_power(power, dup, query))
    return contributions

def sum_omitting_factors_of_nonzeros(contributions: Sequence[int]) -> int:
    """
    Combine per group size sums (contributions[0] belongs to group size 1) into a sum
    counting every id once. An id built from blocks of size i is also built from blocks
    of every divisor of i, so each non-zero entry is reduced by what its strict divisors
    already account for.
    """
    unique: list[int] = []
    for i, value in enumerate(contributions, start=1):
        if value != 0:
            value -= sum(unique[j - 1] for j in strict_divisors(i))
        unique.append(value)
    return sum(unique)

def distinct_sum_for_range(query: RangeLike, total_digits: int) -> int:
    contributions = group_size_contributions(query, total_digits)
    total = sum_omitting_factors_of_nonzeros(contributions)
    logger.debug("%s: %d digits, contributions=%s, distinct sum %d",
                 as_range(query), total_digits, contributions, total)
    return total

def part2_sum_of_invalid_ids_for_range(query: RangeLike) -> int:
    """Sum of all ids in the range which consist of at least two repetitions of a block."""
    query = as_range(query)
    lengths = range(digit_count(query.start), digit_count(query.end) + 1)
    return sum(distinct_sum_for_range(query, length) for length in lengths if length > 0)

def part2_sum_of_invalid_ids(ranges: Iterable[RangeLike]) -> int:
    return sum(part2_sum_of_invalid_ids_for_range(rng) for rng in ranges)
