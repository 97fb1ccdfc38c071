# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Brute force detection of invalid ids. Every id of a range is materialized as an array
and tested for all block widths, which makes the scan a reference for the closed form sums.
"""

import logging
from typing import Iterable, Optional, TypeVar

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, get_index_dtype, max_index, size, to_int
from .duppattern import power_dup
from .intrange import RangeLike, as_range
from .options import OptionType, get_options
from .utils import check_pos, digit_count, strict_divisors

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ArrayLike)

def digit_counts(ids: T) -> T:
    """Number of decimal digits of every id, 0 for the id 0."""
    xp = namespace_of_arrays(ids)
    digits = xp.zeros(ids.shape, dtype=ids.dtype)
    if size(ids) == 0:
        return digits
    bound = 1
    for _ in range(digit_count(to_int(xp.max(ids)))):
        digits += xp.astype(ids >= bound, ids.dtype)
        bound *= 10
    return digits

def repeated_block_mask(ids: T, max_count: Optional[int] = None) -> T:
    """
    Boolean mask of the ids that are a block of digits repeated at least twice and at most
    max_count times. An id with L digits is such a repetition for the block width w iff w
    divides L and the id is divisible by the multiplier of the pattern, as a multiple with
    more than w digits would carry into an additional digit.
    """
    xp = namespace_of_arrays(ids)
    int_type = get_index_dtype(xp)
    if ids.dtype != int_type:
        raise ValueError(f"Input should have dtype={int_type}")
    if max_count is not None and max_count < 2:
        raise ValueError(f"Maximal count must be at least 2, got {max_count}")
    mask = xp.zeros(ids.shape, dtype=xp.bool)
    if size(ids) == 0:
        return mask
    if to_int(xp.min(ids)) < 0:
        raise ValueError("Ids must be non-negative")

    digits = digit_counts(ids)
    for length in range(2, to_int(xp.max(digits)) + 1):
        length_mask = digits == length
        for width in strict_divisors(length):
            count = length // width
            if max_count is not None and count > max_count:
                continue
            dup = power_dup(10 ** width, count)
            mask = xp.logical_or(mask, xp.logical_and(length_mask, ids % dup == 0))
    return mask

def scan_sum(
        xp: ArrayNamespace,
        rng: RangeLike,
        max_count: Optional[int] = None,
        chunk_size: Optional[int] = None) -> int:
    """
    Sum of the invalid ids in a range found by testing every id. The range is processed
    in chunks, whose size defaults to the one of the current scan options.
    """
    rng = as_range(rng)
    if chunk_size is None:
        chunk_size = get_options(xp, OptionType.SCAN).chunk_size
    check_pos("Chunk size", chunk_size)
    if rng.start < 0 or rng.end >= max_index(xp):
        raise ValueError(f"{rng} exceeds the representable ids of the namespace")

    int_type = get_index_dtype(xp)
    total = 0
    for begin in range(rng.start, rng.end + 1, chunk_size):
        end = min(begin + chunk_size, rng.end + 1)
        ids = xp.arange(begin, end, dtype=int_type)
        mask = repeated_block_mask(ids, max_count)
        total += to_int(xp.sum(ids[mask]))
        logger.debug("scanned [%d, %d), running total %d", begin, end, total)
    return total

def scan_sums(
        xp: ArrayNamespace,
        ranges: Iterable[RangeLike],
        max_count: Optional[int] = None,
        chunk_size: Optional[int] = None) -> int:
    return sum(scan_sum(xp, rng, max_count, chunk_size) for rng in ranges)
