# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Iterable, Optional, Type, overload
from numbers import Integral
from dataclasses import dataclass
import h5py

from .backend import ArrayNamespace, ArrayLike, get_index_dtype, get_namespace
from .intrange import IntRange, RangeLike
from .duppattern import DupPattern
from .rangeset import RangeSet
from .invalidids import (
    sum_of_invalid_ids_in_range_for_power,
    sum_of_invalid_ids_for_range,
    sum_of_invalid_ids,
    distinct_sum_for_range,
    part2_sum_of_invalid_ids_for_range,
    part2_sum_of_invalid_ids,
)
from .scan import scan_sum as _scan_sum, scan_sums as _scan_sums, repeated_block_mask
from .io import write as _write, read as _read
from .options import ScanOptions, OptionType, set_options, get_options

@dataclass(frozen=True)
class RepeatSum:

    #: Array namespace for the brute force scan.
    namespace: ArrayNamespace

    #: Internally used index type.
    index_type: Any

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        object.__setattr__(self, "index_type", get_index_dtype(self.namespace))

        set_options(self.scan_options())

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    def range(self, start: int, end: int) -> IntRange:
        """
        Closed interval of integers [start, end].
        """
        return IntRange(start, end)

    def range_set(self, ranges: Iterable[RangeLike]) -> RangeSet:
        """
        Ordered collection of query ranges, given as IntRange or (start, end) tuples.
        """
        return RangeSet(ranges)

    def pattern(self, width: int, count: int) -> DupPattern:
        """
        Pattern of a block with width digits repeated count times.
        """
        return DupPattern(10 ** width, count)

    #-------------------------------------------------------------------------------------------------
    # closed form sums

    def pattern_sum(self, pattern: DupPattern, query: RangeLike) -> int:
        """
        Sum of all numbers generated by the pattern within the query range.
        """
        return sum_of_invalid_ids_in_range_for_power(pattern.power, pattern.multiplier, query)

    @overload
    def part1(self, query: RangeLike, /) -> int: ...
    @overload
    def part1(self, queries: RangeSet | Iterable[RangeLike], /) -> int: ...
    # implementation
    def part1(self, query: Any, /) -> int:
        """
        Sum of the ids made of two equal halves. Accepts a single range or a collection
        of ranges, whose sums are added up.
        """
        if _is_single(query):
            return sum_of_invalid_ids_for_range(query)
        return sum_of_invalid_ids(query)

    @overload
    def part2(self, query: RangeLike, /) -> int: ...
    @overload
    def part2(self, queries: RangeSet | Iterable[RangeLike], /) -> int: ...
    # implementation
    def part2(self, query: Any, /) -> int:
        """
        Sum of the ids made of at least two repetitions of a block, every id counted once.
        Accepts a single range or a collection of ranges, whose sums are added up.
        """
        if _is_single(query):
            return part2_sum_of_invalid_ids_for_range(query)
        return part2_sum_of_invalid_ids(query)

    def distinct_sum(self, query: RangeLike, total_digits: int) -> int:
        """
        Part 2 sum restricted to ids with total_digits digits.
        """
        return distinct_sum_for_range(query, total_digits)

    #-------------------------------------------------------------------------------------------------
    # brute force scan

    def mask(self, ids: ArrayLike, max_count: Optional[int] = None) -> ArrayLike:
        """
        Boolean mask of the invalid ids within an index array.
        """
        return repeated_block_mask(ids, max_count)

    def scan(self, query: Any, max_count: Optional[int] = None) -> int:
        """
        Sum of the invalid ids found by testing every id. With max_count=2 the result matches
        part1, without a limit it matches part2. Affected by the scan context manager.
        """
        if _is_single(query):
            return _scan_sum(self.namespace, query, max_count)
        return _scan_sums(self.namespace, query, max_count)

    #-------------------------------------------------------------------------------------------------
    # io wrapper

    @overload
    def write(self, group: h5py.Group, obj: IntRange) -> None: ...
    @overload
    def write(self, group: h5py.Group, obj: DupPattern) -> None: ...
    @overload
    def write(self, group: h5py.Group, obj: RangeSet) -> None: ...
    # implementation
    def write(self, group: h5py.Group, obj: Any) -> None:
        """
        Write a range, a pattern or a range set to a hdf5 group.
        """
        _write(group, obj)

    @overload
    def read(self, group: h5py.Group, cls: Type[IntRange]) -> IntRange: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[DupPattern]) -> DupPattern: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[RangeSet]) -> RangeSet: ...
    # implementation
    def read(self, group: h5py.Group, cls: Any) -> Any:
        """
        Read a range, a pattern or a range set from a hdf5 group.
        """
        return _read(group, cls)

    #-------------------------------------------------------------------------------------------------
    # default options

    def scan_options(self, *, chunk_size: int = 65536) -> ScanOptions:
        """
        Manager for scan operations.
        """
        return ScanOptions(namespace=self.namespace, chunk_size=chunk_size)

    def set_options(self, options: ScanOptions) -> None:
        """
        Set options globally. The options are stored per thread and used by the scan.
        """
        set_options(options)

    def get_options(self, otype: OptionType) -> ScanOptions:
        """
        Get the current options.
        """
        return get_options(self.namespace, otype) # type: ignore

def _is_single(query: Any) -> bool:
    if isinstance(query, IntRange):
        return True
    if isinstance(query, (tuple, list)) and len(query) == 2\
            and all(isinstance(v, Integral) for v in query):
        return True
    return False
