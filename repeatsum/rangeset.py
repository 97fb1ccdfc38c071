# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Iterable, Iterator, Sequence, SupportsIndex, Any, overload
from dataclasses import dataclass

from .intrange import IntRange, RangeLike, as_range

@dataclass(frozen=True, init=False)
class RangeSet(Sequence):
    """
    Ordered collection of query ranges. Ranges may overlap, their order is kept
    as provided.
    """

    _ranges: tuple[IntRange, ...]

    def __init__(self, ranges: Iterable[RangeLike]) -> None:
        object.__setattr__(self, "_ranges", tuple(as_range(rng) for rng in ranges))

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[IntRange]:
        return iter(self._ranges)

    @overload
    def __getitem__(self, idx: SupportsIndex) -> IntRange: ...
    @overload
    def __getitem__(self, idx: slice) -> Sequence[IntRange]: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | slice) -> IntRange | Sequence[IntRange]:
        return self._ranges[idx]

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, RangeSet)\
               and self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __str__(self) -> str:
        return f"RangeSet({', '.join(f'[{r.start}, {r.end}]' for r in self)})"
