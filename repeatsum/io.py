# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Type, overload
import h5py
import numpy as np

from .intrange import IntRange
from .duppattern import DupPattern
from .rangeset import RangeSet

@overload
def write(group: h5py.Group, obj: IntRange) -> None: ...
@overload
def write(group: h5py.Group, obj: DupPattern) -> None: ...
@overload
def write(group: h5py.Group, obj: RangeSet) -> None: ...
#implementation
def write(group: h5py.Group, obj: Any) -> None:
    if isinstance(obj, IntRange):
        group.attrs["start"] = obj.start
        group.attrs["end"] = obj.end
    elif isinstance(obj, DupPattern):
        group.attrs["power"] = obj.power
        group.attrs["count"] = obj.count
    elif isinstance(obj, RangeSet):
        data = np.asarray([[rng.start, rng.end] for rng in obj], dtype=np.int64)
        group.create_dataset("ranges", data=np.reshape(data, (len(obj), 2)))
    else:
        raise TypeError(f"Cannot write object of type {type(obj).__name__}")

@overload
def read(group: h5py.Group, cls: Type[IntRange]) -> IntRange: ...
@overload
def read(group: h5py.Group, cls: Type[DupPattern]) -> DupPattern: ...
@overload
def read(group: h5py.Group, cls: Type[RangeSet]) -> RangeSet: ...
#implementation
def read(group: h5py.Group, cls: Any) -> Any:
    if cls == IntRange:
        return IntRange(int(get_attr(group, "start")),
                        int(get_attr(group, "end")))
    elif cls == DupPattern:
        return DupPattern(int(get_attr(group, "power")),
                          int(get_attr(group, "count")))
    elif cls == RangeSet:
        dset = group["ranges"]
        assert isinstance(dset, h5py.Dataset)
        data = dset[()]
        return RangeSet((int(start), int(end)) for start, end in data)
    raise TypeError(f"Cannot read object of type {cls}")

def get_attr(group: h5py.Group, name: str) -> Any:
    if name not in group.attrs:
        raise KeyError(f"Attribute {name} not found in group {group.name}")
    return group.attrs[name]
