# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import size as _size

#: Any array API compatible namespace, e.g. the wrapped numpy namespace.
ArrayNamespace = Any
#: Array of an array API compatible namespace.
ArrayLike = Any

def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError as exc:
            raise TypeError("Provided object is not a recognized array or namespace.") from exc
    return api.array_namespace(obj)

def namespace_of_arrays(*arrays: ArrayLike) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def get_index_dtype(xp: ArrayNamespace) -> Any:
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind=None)
    # signed, ids are compared against python ints
    for name in ["int64", "int32"]:
        if name in dtypes:
            return dtypes[name]
    raise ValueError("No suitable index dtype found")

def max_index(xp: ArrayNamespace) -> int:
    return int(xp.iinfo(get_index_dtype(xp)).max)

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def to_int(array: ArrayLike) -> int:
    """Convert a zero dimensional array into a python int."""
    if array.ndim != 0:
        raise ValueError(f"Expected a scalar array, got shape {array.shape}")
    return int(array)

__all__ = ["ArrayNamespace", "ArrayLike", "get_namespace", "namespace_of_arrays",
           "get_index_dtype", "max_index", "size", "to_int"]
