# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Self
from enum import Enum
import threading

from .backend import ArrayNamespace
from .utils import check_pos

class OptionType(Enum):
    SCAN = 0

class Options:
    """
    Base of all option context managers. Entering a manager registers it for the
    current thread, leaving restores the previously registered options.
    """

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category)

    def __enter__(self) -> Self:
        registry = _registry()
        self._previous = registry.get(self.key)
        registry[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        registry = _registry()
        if self._previous is None:
            registry.pop(self.key, None)
        else:
            registry[self.key] = self._previous

class ScanOptions(Options):
    """
    Context manager for the brute force scan of ranges.
    """

    #: Number of ids materialized at once.
    chunk_size: int

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            chunk_size: int = 65536):
        check_pos("Chunk size", chunk_size)
        self.chunk_size = chunk_size
        super().__init__(namespace, OptionType.SCAN)

# released together with its thread
_local = threading.local()

def _registry() -> dict[Any, Options]:
    if not hasattr(_local, "opts"):
        _local.opts = {}
    return _local.opts

def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    registry = _registry()
    key = (namespace, otype)
    if key in registry:
        return registry[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: ScanOptions) -> None:
    _registry()[opts.key] = opts
