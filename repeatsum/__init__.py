# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .repeatsum import RepeatSum
from .invalidids import (
    EXAMPLE_RANGES,
    sum_of_invalid_ids_for_range,
    sum_of_invalid_ids,
    part2_sum_of_invalid_ids_for_range,
    part2_sum_of_invalid_ids,
)

__all__ = [
    "RepeatSum",
    "EXAMPLE_RANGES",
    "sum_of_invalid_ids_for_range",
    "sum_of_invalid_ids",
    "part2_sum_of_invalid_ids_for_range",
    "part2_sum_of_invalid_ids",
]
