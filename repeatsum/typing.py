# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of repeatsum."""

from .intrange import IntRange, RangeLike
from .duppattern import DupPattern
from .rangeset import RangeSet

from .options import Options, ScanOptions, OptionType

from .repeatsum import RepeatSum
