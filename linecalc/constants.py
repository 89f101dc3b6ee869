# constants.py

"""Named constants recognized in expressions."""

import math
from types import MappingProxyType
from typing import Mapping, Tuple

CONSTANTS: Mapping[str, float] = MappingProxyType({
    'tau': math.tau,
    'pi': math.pi,
    'e': math.e,
})

# Longest first, so a name is never shadowed by one of its own prefixes.
CONSTANT_NAMES: Tuple[str, ...] = tuple(sorted(CONSTANTS, key=len, reverse=True))
