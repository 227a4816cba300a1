#!/usr/bin/env python3
"""
Aircraft Command Compilers
One module per supported airframe, each turning entries into cockpit commands
"""
from .a10c import A10C
from .ah64 import AH64
from .f16c import F16C
from .f18c import F18C
from .jf17 import JF17
from .ka50 import KA50

# Public API
__all__ = [
    'A10C',
    'AH64',
    'F16C',
    'F18C',
    'JF17',
    'KA50'
]
