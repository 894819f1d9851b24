"""
Chad CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .chad import Chad
from .parser import ArgumentDefinition, Schema
from .version import __version__

logger = logging.getLogger("chad")


__all__ = [
    "Chad",
    "ArgumentDefinition",
    "Schema",
    "__version__",
]
