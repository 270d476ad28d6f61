"""
Argumentative

Copyright (c) 2025 The Argumentative Authors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .bool_flag import BoolFlag
from .flag_kind import FlagKind
from .flags import Flags
from .positional import Positional
from .string_flag import StringFlag
from .value_handle import ValueHandle

__all__ = [
    "BoolFlag",
    "FlagKind",
    "Flags",
    "Positional",
    "StringFlag",
    "ValueHandle",
]
