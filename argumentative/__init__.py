"""
Argumentative

Copyright (c) 2025 The Argumentative Authors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgumentativeError, ParseError
from .parser import BoolFlag, FlagKind, Flags, Positional, StringFlag, ValueHandle

logger = logging.getLogger("argumentative")


__all__ = [
    "ArgumentativeError",
    "BoolFlag",
    "FlagKind",
    "Flags",
    "ParseError",
    "Positional",
    "StringFlag",
    "ValueHandle",
]
