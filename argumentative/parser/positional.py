# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Defines the `Positional` descriptor, an argument given without a leading dash.

Positional arguments have no alias. They are matched purely by registration order:
the first non-flag token fills the first registered positional, the second token
the second one, and so on.
"""
from dataclasses import dataclass, field

from argumentative.parser.parser_types import (
    format_long_description,
    format_short_description,
)
from argumentative.parser.value_handle import ValueHandle


@dataclass
class Positional:
    """
    Represents a positional command-line argument.

    Attributes:
        long_name (str): Name shown in usage output and error messages.
        required (bool): True if the value must be non-empty after parsing.
        default (str): Initial value used when no token fills this argument.
        description (str): Help text for usage output.
        handle (ValueHandle[str]): Value slot shared with the caller.
    """

    long_name: str
    required: bool = False
    default: str = ""
    description: str = ""
    handle: ValueHandle[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.handle = ValueHandle(self.default or "")

    @property
    def value(self) -> str:
        return self.handle.value

    @value.setter
    def value(self, value: str) -> None:
        self.handle.value = value

    def get_long_description(self) -> str:
        """Return the aligned line shown under `Positional arguments:`."""
        return format_long_description(self.long_name, self.description, self.default)

    def get_short_description(self) -> str:
        """Return the `Usage:` line token, bracketed unless the argument is required."""
        return format_short_description(self.long_name, optional=not self.required)
