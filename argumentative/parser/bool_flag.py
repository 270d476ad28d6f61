# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Defines the `BoolFlag` descriptor, a presence-only switch such as `-v/--verbose`.

A boolean flag starts out `False` and is set to `True` whenever it appears on the
command line, either on its own (`--verbose`, `-v`) or inside a bundle of short
flags (`-xvz`). Boolean flags are never required and carry no default other than
`False`.
"""
from dataclasses import dataclass, field

from argumentative.parser.parser_types import (
    format_flag_names,
    format_long_description,
    format_short_description,
)
from argumentative.parser.value_handle import ValueHandle


@dataclass
class BoolFlag:
    """
    Represents a boolean command-line switch.

    Attributes:
        long_name (str): Name used as `--long_name`, without leading dashes.
        short_alias (str): Optional single-character alias used as `-a`.
        description (str): Help text for usage output.
        handle (ValueHandle[bool]): Value slot shared with the caller.
    """

    long_name: str
    short_alias: str = ""
    description: str = ""
    handle: ValueHandle[bool] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.handle = ValueHandle(False)

    @property
    def value(self) -> bool:
        return self.handle.value

    @value.setter
    def value(self, value: bool) -> None:
        self.handle.value = value

    def get_long_description(self) -> str:
        """Return the aligned line shown under `Flags:` in usage output."""
        return format_long_description(
            format_flag_names(self.long_name, self.short_alias), self.description
        )

    def get_short_description(self) -> str:
        """Return the bracketed token shown in the `Usage:` line."""
        if self.short_alias:
            return format_short_description(f"-{self.short_alias}", optional=True)
        return format_short_description(f"--{self.long_name}", optional=True)
