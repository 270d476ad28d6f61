# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Defines the `StringFlag` descriptor, a named option that takes one value,
e.g. `-o out.txt` or `--output out.txt`.

The value always follows the flag as a separate token. A string flag can not be
bundled with other short flags (`-vo out.txt` is rejected), and a required string
flag must end up with a non-empty value after parsing.
"""
from dataclasses import dataclass, field

from argumentative.parser.parser_types import (
    format_flag_names,
    format_long_description,
    format_short_description,
)
from argumentative.parser.value_handle import ValueHandle


@dataclass
class StringFlag:
    """
    Represents a string-valued command-line option.

    Attributes:
        long_name (str): Name used as `--long_name`, without leading dashes.
        short_alias (str): Optional single-character alias used as `-a`.
        required (bool): True if the value must be non-empty after parsing.
        default (str): Initial value used when the option is not given.
        description (str): Help text for usage output.
        handle (ValueHandle[str]): Value slot shared with the caller.
    """

    long_name: str
    short_alias: str = ""
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
        """Return the aligned line shown under `Options:` in usage output."""
        return format_long_description(
            format_flag_names(self.long_name, self.short_alias),
            self.description,
            self.default,
        )

    def get_short_description(self) -> str:
        """Return the `Usage:` line token, bracketed unless the option is required."""
        text = f"-{self.short_alias}" if self.short_alias else f"--{self.long_name}"
        return format_short_description(text, optional=not self.required)
