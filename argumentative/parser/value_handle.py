# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Defines `ValueHandle`, the value slot shared between a flag descriptor and the
code that registered it.

Every descriptor owns exactly one handle. `Flags.add_bool()`, `Flags.add_string()`
and `Flags.add_positional()` return that handle, and `Flags.parse()` writes parsed
values into it, so callers read results straight from the handle after parsing:

    verbose = flags.add_bool("verbose", "v", "Chatty output")
    flags.parse(["prog", "-v"])
    verbose.value  # True

Handles are independent objects rather than references into the registry's
collections, so they stay valid no matter how many flags are registered later.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class ValueHandle(Generic[T]):
    """
    Mutable cell holding the current value of one flag or positional argument.

    Attributes:
        value (T): The current value. Starts at the descriptor's default and is
            overwritten in place on every successful match during parsing.
    """

    value: T
