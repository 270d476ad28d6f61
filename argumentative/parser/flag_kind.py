# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Defines `FlagKind`, an enum naming the three kinds of arguments a `Flags`
registry understands.

It is accepted by `Flags.register()` and used as the `kind` field of flag
definitions loaded from YAML/TOML configuration files.

Supports alias coercion for shorthand or config-friendly values.

Example:
    FlagKind("bool")    → FlagKind.BOOL
    FlagKind("switch")  → FlagKind.BOOL (via alias)
    FlagKind("option")  → FlagKind.STRING (via alias)
"""
from __future__ import annotations

from enum import Enum


class FlagKind(Enum):
    """
    The kind of a registered argument.

    Members:
        BOOL: Presence-only switch, `False` until seen.
        STRING: Named option followed by one value token.
        POSITIONAL: Unnamed value matched by registration order.

    Aliases:
        - "flag", "switch" → "bool"
        - "str", "option" → "string"
        - "arg", "argument" → "positional"
    """

    BOOL = "bool"
    STRING = "string"
    POSITIONAL = "positional"

    @classmethod
    def choices(cls) -> list[FlagKind]:
        """Return a list of all flag kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "bool",
            "switch": "bool",
            "str": "string",
            "option": "string",
            "arg": "positional",
            "argument": "positional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the flag kind."""
        return self.value
