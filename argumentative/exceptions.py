# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Defines all custom exception classes used by Argumentative.

Parse failures are reported by raising one of the `ParseError` subclasses below.
The string form of every parse error is the user-facing message, so callers can
show `str(error)` directly or pass the error to `Flags.render_usage()`.

All exceptions inherit from `ArgumentativeError`, the base exception for the package.

Exception Hierarchy:
- ArgumentativeError
    ├── FlagDefinitionError
    └── ParseError
        ├── CombinedParameterFlagError
        ├── UnknownFlagError
        ├── UnknownPositionalError
        ├── MissingValueError
        └── MissingRequiredError

Parse errors are terminal: parsing stops at the first one and nothing is retried.
"""
from __future__ import annotations


class ArgumentativeError(Exception):
    """Base exception for Argumentative."""


class FlagDefinitionError(ArgumentativeError):
    """Exception raised when a flag is registered with options its kind does not support."""


class ParseError(ArgumentativeError):
    """
    Base exception for failures while parsing an argument list.

    Attributes:
        token (str | None): The argument token that caused the failure, if any.
    """

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token: str | None = token


class CombinedParameterFlagError(ParseError):
    """Exception raised when a flag that takes a value is bundled with other flags."""


class UnknownFlagError(ParseError):
    """Exception raised when a flag token does not resolve to a registered flag."""


class UnknownPositionalError(ParseError):
    """Exception raised when a positional value arrives after all positionals are filled."""


class MissingValueError(ParseError):
    """Exception raised when a flag that takes a value is the last argument."""


class MissingRequiredError(ParseError):
    """
    Exception raised when a required flag or positional argument is still empty
    after parsing.

    Attributes:
        name (str): Long name of the missing flag or positional argument.
    """

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name: str = name
