# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
This module implements `Flags`, the flag registry and parser at the heart of
Argumentative. It declares typed command-line arguments, consumes a raw argument
vector, writes parsed values into the handles returned at registration time,
validates required arguments and renders usage text.

Supported syntax:
- Boolean switches: `--verbose`, `-v`, and bundles of short switches (`-xvz`)
- String options: `--output out.txt` or `-o out.txt` (value is the next token)
- Positional arguments, matched strictly in registration order

Deliberately unsupported: subcommands, repeated or multi-valued flags, type
coercion beyond `str`/`bool`, and `--flag=value`.

Public Interface:
- `add_bool(...)`, `add_string(...)`, `add_positional(...)`: Register an argument
  and get back its `ValueHandle`.
- `register(kind, ...)`: Generic registration entry point taking a `FlagKind`.
- `parse(args)`: Parse an argv-style list (index 0 is the program name).
- `validate()`: Check that required arguments received a value.
- `get_usage_text(...)` / `render_usage(...)`: Build or print usage output.
- `suggest_next(...)`: Suggest completions for partially typed input.

Example Usage:
    flags = Flags()
    target = flags.add_string("target", "t", True, "", "Destination directory")
    verbose = flags.add_bool("verbose", "v", "Chatty output")
    source = flags.add_positional("source", False, ".", "Directory to copy")

    try:
        flags.parse(sys.argv)
    except ParseError as error:
        flags.render_usage("backup", "Copy files somewhere safe", error)

    print(target.value, verbose.value, source.value)
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console
from rich.text import Text

from argumentative.console import console as shared_console
from argumentative.exceptions import (
    CombinedParameterFlagError,
    FlagDefinitionError,
    MissingRequiredError,
    MissingValueError,
    UnknownFlagError,
    UnknownPositionalError,
)
from argumentative.logger import logger
from argumentative.parser.bool_flag import BoolFlag
from argumentative.parser.flag_kind import FlagKind
from argumentative.parser.positional import Positional
from argumentative.parser.string_flag import StringFlag
from argumentative.parser.value_handle import ValueHandle


class Flags:
    """
    Registry and parser for boolean flags, string options and positional arguments.

    Boolean and string flags are keyed by their long name. Their short aliases live
    in one shared table, so an alias maps to exactly one flag of either kind; when
    two flags register the same alias the later registration wins. Positional
    arguments are kept in registration order, which is the order they are filled in.

    Values are written in place into each descriptor's `ValueHandle`. Parsing again
    overwrites matched values and leaves everything else as it was.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize an empty registry."""
        self.console: Console = console or shared_console
        self._bool_flags: dict[str, BoolFlag] = {}
        self._string_flags: dict[str, StringFlag] = {}
        self._positionals: list[Positional] = []
        self._short_flags: dict[str, str] = {}

    def _register_short_alias(self, short_alias: str, long_name: str) -> None:
        """Map the first character of `short_alias` to `long_name`."""
        if not short_alias:
            return
        alias = short_alias[0]
        existing = self._short_flags.get(alias)
        if existing is not None and existing != long_name:
            logger.debug(
                "Short alias '-%s' moved from '--%s' to '--%s'", alias, existing, long_name
            )
        self._short_flags[alias] = long_name

    def add_bool(
        self, long_name: str, short_alias: str = "", description: str = ""
    ) -> ValueHandle[bool]:
        """
        Register a boolean flag.

        Args:
            long_name (str): Name used as `--long_name`.
            short_alias (str): Optional single-character alias used as `-a`.
            description (str): Help text for usage output.

        Returns:
            ValueHandle[bool]: Handle whose value is `False` until the flag is seen.
        """
        flag = BoolFlag(long_name, short_alias, description)
        self._bool_flags[long_name] = flag
        self._register_short_alias(short_alias, long_name)
        return flag.handle

    def add_string(
        self,
        long_name: str,
        short_alias: str = "",
        required: bool = False,
        default: str = "",
        description: str = "",
    ) -> ValueHandle[str]:
        """
        Register a string-valued flag.

        Args:
            long_name (str): Name used as `--long_name`.
            short_alias (str): Optional single-character alias used as `-a`.
            required (bool): Whether the value must be non-empty after parsing.
            default (str): Initial value when the flag is not given.
            description (str): Help text for usage output.

        Returns:
            ValueHandle[str]: Handle holding `default` until the flag is parsed.
        """
        flag = StringFlag(long_name, short_alias, required, default, description)
        self._string_flags[long_name] = flag
        self._register_short_alias(short_alias, long_name)
        return flag.handle

    def add_positional(
        self,
        long_name: str,
        required: bool = False,
        default: str = "",
        description: str = "",
    ) -> ValueHandle[str]:
        """
        Register a positional argument after all previously registered ones.

        Args:
            long_name (str): Name shown in usage output and error messages.
            required (bool): Whether the value must be non-empty after parsing.
            default (str): Initial value when no token fills this argument.
            description (str): Help text for usage output.

        Returns:
            ValueHandle[str]: Handle holding `default` until a token fills it.
        """
        positional = Positional(long_name, required, default, description)
        self._positionals.append(positional)
        return positional.handle

    def register(
        self,
        kind: FlagKind | str,
        long_name: str,
        short_alias: str = "",
        required: bool = False,
        default: str = "",
        description: str = "",
    ) -> ValueHandle[Any]:
        """
        Register an argument of any kind.

        Raises:
            FlagDefinitionError: If `kind` is unknown, or options are given that the
                kind does not support (`required`/`default` on a boolean flag, a short
                alias on a positional argument).
        """
        if not isinstance(kind, FlagKind):
            try:
                kind = FlagKind(kind)
            except ValueError as error:
                raise FlagDefinitionError(str(error)) from error
        if kind == FlagKind.BOOL:
            if required or default:
                raise FlagDefinitionError(
                    f"Boolean flag '--{long_name}' cannot be required or have a default"
                )
            return self.add_bool(long_name, short_alias, description)
        if kind == FlagKind.STRING:
            return self.add_string(long_name, short_alias, required, default, description)
        if short_alias:
            raise FlagDefinitionError(
                f"Positional argument '{long_name}' cannot have a short alias"
            )
        return self.add_positional(long_name, required, default, description)

    def get_descriptor(self, long_name: str) -> StringFlag | BoolFlag | Positional | None:
        """
        Return the descriptor registered under `long_name`.

        String flags are searched first, then boolean flags, then positionals.
        """
        if long_name in self._string_flags:
            return self._string_flags[long_name]
        if long_name in self._bool_flags:
            return self._bool_flags[long_name]
        return next((p for p in self._positionals if p.long_name == long_name), None)

    def get_handle(self, long_name: str) -> ValueHandle[Any] | None:
        """Return the value handle registered under `long_name`, if any."""
        descriptor = self.get_descriptor(long_name)
        return descriptor.handle if descriptor else None

    def values(self) -> dict[str, bool | str]:
        """Return the current value of every registered argument, keyed by long name."""
        result: dict[str, bool | str] = {}
        for name, flag in self._bool_flags.items():
            result[name] = flag.value
        for name, option in self._string_flags.items():
            result[name] = option.value
        for positional in self._positionals:
            result[positional.long_name] = positional.value
        return result

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert registered arguments into a serializable list of dicts.

        The keys match the fields accepted by configuration files, so the output can
        be dumped to YAML/TOML and loaded back with `argumentative.config.loader`.
        """
        defs: list[dict[str, Any]] = []
        for flag in self._bool_flags.values():
            defs.append(
                {
                    "kind": FlagKind.BOOL.value,
                    "name": flag.long_name,
                    "short": flag.short_alias,
                    "description": flag.description,
                }
            )
        for option in self._string_flags.values():
            defs.append(
                {
                    "kind": FlagKind.STRING.value,
                    "name": option.long_name,
                    "short": option.short_alias,
                    "required": option.required,
                    "default": option.default,
                    "description": option.description,
                }
            )
        for positional in self._positionals:
            defs.append(
                {
                    "kind": FlagKind.POSITIONAL.value,
                    "name": positional.long_name,
                    "required": positional.required,
                    "default": positional.default,
                    "description": positional.description,
                }
            )
        return defs

    def is_flag(self, token: str) -> bool:
        """Return True if `token` starts with a dash."""
        return token.startswith("-")

    def is_long_flag(self, token: str) -> bool:
        """Return True if `token` has the form `--name`."""
        return len(token) > 2 and token.startswith("--")

    def get_flag_name(self, token: str, pos: int) -> str:
        """
        Resolve a flag token to a long name.

        Long tokens resolve to the text after `--`. Short tokens resolve the alias
        character at index `pos` through the shared alias table.

        Returns:
            str: The long name, or `""` if the token is not a flag, `pos` is past the
            end of the token, or the alias is not registered.
        """
        if len(token) > 1 and token[0] == "-":
            if self.is_long_flag(token):
                return token[2:]
            if pos < len(token):
                return self._short_flags.get(token[pos], "")
        return ""

    def _takes_value(self, token: str) -> bool:
        """Return True if `token` is a standalone spelling of a string flag."""
        return (
            self.is_flag(token)
            and (self.is_long_flag(token) or len(token) == 2)
            and self.get_flag_name(token, 1) in self._string_flags
        )

    def _parse_bundle(self, token: str) -> None:
        """Set every boolean flag named by the characters of a short-flag bundle."""
        for pos in range(1, len(token)):
            name = self.get_flag_name(token, pos)
            if name in self._bool_flags:
                logger.debug("Setting '--%s' from bundle %r", name, token)
                self._bool_flags[name].value = True
            elif name in self._string_flags:
                raise CombinedParameterFlagError(
                    f"options with parameters can not be combined: {token[pos]} in {token}",
                    token,
                )
            else:
                raise UnknownFlagError(f"unknown flag -{token[pos]}", token)

    def parse(self, args: Sequence[str] | None = None) -> None:
        """
        Parse an argv-style token list and update the registered value handles.

        The first element is the program name and is skipped. Parsing stops at the
        first error; values set before the error keep their new values.

        Args:
            args (Sequence[str] | None): Argument list, `sys.argv` when None.

        Raises:
            CombinedParameterFlagError: A string flag was bundled with other flags.
            MissingValueError: A string flag was the last token.
            UnknownFlagError: A flag did not resolve to a registered flag.
            UnknownPositionalError: More positional tokens than positional arguments.
            MissingRequiredError: A required argument is empty after parsing.
        """
        if args is None:
            args = sys.argv
        args = list(args)
        logger.debug("Parsing arguments: %r", args)

        positional = 0
        i = 1
        while i < len(args):
            token = args[i]
            if self.is_flag(token):
                name = self.get_flag_name(token, 1)
                if name in self._string_flags:
                    if not self.is_long_flag(token) and len(token) > 2:
                        raise CombinedParameterFlagError(
                            f"options with parameters can not be combined {token}", token
                        )
                    if i + 1 >= len(args):
                        raise MissingValueError(f"missing value for flag {token}", token)
                    logger.debug("Setting '--%s' to %r", name, args[i + 1])
                    self._string_flags[name].value = args[i + 1]
                    i += 1
                elif self.is_long_flag(token):
                    if name not in self._bool_flags:
                        raise UnknownFlagError(f"unknown flag {token}", token)
                    logger.debug("Setting '--%s'", name)
                    self._bool_flags[name].value = True
                else:
                    self._parse_bundle(token)
            elif positional < len(self._positionals):
                logger.debug(
                    "Setting positional '%s' to %r",
                    self._positionals[positional].long_name,
                    token,
                )
                self._positionals[positional].value = token
                positional += 1
            else:
                raise UnknownPositionalError(
                    f"unknown positional argument {token}", token
                )
            i += 1
        self.validate()

    def validate(self) -> None:
        """
        Check that every required string flag and positional argument has a value.

        An explicitly empty value counts as missing. Only the first failure is
        reported, string flags before positionals.

        Raises:
            MissingRequiredError: For the first required argument that is empty.
        """
        for flag in self._string_flags.values():
            if flag.required and flag.value == "":
                logger.debug("Required flag '--%s' missing", flag.long_name)
                raise MissingRequiredError(
                    f"required flag --{flag.long_name} missing", flag.long_name
                )
        for positional in self._positionals:
            if positional.required and positional.value == "":
                logger.debug("Required positional '%s' missing", positional.long_name)
                raise MissingRequiredError(
                    f"required positional argument [{positional.long_name}] missing",
                    positional.long_name,
                )

    def _build_usage(
        self, name: str, description: str, error: BaseException | str | None
    ) -> Text:
        text = Text()
        if error is not None:
            text.append(f"Error: {error}\n", style="bold red")
        else:
            text.append(f"{name}\n", style="bold")
            text.append(f"{description}\n")

        usage = f"\nUsage: {name}"
        for flag in self._bool_flags.values():
            usage += f" {flag.get_short_description()}"
        for option in self._string_flags.values():
            usage += f" {option.get_short_description()}"
        for positional in self._positionals:
            usage += f" {positional.get_short_description()}"
        text.append(f"{usage}\n")

        if self._bool_flags:
            text.append("\nFlags:\n", style="bold")
            for flag in self._bool_flags.values():
                text.append(f"{flag.get_long_description()}\n")
        if self._string_flags:
            text.append("\nOptions:\n", style="bold")
            for option in self._string_flags.values():
                text.append(f"{option.get_long_description()}\n")
        if self._positionals:
            text.append("\nPositional arguments:\n", style="bold")
            for positional in self._positionals:
                text.append(f"{positional.get_long_description()}\n")
        return text

    def get_usage_text(
        self, name: str, description: str, error: BaseException | str | None = None
    ) -> str:
        """
        Build the plain usage text.

        Args:
            name (str): Program name shown in the title and `Usage:` line.
            description (str): Program description, shown when there is no error.
            error (BaseException | str | None): Prior error, shown instead of the
                name and description.

        Returns:
            str: The usage text, every line terminated by a newline.
        """
        return self._build_usage(name, description, error).plain

    def render_usage(
        self, name: str, description: str, error: BaseException | str | None = None
    ) -> None:
        """Print the usage text to this registry's console."""
        self.console.print(
            self._build_usage(name, description, error),
            end="",
            soft_wrap=True,
            highlight=False,
        )

    def suggest_next(
        self, args: list[str], cursor_at_end_of_token: bool = False
    ) -> list[str]:
        """
        Suggest completions for the next token based on current input.

        Args:
            args (list[str]): Tokens typed so far, without the program name. Unless
                `cursor_at_end_of_token` is set, the last token is the partial token
                being completed.
            cursor_at_end_of_token (bool): True if the input ends with whitespace.

        Returns:
            list[str]: Sorted suggestions.
        """
        if cursor_at_end_of_token or not args:
            parsed, stub = list(args), ""
        else:
            parsed, stub = list(args[:-1]), args[-1]

        used: set[str] = set()
        awaiting: StringFlag | None = None
        for token in parsed:
            if awaiting is not None:
                awaiting = None
                continue
            if not self.is_flag(token):
                continue
            if self._takes_value(token):
                awaiting = self._string_flags[self.get_flag_name(token, 1)]
                used.add(awaiting.long_name)
            elif self.is_long_flag(token):
                used.add(token[2:])
            else:
                used.update(self.get_flag_name(token, pos) for pos in range(1, len(token)))

        if awaiting is not None:
            if awaiting.default and awaiting.default.startswith(stub):
                return [awaiting.default]
            return []

        remaining: list[str] = []
        for flag in [*self._bool_flags.values(), *self._string_flags.values()]:
            if flag.long_name in used:
                continue
            remaining.append(f"--{flag.long_name}")
            alias = flag.short_alias[:1]
            if alias and self._short_flags.get(alias) == flag.long_name:
                remaining.append(f"-{alias}")

        if stub and not stub.startswith("-"):
            return []
        return sorted(flag for flag in remaining if flag.startswith(stub))

    def __str__(self) -> str:
        """Return a human-readable summary of the registry."""
        required = sum(flag.required for flag in self._string_flags.values()) + sum(
            positional.required for positional in self._positionals
        )
        return (
            f"Flags(bools={len(self._bool_flags)}, strings={len(self._string_flags)}, "
            f"positionals={len(self._positionals)}, aliases={len(self._short_flags)}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
