# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Shared helpers for rendering flag descriptors in usage output.

Contents:
- `NAME_COLUMN_WIDTH`: Width the name column is padded to in long descriptions.
- `format_flag_names`: Build the `-a, --alpha` style name field for a flag.
- `format_long_description`: Build one aligned line of a usage section.
- `format_short_description`: Build one token of the `Usage:` line.
"""
NAME_COLUMN_WIDTH = 25


def format_flag_names(long_name: str, short_alias: str = "") -> str:
    """Return the name field for a flag, e.g. `-v, --verbose` or `--verbose`."""
    names = ""
    if short_alias:
        names += f"-{short_alias}, "
    names += f"--{long_name}"
    return names


def format_long_description(names: str, description: str, default: str = "") -> str:
    """
    Return a usage section line with the name field padded to `NAME_COLUMN_WIDTH`.

    Args:
        names (str): The name field (`-v, --verbose`, `--verbose` or a positional name).
        description (str): Help text shown after the name field.
        default (str): Default value; appended as `(Default: ...)` when non-empty.

    Returns:
        str: The formatted line without a trailing newline.
    """
    line = f"{names:<{NAME_COLUMN_WIDTH}}{description}"
    if default:
        line += f" (Default: {default})"
    return line


def format_short_description(text: str, optional: bool) -> str:
    """Return a `Usage:` line token, bracketed when the argument is optional."""
    if optional:
        return f"[{text}]"
    return text
