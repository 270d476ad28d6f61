# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""config.py
Configuration loader for declaring flags in YAML or TOML files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from argumentative.logger import logger
from argumentative.parser.flag_kind import FlagKind
from argumentative.parser.flags import Flags


class RawFlag(BaseModel):
    """Raw flag model for Argumentative configuration."""

    kind: FlagKind
    name: str
    short: str = ""
    required: bool = False
    default: str = ""
    description: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> FlagKind:
        if isinstance(value, FlagKind):
            return value
        return FlagKind(value)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value or value.startswith("-"):
            raise ValueError("name must be non-empty and given without leading dashes")
        return value

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str) -> str:
        if len(value) > 1:
            raise ValueError("short must be a single character")
        if value == "-":
            raise ValueError("short cannot be '-'")
        return value

    @model_validator(mode="after")
    def validate_kind_options(self) -> RawFlag:
        if self.kind == FlagKind.BOOL and (self.required or self.default):
            raise ValueError(
                f"bool flag '{self.name}' cannot be required or have a default"
            )
        if self.kind == FlagKind.POSITIONAL and self.short:
            raise ValueError(f"positional argument '{self.name}' cannot have a short alias")
        return self


class FlagsConfig(BaseModel):
    """Argumentative configuration model."""

    title: str = ""
    description: str = ""
    flags: list[RawFlag] = Field(default_factory=list)

    def to_flags(self) -> Flags:
        flags = Flags()
        for raw_flag in self.flags:
            flags.register(
                raw_flag.kind,
                raw_flag.name,
                short_alias=raw_flag.short,
                required=raw_flag.required,
                default=raw_flag.default,
                description=raw_flag.description,
            )
        return flags


def load_config(file_path: Path | str) -> FlagsConfig:
    """
    Load and validate a flag configuration from a YAML or TOML file.

    The file should contain a dictionary with a list of flags. Each flag is a
    dictionary with at least:
    - kind: "bool", "string" or "positional" (aliases such as "switch" work too)
    - name: the long name, without leading dashes

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        FlagsConfig: The validated configuration.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported, the document is not a
            dictionary, or a flag definition is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of flags.\n"
            "Example:\n"
            "title: 'backup'\n"
            "flags:\n"
            "  - kind: 'bool'\n"
            "    name: 'verbose'\n"
            "    short: 'v'"
        )

    config = FlagsConfig.model_validate(raw_config)
    logger.debug("Loaded %d flag definitions from %s", len(config.flags), path)
    return config


def loader(file_path: Path | str) -> Flags:
    """
    Load a `Flags` registry from a YAML or TOML configuration file.

    Use `Flags.get_handle()` on the result to reach the registered values.
    """
    return load_config(file_path).to_flags()
