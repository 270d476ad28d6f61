import pytest
import toml
import yaml
from pydantic import ValidationError

from argumentative.config import FlagsConfig, RawFlag, load_config, loader
from argumentative.parser import FlagKind, Flags

YAML_CONFIG = """
title: backup
description: Copy files somewhere safe
flags:
  - kind: switch
    name: verbose
    short: v
    description: Chatty output
  - kind: string
    name: target
    short: t
    required: true
    description: Destination directory
  - kind: arg
    name: source
    default: "."
    description: Directory to copy
"""

TOML_CONFIG = """
title = "backup"

[[flags]]
kind = "bool"
name = "verbose"
short = "v"

[[flags]]
kind = "option"
name = "target"
default = "/tmp"
"""


def test_load_yaml_config(tmp_path):
    path = tmp_path / "flags.yaml"
    path.write_text(YAML_CONFIG)
    config = load_config(path)
    assert config.title == "backup"
    assert config.description == "Copy files somewhere safe"
    assert [flag.kind for flag in config.flags] == [
        FlagKind.BOOL,
        FlagKind.STRING,
        FlagKind.POSITIONAL,
    ]
    assert config.flags[1].required is True


def test_loader_builds_working_registry(tmp_path):
    path = tmp_path / "flags.yml"
    path.write_text(YAML_CONFIG)
    flags = loader(str(path))
    assert isinstance(flags, Flags)
    flags.parse(["backup", "-v", "-t", "/srv", "home"])
    assert flags.values() == {"verbose": True, "target": "/srv", "source": "home"}


def test_load_toml_config(tmp_path):
    path = tmp_path / "flags.toml"
    path.write_text(TOML_CONFIG)
    flags = loader(path)
    flags.parse(["backup"])
    assert flags.get_handle("verbose").value is False
    assert flags.get_handle("target").value == "/tmp"


def test_definition_list_round_trip(tmp_path):
    flags = Flags()
    flags.add_bool("verbose", "v", "Chatty output")
    flags.add_string("target", "t", True, "/tmp", "Destination")
    flags.add_positional("source", False, "src", "Source")

    yaml_path = tmp_path / "flags.yaml"
    yaml_path.write_text(yaml.safe_dump({"flags": flags.to_definition_list()}))
    assert loader(yaml_path).to_definition_list() == flags.to_definition_list()

    toml_path = tmp_path / "flags.toml"
    toml_path.write_text(toml.dumps({"flags": flags.to_definition_list()}))
    assert loader(toml_path).to_definition_list() == flags.to_definition_list()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_bad_path_type():
    with pytest.raises(TypeError):
        load_config(42)


def test_load_config_unsupported_format(tmp_path):
    path = tmp_path / "flags.json"
    path.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported config format: .json"):
        load_config(path)


def test_load_config_requires_mapping(tmp_path):
    path = tmp_path / "flags.yaml"
    path.write_text("- kind: bool\n  name: verbose\n")
    with pytest.raises(ValueError, match="must contain a dictionary"):
        load_config(path)


def test_load_config_rejects_invalid_flag(tmp_path):
    path = tmp_path / "flags.yaml"
    path.write_text("flags:\n  - kind: bool\n    name: verbose\n    required: true\n")
    with pytest.raises(ValidationError):
        load_config(path)


def test_empty_config():
    flags = FlagsConfig().to_flags()
    assert str(flags) == "Flags(bools=0, strings=0, positionals=0, aliases=0, required=0)"


@pytest.mark.parametrize(
    "data",
    [
        {"kind": "nonsense", "name": "verbose"},
        {"kind": "bool", "name": ""},
        {"kind": "bool", "name": "--verbose"},
        {"kind": "bool", "name": "verbose", "short": "vv"},
        {"kind": "bool", "name": "verbose", "short": "-"},
        {"kind": "bool", "name": "verbose", "default": "yes"},
        {"kind": "positional", "name": "source", "short": "s"},
    ],
)
def test_raw_flag_validation(data):
    with pytest.raises(ValidationError):
        RawFlag.model_validate(data)


def test_raw_flag_kind_aliases():
    assert RawFlag(kind="Switch", name="verbose").kind == FlagKind.BOOL
    assert RawFlag(kind=FlagKind.STRING, name="target").kind == FlagKind.STRING
    assert RawFlag(kind="argument", name="source").kind == FlagKind.POSITIONAL
