import pytest

from argumentative.exceptions import (
    MissingRequiredError,
    MissingValueError,
    ParseError,
    UnknownFlagError,
    UnknownPositionalError,
)
from argumentative.parser import Flags


def test_flags_integration():
    """Required string, bool and defaulted positional across repeated parses."""
    flags = Flags()
    string_flag = flags.add_string("stringname", "s", True, "", "stringdescription")
    bool_flag = flags.add_bool("boolname", "b", "booldescription")
    positional = flags.add_positional(
        "positionalname", False, "positionaldefault", "positionaldescription"
    )
    optx = flags.add_bool("optx", "x", "Option X")
    opty = flags.add_bool("opty", "y", "Option Y")
    optz = flags.add_bool("optz", "z", "Option Z")

    args = ["scriptname"]
    with pytest.raises(MissingRequiredError) as error:
        flags.parse(args)
    assert str(error.value) == "required flag --stringname missing"
    assert string_flag.value == ""
    assert bool_flag.value is False
    assert positional.value == "positionaldefault"

    args += ["-s", "stringvalue", "-b", "positionalvalue"]
    flags.parse(args)
    assert string_flag.value == "stringvalue"
    assert bool_flag.value is True
    assert positional.value == "positionalvalue"

    args += ["-xy"]
    flags.parse(args)
    assert optx.value is True
    assert opty.value is True

    args += ["-sz"]
    with pytest.raises(ParseError) as error:
        flags.parse(args)
    assert str(error.value) == "options with parameters can not be combined -sz"
    assert optz.value is False


def test_unmentioned_arguments_keep_defaults():
    flags = Flags()
    verbose = flags.add_bool("verbose", "v")
    target = flags.add_string("target", "t", False, "/tmp")
    name = flags.add_string("name")
    source = flags.add_positional("source", False, "src")
    flags.parse(["prog"])
    assert verbose.value is False
    assert target.value == "/tmp"
    assert name.value == ""
    assert source.value == "src"


@pytest.mark.parametrize("argv", [["prog", "-v"], ["prog", "--verbose"]])
def test_short_and_long_bool_are_equivalent(argv):
    flags = Flags()
    verbose = flags.add_bool("verbose", "v")
    flags.parse(argv)
    assert verbose.value is True


@pytest.mark.parametrize(
    "argv", [["prog", "-t", "/srv"], ["prog", "--target", "/srv"]]
)
def test_short_and_long_string_are_equivalent(argv):
    flags = Flags()
    target = flags.add_string("target", "t")
    flags.parse(argv)
    assert target.value == "/srv"


def test_string_value_is_taken_verbatim():
    flags = Flags()
    target = flags.add_string("target", "t")
    verbose = flags.add_bool("verbose", "v")
    flags.parse(["prog", "--target", "-v"])
    assert target.value == "-v"
    assert verbose.value is False


def test_missing_value_at_end_of_arguments():
    flags = Flags()
    flags.add_string("target", "t")
    with pytest.raises(MissingValueError) as error:
        flags.parse(["prog", "-t"])
    assert str(error.value) == "missing value for flag -t"
    assert error.value.token == "-t"

    with pytest.raises(MissingValueError, match="missing value for flag --target"):
        flags.parse(["prog", "--target"])


def test_unknown_long_flag():
    flags = Flags()
    flags.add_bool("verbose", "v")
    with pytest.raises(UnknownFlagError) as error:
        flags.parse(["prog", "--quiet"])
    assert str(error.value) == "unknown flag --quiet"
    assert error.value.token == "--quiet"


def test_unknown_short_flag():
    flags = Flags()
    flags.add_bool("verbose", "v")
    with pytest.raises(UnknownFlagError) as error:
        flags.parse(["prog", "-q"])
    assert str(error.value) == "unknown flag -q"


def test_double_dash_is_an_unknown_flag():
    flags = Flags()
    with pytest.raises(UnknownFlagError, match="unknown flag --"):
        flags.parse(["prog", "--"])


def test_equals_syntax_is_not_supported():
    flags = Flags()
    flags.add_string("target", "t")
    with pytest.raises(UnknownFlagError) as error:
        flags.parse(["prog", "--target=/srv"])
    assert str(error.value) == "unknown flag --target=/srv"


def test_lone_dash_is_ignored():
    flags = Flags()
    source = flags.add_positional("source")
    flags.parse(["prog", "-"])
    assert source.value == ""


def test_empty_token_is_positional():
    flags = Flags()
    source = flags.add_positional("source", False, "default")
    flags.parse(["prog", ""])
    assert source.value == ""


def test_positionals_fill_in_registration_order():
    flags = Flags()
    first = flags.add_positional("first")
    second = flags.add_positional("second")
    flags.parse(["prog", "one", "two"])
    assert first.value == "one"
    assert second.value == "two"

    with pytest.raises(UnknownPositionalError) as error:
        flags.parse(["prog", "one", "two", "three"])
    assert str(error.value) == "unknown positional argument three"
    assert error.value.token == "three"


def test_positionals_interleaved_with_flags():
    flags = Flags()
    verbose = flags.add_bool("verbose", "v")
    target = flags.add_string("target", "t")
    first = flags.add_positional("first")
    second = flags.add_positional("second")
    flags.parse(["prog", "one", "-t", "/srv", "two", "--verbose"])
    assert first.value == "one"
    assert second.value == "two"
    assert target.value == "/srv"
    assert verbose.value is True


def test_program_name_is_skipped():
    flags = Flags()
    source = flags.add_positional("source")
    flags.parse(["--not-a-flag"])
    assert source.value == ""


def test_parse_is_idempotent():
    flags = Flags()
    target = flags.add_string("target", "t", True)
    verbose = flags.add_bool("verbose", "v")
    source = flags.add_positional("source")
    argv = ["prog", "-t", "/srv", "-v", "src"]

    flags.parse(argv)
    first = flags.values()
    flags.parse(argv)
    assert flags.values() == first
    assert (target.value, verbose.value, source.value) == ("/srv", True, "src")


def test_reparse_does_not_reset_values():
    flags = Flags()
    verbose = flags.add_bool("verbose", "v")
    target = flags.add_string("target", "t")
    flags.parse(["prog", "-v", "-t", "/srv"])
    flags.parse(["prog"])
    assert verbose.value is True
    assert target.value == "/srv"


def test_parse_defaults_to_sys_argv(monkeypatch):
    flags = Flags()
    verbose = flags.add_bool("verbose", "v")
    monkeypatch.setattr("sys.argv", ["prog", "--verbose"])
    flags.parse()
    assert verbose.value is True


def test_parse_accepts_tuples():
    flags = Flags()
    source = flags.add_positional("source")
    flags.parse(("prog", "src"))
    assert source.value == "src"


def test_values_set_before_an_error_are_kept():
    flags = Flags()
    verbose = flags.add_bool("verbose", "v")
    with pytest.raises(UnknownFlagError):
        flags.parse(["prog", "-v", "--unknown"])
    assert verbose.value is True


def test_get_flag_name():
    flags = Flags()
    flags.add_bool("verbose", "v")
    flags.add_string("target", "t")
    assert flags.get_flag_name("--verbose", 1) == "verbose"
    assert flags.get_flag_name("-v", 1) == "verbose"
    assert flags.get_flag_name("-vt", 2) == "target"
    assert flags.get_flag_name("-v", 2) == ""
    assert flags.get_flag_name("-q", 1) == ""
    assert flags.get_flag_name("-", 1) == ""
    assert flags.get_flag_name("verbose", 1) == ""


def test_token_classification():
    flags = Flags()
    assert flags.is_flag("-v")
    assert flags.is_flag("--verbose")
    assert not flags.is_flag("value")
    assert not flags.is_flag("")
    assert flags.is_long_flag("--verbose")
    assert flags.is_long_flag("--v")
    assert not flags.is_long_flag("--")
    assert not flags.is_long_flag("-v")
    assert not flags.is_long_flag("-vx")
