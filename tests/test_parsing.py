import pytest

from dining.parsing import (
    ArgumentError,
    Config,
    NoMealsRequired,
    check_characters,
    parse_args,
    parse_int,
)


def test_parse_int_plain():
    assert parse_int("42") == 42


def test_parse_int_skips_whitespace_and_plus():
    assert parse_int(" \t +7") == 7


def test_parse_int_stops_at_non_digit():
    assert parse_int("12 3") == 12


def test_parse_int_empty_is_zero():
    assert parse_int("") == 0


def test_parse_int_accepts_int_max():
    assert parse_int("2147483647") == 2147483647


def test_parse_int_rejects_overflow():
    with pytest.raises(ArgumentError, match="int_max"):
        parse_int("2147483648")


def test_parse_int_rejects_trailing_plus():
    with pytest.raises(ArgumentError, match="error in atoi"):
        parse_int("5+")


def test_check_characters_rejects_letters():
    with pytest.raises(ArgumentError, match="invalid input"):
        check_characters(["12", "1a"])


def test_parse_args_without_meals():
    config = parse_args(["5", "800", "200", "300"])
    assert config == Config(5, 800, 200, 300, None)
    assert config.max_meals is None


def test_parse_args_with_meals():
    config = parse_args(["5", "800", "200", "200", "7"])
    assert config.max_meals == 7


def test_parse_args_zero_meals():
    with pytest.raises(NoMealsRequired):
        parse_args(["5", "800", "200", "200", "0"])


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_args_wrong_count(args):
    with pytest.raises(ArgumentError, match="more or less"):
        parse_args(args)


def test_parse_args_negative_is_invalid_input():
    with pytest.raises(ArgumentError, match="invalid input"):
        parse_args(["-5", "800", "200", "200"])


@pytest.mark.parametrize(
    "args",
    [["0", "800", "200", "200"], ["2", "0", "200", "200"], ["2", "800", "0", "200"], ["2", "800", "200", "0"]],
)
def test_parse_args_requires_positive(args):
    with pytest.raises(ArgumentError, match="positive"):
        parse_args(args)


def test_parse_args_thread_limit():
    with pytest.raises(ArgumentError, match="threads"):
        parse_args(["62251", "800", "200", "200"])


def test_parse_args_at_thread_limit():
    assert parse_args(["62250", "800", "200", "200"]).count == 62250