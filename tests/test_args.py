import pytest

from philosophers.args import (
    ArgumentError,
    Settings,
    is_numeric,
    parse_args,
    parse_long,
    parse_positive,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("0", True),
        ("", True),
        ("12a", False),
        ("+1", False),
        ("-1", False),
        (" 1", False),
        ("\u0661", False),
    ],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("-13", -13),
        ("  \t\n-42abc", -42),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("007", 7),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("5", 5), ("+5", 5), ("2147483647", 2147483647), ("0001", 1)],
)
def test_parse_positive_accepts(text, expected):
    assert parse_positive(text) == expected


@pytest.mark.parametrize(
    "text",
    [None, "", "+", "0", "+0", "-1", "2147483648", " 5", "5 ", "5x", "++5", "1.5"],
)
def test_parse_positive_rejects(text):
    with pytest.raises(ArgumentError):
        parse_positive(text)


def test_argument_error_message():
    with pytest.raises(ArgumentError) as info:
        parse_positive("0")
    assert str(info.value) == "Error: Invalid arguments passed."


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args([])


def test_parse_args_without_meals():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)
    assert settings.meals is None


def test_parse_args_with_meals():
    settings = parse_args(["4", "410", "200", "+200", "7"])
    assert settings.philosophers == 4
    assert settings.time_to_die == 410
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 200
    assert settings.meals == 7


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
    ],
)
def test_parse_args_wrong_count(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "x", "200"],
        ["5", "800", "200", ""],
        ["5", "800", "200", "200", "0"],
    ],
)
def test_parse_args_invalid_value(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


def test_settings_are_immutable():
    settings = parse_args(["1", "2", "3", "4"])
    with pytest.raises(AttributeError):
        settings.philosophers = 9
    assert settings.philosophers == 1