import pytest

from philosophers.args import (
    POSITIVE_REQUIRED,
    USAGE,
    Settings,
    UsageError,
    atoi,
    parse_args,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-17", -17),
        ("+8", 8),
        ("123abc", 123),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("+-5", 0),
        ("\v\f\r9 9", 9),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_parse_four_arguments():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_five_arguments():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.n_philos == 4
    assert settings.t_die == 410
    assert settings.t_eat == 200
    assert settings.t_sleep == 100
    assert settings.n_must_eat == 7


def test_parse_uses_atoi_leniency():
    settings = parse_args([" 3", "+60", "60ms", "60"])
    assert settings == Settings(3, 60, 60, 60)


@pytest.mark.parametrize(
    "argv",
    [[], ["5"], ["5", "800", "200"], ["5", "800", "200", "200", "3", "1"]],
)
def test_wrong_count_raises_usage(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert str(info.value) == USAGE


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "abc", "200"],
        ["5", "800", "200", "200", "0"],
    ],
)
def test_non_positive_raises(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert str(info.value) == POSITIVE_REQUIRED


def test_usage_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["1"])