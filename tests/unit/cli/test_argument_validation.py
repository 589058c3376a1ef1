import pytest

from randomaker.cli.validation import parse_arguments, parse_count, parse_float, parse_selector
from randomaker.exceptions import ArgumentValidationError
from randomaker.schema.selector import Selector


def test_parse_arguments_builds_request():
    request = parse_arguments(["-n", "10", "0.5", "-2e-1"])
    assert request.selector is Selector.NORMAL
    assert request.count == 10
    assert request.param1 == pytest.approx(0.5)
    assert request.param2 == pytest.approx(-0.2)


@pytest.mark.parametrize("argv", [[], ["-u"], ["-u", "5", "0"], ["-u", "5", "0", "1", "2"]])
def test_parse_arguments_requires_four_tokens(argv):
    with pytest.raises(ArgumentValidationError):
        parse_arguments(argv)


@pytest.mark.parametrize("token", ["-x", "-a", "u", "--u", "-uu", "-", "-U", ""])
def test_parse_selector_rejects_unknown(token):
    with pytest.raises(ArgumentValidationError):
        parse_selector(token)


def test_parse_selector_accepts_every_member():
    for selector in Selector:
        assert parse_selector(selector.flag) is selector


@pytest.mark.parametrize("token", ["0", "-5", "-0", "abc", "1.5", " 3", "1_000", "+3", "", "4294967296"])
def test_parse_count_rejects_bad_tokens(token):
    with pytest.raises(ArgumentValidationError):
        parse_count(token)


def test_parse_count_accepts_upper_bound():
    assert parse_count("4294967295") == 2**32 - 1
    assert parse_count("007") == 7


@pytest.mark.parametrize("token", ["1", "-1", "+2.5", ".5", "5.", "1e3", "-1.5E-2"])
def test_parse_float_accepts_decimal_forms(token):
    assert parse_float("ARG1", token) == pytest.approx(float(token))


@pytest.mark.parametrize("token", ["abc", "inf", "nan", "1e999", "1,5", "", "0x10", "1_0"])
def test_parse_float_rejects_non_decimal(token):
    with pytest.raises(ArgumentValidationError):
        parse_float("ARG2", token)
