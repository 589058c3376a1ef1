import math

import pytest

from randomaker.config.settings import MAX_TOTAL, Settings
from randomaker.exceptions import ArgumentValidationError, ConfigError
from randomaker.schema.request import InvocationRequest
from randomaker.schema.selector import Selector


def test_request_round_trips_through_dict():
    request = InvocationRequest(Selector.CAUCHY, 3, 0.0, 1.0)
    assert request.to_dict() == {"selector": "c", "count": 3, "param1": 0.0, "param2": 1.0}
    assert InvocationRequest.from_dict(request.to_dict()) == request


@pytest.mark.parametrize("count", [0, -1, MAX_TOTAL + 1])
def test_request_rejects_bad_count(count):
    with pytest.raises(ArgumentValidationError):
        InvocationRequest(Selector.UNIFORM, count, 0.0, 1.0)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_request_rejects_non_finite_params(value):
    with pytest.raises(ArgumentValidationError):
        InvocationRequest(Selector.UNIFORM, 1, value, 1.0)


def test_request_requires_selector_member():
    with pytest.raises(ArgumentValidationError):
        InvocationRequest("u", 1, 0.0, 1.0)


def test_selector_flags_and_help():
    assert Selector.from_flag("-t") is Selector.TRUE_UNIFORM
    assert Selector.TRUE_UNIFORM.uses_entropy
    assert not Selector.UNIFORM.uses_entropy
    assert [s.flag for s in Selector] == ["-u", "-n", "-b", "-e", "-g", "-l", "-o", "-c", "-p", "-t"]
    assert all(s.help for s in Selector)


def test_settings_validation():
    assert Settings().output_precision == 9
    with pytest.raises(ConfigError):
        Settings(output_precision=-1)
    with pytest.raises(ConfigError):
        Settings(entropy_device="")
