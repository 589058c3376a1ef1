from types import SimpleNamespace

import numpy as np
import pytest

from randomaker.exceptions import DistributionParameterError, SamplingError
from randomaker.interfaces.distribution import SampleDistribution
from randomaker.interfaces.entropy import EntropySource
from randomaker.sampling.generator import draw, generate_samples, time_seeded_generator
from randomaker.schema.request import InvocationRequest
from randomaker.schema.selector import Selector


class CountingSource(EntropySource):
    name = "counting"

    def __init__(self) -> None:
        self.closed = False
        self.requested = 0

    def read(self, n_bytes: int) -> bytes:
        self.requested += n_bytes
        return bytes(n_bytes)

    def close(self) -> None:
        self.closed = True


def test_generate_samples_length_matches_count():
    request = InvocationRequest(Selector.POISSON, 25, 3.0, 0.0)
    samples = generate_samples(request, rng=time_seeded_generator(11))
    assert samples.shape == (25,)
    assert samples.dtype == np.float64


def test_seeded_generators_reproduce():
    request = InvocationRequest(Selector.GAMMA, 10, 2.0, 1.0)
    a = generate_samples(request, rng=time_seeded_generator(5))
    b = generate_samples(request, rng=time_seeded_generator(5))
    assert np.array_equal(a, b)


def test_default_generator_is_seeded_from_clock(monkeypatch):
    ticks = iter([1_000, 2_000, 2_000])
    monkeypatch.setattr(
        "randomaker.sampling.generator.time", SimpleNamespace(time_ns=lambda: next(ticks))
    )
    request = InvocationRequest(Selector.UNIFORM, 8, 0.0, 1.0)
    first = generate_samples(request)
    second = generate_samples(request)
    third = generate_samples(request)
    assert not np.array_equal(first, second)
    assert np.array_equal(second, third)


def test_true_random_reads_injected_source_without_closing_it():
    source = CountingSource()
    request = InvocationRequest(Selector.TRUE_UNIFORM, 6, -1.0, 1.0)
    samples = generate_samples(request, entropy=source)
    assert np.array_equal(samples, np.full(6, -1.0))
    assert source.requested == 6 * 8
    assert source.closed is False


def test_true_random_closes_default_source(monkeypatch):
    source = CountingSource()
    monkeypatch.setattr(
        "randomaker.sampling.generator.default_entropy_source", lambda settings: source
    )
    generate_samples(InvocationRequest(Selector.TRUE_UNIFORM, 2, 0.0, 1.0))
    assert source.closed is True


def test_invalid_parameters_raise_before_drawing():
    request = InvocationRequest(Selector.NORMAL, 3, 0.0, -1.0)
    with pytest.raises(DistributionParameterError):
        generate_samples(request, rng=time_seeded_generator(1))


def test_draw_rejects_wrong_shape():
    class BadDist(SampleDistribution):
        name = "bad"

        def sample(self, size, rng):
            return np.ones((1, 1))

        def params(self):
            return {}

    with pytest.raises(SamplingError):
        draw(BadDist(), 2, time_seeded_generator(1))


def test_unit_uniform_buffer_is_half_open():
    request = InvocationRequest(Selector.UNIFORM, 5000, 0.0, 1.0)
    samples = generate_samples(request, rng=time_seeded_generator(21))
    assert samples.min() >= 0.0
    assert samples.max() < 1.0


def test_draw_rejects_overflowing_samples():
    class OverflowDist(SampleDistribution):
        name = "overflow"

        def sample(self, size, rng):
            return np.array([1.0, np.inf, -np.inf, np.nan][:size])

        def params(self):
            return {}

    with pytest.raises(DistributionParameterError):
        draw(OverflowDist(), 4, time_seeded_generator(1))


def test_gamma_overflow_is_a_parameter_error():
    request = InvocationRequest(Selector.GAMMA, 4, 1e308, 1e308)
    with pytest.raises(DistributionParameterError):
        generate_samples(request, rng=time_seeded_generator(2))
