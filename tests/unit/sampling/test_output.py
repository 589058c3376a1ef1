import re

import numpy as np

from randomaker.sampling.output import format_samples

LINE = re.compile(r"^-?\d+\.\d{9}$")


def test_format_samples_nine_decimals_one_per_line():
    text = format_samples([0.0, 1.5, -2.25, 3])
    assert text == "0.000000000\n1.500000000\n-2.250000000\n3.000000000\n"


def test_format_samples_matches_line_pattern_for_large_and_small_values():
    values = np.array([1e12, -1e-12, 123456.789, 7.0])
    lines = format_samples(values).splitlines()
    assert len(lines) == 4
    assert all(LINE.match(line) for line in lines)
    assert lines[0] == "1000000000000.000000000"


def test_format_samples_custom_precision():
    assert format_samples([1.0], precision=2) == "1.00\n"


def test_format_samples_empty():
    assert format_samples([]) == ""
