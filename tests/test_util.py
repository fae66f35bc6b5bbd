import math

import pytest

from symmlines.util import (
    EPSILON,
    float_cmp_tolerance,
    floats_equal_toler,
    floats_lt_toler,
)


def test_cmp_equal_within_tolerance():
    assert float_cmp_tolerance(1.0, 1.0 + EPSILON / 2.0) == 0


def test_cmp_less_and_greater():
    assert float_cmp_tolerance(1.0, 2.0) == -1
    assert float_cmp_tolerance(2.0, 1.0) == 1


@pytest.mark.parametrize(
    "a, b",
    [(1.0, 2.0), (-3.5, 7.25), (0.0, EPSILON / 3.0), (10.0, 10.0 + 2 * EPSILON)],
)
def test_cmp_is_antisymmetric(a, b):
    assert float_cmp_tolerance(a, b) == -float_cmp_tolerance(b, a)


@pytest.mark.parametrize(
    "a, b",
    [(math.inf, 1.0), (1.0, -math.inf), (math.nan, 0.0), (0.0, math.nan)],
)
def test_cmp_non_finite_is_none(a, b):
    assert float_cmp_tolerance(a, b) is None


def test_equal_toler():
    assert floats_equal_toler(1.0, 1.0 + EPSILON / 10.0)
    assert not floats_equal_toler(1.0, 1.0 + 2 * EPSILON)


def test_equal_toler_agrees_with_cmp():
    for a, b in [(0.0, 0.0), (1.0, 1.5), (3.0, 3.0 + EPSILON / 4.0)]:
        assert floats_equal_toler(a, b) == (float_cmp_tolerance(a, b) == 0)


def test_lt_toler():
    assert floats_lt_toler(1.0, 1.0 + 2 * EPSILON)
    assert not floats_lt_toler(1.0, 1.0 + EPSILON / 2.0)
    assert not floats_lt_toler(2.0, 1.0)