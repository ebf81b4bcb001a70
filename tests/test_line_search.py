import math

import pytest

from minimizer2d.core.errors import InvalidArgumentError, NonFiniteResultError
from minimizer2d.core.line_search import line_search, scan_1d


def test_finds_interior_minimum():
    x = line_search(lambda t: (t - 0.3) ** 2, 0.0, 1.0, 0.01)
    assert abs(x - 0.3) < 0.01


def test_minimum_outside_interval_stops_at_boundary():
    x = line_search(lambda t: (t - 5.0) ** 2, 0.0, 1.0, 0.1)
    assert 0.85 < x <= 1.0


@pytest.mark.parametrize(
    "phi, x0, search_range, step",
    [
        (lambda t: (t - 5.0) ** 2, 0.0, 1.0, 0.1),
        (lambda t: math.sin(3.0 * t) + 0.1 * t, 2.0, 1.5, 0.05),
        (lambda t: -abs(t - 1.1), 1.0, 0.5, 0.03),
        (lambda t: t ** 4 - t ** 2, -0.2, 2.0, 0.07),
    ],
)
def test_result_stays_in_interval_and_never_worse(phi, x0, search_range, step):
    res = scan_1d(phi, x0, search_range, step)
    assert x0 - search_range <= res.x <= x0 + search_range
    assert phi(res.x) <= phi(x0)
    assert res.value == phi(res.x)


def test_constant_function_returns_initial_point():
    assert line_search(lambda t: 7.0, 0.42, 1.0, 0.1) == 0.42


def test_ties_keep_leftmost_sample():
    # Мінімуми в -0.5 та 0.5 однакові, перемагає лівіший
    x = line_search(lambda t: abs(abs(t) - 0.5), 0.0, 1.0, 0.25)
    assert x == -0.5


def test_never_evaluates_outside_interval():
    calls = []

    def phi(t):
        calls.append(t)
        return (t - 0.7) ** 2

    res = scan_1d(phi, 0.5, 0.4, 0.01)
    assert calls[0] == 0.5
    assert all(0.1 - 1e-12 <= t <= 0.9 + 1e-12 for t in calls)
    assert res.func_evals == len(calls) == res.samples + 1


@pytest.mark.parametrize(
    "search_range, step",
    [(0.0, 0.1), (-1.0, 0.1), (1.0, 0.0), (1.0, -0.5), (1.0, float("nan")), (float("inf"), 0.1)],
)
def test_invalid_range_or_step(search_range, step):
    with pytest.raises(InvalidArgumentError):
        line_search(lambda t: t * t, 0.0, search_range, step)


def test_step_too_small_to_advance():
    with pytest.raises(InvalidArgumentError):
        line_search(lambda t: t * t, 1e20, 1.0, 1e-3)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        line_search(lambda t: t * t, 0.0, 1.0, 0.0)


def test_non_finite_value_propagates():
    with pytest.raises(NonFiniteResultError):
        line_search(lambda t: float("nan") if t > 0.5 else t, 0.0, 1.0, 0.1)
