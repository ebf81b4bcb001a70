import math

import numpy as np
import pytest

from minimizer2d.core.errors import InvalidArgumentError, NonFiniteResultError
from minimizer2d.core.random_search import RandomSearchMethod, random_search
from minimizer2d.core.trace import (
    STOP_CONVERGED,
    STOP_MAX_ITER,
    STOP_REASONS,
    STOP_STEP_TOO_SMALL,
)


class FixedAngle:
    """Джерело випадковості, що завжди повертає одне значення."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def flat(x, y):
    return 1.0


def test_reaches_paraboloid_minimum(paraboloid, rng):
    trace = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=rng)

    assert trace.status in STOP_REASONS
    assert trace.f_star < 3.1
    assert trace.f_star <= trace.records[0].value


def test_values_never_increase(paraboloid, rng):
    trace = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=rng)
    values = trace.values()
    assert all(b <= a for a, b in zip(values, values[1:]))


def test_step_size_never_increases(paraboloid, rng):
    trace = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=rng)
    steps = [rec.meta["step_size"] for rec in trace.records]
    assert all(b <= a for a, b in zip(steps, steps[1:]))


def test_step_halves_after_six_failures_in_a_row(rng):
    trace = random_search(flat, 0.0, 0.0, 1e-3, rng=rng)
    records = trace.records[1:]

    assert all(rec.step_type == "no_improvement" for rec in records)
    shrunk_at = [rec.index for rec in records if rec.meta["step_shrunk"]]
    assert shrunk_at[:3] == [6, 12, 18]
    assert trace.records[6].meta["step_size"] == 1.0
    assert trace.records[7].meta["step_size"] == 0.5
    assert trace.records[13].meta["step_size"] == 0.25


def test_flat_function_converges_once_step_is_small(rng):
    trace = random_search(flat, 0.0, 0.0, 1e-3, rng=rng)

    # 2^-14: перший крок, менший за eps / 10
    assert trace.status == STOP_CONVERGED
    assert trace.n_iter == 14 * 6
    assert (trace.x_star.x, trace.x_star.y) == (0.0, 0.0)


def test_opposite_direction_is_tried_when_forward_fails():
    # θ = 0: крок уперед по +x погіршує, назад по -x покращує
    trace = random_search(lambda x, y: x, 0.0, 0.0, 1e-3, rng=FixedAngle(0.0), max_iter=1)
    rec = trace.records[1]

    assert rec.step_type == "opposite"
    assert rec.x == pytest.approx(-1.0)
    assert rec.y == pytest.approx(0.0)
    assert rec.meta["improvement"] == pytest.approx(1.0)
    assert trace.status == STOP_MAX_ITER


def test_step_too_small_when_still_improving():
    trace = random_search(
        lambda x, y: 1e4 * (x + y), 0.0, 0.0, 1e-3,
        rng=FixedAngle(0.0),
        options={"initial_step": 1e-6},
    )

    assert trace.status == STOP_STEP_TOO_SMALL
    assert trace.n_iter == 1
    assert trace.records[1].meta["f_change"] >= 1e-3


def test_same_seed_gives_identical_traces(paraboloid):
    first = random_search(paraboloid.func, 1.0, 1.0, 1e-3, options={"seed": 7})
    second = random_search(paraboloid.func, 1.0, 1.0, 1e-3, options={"seed": 7})
    assert first == second


def test_same_generator_state_gives_identical_traces(paraboloid):
    first = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=np.random.default_rng(3))
    second = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=np.random.default_rng(3))
    assert first.records == second.records


def test_direction_is_unit_vector_times_step(paraboloid):
    rng = FixedAngle(0.125)
    trace = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=rng, max_iter=1)
    rec = trace.records[1]

    moved = math.hypot(rec.x - 1.0, rec.y - 1.0)
    assert moved == pytest.approx(1.0)
    assert rec.step_type == "forward"


def test_iteration_cap(paraboloid, rng):
    trace = random_search(paraboloid.func, 1.0, 1.0, 1e-3, rng=rng, max_iter=5)
    assert trace.status == STOP_MAX_ITER
    assert len(trace.records) == 6


def test_non_finite_value_propagates():
    with pytest.raises(NonFiniteResultError):
        RandomSearchMethod(lambda x, y: math.inf).minimize((0.0, 0.0), 1e-3)


@pytest.mark.parametrize(
    "options",
    [
        {"initial_step": 0.0},
        {"initial_step": -1.0},
        {"shrink_factor": 1.0},
        {"shrink_factor": 0.0},
        {"shrink_factor": 2.0},
        {"max_failures": -1},
    ],
)
def test_rejects_bad_options_before_evaluating(options, recorder, rng):
    calls = []

    def func(x, y):
        calls.append((x, y))
        return x + y

    with pytest.raises(InvalidArgumentError):
        random_search(func, 0.0, 0.0, 1e-3, rng=rng, callback=recorder, options=options)
    assert calls == []
    assert recorder.records == []


def test_zero_failures_allowed_halves_on_every_miss(rng):
    trace = random_search(flat, 0.0, 0.0, 1e-3, rng=rng, max_iter=3, options={"max_failures": 0})
    assert [rec.meta["step_size"] for rec in trace.records[1:]] == [1.0, 0.5, 0.25]


def test_huge_epsilon_stops_after_first_iteration(paraboloid, rng):
    trace = random_search(paraboloid.func, 1.0, 1.0, 100.0, rng=rng)
    assert trace.status == STOP_CONVERGED
    assert trace.n_iter <= 1
