import math

import pytest

from minimizer2d.core.errors import InvalidArgumentError, NonFiniteResultError
from minimizer2d.core.gradient_descent import GradientDescentMethod, gradient_descent
from minimizer2d.core.trace import (
    STOP_CONVERGED,
    STOP_LEARNING_RATE_TOO_SMALL,
    STOP_MAX_ITER,
)


def steep(x, y):
    return 20.0 * x ** 2 + y ** 2


def steep_dx(x, y):
    return 40.0 * x


def steep_dy(x, y):
    return 2.0 * y


def bowl(x, y):
    return x ** 2 + y ** 2


def test_converges_on_paraboloid(paraboloid):
    trace = gradient_descent(paraboloid.func, paraboloid.dfdx, paraboloid.dfdy, 1.0, 1.0, 1e-3)

    assert trace.status == STOP_CONVERGED
    assert trace.x_star.x == pytest.approx(5.0, abs=0.1)
    assert trace.x_star.y == pytest.approx(4.0, abs=0.1)
    assert trace.f_star == pytest.approx(3.0, abs=0.01)
    assert all(rec.step_type != "reverted" for rec in trace.records)


def test_first_step_follows_negative_gradient(paraboloid):
    trace = gradient_descent(
        paraboloid.func, paraboloid.dfdx, paraboloid.dfdy, 1.0, 1.0, 1e-3, max_iter=1,
    )
    rec = trace.records[1]

    # (1, 1) - 0.1 * (-8, -12)
    assert rec.x == pytest.approx(1.8)
    assert rec.y == pytest.approx(2.2)
    assert rec.meta["learning_rate"] == pytest.approx(0.1)
    assert trace.status == STOP_MAX_ITER


def test_worse_step_is_reverted_with_same_index():
    trace = gradient_descent(steep, steep_dx, steep_dy, 1.0, 1.0, 1e-3)
    reverted, accepted = trace.records[1], trace.records[2]

    assert reverted.step_type == "reverted"
    assert reverted.index == 1
    assert (reverted.x, reverted.y) == (1.0, 1.0)
    assert reverted.meta["learning_rate"] == pytest.approx(0.05)
    assert reverted.meta["rejected_value"] > trace.records[0].value

    assert accepted.step_type == "accepted"
    assert accepted.index == 1
    assert accepted.x == pytest.approx(-1.0)
    assert accepted.y == pytest.approx(0.9)


def test_learning_rate_never_increases():
    trace = gradient_descent(steep, steep_dx, steep_dy, 1.0, 1.0, 1e-3)
    rates = [rec.meta["learning_rate"] for rec in trace.records]
    assert all(b <= a for a, b in zip(rates, rates[1:]))


def test_accepted_values_never_increase():
    trace = gradient_descent(steep, steep_dx, steep_dy, 1.0, 1.0, 1e-3)
    values = [rec.value for rec in trace.records if rec.step_type != "reverted"]
    assert all(b <= a for a, b in zip(values, values[1:]))


def test_only_accepted_iterations_advance_the_index():
    trace = gradient_descent(steep, steep_dx, steep_dy, 1.0, 1.0, 1e-3)
    accepted = [rec.index for rec in trace.records if rec.step_type == "accepted"]
    assert accepted == list(range(1, len(accepted) + 1))
    assert trace.n_iter == len(accepted)


def test_learning_rate_too_small_keeps_start_point():
    # Градієнт з неправильним знаком: кожен крок погіршує f
    trace = gradient_descent(
        bowl, lambda x, y: -2.0 * x, lambda x, y: -2.0 * y, 1.0, 1.0, 1e-3,
    )

    assert trace.status == STOP_LEARNING_RATE_TOO_SMALL
    assert (trace.x_star.x, trace.x_star.y) == (1.0, 1.0)
    assert trace.f_star == 2.0

    reverted = trace.records[1:]
    # 0.1 * 0.5^17: перший lr, менший за eps / 1000
    assert len(reverted) == 17
    assert all(rec.step_type == "reverted" and rec.index == 1 for rec in reverted)
    assert reverted[-1].meta["learning_rate"] < 1e-6
    assert trace.grad_evals == 1


def test_iteration_cap_counts_accepted_steps(paraboloid):
    trace = gradient_descent(
        paraboloid.func, paraboloid.dfdx, paraboloid.dfdy, 1.0, 1.0, 1e-3, max_iter=2,
    )
    assert trace.status == STOP_MAX_ITER
    assert trace.n_iter == 2
    assert trace.grad_evals == 2


def test_zero_gradient_converges_immediately():
    trace = gradient_descent(bowl, lambda x, y: 2.0 * x, lambda x, y: 2.0 * y, 0.0, 0.0, 1e-3)
    assert trace.status == STOP_CONVERGED
    assert trace.n_iter == 1


def test_custom_learning_rate(paraboloid):
    trace = gradient_descent(
        paraboloid.func, paraboloid.dfdx, paraboloid.dfdy, 1.0, 1.0, 1e-3,
        max_iter=1, options={"learning_rate": 0.25},
    )
    # x: 1 + 0.25 * 8, y: 1 + 0.25 * 12
    assert (trace.x_star.x, trace.x_star.y) == (3.0, 4.0)


def test_requires_gradient(paraboloid):
    with pytest.raises(InvalidArgumentError):
        GradientDescentMethod(paraboloid.func)


def test_gradient_must_be_a_pair(paraboloid):
    with pytest.raises(InvalidArgumentError):
        GradientDescentMethod(paraboloid.func, grad=(paraboloid.dfdx,))


def test_non_finite_gradient_propagates(paraboloid):
    with pytest.raises(NonFiniteResultError):
        gradient_descent(
            paraboloid.func, lambda x, y: math.nan, paraboloid.dfdy, 1.0, 1.0, 1e-3,
        )


@pytest.mark.parametrize(
    "options",
    [
        {"lr_decay": 1.0},
        {"lr_decay": 1.5},
        {"lr_decay": 0.0},
        {"lr_decay": -0.5},
        {"learning_rate": 0.0},
        {"learning_rate": -0.1},
        {"lr_floor_divisor": 0.0},
    ],
)
def test_rejects_bad_options_before_evaluating(options, recorder):
    calls = []

    def func(x, y):
        calls.append((x, y))
        return bowl(x, y)

    # З lr_decay >= 1 відкат з неправильним градієнтом не закінчився б ніколи
    with pytest.raises(InvalidArgumentError):
        gradient_descent(
            func, lambda x, y: -2.0 * x, lambda x, y: -2.0 * y, 1.0, 1.0, 1e-3,
            callback=recorder, options=options,
        )
    assert calls == []
    assert recorder.records == []


def test_huge_epsilon_stops_after_first_iteration(paraboloid):
    trace = gradient_descent(paraboloid.func, paraboloid.dfdx, paraboloid.dfdy, 1.0, 1.0, 100.0)
    assert trace.status == STOP_CONVERGED
    assert trace.n_iter <= 1
