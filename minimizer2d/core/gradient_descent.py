"""
gradient_descent.py

Градієнтний спуск з відкатом кроку як стратегія Optimizer.

Ідея:
    x_{k+1} = x_k - lr * ∇f(x_k)

    Якщо кандидат гірший за поточну точку (f зросла), кандидат
    відкидається, lr зменшується вдвічі і та сама ітерація k повторюється
    з меншим lr. Повтор оформлено внутрішнім циклом, обмеженим
    мінімальним lr = eps / 1000.

Зупинка:
    - converged                : ||∇f|| < eps або |Δf| < eps (лише для прийнятих кроків);
    - learning_rate_too_small  : lr < eps / 1000 після чергового відкату;
    - max_iter                 : вичерпано ліміт ПРИЙНЯТИХ ітерацій.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .errors import require_fraction, require_positive
from .optimizer_base import EmitRecord, IterationCallback, Optimizer
from .functions import GradientComponent, GradientPair, ObjectiveFunction
from .trace import (
    MAX_ITERATIONS,
    STOP_CONVERGED,
    STOP_LEARNING_RATE_TOO_SMALL,
    STOP_MAX_ITER,
    EvaluatedPoint,
    IterationRecord,
    Point2D,
    Trace,
)

logger = logging.getLogger(__name__)


class GradientDescentMethod(Optimizer):
    """
    Градієнтний спуск з адаптивною швидкістю навчання.

    Налаштування (options):
        max_iter          : ліміт прийнятих ітерацій (default: 1000)
        learning_rate     : початковий lr (default: 0.1)
        lr_decay          : множник lr після невдалого кроку (default: 0.5)
        lr_floor_divisor  : мінімальний lr = eps / lr_floor_divisor (default: 1000.0)
    """

    requires_gradient: bool = True

    def __init__(
        self,
        func: ObjectiveFunction,
        grad: Optional[GradientPair] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(
            func=func,
            grad=grad,
            options=options,
            name=name or "Градієнтний спуск",
        )

    def _run_impl(
        self,
        start: Point2D,
        epsilon: float,
        max_iter: int,
        emit: EmitRecord,
    ) -> Tuple[str, EvaluatedPoint]:
        learning_rate = require_positive("learning_rate", self.options.get("learning_rate", 0.1))
        lr_decay = require_fraction("lr_decay", self.options.get("lr_decay", 0.5))
        lr_floor = epsilon / require_positive("lr_floor_divisor", self.options.get("lr_floor_divisor", 1000.0))

        current = self.evaluate(start)
        emit(IterationRecord(index=0, point=current.point, value=current.value,
                             meta={"step_type": "initial", "learning_rate": learning_rate}))

        for k in range(1, max_iter + 1):
            gx, gy = self.eval_grad(current.point)
            grad_norm = float(np.linalg.norm([gx, gy], ord=2))

            # Повтор ітерації k, поки кандидат не перестане погіршувати f
            while True:
                candidate = self.evaluate(
                    current.point.moved(-learning_rate * gx, -learning_rate * gy)
                )
                if candidate.value <= current.value:
                    break

                learning_rate *= lr_decay
                emit(IterationRecord(
                    index=k,
                    point=current.point,
                    value=current.value,
                    meta={
                        "step_type": "reverted",
                        "learning_rate": learning_rate,
                        "grad_norm": grad_norm,
                        "rejected_value": candidate.value,
                    },
                ))
                logger.debug("GD k=%d: f зросла до %.6f, lr -> %.3e", k, candidate.value, learning_rate)

                if learning_rate < lr_floor:
                    return STOP_LEARNING_RATE_TOO_SMALL, current

            f_change = abs(candidate.value - current.value)
            step_norm = current.point.distance_to(candidate.point)
            current = candidate

            emit(IterationRecord(
                index=k,
                point=current.point,
                value=current.value,
                meta={
                    "step_type": "accepted",
                    "learning_rate": learning_rate,
                    "grad_norm": grad_norm,
                    "f_change": f_change,
                    "step_norm": step_norm,
                },
            ))
            logger.debug("GD k=%d: (%.6f, %.6f) f=%.6f |g|=%.3e", k,
                         current.point.x, current.point.y, current.value, grad_norm)

            if grad_norm < epsilon or f_change < epsilon:
                return STOP_CONVERGED, current

        return STOP_MAX_ITER, current


def gradient_descent(
    func: ObjectiveFunction,
    dfdx: GradientComponent,
    dfdy: GradientComponent,
    start_x: float,
    start_y: float,
    epsilon: float,
    max_iter: int = MAX_ITERATIONS,
    callback: Optional[IterationCallback] = None,
    options: Optional[Dict[str, Any]] = None,
) -> Trace:
    """Функціональна обгортка над GradientDescentMethod."""
    method = GradientDescentMethod(func=func, grad=(dfdx, dfdy), options=options)
    return method.minimize((start_x, start_y), epsilon, max_iter=max_iter, callback=callback)


__all__ = [
    "GradientDescentMethod",
    "gradient_descent",
]
