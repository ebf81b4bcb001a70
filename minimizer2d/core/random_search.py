"""
random_search.py

Метод випадкового пошуку як стратегія Optimizer.

Ідея:
    - на кожній ітерації обираємо випадковий напрямок (cos θ, sin θ),
      θ рівномірно в [0, 2π);
    - пробуємо крок step_size уздовж напрямку; якщо не краще —
      у протилежному напрямку;
    - якщо обидві спроби невдалі кілька разів поспіль, крок зменшується вдвічі.

Зупинка:
    - converged       : |Δf| < eps і step_size < eps / 10;
    - step_too_small  : step_size < eps / 100;
    - max_iter        : вичерпано ліміт ітерацій.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .errors import InvalidArgumentError, require_fraction, require_positive
from .optimizer_base import EmitRecord, IterationCallback, Optimizer
from .functions import ObjectiveFunction, GradientPair
from .trace import (
    MAX_ITERATIONS,
    STOP_CONVERGED,
    STOP_MAX_ITER,
    STOP_STEP_TOO_SMALL,
    EvaluatedPoint,
    IterationRecord,
    Point2D,
    Trace,
)

logger = logging.getLogger(__name__)


class RandomSearchMethod(Optimizer):
    """
    Випадковий пошук з адаптивним зменшенням кроку.

    Налаштування (options):
        max_iter       : ліміт ітерацій (default: 1000)
        initial_step   : початковий step_size (default: 1.0)
        shrink_factor  : множник зменшення кроку (default: 0.5)
        max_failures   : крок зменшується, коли кількість невдач поспіль
                         стає БІЛЬШОЮ за це число (default: 5)
        seed           : seed для numpy.random.default_rng, якщо rng не задано

    rng — будь-яке джерело з методом random() -> float у [0, 1)
    (numpy.random.Generator, random.Random).
    """

    requires_gradient: bool = False

    def __init__(
        self,
        func: ObjectiveFunction,
        grad: Optional[GradientPair] = None,   # ігнорується
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
        rng: Any = None,
    ) -> None:
        super().__init__(
            func=func,
            grad=None,
            options=options,
            name=name or "Випадковий пошук",
        )
        self.rng = rng

    def _make_rng(self) -> Any:
        if self.rng is not None:
            return self.rng
        return np.random.default_rng(self.options.get("seed"))

    def _run_impl(
        self,
        start: Point2D,
        epsilon: float,
        max_iter: int,
        emit: EmitRecord,
    ) -> Tuple[str, EvaluatedPoint]:
        step_size = require_positive("initial_step", self.options.get("initial_step", 1.0))
        shrink_factor = require_fraction("shrink_factor", self.options.get("shrink_factor", 0.5))
        max_failures = int(self.options.get("max_failures", 5))
        if max_failures < 0:
            raise InvalidArgumentError(f"max_failures повинен бути >= 0, отримано: {max_failures}")
        rng = self._make_rng()

        streak = 0

        current = self.evaluate(start)
        emit(IterationRecord(index=0, point=current.point, value=current.value,
                             meta={"step_type": "initial", "step_size": step_size}))

        for k in range(1, max_iter + 1):
            prev_value = current.value
            used_step = step_size

            theta = float(rng.random()) * 2.0 * math.pi
            dx = math.cos(theta) * step_size
            dy = math.sin(theta) * step_size

            step_type = "no_improvement"
            candidate = self.evaluate(current.point.moved(dx, dy))
            if candidate.value < current.value:
                step_type = "forward"
            else:
                candidate = self.evaluate(current.point.moved(-dx, -dy))
                if candidate.value < current.value:
                    step_type = "opposite"

            improved = step_type != "no_improvement"
            if improved:
                current = candidate
                streak = 0
            else:
                streak += 1

            shrunk = False
            if not improved and streak > max_failures:
                step_size *= shrink_factor
                streak = 0
                shrunk = True

            f_change = abs(current.value - prev_value)
            meta: Dict[str, Any] = {
                "step_type": step_type,
                "step_size": used_step,
                "step_shrunk": shrunk,
                "f_change": f_change,
            }
            if improved:
                meta["improvement"] = prev_value - current.value
            emit(IterationRecord(index=k, point=current.point, value=current.value, meta=meta))
            logger.debug("RS k=%d: %s f=%.6f step=%.3e", k, step_type, current.value, used_step)

            if f_change < epsilon and step_size < epsilon / 10.0:
                return STOP_CONVERGED, current
            if step_size < epsilon / 100.0:
                return STOP_STEP_TOO_SMALL, current

        return STOP_MAX_ITER, current


def random_search(
    func: ObjectiveFunction,
    start_x: float,
    start_y: float,
    epsilon: float,
    rng: Any = None,
    max_iter: int = MAX_ITERATIONS,
    callback: Optional[IterationCallback] = None,
    options: Optional[Dict[str, Any]] = None,
) -> Trace:
    """Функціональна обгортка над RandomSearchMethod."""
    method = RandomSearchMethod(func=func, options=options, rng=rng)
    return method.minimize((start_x, start_y), epsilon, max_iter=max_iter, callback=callback)


__all__ = [
    "RandomSearchMethod",
    "random_search",
]
