"""
coordinate_descent.py

Метод покоординатного спуску як стратегія Optimizer.

Ідея:
    - на кожній ітерації по черзі мінімізуємо f уздовж осі x, потім уздовж
      осі y, кожного разу скануванням відрізка [c - range, c + range]
      з кроком epsilon / 10 (core.line_search.scan_1d);
    - зупинка, коли І зміна f, І зміщення точки менші за epsilon.

Особливість порядку оновлення:
    пошук по y виконується з x, зафіксованим на значенні ДО оновлення x
    на цій самій ітерації. Це впливає на траєкторію, тому за замовчуванням
    поведінку збережено; options["refresh_x_for_y_search"] = True вмикає
    класичний варіант з уже оновленим x.

Якщо eps настільки малий, що крок сканування eps / step_divisor не зсуває
координату (x + step == x), сканування кидає InvalidArgumentError замість
нескінченного циклу; до max_iter такий запуск не доходить.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from .errors import require_positive
from .line_search import scan_1d
from .optimizer_base import EmitRecord, IterationCallback, Optimizer
from .functions import ObjectiveFunction, GradientPair
from .trace import (
    MAX_ITERATIONS,
    STOP_CONVERGED,
    STOP_MAX_ITER,
    EvaluatedPoint,
    IterationRecord,
    Point2D,
    Trace,
)

logger = logging.getLogger(__name__)


class CoordinateDescentMethod(Optimizer):
    """
    Покоординатний спуск з одномірним скануванням.

    Налаштування (options):
        max_iter               : ліміт ітерацій (default: 1000)
        search_range           : півширина відрізка сканування (default: 1.0)
        step_divisor           : крок сканування = epsilon / step_divisor (default: 10.0)
        refresh_x_for_y_search : шукати по y з уже оновленим x (default: False)
    """

    requires_gradient: bool = False

    def __init__(
        self,
        func: ObjectiveFunction,
        grad: Optional[GradientPair] = None,   # ігнорується
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(
            func=func,
            grad=None,
            options=options,
            name=name or "Покоординатний спуск",
        )

    def _run_impl(
        self,
        start: Point2D,
        epsilon: float,
        max_iter: int,
        emit: EmitRecord,
    ) -> Tuple[str, EvaluatedPoint]:
        search_range = require_positive("search_range", self.options.get("search_range", 1.0))
        step = epsilon / require_positive("step_divisor", self.options.get("step_divisor", 10.0))
        refresh_x = bool(self.options.get("refresh_x_for_y_search", False))

        current = self.evaluate(start)
        emit(IterationRecord(index=0, point=current.point, value=current.value,
                             meta={"step_type": "initial"}))

        for k in range(1, max_iter + 1):
            prev = current
            y_fixed = prev.point.y
            x_before = prev.point.x

            # 1) пошук по x при фіксованому y
            res_x = scan_1d(
                lambda x: self.eval_f(Point2D(x, y_fixed)),
                x_before, search_range, step,
            )
            new_x = res_x.x

            # 2) пошук по y з x до оновлення (див. docstring модуля)
            x_for_y = new_x if refresh_x else x_before
            res_y = scan_1d(
                lambda y: self.eval_f(Point2D(x_for_y, y)),
                prev.point.y, search_range, step,
            )

            current = self.evaluate(Point2D(new_x, res_y.x))

            f_change = abs(current.value - prev.value)
            step_norm = prev.point.distance_to(current.point)

            emit(IterationRecord(
                index=k,
                point=current.point,
                value=current.value,
                meta={
                    "step_type": "coordinate",
                    "f_change": f_change,
                    "step_norm": step_norm,
                    "line_search_evals": res_x.func_evals + res_y.func_evals,
                },
            ))
            logger.debug("CD k=%d: (%.6f, %.6f) f=%.6f df=%.3e", k,
                         current.point.x, current.point.y, current.value, f_change)

            if f_change < epsilon and step_norm < epsilon:
                return STOP_CONVERGED, current

        return STOP_MAX_ITER, current


def coordinate_descent(
    func: ObjectiveFunction,
    start_x: float,
    start_y: float,
    epsilon: float,
    max_iter: int = MAX_ITERATIONS,
    callback: Optional[IterationCallback] = None,
    options: Optional[Dict[str, Any]] = None,
) -> Trace:
    """Функціональна обгортка над CoordinateDescentMethod."""
    method = CoordinateDescentMethod(func=func, options=options)
    return method.minimize((start_x, start_y), epsilon, max_iter=max_iter, callback=callback)


__all__ = [
    "CoordinateDescentMethod",
    "coordinate_descent",
]
