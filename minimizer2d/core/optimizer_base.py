"""
optimizer_base.py

Базовий клас для методів мінімізації функції двох змінних (Strategy).

Ідея:
    - є абстрактний клас Optimizer, від якого наслідуються всі методи:
        * CoordinateDescentMethod
        * RandomSearchMethod
        * GradientDescentMethod
    - кожен метод сам веде свій ітераційний цикл у _run_impl(),
      бо умови зупинки та відкат кроку в них різні;
    - користувач/движок викликає minimize() і отримує Trace.

Формат:
    minimize(start, epsilon, max_iter=None, callback=None) -> Trace
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .errors import InvalidArgumentError, require_finite, require_positive
from .functions import GradientPair, ObjectiveFunction
from .trace import (
    MAX_ITERATIONS,
    EvaluatedPoint,
    IterationRecord,
    Point2D,
    Trace,
)

logger = logging.getLogger(__name__)

# Callback для GUI / логів: викликається для кожного нового запису
IterationCallback = Callable[[IterationRecord], None]

# Функція, через яку _run_impl() додає записи в трасу
EmitRecord = Callable[[IterationRecord], None]

StartPoint = Union[Point2D, Tuple[float, float]]


def as_point(start: StartPoint) -> Point2D:
    """Привести (x, y) або Point2D до Point2D з float-координатами."""
    if isinstance(start, Point2D):
        return Point2D(float(start.x), float(start.y))
    x, y = start
    return Point2D(float(x), float(y))


class Optimizer(ABC):
    """
    Абстрактний базовий клас для всіх методів.

    Кожен конкретний метод:
        - наслідується від Optimizer;
        - реалізує _run_impl();
        - за потреби встановлює requires_gradient = True.

    Використання:
        opt = GradientDescentMethod(func=f, grad=(dfdx, dfdy))
        trace = opt.minimize((1.0, 1.0), epsilon=1e-3)
    """

    requires_gradient: bool = False

    def __init__(
        self,
        func: ObjectiveFunction,
        grad: Optional[GradientPair] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Parameters
        ----------
        func : ObjectiveFunction
            Цільова функція f(x, y).
        grad : Optional[GradientPair]
            Пара (∂f/∂x, ∂f/∂y). Обов'язкова, якщо requires_gradient = True.
        options : Optional[dict]
            Параметри методу (max_iter, початковий крок тощо).
        name : Optional[str]
            Людяна назва методу (для логів/таблиць).
        """
        if grad is not None and len(grad) != 2:
            raise InvalidArgumentError("Градієнт задається парою функцій (df/dx, df/dy).")
        if self.requires_gradient and grad is None:
            raise InvalidArgumentError(
                f"{self.__class__.__name__} потребує обидві компоненти градієнта."
            )

        self.func = func
        self._grad = grad
        self.options: Dict[str, Any] = options or {}
        self.name: str = name or self.__class__.__name__

        self.func_evals: int = 0
        self.grad_evals: int = 0

    # ------------------------------------------------------------------
    # Обчислення f та ∇f з підрахунком викликів
    # ------------------------------------------------------------------

    def eval_f(self, point: Point2D) -> float:
        """Обчислити f(x, y); NaN/inf -> NonFiniteResultError."""
        self.func_evals += 1
        return require_finite(self.func(point.x, point.y), "Цільова функція")

    def evaluate(self, point: Point2D) -> EvaluatedPoint:
        return EvaluatedPoint(point, self.eval_f(point))

    def eval_grad(self, point: Point2D) -> Tuple[float, float]:
        """Обчислити (∂f/∂x, ∂f/∂y) у точці."""
        if self._grad is None:
            raise InvalidArgumentError(f"Для методу {self.name} градієнт не задано.")
        self.grad_evals += 1
        dfdx, dfdy = self._grad
        gx = require_finite(dfdx(point.x, point.y), "Компонента градієнта df/dx")
        gy = require_finite(dfdy(point.x, point.y), "Компонента градієнта df/dy")
        return gx, gy

    # ------------------------------------------------------------------
    # Життєвий цикл
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Скинути лічильники перед новим запуском."""
        self.func_evals = 0
        self.grad_evals = 0

    def resolve_max_iter(self, max_iter: Optional[int]) -> int:
        if max_iter is None:
            max_iter = self.options.get("max_iter", MAX_ITERATIONS)
        max_iter = int(max_iter)
        if max_iter < 1:
            raise InvalidArgumentError(f"max_iter повинен бути >= 1, отримано: {max_iter}")
        return max_iter

    def minimize(
        self,
        start: StartPoint,
        epsilon: float,
        max_iter: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
    ) -> Trace:
        """
        Запустити метод зі стартової точки до зупинки.

        Параметри перевіряються до першого виклику f. Причина зупинки
        повертається в Trace.status, винятки летять лише для некоректних
        аргументів та NaN/inf.
        """
        epsilon = require_positive("epsilon", epsilon)
        max_iter = self.resolve_max_iter(max_iter)
        start_point = as_point(start)

        self.reset()
        records: List[IterationRecord] = []

        def emit(record: IterationRecord) -> None:
            records.append(record)
            if callback is not None:
                callback(record)

        status, final = self._run_impl(start_point, epsilon, max_iter, emit)

        logger.info(
            "%s: зупинка '%s' після %d ітерацій, f*=%.6g у точці (%.6g, %.6g)",
            self.name, status, records[-1].index if records else 0,
            final.value, final.point.x, final.point.y,
        )

        return Trace(
            method_name=self.name,
            records=records,
            final=final,
            status=status,
            func_evals=self.func_evals,
            grad_evals=self.grad_evals,
        )

    @abstractmethod
    def _run_impl(
        self,
        start: Point2D,
        epsilon: float,
        max_iter: int,
        emit: EmitRecord,
    ) -> Tuple[str, EvaluatedPoint]:
        """
        Ітераційний цикл методу.

        Має викликати emit() для запису k=0 та для кожної наступної
        ітерації і повернути (причина зупинки, фінальна точка).
        """
        raise NotImplementedError


__all__ = [
    "IterationCallback",
    "EmitRecord",
    "StartPoint",
    "as_point",
    "Optimizer",
]
