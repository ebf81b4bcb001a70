"""
engine.py

Движок для запуску методів мінімізації (Optimizer).

Функціонал:
    - зберігає параметри запуску за замовчуванням (max_iter);
    - викликає Optimizer.minimize() і повертає Trace;
    - пробрасовує callback для оновлення GUI / логів на кожному записі;
    - логує старт і причину зупинки кожного запуску.

Сам ітераційний цикл живе в методах (_run_impl), бо умови зупинки та
відкат кроку в них різні.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import InvalidArgumentError
from .optimizer_base import IterationCallback, Optimizer, StartPoint, as_point
from .trace import MAX_ITERATIONS, Trace

logger = logging.getLogger(__name__)


class OptimizationEngine:
    """
    Запускає довільний Optimizer з однаковими налаштуваннями.

    Налаштування за замовчуванням (можуть бути переозначені у run()):
        max_iter : ліміт ітерацій (default: 1000)
    """

    def __init__(self, max_iter: int = MAX_ITERATIONS) -> None:
        if int(max_iter) < 1:
            raise InvalidArgumentError(f"max_iter повинен бути >= 1, отримано: {max_iter}")
        self.max_iter_default = int(max_iter)

    def run(
        self,
        optimizer: Optimizer,
        x0: StartPoint,
        epsilon: float,
        max_iter: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
    ) -> Trace:
        """
        Запустити процес мінімізації.
        """
        max_iter = max_iter if max_iter is not None else self.max_iter_default
        start = as_point(x0)

        logger.info(
            "Запуск %s з (%.6g, %.6g), eps=%.3g, max_iter=%d",
            optimizer.name, start.x, start.y, epsilon, max_iter,
        )

        trace = optimizer.minimize(start, epsilon, max_iter=max_iter, callback=callback)

        logger.info(
            "%s: %s, ітерацій: %d, викликів f: %d, викликів grad: %d",
            trace.method_name, trace.status, trace.n_iter,
            trace.func_evals, trace.grad_evals,
        )
        return trace


__all__ = [
    "OptimizationEngine",
]
