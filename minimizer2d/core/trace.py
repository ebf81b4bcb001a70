"""
trace.py

Структури даних для трасування процесу мінімізації функції двох змінних.
Використовуються і методами оптимізації, і GUI (таблиця, графіки).

    Point2D          - точка (x, y), незмінна;
    EvaluatedPoint   - точка разом зі значенням функції в ній;
    IterationRecord  - запис про одну ітерацію (або про відкат кроку);
    Trace            - повна траса одного запуску + фінальна точка і
                       причина зупинки.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np


# ---------------------------------------------------------------------------
# Причини зупинки
# ---------------------------------------------------------------------------

STOP_CONVERGED = "converged"
STOP_MAX_ITER = "max_iter"
STOP_STEP_TOO_SMALL = "step_too_small"
STOP_LEARNING_RATE_TOO_SMALL = "learning_rate_too_small"

STOP_REASONS = (
    STOP_CONVERGED,
    STOP_MAX_ITER,
    STOP_STEP_TOO_SMALL,
    STOP_LEARNING_RATE_TOO_SMALL,
)

# Ліміт ітерацій за замовчуванням
MAX_ITERATIONS = 1000


# ---------------------------------------------------------------------------
# Точки
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def moved(self, dx: float, dy: float) -> "Point2D":
        """Нова точка (x + dx, y + dy)."""
        return Point2D(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point2D") -> float:
        """Евклідова відстань між точками."""
        return float(np.linalg.norm([self.x - other.x, self.y - other.y], ord=2))


@dataclass(frozen=True)
class EvaluatedPoint:
    point: Point2D
    value: float


# ---------------------------------------------------------------------------
# Записи ітерацій
# ---------------------------------------------------------------------------

@dataclass
class IterationRecord:
    """
    Опис однієї ітерації.

    Атрибути:
        index  - номер ітерації (0 — стартова точка). Для градієнтного
                 спуску відкочений крок має той самий index, що й
                 наступна спроба.
        point  - поточна точка ПІСЛЯ ітерації
        value  - f(point)
        meta   - діагностика конкретного методу: step_type, f_change,
                 step_norm, step_size, learning_rate, grad_norm, ...
    """
    index: int
    point: Point2D
    value: float
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    @property
    def step_type(self) -> str:
        return str(self.meta.get("step_type", ""))


@dataclass
class Trace:
    """
    Підсумок одного запуску методу.

    Атрибути:
        method_name - назва методу (Optimizer.name)
        records     - записи ітерацій у порядку появи
        final       - знайдена точка та значення функції в ній
        status      - причина зупинки (STOP_*)
        func_evals  - кількість викликів цільової функції
        grad_evals  - кількість обчислень градієнта (пара компонент = 1)
    """
    method_name: str
    records: List[IterationRecord]
    final: EvaluatedPoint
    status: str
    func_evals: int = 0
    grad_evals: int = 0

    @property
    def n_iter(self) -> int:
        """
        Номер останнього запису (k=0 не рахується).

        Зазвичай це кількість прийнятих ітерацій. Якщо градієнтний спуск
        зупинився через learning_rate_too_small, останній запис є відкатом,
        і n_iter дорівнює номеру спроби, яку так і не прийняли.
        """
        if not self.records:
            return 0
        return self.records[-1].index

    @property
    def x_star(self) -> Point2D:
        return self.final.point

    @property
    def f_star(self) -> float:
        return self.final.value

    @property
    def converged(self) -> bool:
        return self.status == STOP_CONVERGED

    def values(self) -> List[float]:
        return [rec.value for rec in self.records]

    def points(self) -> np.ndarray:
        """Траєкторія як масив форми (n, 2) — для графіків."""
        return np.array([[rec.x, rec.y] for rec in self.records], dtype=float)


__all__ = [
    "STOP_CONVERGED",
    "STOP_MAX_ITER",
    "STOP_STEP_TOO_SMALL",
    "STOP_LEARNING_RATE_TOO_SMALL",
    "STOP_REASONS",
    "MAX_ITERATIONS",
    "Point2D",
    "EvaluatedPoint",
    "IterationRecord",
    "Trace",
]
