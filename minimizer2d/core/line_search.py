"""
line_search.py

Одномірний пошук мінімуму простим скануванням відрізка з фіксованим кроком.

Ідея:
    - маємо функцію однієї змінної φ: float -> float (зазвичай це
      f(x, y) з однією зафіксованою координатою);
    - перебираємо точки initial_x - range, initial_x - range + step, ...
      поки не вийдемо за initial_x + range;
    - запам'ятовуємо точку з найменшим значенням φ.

Через накопичення похибки у `current += step` остання точка може не
дійти до правої межі — це прийнятне наближення.

Публічний інтерфейс:
    - LineSearchResult       – результат сканування;
    - scan_1d(...)           – сканування з повною статистикою;
    - line_search(...)       – лише знайдене x.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .errors import InvalidArgumentError, require_finite, require_positive

logger = logging.getLogger(__name__)

# Скалярна функція від одного аргументу
Scalar1DFunction = Callable[[float], float]


@dataclass
class LineSearchResult:
    """
    Результат сканування.

    Атрибути:
        x          - знайдена точка мінімуму на відрізку
        value      - φ(x)
        samples    - кількість точок сітки, що були переглянуті
        func_evals - кількість викликів φ (samples + 1 для стартової точки)
    """
    x: float
    value: float
    samples: int
    func_evals: int


def scan_1d(
    phi: Scalar1DFunction,
    initial_x: float,
    search_range: float,
    step: float,
) -> LineSearchResult:
    """
    Просканувати [initial_x - search_range, initial_x + search_range] з кроком step.

    Parameters
    ----------
    phi : Callable[[float], float]
        Функція однієї змінної.
    initial_x : float
        Центр відрізка; φ(initial_x) — початковий рекорд.
    search_range : float
        Півширина відрізка (> 0).
    step : float
        Крок сканування (> 0).

    Returns
    -------
    LineSearchResult
        Точка з найменшим значенням. Нова точка замінює рекорд лише якщо
        вона СТРОГО краща, тому при рівності лишається лівіша (або стартова).

    Raises
    ------
    InvalidArgumentError
        Якщо search_range / step не додатні, або крок настільки малий,
        що не зсуває поточну точку (цикл ніколи б не завершився).
    NonFiniteResultError
        Якщо φ повернула NaN / inf.
    """
    initial_x = float(initial_x)
    search_range = require_positive("search_range", search_range)
    step = require_positive("step", step)

    lower = initial_x - search_range
    upper = initial_x + search_range

    if lower + step == lower or upper + step == upper:
        raise InvalidArgumentError(
            f"Крок сканування {step} занадто малий для відрізка [{lower}, {upper}]."
        )

    best_x = initial_x
    best_value = require_finite(phi(initial_x), "φ")
    func_evals = 1
    samples = 0

    current = lower
    while current <= upper:
        value = require_finite(phi(current), "φ")
        func_evals += 1
        samples += 1
        if value < best_value:
            best_value = value
            best_x = current
        current += step

    logger.debug(
        "scan_1d: x0=%.6g, range=%.3g, step=%.3g -> x*=%.6g (%d точок)",
        initial_x, search_range, step, best_x, samples,
    )

    return LineSearchResult(
        x=best_x,
        value=best_value,
        samples=samples,
        func_evals=func_evals,
    )


def line_search(
    phi: Scalar1DFunction,
    initial_x: float,
    search_range: float,
    step: float,
) -> float:
    """
    Те саме, що scan_1d, але повертає лише знайдене x.
    Якщо жодна точка не краща за φ(initial_x), повертається initial_x.
    """
    return scan_1d(phi, initial_x, search_range, step).x


__all__ = [
    "Scalar1DFunction",
    "LineSearchResult",
    "scan_1d",
    "line_search",
]
