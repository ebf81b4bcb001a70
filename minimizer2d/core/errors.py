"""
errors.py

Винятки ядра мінімізації.

    OptimizationError      - спільний предок;
    InvalidArgumentError   - некоректні параметри (eps, діапазон, крок, ...),
                             перевіряються ДО першої ітерації;
    NonFiniteResultError   - цільова функція або компонента градієнта
                             повернула NaN / ±inf.

Причини зупинки (збіжність, max_iter, малий крок) — це НЕ винятки,
вони повертаються в Trace.status.
"""

from __future__ import annotations

import math


class OptimizationError(Exception):
    """Базовий виняток для помилок ядра оптимізації."""


class InvalidArgumentError(OptimizationError, ValueError):
    """Некоректне значення параметра методу."""


class NonFiniteResultError(OptimizationError, ArithmeticError):
    """Функція повернула NaN або нескінченність."""


def require_positive(name: str, value: float) -> float:
    """
    Перевірити, що value — скінченне додатне число, і повернути його як float.
    """
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidArgumentError(f"{name} повинен бути додатним скінченним числом, отримано: {value}")
    return value


def require_fraction(name: str, value: float) -> float:
    """
    Перевірити множник зменшення: 0 < value < 1.
    """
    value = float(value)
    if not math.isfinite(value) or not 0.0 < value < 1.0:
        raise InvalidArgumentError(f"{name} повинен бути в інтервалі (0, 1), отримано: {value}")
    return value


def require_finite(value: float, what: str) -> float:
    """
    Перевірити результат обчислення функції.
    """
    value = float(value)
    if not math.isfinite(value):
        raise NonFiniteResultError(f"{what} повернула NaN або нескінченність: {value}")
    return value


__all__ = [
    "OptimizationError",
    "InvalidArgumentError",
    "NonFiniteResultError",
    "require_positive",
    "require_fraction",
    "require_finite",
]
