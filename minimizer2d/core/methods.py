"""
methods.py

Фабрика методів оптимізації за ключем (для GUI та зведених прогонів)
і реекспорт функціонального API.

Ключі методів:
    "coordinate_descent", "random_search", "gradient_descent"
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .coordinate_descent import CoordinateDescentMethod, coordinate_descent
from .errors import InvalidArgumentError
from .functions import TargetFunction
from .gradient_descent import GradientDescentMethod, gradient_descent
from .line_search import line_search
from .optimizer_base import Optimizer
from .random_search import RandomSearchMethod, random_search

METHOD_KEYS: List[str] = [
    "coordinate_descent",
    "random_search",
    "gradient_descent",
]

METHOD_TITLES: Dict[str, str] = {
    "coordinate_descent": "Покоординатний спуск",
    "random_search": "Випадковий пошук",
    "gradient_descent": "Градієнтний спуск",
}


def create_optimizer(
    method_key: str,
    target: TargetFunction,
    options: Optional[Dict[str, Any]] = None,
    rng: Any = None,
) -> Optimizer:
    """
    Створити Optimizer по ключу методу для функції з реєстру.

    method_key:
        "coordinate_descent", "random_search", "gradient_descent"
    options:
        передаються методу як є (max_iter, seed, learning_rate, ...)
    rng:
        джерело випадковості для random_search (інакше options["seed"])
    """
    options = dict(options or {})

    if method_key == "coordinate_descent":
        return CoordinateDescentMethod(func=target.func, options=options)

    if method_key == "random_search":
        return RandomSearchMethod(func=target.func, options=options, rng=rng)

    if method_key == "gradient_descent":
        return GradientDescentMethod(func=target.func, grad=target.grad, options=options)

    raise InvalidArgumentError(f"Невідомий метод оптимізації: {method_key}")


__all__ = [
    "METHOD_KEYS",
    "METHOD_TITLES",
    "create_optimizer",
    "line_search",
    "coordinate_descent",
    "random_search",
    "gradient_descent",
]
