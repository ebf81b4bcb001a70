"""
functions.py

Типи для цільових функцій двох змінних та набір тестових функцій
з аналітичними частинними похідними.

Цільова функція — звичайний callable f(x, y) -> float без побічних ефектів.
Градієнт завжди задається ПАРОЮ функцій (∂f/∂x, ∂f/∂y).

Функції написані на звичайній арифметиці, тому працюють і з float,
і з numpy-масивами (зручно для contour-графіків).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np

# f(x, y) -> float
ObjectiveFunction = Callable[[float, float], float]

# ∂f/∂x або ∂f/∂y
GradientComponent = Callable[[float, float], float]

GradientPair = Tuple[GradientComponent, GradientComponent]


# ---------------------------------------------------------------------------
# Параболоїд: f(x, y) = x^2 + 2y^2 - 10x - 16y + 60, мінімум f(5, 4) = 3
# ---------------------------------------------------------------------------

def paraboloid(x, y):
    return x ** 2 + 2.0 * y ** 2 - 10.0 * x - 16.0 * y + 60.0


def paraboloid_dx(x, y):
    return 2.0 * x - 10.0


def paraboloid_dy(x, y):
    return 4.0 * y - 16.0


# ---------------------------------------------------------------------------
# f(x, y) = (x - y)^2 + (x + y - 10)^2 / 9, мінімум f(5, 5) = 0
# ---------------------------------------------------------------------------

def valley(x, y):
    return (x - y) ** 2 + (x + y - 10.0) ** 2 / 9.0


def valley_dx(x, y):
    return 2.0 * (x - y) + 2.0 * (x + y - 10.0) / 9.0


def valley_dy(x, y):
    return -2.0 * (x - y) + 2.0 * (x + y - 10.0) / 9.0


# ---------------------------------------------------------------------------
# Розенброк: f(x, y) = 100 (y - x^2)^2 + (1 - x)^2, мінімум f(1, 1) = 0
# ---------------------------------------------------------------------------

def rosenbrock(x, y):
    return 100.0 * (y - x ** 2) ** 2 + (1.0 - x) ** 2


def rosenbrock_dx(x, y):
    return -400.0 * x * (y - x ** 2) - 2.0 * (1.0 - x)


def rosenbrock_dy(x, y):
    return 200.0 * (y - x ** 2)


# ---------------------------------------------------------------------------
# Проста квадратична форма: f(x, y) = (x - 4)^2 + (y - 4)^2
# ---------------------------------------------------------------------------

def sphere(x, y):
    return (x - 4.0) ** 2 + (y - 4.0) ** 2


def sphere_dx(x, y):
    return 2.0 * (x - 4.0)


def sphere_dy(x, y):
    return 2.0 * (y - 4.0)


# ---------------------------------------------------------------------------
# Реєстр функцій для вибору в GUI
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    key: str
    name: str
    func: ObjectiveFunction
    dfdx: GradientComponent
    dfdy: GradientComponent
    minimum: Optional[Tuple[float, float]] = None

    @property
    def grad(self) -> GradientPair:
        return (self.dfdx, self.dfdy)

    def on_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Значення f на сітці (для contour-графіків)."""
        return np.vectorize(self.func, otypes=[float])(xs, ys)


FUNCTIONS: Dict[str, TargetFunction] = {
    "paraboloid": TargetFunction(
        key="paraboloid",
        name="f(x, y) = x^2 + 2y^2 - 10x - 16y + 60",
        func=paraboloid,
        dfdx=paraboloid_dx,
        dfdy=paraboloid_dy,
        minimum=(5.0, 4.0),
    ),
    "valley": TargetFunction(
        key="valley",
        name="f(x, y) = (x - y)^2 + (x + y - 10)^2 / 9",
        func=valley,
        dfdx=valley_dx,
        dfdy=valley_dy,
        minimum=(5.0, 5.0),
    ),
    "rosenbrock": TargetFunction(
        key="rosenbrock",
        name="f(x, y) = 100 (y - x^2)^2 + (1 - x)^2",
        func=rosenbrock,
        dfdx=rosenbrock_dx,
        dfdy=rosenbrock_dy,
        minimum=(1.0, 1.0),
    ),
    "sphere": TargetFunction(
        key="sphere",
        name="f(x, y) = (x - 4)^2 + (y - 4)^2",
        func=sphere,
        dfdx=sphere_dx,
        dfdy=sphere_dy,
        minimum=(4.0, 4.0),
    ),
}

__all__ = [
    "ObjectiveFunction",
    "GradientComponent",
    "GradientPair",
    "paraboloid", "paraboloid_dx", "paraboloid_dy",
    "valley", "valley_dx", "valley_dy",
    "rosenbrock", "rosenbrock_dx", "rosenbrock_dy",
    "sphere", "sphere_dx", "sphere_dy",
    "TargetFunction",
    "FUNCTIONS",
]
