"""
results_summary.py

Порівняння кількох запусків (Trace) на одній цільовій функції з однієї
стартової точки: рядки для зведеної таблиці GUI та вибір найкращого методу.

Якщо відомий точний мінімум функції (TargetFunction.minimum), у рядках
з'являється відстань знайденої точки до нього.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .trace import Point2D, Trace


@dataclass
class ResultsSummary:
    """
    summary = ResultsSummary(reference=Point2D(5.0, 4.0))
    for trace in traces:
        summary.add_run(trace)
    summary.as_rows()       # GUI / pandas
    summary.best_by_f()     # Trace з найменшим f*
    """
    runs: List[Trace] = field(default_factory=list)
    reference: Optional[Point2D] = None

    def add_run(self, run: Trace) -> None:
        self.runs.append(run)

    def error_of(self, run: Trace) -> Optional[float]:
        """||x* - reference||, або None, якщо мінімум невідомий."""
        if self.reference is None:
            return None
        return run.x_star.distance_to(self.reference)

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Поля рядка:
            method, x_star [x, y], f_star, n_iter, func_evals, grad_evals,
            status, distance_to_minimum (None без reference)
        """
        return [
            {
                "method": run.method_name,
                "x_star": [run.x_star.x, run.x_star.y],
                "f_star": float(run.f_star),
                "n_iter": run.n_iter,
                "func_evals": run.func_evals,
                "grad_evals": run.grad_evals,
                "status": run.status,
                "distance_to_minimum": self.error_of(run),
            }
            for run in self.runs
        ]

    def best_by_f(self) -> Optional[Trace]:
        """Трасу з найменшим f*; при рівності лишається раніше додана."""
        if not self.runs:
            return None
        return min(self.runs, key=lambda run: run.f_star)

    def converged_runs(self) -> List[Trace]:
        return [run for run in self.runs if run.converged]

    def to_dataframe(self):
        """
        pandas.DataFrame зі зведеною таблицею (extra "pandas").
        """
        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "Для ResultsSummary.to_dataframe() потрібен пакет 'pandas' "
                "(pip install minimizer2d[pandas])."
            ) from exc

        return pd.DataFrame(self.as_rows())


__all__ = ["ResultsSummary"]
