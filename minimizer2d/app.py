"""
app.py

Контролер GUI-застосунку мінімізації функції двох змінних.

Зв'язує:
    - ui.MainWindow (PyQt6)
    - core.OptimizationEngine
    - методи: покоординатний спуск, випадковий пошук, градієнтний спуск
    - core.functions.FUNCTIONS

Функціонал:
    - реагує на сигнал MainWindow.optimizationRequested(OptimizationConfig);
    - створює Optimizer через core.methods.create_optimizer;
    - запускає OptimizationEngine, у callback додає рядки в таблицю;
    - після завершення оновлює графік f(k) та траєкторію на лініях рівня;
    - у режимі "усі методи" показує зведену таблицю.

Запуск:
    python -m minimizer2d.app
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from .core.engine import OptimizationEngine
from .core.errors import OptimizationError
from .core.functions import FUNCTIONS
from .core.methods import METHOD_KEYS, create_optimizer
from .core.optimizer_base import IterationCallback
from .core.results_summary import ResultsSummary
from .core.trace import Point2D, Trace
from .ui.control_panel import OptimizationConfig
from .ui.dialogs import show_error, show_summary
from .ui.main_window import MainWindow
from .ui.styles import apply_app_style

logger = logging.getLogger(__name__)


class OptimizationController:
    """
    Схема:
        GUI (MainWindow) --[OptimizationConfig]--> Controller
        Controller -- створює Optimizer, запускає Engine
        Engine -- callback --> MainWindow.add_record(...)
        Після завершення: MainWindow.show_traces(...) + update_run_stats(...)
    """

    def __init__(self, window: MainWindow, engine: OptimizationEngine) -> None:
        self.window = window
        self.engine = engine
        self.window.optimizationRequested.connect(self.on_optimization_requested)

    def _fail(self, title: str, message: str) -> None:
        show_error(self.window, message, title=title)
        self.window.statusBar().showMessage(f"Помилка: {message}")

    def on_optimization_requested(self, cfg: OptimizationConfig) -> None:
        if cfg.function_key not in FUNCTIONS:
            self._fail("Функція не знайдена", f"Функція з ключем '{cfg.function_key}' не знайдена.")
            return

        if cfg.run_all_methods:
            self._run_all_methods(cfg)
        else:
            self._run_single_method(cfg)

    def _run(
        self,
        method_key: str,
        cfg: OptimizationConfig,
        callback: Optional[IterationCallback] = None,
    ) -> Trace:
        options = {"seed": cfg.seed} if method_key == "random_search" else {}
        optimizer = create_optimizer(method_key, FUNCTIONS[cfg.function_key], options)
        return self.engine.run(
            optimizer,
            cfg.start,
            cfg.eps,
            max_iter=cfg.max_iter,
            callback=callback,
        )

    # ------------------------------------------------------------------
    # Один метод
    # ------------------------------------------------------------------

    def _run_single_method(self, cfg: OptimizationConfig) -> None:
        try:
            trace = self._run(cfg.method_key, cfg, callback=self.window.add_record)
        except OptimizationError as exc:
            logger.warning("Метод %s для %s завершився помилкою: %s",
                           cfg.method_key, cfg.function_key, exc)
            self._fail("Помилка під час оптимізації", str(exc))
            return

        self.window.show_traces(FUNCTIONS[cfg.function_key], [trace])
        self.window.update_run_stats(trace)
        self.window.statusBar().showMessage(
            f"{trace.method_name}: {trace.status}, ітерацій: {trace.n_iter}, "
            f"f* = {trace.f_star:.6f}, x* = ({trace.x_star.x:.4f}, {trace.x_star.y:.4f})"
        )

    # ------------------------------------------------------------------
    # Усі методи + зведена таблиця
    # ------------------------------------------------------------------

    def _run_all_methods(self, cfg: OptimizationConfig) -> None:
        target = FUNCTIONS[cfg.function_key]
        reference = Point2D(*target.minimum) if target.minimum is not None else None
        summary = ResultsSummary(reference=reference)
        traces: List[Trace] = []

        for method_key in METHOD_KEYS:
            try:
                trace = self._run(method_key, cfg)
            except OptimizationError as exc:
                logger.warning("Метод %s для %s завершився помилкою: %s",
                               method_key, cfg.function_key, exc)
                continue
            traces.append(trace)
            summary.add_run(trace)

        if not traces:
            self._fail(
                "Немає даних для зведеної таблиці",
                "Жоден із методів не завершився коректно. Перевірте стартову точку та eps.",
            )
            return

        # Таблиця показує останній метод, графіки показують усі
        last = traces[-1]
        self.window.iterations_table.populate(last.records)
        self.window.update_run_stats(last)
        self.window.show_traces(target, traces)

        show_summary(self.window, summary)

        best = summary.best_by_f()
        self.window.statusBar().showMessage(
            f"Найкращий метод за f*: {best.method_name}, f* = {best.f_star:.6f}, "
            f"x* = ({best.x_star.x:.4f}, {best.x_star.y:.4f}); "
            f"збіглися {len(summary.converged_runs())} з {len(traces)}"
        )


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    apply_app_style(app)

    window = MainWindow()
    engine = OptimizationEngine()
    _controller = OptimizationController(window, engine)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
