"""
Головне вікно:
    - зліва: панель керування;
    - справа: графіки над таблицею ітерацій.
"""

from __future__ import annotations

from typing import Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStatusBar,
    QLabel,
    QSplitter,
)

from ..core.functions import TargetFunction
from ..core.trace import IterationRecord, Trace
from .control_panel import ControlPanelWidget, OptimizationConfig
from .table_view import IterationsTableWidget
from .plot_view import PlotView
from .dialogs import show_about, humanize_stop_reason
from .styles import MARGIN, SPACING, apply_label_muted


class MainWindow(QMainWindow):
    optimizationRequested = pyqtSignal(OptimizationConfig)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.setWindowTitle("Мінімізація функції двох змінних")
        self.resize(1320, 840)

        self._create_menu()
        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("Готово")
        self._create_content()
        self._connect_signals()

    def _create_menu(self) -> None:
        self.action_exit = QAction("Вихід", self, shortcut="Ctrl+Q")
        self.action_about = QAction("Про програму", self)
        menu = self.menuBar()
        menu.addMenu("Файл").addAction(self.action_exit)
        menu.addMenu("Довідка").addAction(self.action_about)

    def _create_content(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QHBoxLayout(central)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        self.control_panel = ControlPanelWidget(central)
        self.control_panel.setMinimumWidth(340)
        root.addWidget(self.control_panel, stretch=2)

        splitter = QSplitter(Qt.Orientation.Vertical, central)
        self.plot_view = PlotView(splitter)
        splitter.addWidget(self.plot_view)

        bottom = QWidget(splitter)
        bottom_layout = QVBoxLayout(bottom)
        bottom_layout.setContentsMargins(0, 0, 0, 0)
        bottom_layout.setSpacing(SPACING)

        self.iterations_table = IterationsTableWidget(bottom)
        bottom_layout.addWidget(self.iterations_table)

        self.label_stats = QLabel(bottom)
        apply_label_muted(self.label_stats)
        bottom_layout.addWidget(self.label_stats)

        splitter.addWidget(bottom)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        root.addWidget(splitter, stretch=5)

        self.update_run_stats(None)

    def _connect_signals(self) -> None:
        self.action_exit.triggered.connect(self.close)
        self.action_about.triggered.connect(lambda: show_about(self))

        self.control_panel.exitRequested.connect(self.close)
        self.control_panel.clearRequested.connect(self._on_clear_requested)
        self.control_panel.runRequested.connect(self._on_run_requested)

    # ------------------------------------------------------------------
    # Обробники
    # ------------------------------------------------------------------

    def _on_run_requested(self, cfg: OptimizationConfig) -> None:
        self.clear_results()
        self.statusBar().showMessage(f"Запуск: {cfg.function_key}, старт={cfg.start}, eps={cfg.eps:g}")
        self.optimizationRequested.emit(cfg)

    def _on_clear_requested(self) -> None:
        self.clear_results()
        self.statusBar().showMessage("Очищено")

    # ------------------------------------------------------------------
    # API для контролера (app.py)
    # ------------------------------------------------------------------

    def clear_results(self) -> None:
        self.iterations_table.clear_table()
        self.iterations_table.set_title("Ітерації")
        self.plot_view.show_placeholder()
        self.update_run_stats(None)

    def add_record(self, record: IterationRecord) -> None:
        self.iterations_table.add_record(record)

    def show_traces(self, target: TargetFunction, traces: Sequence[Trace]) -> None:
        """Оновити графіки; у таблиці лишається останній показаний метод."""
        self.plot_view.plot_fk(traces)
        self.plot_view.plot_contour_trajectory(target, traces)

    def update_run_stats(self, trace: Optional[Trace]) -> None:
        if trace is None:
            self.label_stats.setText("f evals: –    grad evals: –    ітерацій: –")
            return
        self.iterations_table.set_title(f"Ітерації: {trace.method_name}")
        self.label_stats.setText(
            f"f evals: {trace.func_evals}    grad evals: {trace.grad_evals}    "
            f"ітерацій: {trace.n_iter}    зупинка: {humanize_stop_reason(trace.status)}"
        )
