"""
Графіки процесу мінімізації (matplotlib у Qt):
    - f(k) для однієї або кількох трас;
    - лінії рівня цільової функції + траєкторії.

Публічні методи:
    show_placeholder(), plot_fk(traces), plot_contour_trajectory(target, traces)
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QTabWidget

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ..core.functions import TargetFunction
from ..core.trace import Trace
from .styles import MARGIN, SPACING, PALETTE, apply_card_style, trace_color

_CANVAS_BG = PALETTE.field
_TEXT = PALETTE.text
_MUTED = PALETTE.text_dim


class PlotView(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("plotView")
        self.figures: Dict[str, Figure] = {}
        self.canvases: Dict[str, FigureCanvas] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)
        apply_card_style(self)

        self.tabs = QTabWidget(self)
        for key, title in (("contour", "Рівні та траєкторія"), ("fk", "Графік f(k)")):
            figure = Figure(facecolor=_CANVAS_BG)
            figure.add_subplot(111)
            canvas = FigureCanvas(figure)
            self.figures[key] = figure
            self.canvases[key] = canvas
            self.tabs.addTab(canvas, title)
        layout.addWidget(self.tabs)

        self.show_placeholder()

    # ------------------------------------------------------------------
    # Стилізація
    # ------------------------------------------------------------------

    def _axes(self, key: str):
        ax = self.figures[key].axes[0]
        ax.clear()
        ax.set_facecolor(_CANVAS_BG)
        ax.tick_params(colors=_MUTED, labelsize=9)
        for spine in ax.spines.values():
            spine.set_color(PALETTE.outline)
        ax.grid(True, color=PALETTE.outline, linestyle="--", linewidth=0.5)
        ax.title.set_color(_TEXT)
        ax.xaxis.label.set_color(_TEXT)
        ax.yaxis.label.set_color(_TEXT)
        return ax

    def _redraw(self, key: str) -> None:
        self.figures[key].tight_layout()
        self.canvases[key].draw_idle()

    # ------------------------------------------------------------------
    # Публічні методи
    # ------------------------------------------------------------------

    def show_placeholder(self) -> None:
        for key in self.figures:
            ax = self._axes(key)
            ax.text(0.5, 0.5, "Графік з'явиться після запуску", ha="center", va="center",
                    transform=ax.transAxes, color=_MUTED)
            self.canvases[key].draw_idle()

    def plot_fk(self, traces: Sequence[Trace]) -> None:
        """f(k) для кожної траси; відкочені кроки не показуються."""
        ax = self._axes("fk")
        for i, trace in enumerate(traces):
            records = [rec for rec in trace.records if rec.step_type != "reverted"]
            ax.plot([rec.index for rec in records], [rec.value for rec in records],
                    marker="o", markersize=3, linewidth=1.3,
                    color=trace_color(trace.method_name, i), label=trace.method_name)
        ax.set_xlabel("k")
        ax.set_ylabel("f(x_k, y_k)")
        ax.set_title("Графік f(k)")
        if len(traces) > 1:
            ax.legend(fontsize=8)
        self._redraw("fk")

    def plot_contour_trajectory(
        self,
        target: TargetFunction,
        traces: Sequence[Trace],
        levels: int = 20,
        padding: float = 0.75,
        grid_size: int = 120,
    ) -> None:
        ax = self._axes("contour")
        if not traces:
            self._redraw("contour")
            return

        pts = np.vstack([trace.points() for trace in traces])
        x_min, y_min = pts.min(axis=0) - padding
        x_max, y_max = pts.max(axis=0) + padding

        X, Y = np.meshgrid(np.linspace(x_min, x_max, grid_size),
                           np.linspace(y_min, y_max, grid_size))
        Z = target.on_grid(X, Y)

        ax.contourf(X, Y, Z, levels=levels, cmap="viridis", alpha=0.45)
        ax.contour(X, Y, Z, levels=levels, colors=_MUTED, linewidths=0.6)

        for i, trace in enumerate(traces):
            color = trace_color(trace.method_name, i)
            path = trace.points()
            ax.plot(path[:, 0], path[:, 1], marker="o", markersize=3, linewidth=1.1,
                    color=color, label=trace.method_name)
            ax.scatter(path[-1, 0], path[-1, 1], marker="*", s=110, color=color, zorder=6)

        ax.scatter(pts[0, 0], pts[0, 1], marker="s", s=45, color=_TEXT, zorder=5)
        if target.minimum is not None:
            ax.scatter(*target.minimum, marker="x", s=60, color=PALETTE.minimum_marker, zorder=7)

        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(target.name)
        if len(traces) > 1:
            ax.legend(fontsize=8)
        self._redraw("contour")
        self.tabs.setCurrentIndex(0)
