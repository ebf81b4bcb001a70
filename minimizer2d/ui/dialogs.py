"""
ui/dialogs.py

Діалоги GUI:

    - show_error     – повідомлення про помилку
    - show_about     – вікно "Про програму"
    - show_summary   – зведена таблиця ResultsSummary
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QMessageBox,
    QDialog,
    QVBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QDialogButtonBox,
    QHeaderView,
)

from ..core.results_summary import ResultsSummary
from ..core.trace import (
    STOP_CONVERGED,
    STOP_LEARNING_RATE_TOO_SMALL,
    STOP_MAX_ITER,
    STOP_STEP_TOO_SMALL,
)
from .styles import MARGIN, SPACING, apply_table_style

STOP_REASON_TEXT = {
    STOP_CONVERGED: "Досягнуто збіжності",
    STOP_MAX_ITER: "Досягнуто граничної кількості ітерацій",
    STOP_STEP_TOO_SMALL: "Крок пошуку став занадто малим",
    STOP_LEARNING_RATE_TOO_SMALL: "Швидкість навчання стала занадто малою після невдалого кроку",
}


def humanize_stop_reason(code: Optional[str]) -> str:
    if not code:
        return "Невідомо"
    return STOP_REASON_TEXT.get(code, f"Інша причина ({code})")


def show_error(parent: Optional[QWidget], message: str, title: str = "Помилка") -> None:
    QMessageBox.critical(parent, title, message)


def show_about(parent: Optional[QWidget]) -> None:
    QMessageBox.about(
        parent,
        "Про програму",
        (
            "<p><b>Мінімізація функції двох змінних</b></p>"
            "<p>Реалізовані методи:</p>"
            "<ul>"
            "<li>Покоординатний спуск (одномірне сканування по осях)</li>"
            "<li>Випадковий пошук з адаптивним кроком</li>"
            "<li>Градієнтний спуск з відкатом кроку</li>"
            "</ul>"
            "<p>Таблиця ітерацій, графік f(k) та траєкторії на лініях рівня.</p>"
        ),
    )


class SummaryDialog(QDialog):
    """Зведена таблиця результатів для всіх методів."""

    HEADERS = ["Метод", "f*", "x*", "||x* - x_min||", "Ітерацій", "Виклики f", "Виклики grad", "Причина зупинки"]

    def __init__(self, parent: Optional[QWidget], summary: ResultsSummary) -> None:
        super().__init__(parent)
        self.summary = summary

        self.setWindowTitle("Зведена таблиця результатів")
        self.setModal(True)
        self.resize(860, 320)

        self._build_ui()
        self._populate()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        label = QLabel("Однакова функція, стартова точка та eps для всіх методів", self)
        label.setWordWrap(True)

        self.table = QTableWidget(self)
        self.table.setColumnCount(len(self.HEADERS))
        self.table.setHorizontalHeaderLabels(self.HEADERS)
        apply_table_style(self.table)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok, Qt.Orientation.Horizontal, self)
        buttons.accepted.connect(self.accept)

        layout.addWidget(label)
        layout.addWidget(self.table)
        layout.addWidget(buttons)

    def _populate(self) -> None:
        rows = self.summary.as_rows()
        self.table.setRowCount(len(rows))

        for row_idx, row in enumerate(rows):
            x_star = "(" + ", ".join(f"{v:.4f}" for v in row["x_star"]) + ")"
            cells = [
                row["method"],
                f"{row['f_star']:.6e}",
                x_star,
                "—" if row["distance_to_minimum"] is None else f"{row['distance_to_minimum']:.3e}",
                row["n_iter"],
                row["func_evals"],
                row["grad_evals"],
                humanize_stop_reason(row["status"]),
            ]
            for col, value in enumerate(cells):
                item = QTableWidgetItem(str(value))
                item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
                self.table.setItem(row_idx, col, item)

        self.table.resizeColumnsToContents()


def show_summary(parent: Optional[QWidget], summary: ResultsSummary) -> None:
    SummaryDialog(parent, summary).exec()
