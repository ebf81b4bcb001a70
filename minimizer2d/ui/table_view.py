"""
table_view.py

Таблиця записів траси (IterationRecord).

Колонки:
    k, x, y, f(x, y), |Δf|, крок / lr, примітка

Колір рядка залежить від типу кроку (styles.STEP_TYPE_COLORS).
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from ..core.trace import IterationRecord
from .styles import MARGIN, SPACING, apply_table_style, step_type_color

STEP_TYPE_LABELS = {
    "initial": "старт",
    "coordinate": "x, потім y",
    "forward": "покращення",
    "opposite": "покращення (протилежний)",
    "no_improvement": "без покращення",
    "accepted": "крок прийнято",
    "reverted": "f зросла, відкат",
}

COLUMNS = ["k", "x", "y", "f(x, y)", "|Δf|", "крок / lr", "примітка"]


def step_value(record: IterationRecord) -> Optional[float]:
    """
    Що показувати в колонці "крок / lr":
    lr для градієнтного спуску, step_size для випадкового пошуку,
    норму зміщення для покоординатного спуску.
    """
    for key in ("learning_rate", "step_size", "step_norm"):
        if key in record.meta:
            return float(record.meta[key])
    return None


class IterationsTableWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        self.title = QLabel("Ітерації", self)
        root.addWidget(self.title)

        self.table = QTableWidget(self)
        self.table.setColumnCount(len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        apply_table_style(self.table)

        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(len(COLUMNS) - 1, QHeaderView.ResizeMode.ResizeToContents)

        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setDefaultSectionSize(22)

        root.addWidget(self.table)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def set_title(self, text: str) -> None:
        self.title.setText(text)

    def clear_table(self) -> None:
        self.table.setRowCount(0)

    def add_record(self, record: IterationRecord) -> None:
        """Додати один рядок у таблицю."""
        row = self.table.rowCount()
        self.table.insertRow(row)

        f_change = record.meta.get("f_change")
        step = step_value(record)
        note = STEP_TYPE_LABELS.get(record.step_type, record.step_type)
        if record.meta.get("step_shrunk"):
            note += ", крок зменшено"
        cells = [
            str(record.index),
            f"{record.x:.6f}",
            f"{record.y:.6f}",
            f"{record.value:.6f}",
            "—" if f_change is None else f"{f_change:.3e}",
            "—" if step is None else f"{step:.3e}",
            note,
        ]

        color = step_type_color(record.step_type)
        for col, text in enumerate(cells):
            self.table.setItem(row, col, self._item(text, col, color))

    def populate(self, records: Iterable[IterationRecord]) -> None:
        """Повністю перезаповнити таблицю трасою."""
        self.clear_table()
        for record in records:
            self.add_record(record)

    @staticmethod
    def _item(text: Any, col: int, color: Optional[QColor]) -> QTableWidgetItem:
        item = QTableWidgetItem(str(text))
        align = Qt.AlignmentFlag.AlignHCenter if col == 0 else Qt.AlignmentFlag.AlignRight
        if col == len(COLUMNS) - 1:
            align = Qt.AlignmentFlag.AlignLeft
        item.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
        if color is not None:
            item.setForeground(color)
        return item
