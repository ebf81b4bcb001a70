"""
Оформлення застосунку мінімізації.

Тут зібрано:
    - палітру темної теми та QSS для віджетів;
    - кольори трас кожного методу (графіки f(k) і траєкторії);
    - кольори рядків таблиці за типом кроку (відкат, зменшення кроку, ...).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPalette
from PyQt6.QtWidgets import (
    QApplication,
    QWidget,
    QTableWidget,
    QHeaderView,
    QPushButton,
    QLabel,
)

from ..core.methods import METHOD_TITLES

MARGIN = 10
SPACING = 8
RADIUS = 5

FONT_FAMILY = "Segoe UI"
FONT_SIZE = 10


@dataclass(frozen=True)
class AppPalette:
    background: str = "#111418"
    panel: str = "#181c22"
    field: str = "#20262e"
    outline: str = "#2b323c"

    text: str = "#e4e8ef"
    text_dim: str = "#8f9aab"
    text_on_accent: str = "#111418"

    accent: str = "#4fc3a1"
    warning: str = "#f2b35e"
    minimum_marker: str = "#e06c75"


PALETTE = AppPalette()

# Траса кожного методу має свій колір на обох графіках
TRACE_COLORS: Dict[str, str] = {
    METHOD_TITLES["coordinate_descent"]: PALETTE.accent,
    METHOD_TITLES["random_search"]: PALETTE.warning,
    METHOD_TITLES["gradient_descent"]: "#7aa2f7",
}
_FALLBACK_TRACE_COLORS = ["#c792ea", "#89ddff", "#ffcb6b"]

# Колір тексту рядка таблиці за step_type; None -> звичайний текст
STEP_TYPE_COLORS: Dict[str, str] = {
    "initial": PALETTE.accent,
    "reverted": PALETTE.warning,
    "no_improvement": PALETTE.text_dim,
}


def trace_color(method_name: str, position: int = 0) -> str:
    """Колір траси за назвою методу (position — для невідомих назв)."""
    if method_name in TRACE_COLORS:
        return TRACE_COLORS[method_name]
    return _FALLBACK_TRACE_COLORS[position % len(_FALLBACK_TRACE_COLORS)]


def step_type_color(step_type: str) -> Optional[QColor]:
    color = STEP_TYPE_COLORS.get(step_type)
    return QColor(color) if color else None


def _stylesheet() -> str:
    p = PALETTE
    return f"""
    QWidget {{ background-color: {p.background}; color: {p.text}; }}
    QGroupBox {{
        background-color: {p.panel};
        border: 1px solid {p.outline};
        border-radius: {RADIUS}px;
        margin-top: 14px;
    }}
    QGroupBox::title {{ subcontrol-origin: margin; left: 10px; color: {p.accent}; }}
    QStatusBar, QMenuBar {{ background-color: {p.panel}; color: {p.text_dim}; }}
    QPushButton {{
        background-color: {p.accent};
        color: {p.text_on_accent};
        border-radius: {RADIUS}px;
        padding: 6px 14px;
    }}
    QPushButton[secondary="true"] {{
        background-color: {p.field};
        color: {p.text};
        border: 1px solid {p.outline};
    }}
    QSpinBox, QDoubleSpinBox, QComboBox {{
        background-color: {p.field};
        border: 1px solid {p.outline};
        border-radius: {RADIUS}px;
        padding: 4px 6px;
    }}
    QTableWidget {{
        background-color: {p.panel};
        alternate-background-color: {p.field};
        gridline-color: {p.outline};
    }}
    QHeaderView::section {{ background-color: {p.field}; border: none; padding: 4px; }}
    QTabBar::tab:selected {{ color: {p.accent}; }}
    """


def apply_app_style(app: QApplication) -> None:
    qpal = app.palette()
    qpal.setColor(QPalette.ColorRole.Window, QColor(PALETTE.background))
    qpal.setColor(QPalette.ColorRole.Base, QColor(PALETTE.panel))
    qpal.setColor(QPalette.ColorRole.Text, QColor(PALETTE.text))
    app.setPalette(qpal)
    app.setFont(QFont(FONT_FAMILY, FONT_SIZE))
    app.setStyleSheet(_stylesheet())


def apply_table_style(table: QTableWidget) -> None:
    table.verticalHeader().setVisible(False)
    table.setAlternatingRowColors(True)
    header = table.horizontalHeader()
    header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
    header.setDefaultAlignment(Qt.AlignmentFlag.AlignCenter)


def apply_button_secondary(btn: QPushButton) -> None:
    # Стиль задається в QSS через динамічну властивість
    btn.setProperty("secondary", True)


def apply_label_muted(lbl: QLabel) -> None:
    lbl.setStyleSheet(f"color: {PALETTE.text_dim};")


def apply_card_style(widget: QWidget) -> None:
    widget.setStyleSheet(
        f"QWidget#{widget.objectName()} {{ background-color: {PALETTE.panel}; "
        f"border: 1px solid {PALETTE.outline}; border-radius: {RADIUS}px; }}"
    )
