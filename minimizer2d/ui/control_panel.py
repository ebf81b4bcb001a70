"""
control_panel.py

Панель керування:
    - вибір цільової функції (core.functions.FUNCTIONS);
    - вибір методу або "усі методи";
    - стартова точка (x, y);
    - eps, max_iter, seed для випадкового пошуку;
    - кнопки: Запустити, Очистити, Вихід.

Сигнали назовні:
    runRequested(OptimizationConfig), clearRequested(), exitRequested()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QGroupBox,
    QComboBox,
    QLabel,
    QPushButton,
    QSpinBox,
    QDoubleSpinBox,
    QCheckBox,
)

from ..core.functions import FUNCTIONS
from ..core.methods import METHOD_KEYS, METHOD_TITLES
from .styles import MARGIN, SPACING, apply_button_secondary

# Значення spinbox'а seed, яке означає "без фіксованого seed"
RANDOM_SEED_SENTINEL = -1


@dataclass
class OptimizationConfig:
    function_key: str
    method_key: str
    start: Tuple[float, float]
    eps: float
    max_iter: int
    seed: Optional[int] = None
    run_all_methods: bool = False


class ControlPanelWidget(QWidget):
    """
    Ліва панель керування.

    Значення за замовчуванням — як у класичному прогоні трьох методів:
    параболоїд, старт (1, 1), eps = 0.001, max_iter = 1000.
    """

    runRequested = pyqtSignal(OptimizationConfig)
    clearRequested = pyqtSignal()
    exitRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._function_keys = list(FUNCTIONS.keys())
        self._build_ui()
        self._connect_signals()

    # ------------------------------------------------------------------
    # Побудова UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        # Задача
        problem_group = QGroupBox("Задача", self)
        problem_form = QFormLayout(problem_group)
        problem_form.setSpacing(SPACING)

        self.combo_function = QComboBox(problem_group)
        self.combo_function.addItems([FUNCTIONS[key].name for key in self._function_keys])

        self.input_x = self._coordinate_spinbox(problem_group, 1.0)
        self.input_y = self._coordinate_spinbox(problem_group, 1.0)

        start_row = QHBoxLayout()
        start_row.setSpacing(SPACING)
        start_row.addWidget(QLabel("x:", problem_group))
        start_row.addWidget(self.input_x)
        start_row.addWidget(QLabel("y:", problem_group))
        start_row.addWidget(self.input_y)

        problem_form.addRow("Функція:", self.combo_function)
        problem_form.addRow("Старт:", start_row)
        layout.addWidget(problem_group)

        # Метод
        method_group = QGroupBox("Метод", self)
        method_layout = QVBoxLayout(method_group)
        method_layout.setSpacing(SPACING)

        self.combo_method = QComboBox(method_group)
        self.combo_method.addItems([METHOD_TITLES[key] for key in METHOD_KEYS])

        self.check_run_all = QCheckBox("Запустити всі методи (зведена таблиця)", method_group)

        method_layout.addWidget(self.combo_method)
        method_layout.addWidget(self.check_run_all)
        layout.addWidget(method_group)

        # Параметри
        params_group = QGroupBox("Точність та ліміти", self)
        params_form = QFormLayout(params_group)
        params_form.setSpacing(SPACING)

        self.input_eps = QDoubleSpinBox(params_group)
        self.input_eps.setDecimals(8)
        self.input_eps.setRange(1e-8, 1e3)
        self.input_eps.setValue(1e-3)

        self.input_max_iter = QSpinBox(params_group)
        self.input_max_iter.setRange(1, 100000)
        self.input_max_iter.setValue(1000)

        self.input_seed = QSpinBox(params_group)
        self.input_seed.setRange(RANDOM_SEED_SENTINEL, 2 ** 31 - 1)
        self.input_seed.setSpecialValueText("випадковий")
        self.input_seed.setValue(42)

        params_form.addRow("eps:", self.input_eps)
        params_form.addRow("max_iter:", self.input_max_iter)
        params_form.addRow("seed:", self.input_seed)
        layout.addWidget(params_group)

        # Кнопки
        buttons_row = QHBoxLayout()
        buttons_row.setSpacing(SPACING)

        self.button_run = QPushButton("Запустити", self)
        self.button_clear = QPushButton("Очистити", self)
        self.button_exit = QPushButton("Вихід", self)
        apply_button_secondary(self.button_clear)
        apply_button_secondary(self.button_exit)

        buttons_row.addWidget(self.button_run)
        buttons_row.addWidget(self.button_clear)
        buttons_row.addStretch(1)
        buttons_row.addWidget(self.button_exit)

        layout.addLayout(buttons_row)
        layout.addStretch(1)

    @staticmethod
    def _coordinate_spinbox(parent: QWidget, value: float) -> QDoubleSpinBox:
        box = QDoubleSpinBox(parent)
        box.setRange(-1e6, 1e6)
        box.setDecimals(6)
        box.setValue(value)
        return box

    def _connect_signals(self) -> None:
        self.button_run.clicked.connect(lambda: self.runRequested.emit(self.build_config()))
        self.button_clear.clicked.connect(self.clearRequested)
        self.button_exit.clicked.connect(self.exitRequested)
        self.check_run_all.toggled.connect(lambda checked: self.combo_method.setEnabled(not checked))

    # ------------------------------------------------------------------
    # Зчитування конфігурації
    # ------------------------------------------------------------------

    def build_config(self) -> OptimizationConfig:
        """Зібрати OptimizationConfig з поточного стану контролів."""
        seed_value = int(self.input_seed.value())
        return OptimizationConfig(
            function_key=self._function_keys[self.combo_function.currentIndex()],
            method_key=METHOD_KEYS[self.combo_method.currentIndex()],
            start=(float(self.input_x.value()), float(self.input_y.value())),
            eps=float(self.input_eps.value()),
            max_iter=int(self.input_max_iter.value()),
            seed=None if seed_value == RANDOM_SEED_SENTINEL else seed_value,
            run_all_methods=self.check_run_all.isChecked(),
        )
