"""
Main Application Window
=======================
The single form of the application: three inputs, Calculate/Clear actions
and the result or error block underneath.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the form.
2. Routing: It forwards user edits and button clicks to the FormStore and
   re-renders whenever the store reports a change. It holds no state of
   its own.
"""
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel,
    QLineEdit, QPushButton
)
from PySide6.QtCore import Qt, Slot

from packcalc.app.application import VISIBLE_APP_NAME
from packcalc.app.state import FormStore, FormInput
from packcalc.model.calculator import CalculationResult, ValidationError
from packcalc.view.widgets.result_display import ResultDisplay

SUBTITLE = "Coca-Cola FEMSA"
FOOTER = "Software developed by Cassio Ferreira (©)"


class MainWindow(QMainWindow):
    def __init__(self, store: FormStore) -> None:
        super().__init__()
        self.store: FormStore = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(460, 620)

        main_widget = QWidget()
        main_widget.setObjectName("formCard")
        self.setCentralWidget(main_widget)

        layout = QVBoxLayout(main_widget)
        layout.setContentsMargins(32, 32, 32, 16)
        layout.setSpacing(16)

        # --- Header ---
        title = QLabel(self.tr(VISIBLE_APP_NAME))
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel(SUBTITLE)
        subtitle.setObjectName("subtitle")
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(subtitle)

        # --- Inputs ---
        form = QFormLayout()
        form.setRowWrapPolicy(QFormLayout.WrapAllRows)

        self.edit_product = QLineEdit()
        self.edit_product.setPlaceholderText(self.tr("e.g. Coca-Cola 2L"))
        form.addRow(self.tr("Product name"), self.edit_product)

        self.edit_total = self._quantity_edit(self.tr("e.g. 100"))
        form.addRow(self.tr("Total number of units wanted"), self.edit_total)

        self.edit_per_package = self._quantity_edit(self.tr("e.g. 6"))
        form.addRow(self.tr("Units per package/box"), self.edit_per_package)

        layout.addLayout(form)

        # --- Actions ---
        buttons = QHBoxLayout()
        self.btn_clear = QPushButton(self.tr("Clear"))
        self.btn_clear.setMinimumHeight(40)
        self.btn_calculate = QPushButton(self.tr("Calculate"))
        self.btn_calculate.setObjectName("primary")
        self.btn_calculate.setMinimumHeight(40)
        self.btn_calculate.setDefault(True)
        buttons.addWidget(self.btn_clear)
        buttons.addWidget(self.btn_calculate)
        layout.addLayout(buttons)

        # --- Output ---
        self.lbl_error = QLabel()
        self.lbl_error.setObjectName("errorMessage")
        self.lbl_error.setAlignment(Qt.AlignCenter)
        self.lbl_error.setWordWrap(True)
        self.lbl_error.setVisible(False)
        layout.addWidget(self.lbl_error)

        self.result_display = ResultDisplay()
        self.result_display.setVisible(False)
        layout.addWidget(self.result_display)

        layout.addStretch()

        footer = QLabel(self.tr(FOOTER))
        footer.setObjectName("footer")
        footer.setAlignment(Qt.AlignCenter)
        layout.addWidget(footer)

        # --- SIGNAL CONNECTIONS ---
        # 1. User edits -> Store (textEdited ignores programmatic setText)
        self.edit_product.textEdited.connect(self.store.set_product_name)
        self.edit_total.textEdited.connect(self.store.set_total_units)
        self.edit_per_package.textEdited.connect(self.store.set_units_per_package)

        # 2. Submit: button or Return in any field, like an HTML form
        self.btn_calculate.clicked.connect(self.on_submit)
        for edit in (self.edit_product, self.edit_total, self.edit_per_package):
            edit.returnPressed.connect(self.on_submit)
        self.btn_clear.clicked.connect(self.store.clear)

        # 3. Store -> View
        self.store.input_changed.connect(self.on_input_changed)
        self.store.outcome_changed.connect(self.on_outcome_changed)

        # Initial Render
        self.on_input_changed(self.store.form)
        self.on_outcome_changed(self.store.outcome)

    def _quantity_edit(self, placeholder: str) -> QLineEdit:
        """Numeric hint only; the calculator re-validates whatever is typed."""
        edit = QLineEdit()
        edit.setPlaceholderText(placeholder)
        edit.setInputMethodHints(Qt.ImhDigitsOnly)
        edit.setToolTip(self.tr("Minimum 1"))
        return edit

    @Slot()
    def on_submit(self) -> None:
        self.store.submit()

    @Slot(object)
    def on_input_changed(self, form: FormInput) -> None:
        """Push the store's field values into the widgets (e.g. after Clear)."""
        for edit, value in (
            (self.edit_product, form.product_name),
            (self.edit_total, form.total_units_raw),
            (self.edit_per_package, form.units_per_package_raw),
        ):
            if edit.text() != value:
                edit.blockSignals(True)
                try:
                    edit.setText(value)
                finally:
                    edit.blockSignals(False)

    @Slot(object)
    def on_outcome_changed(self, outcome: Optional[object]) -> None:
        if isinstance(outcome, CalculationResult):
            self.lbl_error.clear()
            self.lbl_error.setVisible(False)
            self.result_display.show_result(outcome)
        elif isinstance(outcome, ValidationError):
            self.result_display.reset()
            self.lbl_error.setText(self.tr(outcome.message))
            self.lbl_error.setVisible(True)
        else:
            self.result_display.reset()
            self.lbl_error.clear()
            self.lbl_error.setVisible(False)
