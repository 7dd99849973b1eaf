"""
Result Display
Shows the outcome of a successful calculation as a label/value table.
"""
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QGroupBox, QFormLayout, QLabel, QFrame

from packcalc.model.calculator import CalculationResult
from packcalc.view.formatting import format_quantity


class ResultDisplay(QGroupBox):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(self.tr("Calculation Result"), parent)
        self.setObjectName("resultDisplay")

        form = QFormLayout(self)

        self.lbl_product = QLabel()
        self.lbl_product.setObjectName("resultProduct")
        self.lbl_total = QLabel()
        self.lbl_per_package = QLabel()
        self.lbl_remainder = QLabel()
        self.lbl_packages = QLabel()
        self.lbl_packages.setObjectName("resultPackages")

        for lbl in (self.lbl_product, self.lbl_total, self.lbl_per_package, self.lbl_remainder, self.lbl_packages):
            lbl.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)

        form.addRow(self.tr("Product name:"), self.lbl_product)
        form.addRow(self.tr("Desired units:"), self.lbl_total)
        form.addRow(self.tr("Units per package:"), self.lbl_per_package)

        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        form.addRow(line)

        form.addRow(self.tr("Packages needed:"), self.lbl_packages)
        form.addRow(self.tr("Spare slots in last package:"), self.lbl_remainder)

    def show_result(self, result: CalculationResult) -> None:
        self.lbl_product.setText(result.product_name)
        self.lbl_total.setText(format_quantity(result.total_units))
        self.lbl_per_package.setText(format_quantity(result.units_per_package))
        self.lbl_packages.setText(format_quantity(result.packages_needed))
        self.lbl_remainder.setText(format_quantity(result.remainder))
        self.setVisible(True)

    def reset(self) -> None:
        for lbl in (self.lbl_product, self.lbl_total, self.lbl_per_package, self.lbl_remainder, self.lbl_packages):
            lbl.clear()
        self.setVisible(False)
