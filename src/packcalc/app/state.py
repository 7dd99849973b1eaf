from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from packcalc.model.calculator import CalculationResult, Outcome, ValidationError, calculate

logger = logging.getLogger(__name__)


class FormPhase(IntEnum):
    """Where the form is in its edit/submit cycle."""
    EMPTY = 0
    EDITING = 1
    COMPUTED = 2
    INVALID = 3


@dataclass
class FormInput:
    """Raw text of the three fields, exactly as typed."""
    product_name: str = ""
    total_units_raw: str = ""
    units_per_package_raw: str = ""

    def is_blank(self) -> bool:
        return not (self.product_name or self.total_units_raw or self.units_per_package_raw)


FIELDS = ("product_name", "total_units_raw", "units_per_package_raw")


class FormStore(QObject):
    """
    Owns the form input and the outcome of the last submission.

    The result and the error are mutually exclusive. Editing a field keeps
    whatever outcome is currently shown; only `submit()` or `clear()`
    replace it.
    """
    input_changed = Signal(object)
    outcome_changed = Signal(object)
    phase_changed = Signal(int)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._form = FormInput()
        self._result: Optional[CalculationResult] = None
        self._error: Optional[ValidationError] = None
        self._phase = FormPhase.EMPTY

    @property
    def form(self) -> FormInput:
        return replace(self._form)

    @property
    def result(self) -> Optional[CalculationResult]:
        return self._result

    @property
    def error(self) -> Optional[ValidationError]:
        return self._error

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._result or self._error

    @property
    def phase(self) -> FormPhase:
        return self._phase

    def _set_phase(self, phase: FormPhase) -> None:
        if phase != self._phase:
            logger.debug("Form phase %s -> %s", self._phase.name, phase.name)
            self._phase = phase
            self.phase_changed.emit(int(phase))

    # ---- editing ----

    def set_field(self, name: str, value: str) -> None:
        if name not in FIELDS:
            raise KeyError(f"Unknown form field '{name}'")
        if getattr(self._form, name) == value:
            return
        setattr(self._form, name, value)
        self.input_changed.emit(self.form)

        if self._form.is_blank() and self.outcome is None:
            self._set_phase(FormPhase.EMPTY)
        else:
            self._set_phase(FormPhase.EDITING)

    def set_product_name(self, value: str) -> None:
        self.set_field("product_name", value)

    def set_total_units(self, value: str) -> None:
        self.set_field("total_units_raw", value)

    def set_units_per_package(self, value: str) -> None:
        self.set_field("units_per_package_raw", value)

    # ---- actions ----

    def submit(self) -> Outcome:
        outcome = calculate(
            self._form.product_name,
            self._form.total_units_raw,
            self._form.units_per_package_raw,
        )
        if isinstance(outcome, CalculationResult):
            self._result, self._error = outcome, None
            logger.info(
                "%s: %d units / %d per package -> %d packages",
                outcome.product_name, outcome.total_units,
                outcome.units_per_package, outcome.packages_needed,
            )
            phase = FormPhase.COMPUTED
        else:
            self._result, self._error = None, outcome
            logger.info("Submission rejected: %s", outcome.kind)
            phase = FormPhase.INVALID

        self.outcome_changed.emit(outcome)
        self._set_phase(phase)
        return outcome

    def clear(self) -> None:
        """Reset everything, whatever the current phase."""
        self._form = FormInput()
        self._result = None
        self._error = None
        self.input_changed.emit(self.form)
        self.outcome_changed.emit(None)
        self._set_phase(FormPhase.EMPTY)
        logger.debug("Form cleared.")
