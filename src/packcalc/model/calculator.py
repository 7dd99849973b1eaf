"""
Package Count Calculator
========================
Validates the raw form input and derives how many whole packages are needed
to hold the requested number of units.

The outcome of a calculation is a tagged value: either a `CalculationResult`
or a `ValidationError`. Nothing here raises for user input, so the caller
only has to check which of the two it got back.

Exports:
    calculate: The validation + computation routine.
    CalculationResult: Successful outcome.
    ValidationError: Failed outcome (first failing rule only).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import re
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Whitespace as parseInt() skips it: tab, VT, FF, space, NBSP, BOM, the Zs
# spaces and the line terminators. Python's \s differs (e.g. \x1c-\x1f, BOM).
_JS_WHITESPACE = (
    "\t\v\f \u00a0\ufeff"
    "\u1680\u2000-\u200a\u202f\u205f\u3000"
    "\n\r\u2028\u2029"
)

# Leading whitespace, optional sign, then ASCII digits. Anything after is ignored.
_INT_PREFIX = re.compile(f"[{_JS_WHITESPACE}]*([+-]?[0-9]+)")


class ErrorKind(StrEnum):
    MISSING_FIELD = "missing_field"
    INVALID_QUANTITY = "invalid_quantity"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_FIELD: "All fields are required.",
    ErrorKind.INVALID_QUANTITY: "Quantities must be positive numbers greater than zero.",
}


@dataclass(frozen=True)
class CalculationResult:
    """Package count for one product. Quantities are always positive."""
    product_name: str
    total_units: int
    units_per_package: int
    packages_needed: int

    @property
    def remainder(self) -> int:
        """Free slots left in the last package."""
        return self.packages_needed * self.units_per_package - self.total_units


@dataclass(frozen=True)
class ValidationError:
    kind: ErrorKind
    message: str

    @classmethod
    def of(cls, kind: ErrorKind) -> ValidationError:
        return cls(kind=kind, message=ERROR_MESSAGES[kind])


Outcome = Union[CalculationResult, ValidationError]


def parse_int_prefix(raw: str) -> Optional[int]:
    """
    Parse the leading base-10 integer of a string.

    "12abc" -> 12, "3.9" -> 3, "  -4" -> -4. Returns None when the string
    does not start with an integer at all ("abc", "", "-"), and when the
    digit run is longer than the interpreter's int conversion limit
    (sys.get_int_max_str_digits(), 4300 by default).
    """
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        logger.debug("Integer prefix of %d chars exceeds the conversion limit", len(match.group(1)))
        return None


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer division rounded up. Exact for arbitrarily large ints."""
    return -(-numerator // denominator)


def calculate(product_name: str, total_units_raw: str, units_per_package_raw: str) -> Outcome:
    """
    Validate the raw form fields and compute the number of packages.

    Rules are checked in order and the first failure wins:
    1. every field is filled in (product name after trimming),
    2. both quantities parse as integers greater than zero.
    """
    name = product_name.strip()
    if not name or not total_units_raw or not units_per_package_raw:
        logger.debug("Missing field(s) in %r", (product_name, total_units_raw, units_per_package_raw))
        return ValidationError.of(ErrorKind.MISSING_FIELD)

    total_units = parse_int_prefix(total_units_raw)
    units_per_package = parse_int_prefix(units_per_package_raw)

    if total_units is None or units_per_package is None or total_units <= 0 or units_per_package <= 0:
        logger.debug("Invalid quantities: total=%r per_package=%r", total_units_raw, units_per_package_raw)
        return ValidationError.of(ErrorKind.INVALID_QUANTITY)

    return CalculationResult(
        product_name=name,
        total_units=total_units,
        units_per_package=units_per_package,
        packages_needed=ceil_div(total_units, units_per_package),
    )
