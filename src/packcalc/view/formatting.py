"""
Quantity formatting for display.
"""
from typing import Optional

from PySide6.QtCore import QLocale

from packcalc.config import DISPLAY_LOCALE

# QLocale.toString() takes a qlonglong.
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def display_locale() -> QLocale:
    return QLocale(DISPLAY_LOCALE)


def format_quantity(value: int, locale: Optional[QLocale] = None) -> str:
    """
    Format an integer with the locale's digit grouping.

    Values that fit a signed 64-bit int go through QLocale, which knows
    grouping rules such as the Indian 12,34,567. Larger values are grouped
    by three on the Python int, so they are still printed exactly. The
    calculator never produces ints past the interpreter's str conversion
    limit, so the f-string below cannot raise.
    """
    locale = locale or display_locale()
    if _INT64_MIN <= value <= _INT64_MAX:
        return locale.toString(value)
    return f"{value:,}".replace(",", locale.groupSeparator())
