"""Unit-to-package calculator."""
__version__ = "1.0.0"
