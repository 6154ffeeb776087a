"""Utility modules for Fresa.

Provides:
- logger: get_logger for logging
- numbers: format_number and to_unsigned for numeric text and codes
"""

from fresa.utils.logger import get_logger
from fresa.utils.numbers import format_number, to_unsigned

__all__ = [
    "format_number",
    "get_logger",
    "to_unsigned",
]
