"""Data set validation for LocaText.

Python 3.13+.
"""

from .data_set import validate_locale_data

__all__ = ["validate_locale_data"]
