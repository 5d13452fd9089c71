"""Diagnostic system for LocaText errors.

Provides structured error diagnostics with codes and hints, the exception
hierarchy raised at construction time, and validation result types.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DataSetError, LocalizationError
from .validation import ValidationResult, ValidationWarning

__all__ = [
    "DataSetError",
    "Diagnostic",
    "DiagnosticCode",
    "LocalizationError",
    "ValidationResult",
    "ValidationWarning",
]
