"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Data set construction errors
        2000-2999: Loading errors (DataLoader failures)
        5100-5199: Validation warnings (data set structural checks)
    """

    # Data set construction errors (1000-1999)
    INVALID_KEY_TYPE = 1001
    INVALID_ENTRY_TYPE = 1002
    EMPTY_PLURAL_FORMS = 1003
    INVALID_RULE_ENTRY = 1004

    # Loading errors (2000-2999)
    LOCALE_DATA_NOT_FOUND = 2001
    LOCALE_DATA_FAILED = 2002

    # Validation warnings (5100-5199)
    VALIDATION_UNKNOWN_RULE = 5101
    VALIDATION_MISSING_RULE = 5102
    VALIDATION_INSUFFICIENT_FORMS = 5103


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key: Data set key the diagnostic refers to (if any)
        locale: Locale of the data set involved (if known)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key: str | None = None
    locale: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[EMPTY_PLURAL_FORMS]: Plural entry 'apples' has no forms
              --> key: apples (locale: ru)
              = help: Supply at least one form, starting with the singular

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.key is not None:
            location = f"key: {_escape(self.key)}"
            if self.locale is not None:
                location += f" (locale: {_escape(self.locale)})"
            lines.append(f"  --> {location}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so one diagnostic stays on its own lines."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
