"""LocaText exception hierarchy with structured diagnostics.

Lookups never raise: missing keys, unknown rules and short forms lists all
degrade to a usable string. Exceptions are reserved for construction,
where malformed caller data must be rejected before any reader sees it.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocalizationError(Exception):
    """Base exception for all LocaText errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DataSetError(LocalizationError, ValueError):
    """Malformed input while constructing a LocaleData.

    Raised for non-string keys, values that are neither a string nor a
    sequence of strings, empty plural form sequences, and reserved rule
    keys holding anything but a single string.

    Subclasses ValueError so callers validating input generically can
    catch it without importing LocaText types.

    Attributes:
        key: The offending key (None when the key itself is invalid)
    """

    def __init__(self, message: str | Diagnostic, *, key: str | None = None) -> None:
        """Initialize DataSetError.

        Args:
            message: Error message string OR Diagnostic object
            key: The offending key
        """
        super().__init__(message)
        self.key = key
