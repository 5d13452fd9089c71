"""Validation result types for data set validation.

Validation of a LocaleData never raises on content: every finding is a
ValidationWarning, because lookups degrade gracefully on every condition
checked here. The result type reports what a lookup would silently paper
over (unknown rules, missing rules, clamped ordinals).

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from data set validation.

    Attributes:
        code: Warning code (e.g., "unknown-rule", "insufficient-forms")
        message: Human-readable warning message
        context: Additional context (e.g., the affected key)
        diagnostic_code: Matching DiagnosticCode for tooling
    """

    code: str
    message: str
    context: str | None = None
    diagnostic_code: DiagnosticCode | None = None

    def format(self) -> str:
        """Format warning as a single human-readable line."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of validating one data set.

    Attributes:
        warnings: Findings, in the order they were detected
        locale: Locale label of the validated data set (if any)

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.warning_count
        0
    """

    warnings: tuple[ValidationWarning, ...]
    locale: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if validation produced no findings."""
        return len(self.warnings) == 0

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    def get_by_code(self, code: str) -> tuple[ValidationWarning, ...]:
        """Get all warnings with the given warning code."""
        return tuple(w for w in self.warnings if w.code == code)

    @staticmethod
    def valid(locale: str | None = None) -> "ValidationResult":
        """Create a result with no findings."""
        return ValidationResult(warnings=(), locale=locale)

    def format(self) -> str:
        """Format validation result as human-readable string.

        Returns:
            One line per warning, or a pass message when there are none.
        """
        if not self.warnings:
            return "Validation passed: no warnings"

        header = f"Warnings ({len(self.warnings)})"
        if self.locale:
            header += f" for locale '{self.locale}'"
        lines = [header + ":"]
        lines.extend(f"  {warning.format()}" for warning in self.warnings)
        return "\n".join(lines)
