"""Tests for diagnostics and the exception hierarchy."""

from __future__ import annotations

from locatext.diagnostics import (
    DataSetError,
    Diagnostic,
    DiagnosticCode,
    LocalizationError,
)


class TestDiagnostic:
    """Diagnostic formatting."""

    def test_str_is_message(self) -> None:
        """str() returns the bare message."""
        diagnostic = Diagnostic(code=DiagnosticCode.EMPTY_PLURAL_FORMS, message="no forms")
        assert str(diagnostic) == "no forms"

    def test_format_error(self) -> None:
        """format_error renders code, location and hint."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.EMPTY_PLURAL_FORMS,
            message="Plural entry 'apples' has no forms",
            hint="Supply at least one form",
            key="apples",
            locale="ru",
        )
        assert diagnostic.format_error() == (
            "error[EMPTY_PLURAL_FORMS]: Plural entry 'apples' has no forms\n"
            "  --> key: apples (locale: ru)\n"
            "  = help: Supply at least one form"
        )

    def test_control_characters_escaped(self) -> None:
        """Newlines in keys cannot forge extra diagnostic lines."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.INVALID_ENTRY_TYPE,
            message="bad",
            key="evil\nerror[FAKE]: injected",
        )
        assert diagnostic.format_error().count("\n") == 1


class TestErrors:
    """Exception hierarchy."""

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = LocalizationError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages are formatted and retained."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_KEY_TYPE, message="bad key")
        error = DataSetError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == "error[INVALID_KEY_TYPE]: bad key"
        assert error.key is None

    def test_data_set_error_hierarchy(self) -> None:
        """DataSetError is both a LocalizationError and a ValueError."""
        error = DataSetError("bad", key="k")
        assert isinstance(error, LocalizationError)
        assert isinstance(error, ValueError)
        assert error.key == "k"
