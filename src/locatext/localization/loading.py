"""Data loading infrastructure for Localization.

LocaText does not read files or parse configuration formats. An external
reader supplies, per locale, a mapping whose values are strings or
sequences of strings; this module defines the protocol such a reader
implements and the records used to report what happened while loading.

Components:
    DataLoader - Protocol for loading locale data (structural typing)
    MappingDataLoader - In-memory loader over a {locale: mapping} dict
    FallbackInfo - Immutable record of a fallback event
    DataLoadResult - Immutable result of a single locale load attempt
    LoadSummary - Immutable aggregate of all load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from locatext.diagnostics import Diagnostic
from locatext.enums import LoadStatus
from locatext.runtime.value_types import LocaleCode, MessageKey, RawLocaleData

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DataLoader",
    # Concrete loader
    "MappingDataLoader",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "DataLoadResult",
    "LoadSummary",
]


class DataLoader(Protocol):
    """Protocol for loading raw locale data.

    Implementations must provide a load() method returning the mapping for
    a locale. This is a Protocol (structural typing) rather than ABC so
    any reader with the right methods can be passed in.

    Example:
        >>> class YamlLoader:
        ...     def load(self, locale: str) -> Mapping[str, str | list[str]]:
        ...         with open(f"lang/{locale}.yaml", encoding="utf-8") as f:
        ...             return yaml.safe_load(f)
        ...     def describe(self, locale: str) -> str:
        ...         return f"lang/{locale}.yaml"
        ...
        >>> l10n = Localization.from_loader(["ru", "en"], YamlLoader())
    """

    def load(self, locale: LocaleCode) -> RawLocaleData:
        """Load raw data for a locale.

        Args:
            locale: Locale code (e.g., 'en', 'ru')

        Returns:
            Mapping of key to string or sequence of strings

        Raises:
            KeyError: If the loader has no data for this locale
            FileNotFoundError: If backing storage for the locale is missing
        """

    def describe(self, locale: LocaleCode) -> str:
        """Return human-readable source description for diagnostics.

        Optional: Localization.from_loader describes loaders lacking this
        method by the locale code alone.
        """
        ...


@dataclass(frozen=True, slots=True)
class MappingDataLoader:
    """In-memory loader over already-parsed data.

    Example:
        >>> loader = MappingDataLoader({
        ...     "en": {"IntegerRule": "int2Type4", "apples": ["apple", "apples"]},
        ... })
        >>> loader.load("en")["IntegerRule"]
        'int2Type4'

    Attributes:
        data: Mapping of locale code to raw data set mapping
        name: Label used by describe() (e.g. the file the data came from)
    """

    data: Mapping[LocaleCode, RawLocaleData]
    name: str = "memory"
    _frozen: Mapping[LocaleCode, RawLocaleData] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Snapshot the outer mapping so later caller edits are not observed."""
        object.__setattr__(self, "_frozen", MappingProxyType(dict(self.data)))

    def load(self, locale: LocaleCode) -> RawLocaleData:
        """Get raw data for a locale.

        Raises:
            KeyError: If the locale is not present
        """
        return self._frozen[locale]

    def describe(self, locale: LocaleCode) -> str:
        """Return '<name>:<locale>'."""
        return f"{self.name}:{locale}"


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a fallback event.

    Provided to the on_fallback callback when Localization answers a
    lookup from a data set other than the primary one.

    Attributes:
        requested_locale: Locale label of the primary data set
        resolved_locale: Locale label of the data set that held the key
        key: The key that was resolved
        fallback_index: Position of the answering data set in the chain (>= 1)

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.key} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> l10n = Localization(ru, en, on_fallback=log_fallback)
    """

    requested_locale: LocaleCode | None
    resolved_locale: LocaleCode | None
    key: MessageKey
    fallback_index: int


@dataclass(frozen=True, slots=True)
class DataLoadResult:
    """Result of loading one locale.

    Attributes:
        locale: Locale code
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source: Human-readable source description (if available)
        entry_count: Number of entries loaded (0 unless successful)
        diagnostic: LOCALE_DATA_NOT_FOUND or LOCALE_DATA_FAILED diagnostic
            for unsuccessful loads, None otherwise
    """

    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source: str | None = None
    entry_count: int = 0
    diagnostic: Diagnostic | None = None

    @property
    def is_success(self) -> bool:
        """Check if locale data loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if locale data was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if loading failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of load results from Localization.from_loader.

    Attributes:
        results: All individual load results, in locale chain order

    Example:
        >>> summary = l10n.get_load_summary()
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.source}: {result.error}")
    """

    results: tuple[DataLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of locales with no data."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[DataLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[DataLoadResult, ...]:
        """Get all results where locale data was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_locale(self, locale: LocaleCode) -> DataLoadResult | None:
        """Get the result for a specific locale."""
        return next((r for r in self.results if r.locale == locale), None)

    @property
    def has_errors(self) -> bool:
        """Check if any locale failed to load with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every locale loaded successfully."""
        return self.errors == 0 and self.not_found == 0
