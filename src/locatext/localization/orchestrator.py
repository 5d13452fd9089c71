"""Plural-aware localization with fallback chains.

Localization is the public entry point. It composes a FallbackResolver
(one primary data set plus ordered fallbacks) with a RuleCatalog and
answers two kinds of request:

- get_string(key): the text of a scalar entry
- get_plural(quantity, key): the form of a plural entry matching the
  quantity under the answering data set's plural rule

Key architectural decisions:
- Lookups never raise: every gap degrades to an empty string, an unknown
  rule collapses to the first form, and a short forms list clamps to its
  last form
- Source atomicity: the data set that holds a plural key supplies both
  its forms and the rule identifier used to index them
- Dependency injection: the catalog is passed in, never looked up globally
- Immutable after construction: no locks on the read path

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from locatext.constants import FALLBACK_EMPTY
from locatext.diagnostics import Diagnostic, DiagnosticCode
from locatext.enums import LoadStatus
from locatext.localization.loading import (
    DataLoader,
    DataLoadResult,
    FallbackInfo,
    LoadSummary,
)
from locatext.runtime.catalog import DEFAULT_CATALOG, RuleCatalog, is_fractional
from locatext.runtime.locale_data import LocaleData
from locatext.runtime.resolver import FallbackResolver
from locatext.runtime.value_types import LocaleCode, MessageKey, Quantity

__all__ = ["Localization"]

logger = logging.getLogger(__name__)


class Localization:
    """Scalar and plural lookups over a fallback chain of data sets.

    Example:
        >>> en = LocaleData({
        ...     "IntegerRule": "int2Type4",
        ...     "oranges": [
        ...         "There is %s orange on the tree.",
        ...         "There are %s oranges on the tree.",
        ...     ],
        ... }, locale="en")
        >>> l10n = Localization(en)
        >>> l10n.get_plural(1, "oranges") % 1
        'There is 1 orange on the tree.'
        >>> l10n.get_plural(3, "oranges") % 3
        'There are 3 oranges on the tree.'
        >>> l10n.get_plural(3, "missing")
        ''

    Attributes:
        locales: Locale labels of the chain, primary first
    """

    __slots__ = ("_catalog", "_load_results", "_on_fallback", "_resolver")

    def __init__(
        self,
        primary: LocaleData,
        fallback: LocaleData | None = None,
        *,
        fallbacks: Iterable[LocaleData] = (),
        catalog: RuleCatalog | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize localization.

        Args:
            primary: Target language data set, consulted first
            fallback: Default language data set consulted when the primary
                lacks a key (optional)
            fallbacks: Further data sets consulted after ``fallback``
            catalog: Plural rule catalog (default: built-in rules only)
            on_fallback: Optional callback invoked when a lookup is answered
                by a data set other than the primary. Receives a FallbackInfo.

        Raises:
            TypeError: If a source is not a LocaleData or catalog is not
                a RuleCatalog
        """
        if catalog is not None and not isinstance(catalog, RuleCatalog):
            msg = f"Expected RuleCatalog, got {type(catalog).__name__}"
            raise TypeError(msg)
        self._resolver = FallbackResolver(primary, fallback, fallbacks=fallbacks)
        self._catalog: RuleCatalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._on_fallback = on_fallback
        self._load_results: tuple[DataLoadResult, ...] = ()

    @classmethod
    def from_loader(
        cls,
        locales: Iterable[LocaleCode],
        loader: DataLoader,
        *,
        catalog: RuleCatalog | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> Localization:
        """Build a localization by loading each locale through a DataLoader.

        Locales are loaded eagerly in chain order. Missing data and loader
        failures are recorded in the load summary instead of raised; such
        a locale contributes an empty data set so the chain keeps its shape.
        Malformed data (DataSetError) is recorded the same way.

        Args:
            locales: Locale codes in fallback order (e.g., ['ru', 'en'])
            loader: Source of raw data per locale
            catalog: Plural rule catalog (default: built-in rules only)
            on_fallback: Optional fallback callback

        Returns:
            Localization over the loaded data sets

        Raises:
            ValueError: If locales is empty
        """
        # dict.fromkeys() removes duplicates while maintaining insertion order
        locale_chain = tuple(dict.fromkeys(locales))
        if not locale_chain:
            msg = "At least one locale is required"
            raise ValueError(msg)

        data_sets: list[LocaleData] = []
        results: list[DataLoadResult] = []
        for locale in locale_chain:
            data_set, result = _load_locale(locale, loader)
            data_sets.append(data_set)
            results.append(result)

        instance = cls(
            data_sets[0],
            fallbacks=data_sets[1:],
            catalog=catalog,
            on_fallback=on_fallback,
        )
        instance._load_results = tuple(results)

        summary = instance.get_load_summary()
        logger.info(
            "Loaded %d/%d locales (not found: %d, errors: %d)",
            summary.successful,
            summary.total_attempted,
            summary.not_found,
            summary.errors,
        )
        return instance

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(Localization(LocaleData(locale="ru"), LocaleData(locale="en")))
            "Localization(locales=('ru', 'en'))"
        """
        return f"Localization(locales={self.locales!r})"

    @property
    def locales(self) -> tuple[LocaleCode | None, ...]:
        """Get locale labels in precedence order."""
        return tuple(source.locale for source in self._resolver.sources)

    @property
    def catalog(self) -> RuleCatalog:
        """Get the plural rule catalog (read-only)."""
        return self._catalog

    @property
    def resolver(self) -> FallbackResolver:
        """Get the underlying fallback resolver (read-only)."""
        return self._resolver

    def get_load_summary(self) -> LoadSummary:
        """Get summary of load attempts made by from_loader().

        Localizations built directly from data sets report an empty summary.
        """
        return LoadSummary(results=self._load_results)

    def has_key(self, key: MessageKey) -> bool:
        """Check if any data set in the chain holds the key."""
        return self._resolver.has_key(key)

    def get_string(self, key: MessageKey) -> str:
        """Get the text of a scalar entry.

        Args:
            key: Data set key

        Returns:
            Text from the first data set holding the key as a scalar, or an
            empty string. Keys holding plural forms count as absent.
        """
        found = self._resolver.find_scalar(key)
        if found is None:
            logger.debug("Scalar key '%s' not found in any source", key)
            return FALLBACK_EMPTY
        source, text = found
        self._report_fallback(source, key)
        return text

    def get_plural(self, quantity: Quantity, key: MessageKey) -> str:
        """Get the plural form of an entry matching a quantity.

        The data set holding the key as plural forms is chosen first. Its
        ``IntegerRule`` (or ``FractionRule``, for quantities with a non-zero
        fractional part) selects the form. The returned template is not
        substituted; inserting the quantity is the caller's job.

        Args:
            quantity: Count driving form selection
            key: Data set key

        Returns:
            The selected form, or an empty string if no data set holds the
            key as plural forms

        Example:
            >>> ru = LocaleData({
            ...     "IntegerRule": "int3Type4",
            ...     "apples": ["яблоко", "яблока", "яблок"],
            ... })
            >>> [Localization(ru).get_plural(n, "apples") for n in (1, 2, 5)]
            ['яблоко', 'яблока', 'яблок']
        """
        source = self._resolver.resolve_source(key)
        if source is None:
            return FALLBACK_EMPTY

        forms = source.get_plural(key)
        if forms is None:  # pragma: no cover - resolve_source guarantees plural
            return FALLBACK_EMPTY

        fractional = is_fractional(quantity)
        rule_id = source.rule_for(fractional=fractional)
        if rule_id is not None and rule_id not in self._catalog:
            logger.warning(
                "Unrecognized plural rule '%s' in locale %s, using first form of '%s'",
                rule_id,
                source.locale,
                key,
            )

        ordinal = self._catalog.resolve(rule_id, quantity)
        if ordinal >= len(forms):
            logger.debug(
                "Ordinal %d for '%s' exceeds %d forms, using last form",
                ordinal,
                key,
                len(forms),
            )

        self._report_fallback(source, key)
        return forms.select(ordinal)

    def _report_fallback(self, source: LocaleData, key: MessageKey) -> None:
        """Log and report a lookup answered by a non-primary data set."""
        primary = self._resolver.primary
        if source is primary:
            return

        index = self._resolver.sources.index(source)
        logger.debug(
            "Key '%s' resolved from fallback %s (requested %s)",
            key,
            source.locale,
            primary.locale,
        )
        if self._on_fallback is not None:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=primary.locale,
                    resolved_locale=source.locale,
                    key=key,
                    fallback_index=index,
                )
            )


def _describe(locale: LocaleCode, loader: DataLoader) -> str:
    """Describe a locale's source, falling back to the locale code."""
    describe = getattr(loader, "describe", None)
    if describe is None:
        return locale
    return describe(locale)


def _load_locale(locale: LocaleCode, loader: DataLoader) -> tuple[LocaleData, DataLoadResult]:
    """Load one locale and record the outcome.

    Returns:
        (data set, result). The data set is empty unless loading succeeded.
    """
    source = _describe(locale, loader)
    try:
        raw = loader.load(locale)
        data_set = LocaleData(raw, locale=locale)
    except (KeyError, FileNotFoundError):
        logger.debug("No data for locale %s at %s", locale, source)
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_NOT_FOUND,
            message=f"No data for locale '{locale}' at {source}",
            locale=locale,
            severity="warning",
        )
        return (
            LocaleData(locale=locale),
            DataLoadResult(
                locale=locale,
                status=LoadStatus.NOT_FOUND,
                source=source,
                diagnostic=diagnostic,
            ),
        )
    except (OSError, ValueError, TypeError) as e:
        # DataSetError is a ValueError
        logger.warning("Failed to load locale %s from %s: %s", locale, source, e)
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_FAILED,
            message=f"Failed to load locale '{locale}' from {source}: {e}",
            key=getattr(e, "key", None),
            locale=locale,
        )
        return (
            LocaleData(locale=locale),
            DataLoadResult(
                locale=locale,
                status=LoadStatus.ERROR,
                error=e,
                source=source,
                diagnostic=diagnostic,
            ),
        )

    return (
        data_set,
        DataLoadResult(
            locale=locale,
            status=LoadStatus.SUCCESS,
            source=source,
            entry_count=len(data_set),
        ),
    )
