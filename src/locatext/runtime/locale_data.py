"""Immutable localization data sets.

A LocaleData holds one language's entries. Each entry is either a Scalar
(a single template string) or PluralForms (an ordered, non-empty sequence
of templates, one per plural category). Two reserved keys, IntegerRule
and FractionRule, name the plural rules used for integer and fractional
quantities.

Data sets are validated and frozen at construction. Construction is the
only operation that can raise; afterwards a data set is read-only and
safe to share across threads without locking.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from locatext.constants import FRACTION_RULE_KEY, INTEGER_RULE_KEY, RESERVED_KEYS
from locatext.diagnostics import DataSetError, Diagnostic, DiagnosticCode
from locatext.runtime.value_types import (
    LocaleCode,
    MessageKey,
    RawEntry,
    RawLocaleData,
    RuleId,
)

__all__ = [
    "Entry",
    "LocaleData",
    "PluralForms",
    "Scalar",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Scalar:
    """Single template string.

    Attributes:
        text: Template text (may contain caller-side placeholders)
    """

    text: str


@dataclass(frozen=True, slots=True)
class PluralForms:
    """Ordered plural forms for one key.

    Forms are ordered by ascending count starting at "exactly one", with
    any zero-specific form last. Never empty.

    Attributes:
        forms: Template per plural category
    """

    forms: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate the non-empty invariant.

        Raises:
            ValueError: If forms is empty
        """
        if not self.forms:
            msg = "PluralForms requires at least one form"
            raise ValueError(msg)

    def __len__(self) -> int:
        """Return number of forms."""
        return len(self.forms)

    def select(self, ordinal: int) -> str:
        """Get the form for an ordinal, clamped into range.

        Ordinals past the end select the last form, so a translation that
        supplies fewer forms than its rule distinguishes still yields text.

        Args:
            ordinal: Category ordinal computed by a plural rule

        Returns:
            Template string
        """
        return self.forms[min(max(ordinal, 0), len(self.forms) - 1)]


type Entry = Scalar | PluralForms
"""Tagged union of data set entry kinds."""


def _convert_entry(key: str, value: RawEntry, locale: LocaleCode | None) -> Entry:
    """Convert one raw value into an Entry.

    Raises:
        DataSetError: If the value is not a string or a non-empty
            sequence of strings
    """
    match value:
        case str():
            return Scalar(value)
        case bytes() | bytearray():
            pass
        case Sequence():
            forms = tuple(value)
            if not forms:
                raise DataSetError(
                    Diagnostic(
                        code=DiagnosticCode.EMPTY_PLURAL_FORMS,
                        message=f"Plural entry '{key}' has no forms",
                        hint="Supply at least one form, starting with the singular",
                        key=key,
                        locale=locale,
                    ),
                    key=key,
                )
            bad = next((f for f in forms if not isinstance(f, str)), None)
            if bad is None:
                return PluralForms(forms)
            raise DataSetError(
                Diagnostic(
                    code=DiagnosticCode.INVALID_ENTRY_TYPE,
                    message=(
                        f"Plural entry '{key}' contains a non-string form "
                        f"of type {type(bad).__name__}"
                    ),
                    key=key,
                    locale=locale,
                ),
                key=key,
            )

    raise DataSetError(
        Diagnostic(
            code=DiagnosticCode.INVALID_ENTRY_TYPE,
            message=(
                f"Entry '{key}' must be a string or a sequence of strings, "
                f"got {type(value).__name__}"
            ),
            key=key,
            locale=locale,
        ),
        key=key,
    )


class LocaleData:
    """Immutable mapping of keys to entries for one language.

    Built from a mapping supplied by an external data reader, where each
    value is a string or a sequence of strings. The reserved keys
    ``IntegerRule`` and ``FractionRule`` must hold single strings.

    Example:
        >>> ru = LocaleData({
        ...     "IntegerRule": "int3Type4",
        ...     "apples": ["яблоко", "яблока", "яблок"],
        ...     "title": "Сад",
        ... }, locale="ru")
        >>> ru.get_scalar("title")
        'Сад'
        >>> ru.integer_rule
        'int3Type4'

    Attributes:
        locale: Optional locale label used for logging and fallback reports
    """

    __slots__ = ("_entries", "_locale")

    def __init__(
        self,
        data: RawLocaleData | None = None,
        *,
        locale: LocaleCode | None = None,
    ) -> None:
        """Build a data set.

        Args:
            data: Mapping of key to string or sequence of strings
            locale: Locale label (e.g. 'ru', 'en_US')

        Raises:
            DataSetError: If a key is not a string, a value is malformed,
                or a reserved rule key holds a sequence
            TypeError: If data is not a Mapping
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            msg = f"LocaleData expects a Mapping, got {type(data).__name__}"
            raise TypeError(msg)

        entries: dict[MessageKey, Entry] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise DataSetError(
                    Diagnostic(
                        code=DiagnosticCode.INVALID_KEY_TYPE,
                        message=f"Keys must be strings, got {type(key).__name__}",
                        locale=locale,
                    )
                )
            entry = _convert_entry(key, value, locale)
            if key in RESERVED_KEYS and not isinstance(entry, Scalar):
                raise DataSetError(
                    Diagnostic(
                        code=DiagnosticCode.INVALID_RULE_ENTRY,
                        message=f"Reserved key '{key}' must hold a single rule identifier",
                        hint="Use a string such as 'int2Type4'",
                        key=key,
                        locale=locale,
                    ),
                    key=key,
                )
            entries[key] = entry

        self._entries: Mapping[MessageKey, Entry] = MappingProxyType(entries)
        self._locale = locale

        logger.debug(
            "Built LocaleData for %s: %d entries (integer rule: %s, fraction rule: %s)",
            locale or "<unnamed>",
            len(entries),
            self.integer_rule,
            self.fraction_rule,
        )

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocaleData(locale={self._locale!r}, entries={len(self._entries)})"

    def __len__(self) -> int:
        """Return number of entries, reserved keys included."""
        return len(self._entries)

    def __iter__(self) -> Iterator[MessageKey]:
        """Iterate over keys, reserved keys included."""
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        """Check whether a key is present with any entry kind."""
        return key in self._entries

    @property
    def locale(self) -> LocaleCode | None:
        """Get locale label."""
        return self._locale

    @property
    def entries(self) -> Mapping[MessageKey, Entry]:
        """Get read-only view of all entries."""
        return self._entries

    def get(self, key: MessageKey) -> Entry | None:
        """Get the entry for a key, or None."""
        return self._entries.get(key)

    def get_scalar(self, key: MessageKey) -> str | None:
        """Get a key's text if it holds a Scalar, else None."""
        match self._entries.get(key):
            case Scalar(text=text):
                return text
            case _:
                return None

    def get_plural(self, key: MessageKey) -> PluralForms | None:
        """Get a key's forms if it holds PluralForms, else None."""
        match self._entries.get(key):
            case PluralForms() as forms:
                return forms
            case _:
                return None

    @property
    def integer_rule(self) -> RuleId | None:
        """Rule identifier for integer quantities, or None if undeclared."""
        return self.get_scalar(INTEGER_RULE_KEY)

    @property
    def fraction_rule(self) -> RuleId | None:
        """Rule identifier for fractional quantities, or None if undeclared."""
        return self.get_scalar(FRACTION_RULE_KEY)

    def rule_for(self, *, fractional: bool) -> RuleId | None:
        """Get the rule identifier governing a quantity classification."""
        return self.fraction_rule if fractional else self.integer_rule

    def plural_keys(self) -> tuple[MessageKey, ...]:
        """Get all keys holding PluralForms, in insertion order."""
        return tuple(k for k, e in self._entries.items() if isinstance(e, PluralForms))
