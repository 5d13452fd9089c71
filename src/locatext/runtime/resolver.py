"""Fallback resolution across an ordered chain of data sets.

FallbackResolver implements the one precedence rule shared by scalar and
plural lookups: sources are consulted in order, primary first, and a
later source is consulted only when every earlier one lacks the key or
holds it with the wrong entry kind.

Plural lookups resolve to a whole source rather than to a forms list.
The chosen data set supplies both the forms and the rule identifiers,
so a primary-language forms list is never paired with a fallback
language's rule.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from locatext.constants import FALLBACK_EMPTY
from locatext.runtime.locale_data import LocaleData, PluralForms, Scalar
from locatext.runtime.value_types import MessageKey

__all__ = ["FallbackResolver"]

logger = logging.getLogger(__name__)


class FallbackResolver:
    """Key lookup over a primary data set and ordered fallbacks.

    Example:
        >>> en = LocaleData({"title": "Garden", "ok": "OK"}, locale="en")
        >>> de = LocaleData({"title": "Garten"}, locale="de")
        >>> resolver = FallbackResolver(de, en)
        >>> resolver.resolve_scalar("title")
        'Garten'
        >>> resolver.resolve_scalar("ok")
        'OK'
        >>> resolver.resolve_scalar("missing")
        ''
    """

    __slots__ = ("_sources",)

    def __init__(
        self,
        primary: LocaleData,
        fallback: LocaleData | None = None,
        *,
        fallbacks: Iterable[LocaleData] = (),
    ) -> None:
        """Initialize resolver.

        Args:
            primary: Data set consulted first
            fallback: Secondary data set consulted next (optional)
            fallbacks: Further data sets consulted after ``fallback``, in order

        Raises:
            TypeError: If any source is not a LocaleData
        """
        sources = [primary]
        if fallback is not None:
            sources.append(fallback)
        sources.extend(fallbacks)
        for source in sources:
            if not isinstance(source, LocaleData):
                msg = f"Expected LocaleData, got {type(source).__name__}"
                raise TypeError(msg)
        self._sources: tuple[LocaleData, ...] = tuple(sources)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        labels = tuple(s.locale for s in self._sources)
        return f"FallbackResolver(sources={labels!r})"

    @property
    def sources(self) -> tuple[LocaleData, ...]:
        """Get data sets in precedence order."""
        return self._sources

    @property
    def primary(self) -> LocaleData:
        """Get the primary data set."""
        return self._sources[0]

    def find_scalar(self, key: MessageKey) -> tuple[LocaleData, str] | None:
        """Find the first source holding a key as a Scalar.

        Args:
            key: Data set key

        Returns:
            (source, text) pair, or None if no source holds a Scalar
        """
        for source in self._sources:
            match source.get(key):
                case Scalar(text=text):
                    return (source, text)
                case _:
                    continue
        return None

    def resolve_scalar(self, key: MessageKey) -> str:
        """Resolve a key to its text.

        Args:
            key: Data set key

        Returns:
            Text from the first source holding the key as a Scalar,
            or an empty string
        """
        found = self.find_scalar(key)
        if found is None:
            logger.debug("Scalar key '%s' not found in any source", key)
            return FALLBACK_EMPTY
        return found[1]

    def resolve_source(self, key: MessageKey) -> LocaleData | None:
        """Choose the data set that answers a plural lookup.

        Args:
            key: Data set key

        Returns:
            First source holding the key as PluralForms, or None
        """
        for source in self._sources:
            if isinstance(source.get(key), PluralForms):
                return source
        logger.debug("Plural key '%s' not found in any source", key)
        return None

    def has_key(self, key: MessageKey) -> bool:
        """Check if any source holds the key, with either entry kind."""
        return any(key in source for source in self._sources)
