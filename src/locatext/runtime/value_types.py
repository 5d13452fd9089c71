"""Core value types for the LocaText runtime.

Defines the semantic type aliases used by the catalog, data sets, the
fallback resolver and the localization orchestrator. Kept in a leaf
module so every package can import them without circular dependencies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from fractions import Fraction

__all__ = [
    "LocaleCode",
    "MessageKey",
    "Quantity",
    "RawEntry",
    "RawLocaleData",
    "RuleFunction",
    "RuleId",
]

type Quantity = int | float | Decimal | Fraction
"""Count driving plural form selection (integer or fractional)."""

type RuleId = str
"""Opaque plural rule identifier (e.g., 'int3Type4', 'fraction2Type1', 'cldr:ru')."""

type MessageKey = str
"""Data set key (e.g., 'apples', 'menu.title')."""

type LocaleCode = str
"""Locale label attached to a data set (e.g., 'ru', 'en_US')."""

type RuleFunction = Callable[[Quantity], int]
"""Pure function mapping a signed finite quantity to an ordinal."""

type RawEntry = str | Sequence[str]
"""Entry value as produced by an external data reader."""

type RawLocaleData = Mapping[str, RawEntry]
"""Whole data set as produced by an external data reader."""
