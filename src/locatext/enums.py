"""Enumerations for LocaText type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a PluralRule member can be
stored in a data set or compared against a raw identifier directly.

Python 3.13+.
"""

from enum import StrEnum


class PluralRule(StrEnum):
    """Built-in plural rule identifiers.

    Identifiers follow the pattern ``int<N>Type<K>`` or ``fraction<N>Type<K>``,
    where N is the number of categories the rule distinguishes. Forms lists
    are ordered by ascending count starting at "exactly one", with any
    zero-specific form last.

    StrEnum provides automatic string conversion: str(PluralRule.INT1) == "int1"
    """

    INT1 = "int1"
    """Single invariant form."""

    INT2_TYPE1 = "int2Type1"
    """Singular when n ends in 1 but not 11 (Icelandic, Macedonian)."""

    INT2_TYPE3 = "int2Type3"
    """Singular for 0 and 1."""

    INT2_TYPE4 = "int2Type4"
    """Singular for exactly 1 (English, German)."""

    INT3_TYPE1 = "int3Type1"
    """Ends in 1 / other / zero (Latvian)."""

    INT3_TYPE2 = "int3Type2"
    """One / zero and 1-19 mod 100 / other (Romanian)."""

    INT3_TYPE3 = "int3Type3"
    """Ends in 1 / ends in 2-9 / other, excluding teens (Lithuanian)."""

    INT3_TYPE4 = "int3Type4"
    """Ends in 1 / ends in 2-4 / other, excluding teens (Russian, Ukrainian)."""

    INT3_TYPE5 = "int3Type5"
    """One / 2-4 / other (Czech, Slovak)."""

    INT3_TYPE6 = "int3Type6"
    """One / ends in 2-4 excluding teens / other (Polish)."""

    INT4_TYPE1 = "int4Type1"
    """1, 2, 3-4 and other, all mod 100 (Slovenian)."""

    INT6_TYPE1 = "int6Type1"
    """One / two / few / many / other / zero (Arabic)."""

    FRACTION1 = "fraction1"
    """Single invariant form for fractional quantities."""

    FRACTION2_TYPE1 = "fraction2Type1"
    """Singular while the whole part is below 2 (French)."""


class LoadStatus(StrEnum):
    """Outcome of loading one locale through a DataLoader."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "LoadStatus",
    "PluralRule",
]
