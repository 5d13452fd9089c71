"""Hypothesis strategies for LocaText property-based testing.

Usage:
    from tests.strategies import locale_data_pairs, quantities
"""

from .locale_data import (
    BUILTIN_RULE_IDS,
    forms_lists,
    keys,
    locale_data_pairs,
    quantities,
    raw_locale_data,
    rule_ids,
    texts,
)

__all__ = [
    "BUILTIN_RULE_IDS",
    "forms_lists",
    "keys",
    "locale_data_pairs",
    "quantities",
    "raw_locale_data",
    "rule_ids",
    "texts",
]
