"""LocaText runtime package.

Provides the plural rule catalog, immutable data sets and the fallback
resolver that the Localization orchestrator is built on.

Python 3.13+.
"""

from .catalog import BUILTIN_RULES, DEFAULT_CATALOG, RuleCatalog, RuleDefinition, is_fractional
from .locale_data import Entry, LocaleData, PluralForms, Scalar
from .plural_rules import cldr_categories, select_plural_category
from .resolver import FallbackResolver

__all__ = [
    "BUILTIN_RULES",
    "DEFAULT_CATALOG",
    "Entry",
    "FallbackResolver",
    "LocaleData",
    "PluralForms",
    "RuleCatalog",
    "RuleDefinition",
    "Scalar",
    "cldr_categories",
    "is_fractional",
    "select_plural_category",
]
