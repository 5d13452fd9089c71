"""LocaText - localized text lookup with plural form selection.

Resolves keys to localized strings across a primary language data set
and its fallbacks, and selects the grammatically correct plural form for
a quantity (integer or fractional) using named plural rules.

Public API:
    Localization - Scalar and plural lookups over a fallback chain
    LocaleData - Immutable data set for one language
    RuleCatalog - Immutable registry of plural rules
    FallbackResolver - Key lookup precedence across data sets
    validate_locale_data - Non-fatal checks of a data set against a catalog

Exceptions:
    LocalizationError - Base exception class
    DataSetError - Malformed data set input (construction only)

Submodules:
    locatext.runtime - Catalog, plural formulas, data sets, resolver
    locatext.localization - Localization orchestrator and data loading
    locatext.diagnostics - Diagnostic codes, errors, validation results
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import DataSetError, LocalizationError, ValidationResult
from .enums import PluralRule
from .localization import (
    DataLoader,
    FallbackInfo,
    Localization,
    LoadSummary,
    MappingDataLoader,
)
from .runtime import (
    DEFAULT_CATALOG,
    Entry,
    FallbackResolver,
    LocaleData,
    PluralForms,
    RuleCatalog,
    RuleDefinition,
    Scalar,
    is_fractional,
)
from .validation import validate_locale_data

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("locatext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CATALOG",
    "DataLoader",
    "DataSetError",
    "Entry",
    "FallbackInfo",
    "FallbackResolver",
    "LoadSummary",
    "LocaleData",
    "Localization",
    "LocalizationError",
    "MappingDataLoader",
    "PluralForms",
    "PluralRule",
    "RuleCatalog",
    "RuleDefinition",
    "Scalar",
    "ValidationResult",
    "__version__",
    "is_fractional",
    "validate_locale_data",
]
