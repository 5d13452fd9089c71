"""Shared constants for LocaText.

This module provides centralized constants used across the runtime,
localization and validation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Reserved keys: Data set keys holding plural rule identifiers
- Rule identifiers: Prefixes for dynamically resolved rule families
- Cache limits: Memory bounds for caching subsystems
- Fallback strings: Values returned when a lookup cannot be satisfied

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reserved keys
    "INTEGER_RULE_KEY",
    "FRACTION_RULE_KEY",
    "RESERVED_KEYS",
    # Rule identifiers
    "CLDR_RULE_PREFIX",
    "DEFAULT_ORDINAL",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallback strings
    "FALLBACK_EMPTY",
]

# ============================================================================
# RESERVED KEYS
# ============================================================================

# Rule identifier applied to quantities without a fractional component.
INTEGER_RULE_KEY: str = "IntegerRule"

# Rule identifier applied to quantities with a non-zero fractional component.
FRACTION_RULE_KEY: str = "FractionRule"

RESERVED_KEYS: frozenset[str] = frozenset({INTEGER_RULE_KEY, FRACTION_RULE_KEY})

# ============================================================================
# RULE IDENTIFIERS
# ============================================================================

# Rule identifiers starting with this prefix are resolved through Babel's
# CLDR plural data, e.g. "cldr:ru" or "cldr:pt_BR".
CLDR_RULE_PREFIX: str = "cldr:"

# Ordinal produced for unrecognized rule identifiers and non-finite quantities.
# Collapses to the first (or only) form of a forms list.
DEFAULT_ORDINAL: int = 0

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances for the CLDR rule family.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned for any key that no source can satisfy. Localization gaps
# degrade to empty output rather than to an exception.
FALLBACK_EMPTY: str = ""
