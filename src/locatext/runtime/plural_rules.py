"""Plural category formulas.

Two families of rules live here:

- Built-in formulas, one per PluralRule identifier. Each takes the
  signed finite quantity (never NaN) and returns the zero-based index of
  the form to use. Rules built on trailing digits read the digits of the
  magnitude. The catalog filters out non-finite quantities; the formulas
  do not re-check them.
- The CLDR family, backed by Babel's CLDR plural data. The CLDR category
  selected for a locale is turned into an index using that locale's
  ordered category list, which follows the same convention as the
  built-ins: ascending count starting at "one", then "other", with any
  "zero" form last.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
import math
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from locatext.constants import DEFAULT_ORDINAL, MAX_LOCALE_CACHE_SIZE
from locatext.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from locatext.runtime.value_types import Quantity

__all__ = [
    "cldr_categories",
    "fraction1",
    "fraction2_type1",
    "int1",
    "int2_type1",
    "int2_type3",
    "int2_type4",
    "int3_type1",
    "int3_type2",
    "int3_type3",
    "int3_type4",
    "int3_type5",
    "int3_type6",
    "int4_type1",
    "int6_type1",
    "select_cldr_ordinal",
    "select_plural_category",
]

logger = logging.getLogger(__name__)

# Category order shared by every forms list; "zero" is appended last.
_CLDR_CATEGORY_ORDER: tuple[str, ...] = ("one", "two", "few", "many")


# ============================================================================
# BUILT-IN FORMULAS
# ============================================================================


def _digits(i: int) -> tuple[int, int]:
    """Last digit and last two digits of an integer's magnitude."""
    m = abs(i)
    return m % 10, m % 100


def int1(n: Quantity) -> int:  # noqa: ARG001 - uniform rule signature
    """Single invariant form."""
    return 0


def int2_type1(n: Quantity) -> int:
    """Singular when the last digit is 1, except 11."""
    r10, r100 = _digits(int(n))
    return 0 if r10 == 1 and r100 != 11 else 1


def int2_type3(n: Quantity) -> int:
    """Zero and one are both singular."""
    return 0 if int(n) in (0, 1) else 1


def int2_type4(n: Quantity) -> int:
    """Singular for exactly one."""
    return 0 if int(n) == 1 else 1


def int3_type1(n: Quantity) -> int:
    """Latvian-style: ends in 1 (not 11), other, zero last."""
    i = int(n)
    r10, r100 = _digits(i)
    if r10 == 1 and r100 != 11:
        return 0
    if i == 0:
        return 2
    return 1


def int3_type2(n: Quantity) -> int:
    """Romanian-style: one, zero or 1-19 mod 100, other."""
    i = int(n)
    if i == 1:
        return 0
    if i == 0 or 1 <= _digits(i)[1] <= 19:
        return 1
    return 2


def int3_type3(n: Quantity) -> int:
    """Lithuanian-style: ends in 1, ends in 2-9, other; teens are other."""
    r10, r100 = _digits(int(n))
    if 11 <= r100 <= 19:
        return 2
    if r10 == 1:
        return 0
    if r10 >= 2:
        return 1
    return 2


def int3_type4(n: Quantity) -> int:
    """Slavic three-category rule.

    Ordinal 0 for numbers ending in 1 except 11, ordinal 1 for numbers
    ending in 2-4 except 12-14, ordinal 2 for everything else (including 0).
    Negative counts use the digits of their magnitude.

    Examples:
        >>> [int3_type4(n) for n in (0, 1, 2, 5, 11, 21, 22, 112)]
        [2, 0, 1, 2, 2, 0, 1, 2]
    """
    r10, r100 = _digits(int(n))
    if r10 == 1 and r100 != 11:
        return 0
    if r10 in (2, 3, 4) and r100 not in (12, 13, 14):
        return 1
    return 2


def int3_type5(n: Quantity) -> int:
    """Czech/Slovak-style: one, two to four, other."""
    i = int(n)
    if i == 1:
        return 0
    if 2 <= i <= 4:
        return 1
    return 2


def int3_type6(n: Quantity) -> int:
    """Polish-style: one, ends in 2-4 (not 12-14), other."""
    i = int(n)
    if i == 1:
        return 0
    r10, r100 = _digits(i)
    if r10 in (2, 3, 4) and r100 not in (12, 13, 14):
        return 1
    return 2


def int4_type1(n: Quantity) -> int:
    """Slovenian-style: 1, 2, 3-4 and other, all modulo 100."""
    r100 = _digits(int(n))[1]
    if r100 == 1:
        return 0
    if r100 == 2:
        return 1
    if r100 in (3, 4):
        return 2
    return 3


def int6_type1(n: Quantity) -> int:
    """Arabic-style six categories with the zero form last.

    Order: one, two, few (3-10 mod 100), many (11-99 mod 100), other, zero.
    """
    i = int(n)
    if i == 0:
        return 5
    if i == 1:
        return 0
    if i == 2:
        return 1
    r100 = _digits(i)[1]
    if 3 <= r100 <= 10:
        return 2
    if 11 <= r100 <= 99:
        return 3
    return 4


def fraction1(n: Quantity) -> int:  # noqa: ARG001 - uniform rule signature
    """Single invariant form for fractional quantities."""
    return 0


def fraction2_type1(n: Quantity) -> int:
    """French-style: singular while the whole part is below two.

    The whole part is the floor, so every negative quantity is singular.

    Examples:
        >>> [fraction2_type1(n) for n in (0.1, 1.5, 2.1, 3.7, -2.5)]
        [0, 0, 1, 1, 0]
    """
    return 0 if math.floor(n) < 2 else 1


# ============================================================================
# CLDR FAMILY
# ============================================================================


def select_plural_category(n: Quantity, locale: str) -> str | None:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")

    Returns:
        Plural category ("zero", "one", "two", "few", "many", "other"),
        or None when Babel does not know the locale.

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(1, "xx_invalid") is None
        True
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown CLDR locale '%s': %s", locale, e)
        return None

    # Babel always provides plural_form for valid locales
    return locale_obj.plural_form(n)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def cldr_categories(locale: str) -> tuple[str, ...] | None:
    """Get the ordered category list of a locale's CLDR plural rule.

    Categories defined by the locale appear in the order one, two, few,
    many, then "other" (always present), then "zero" if defined.

    Args:
        locale: Locale code (BCP-47 or POSIX)

    Returns:
        Ordered category names, or None for unknown locales

    Examples:
        >>> cldr_categories("en")
        ('one', 'other')
        >>> cldr_categories("lv")
        ('one', 'other', 'zero')
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return None

    tags = locale_obj.plural_form.tags
    ordered = [tag for tag in _CLDR_CATEGORY_ORDER if tag in tags]
    ordered.append("other")
    if "zero" in tags:
        ordered.append("zero")
    return tuple(ordered)


def select_cldr_ordinal(n: Quantity, locale: str) -> int:
    """Map a quantity to a forms-list index using a locale's CLDR rule.

    Args:
        n: Finite quantity (CLDR operands use its absolute value)
        locale: Locale code (BCP-47 or POSIX)

    Returns:
        Index into a forms list ordered per cldr_categories(), or
        DEFAULT_ORDINAL when the locale is unknown. Unknown locales are
        reported by the caller, so nothing is logged here.
    """
    categories = cldr_categories(locale)
    if categories is None:
        return DEFAULT_ORDINAL

    category = select_plural_category(n, locale)
    if category is None:  # pragma: no cover - locale known to Babel above
        return DEFAULT_ORDINAL
    return categories.index(category)
