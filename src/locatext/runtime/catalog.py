"""Plural rule catalog.

RuleCatalog maps rule identifiers to category formulas. A catalog is an
immutable value: it is built once, handed to a Localization at
construction, and shared freely between threads. Adding rules produces a
new catalog (with_rules) and never changes an existing one.

Resolution never fails. Unknown identifiers, a missing identifier and
non-finite quantities all resolve to DEFAULT_ORDINAL, which collapses to
the first form of a forms list.

Python 3.13+.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from locatext.constants import CLDR_RULE_PREFIX, DEFAULT_ORDINAL
from locatext.enums import PluralRule
from locatext.runtime import plural_rules
from locatext.runtime.value_types import Quantity, RuleFunction, RuleId

__all__ = [
    "BUILTIN_RULES",
    "DEFAULT_CATALOG",
    "RuleCatalog",
    "RuleDefinition",
    "is_fractional",
]


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """A named plural formula.

    Attributes:
        identifier: Rule identifier as stored in data sets
        category_count: Number of distinct ordinals the formula can produce
        function: Formula taking a signed finite quantity
    """

    identifier: RuleId
    category_count: int
    function: RuleFunction

    def __post_init__(self) -> None:
        """Validate definition invariants.

        Raises:
            ValueError: If identifier is empty or category_count < 1
            TypeError: If function is not callable
        """
        if not self.identifier:
            msg = "Rule identifier cannot be empty"
            raise ValueError(msg)
        if self.category_count < 1:
            msg = f"Rule '{self.identifier}' must have at least one category"
            raise ValueError(msg)
        if not callable(self.function):
            msg = f"Rule '{self.identifier}' function is not callable"
            raise TypeError(msg)


def _builtin(rule: PluralRule) -> RuleDefinition:
    """Build the definition for a built-in rule identifier."""
    match rule:
        case PluralRule.INT1:
            return RuleDefinition(rule, 1, plural_rules.int1)
        case PluralRule.INT2_TYPE1:
            return RuleDefinition(rule, 2, plural_rules.int2_type1)
        case PluralRule.INT2_TYPE3:
            return RuleDefinition(rule, 2, plural_rules.int2_type3)
        case PluralRule.INT2_TYPE4:
            return RuleDefinition(rule, 2, plural_rules.int2_type4)
        case PluralRule.INT3_TYPE1:
            return RuleDefinition(rule, 3, plural_rules.int3_type1)
        case PluralRule.INT3_TYPE2:
            return RuleDefinition(rule, 3, plural_rules.int3_type2)
        case PluralRule.INT3_TYPE3:
            return RuleDefinition(rule, 3, plural_rules.int3_type3)
        case PluralRule.INT3_TYPE4:
            return RuleDefinition(rule, 3, plural_rules.int3_type4)
        case PluralRule.INT3_TYPE5:
            return RuleDefinition(rule, 3, plural_rules.int3_type5)
        case PluralRule.INT3_TYPE6:
            return RuleDefinition(rule, 3, plural_rules.int3_type6)
        case PluralRule.INT4_TYPE1:
            return RuleDefinition(rule, 4, plural_rules.int4_type1)
        case PluralRule.INT6_TYPE1:
            return RuleDefinition(rule, 6, plural_rules.int6_type1)
        case PluralRule.FRACTION1:
            return RuleDefinition(rule, 1, plural_rules.fraction1)
        case PluralRule.FRACTION2_TYPE1:
            return RuleDefinition(rule, 2, plural_rules.fraction2_type1)


BUILTIN_RULES: tuple[RuleDefinition, ...] = tuple(_builtin(rule) for rule in PluralRule)
"""Definitions for every PluralRule member, in declaration order."""


def _is_finite(quantity: Quantity) -> bool:
    match quantity:
        case Decimal():
            return quantity.is_finite()
        case float():
            return math.isfinite(quantity)
        case _:
            return True


def is_fractional(quantity: Quantity) -> bool:
    """Check whether a quantity has a non-zero fractional component.

    Classification depends on the value only, never on its storage type:
    2.0 and Decimal("2.00") are integers, 2.5 is fractional. Non-finite
    values have no fractional component and classify as integers. Other
    real types, such as fractions.Fraction, are compared against their
    floor.

    Args:
        quantity: Count to classify

    Returns:
        True if the quantity is finite and not a whole number

    Examples:
        >>> is_fractional(2)
        False
        >>> is_fractional(2.0)
        False
        >>> is_fractional(Decimal("1.50"))
        True
        >>> is_fractional(Fraction(5, 2))
        True
    """
    match quantity:
        case bool() | int():
            return False
        case Decimal():
            return quantity.is_finite() and quantity != quantity.to_integral_value()
        case float():
            return math.isfinite(quantity) and not quantity.is_integer()
        case numbers.Real():
            return quantity != math.floor(quantity)
        case _:
            return False


class RuleCatalog:
    """Immutable registry of plural rules.

    Every PluralRule member is always present. Extra rules passed at
    construction extend (or replace) the built-ins for this catalog only.
    Identifiers starting with ``cldr:`` resolve through Babel's CLDR data
    for the named locale and do not need registering.

    Example:
        >>> catalog = RuleCatalog()
        >>> catalog.resolve("int3Type4", 22)
        1
        >>> catalog.resolve("no-such-rule", 22)
        0
        >>> catalog.resolve("cldr:en", 1)
        0
    """

    __slots__ = ("_rules",)

    def __init__(self, extra_rules: Iterable[RuleDefinition] = ()) -> None:
        """Initialize catalog.

        Args:
            extra_rules: Additional rule definitions. A definition whose
                identifier matches a built-in replaces it in this catalog.

        Raises:
            TypeError: If an extra rule is not a RuleDefinition
            ValueError: If an extra rule uses the reserved ``cldr:`` prefix
        """
        rules: dict[RuleId, RuleDefinition] = {str(d.identifier): d for d in BUILTIN_RULES}
        for definition in extra_rules:
            if not isinstance(definition, RuleDefinition):
                msg = f"Expected RuleDefinition, got {type(definition).__name__}"
                raise TypeError(msg)
            if definition.identifier.startswith(CLDR_RULE_PREFIX):
                msg = f"Rule identifier '{definition.identifier}' uses reserved prefix"
                raise ValueError(msg)
            rules[str(definition.identifier)] = definition
        self._rules: Mapping[RuleId, RuleDefinition] = MappingProxyType(rules)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"RuleCatalog(rules={len(self._rules)})"

    def __contains__(self, rule_id: object) -> bool:
        """Check whether an identifier resolves to a known rule.

        CLDR identifiers count as known only when Babel knows the locale.
        """
        if not isinstance(rule_id, str):
            return False
        if rule_id in self._rules:
            return True
        locale = _cldr_locale(rule_id)
        return locale is not None and plural_rules.cldr_categories(locale) is not None

    def __iter__(self) -> Iterator[RuleId]:
        """Iterate over registered identifiers."""
        return iter(self._rules)

    def __len__(self) -> int:
        """Return number of registered rules."""
        return len(self._rules)

    @property
    def identifiers(self) -> tuple[RuleId, ...]:
        """Get registered identifiers (CLDR identifiers are not listed)."""
        return tuple(self._rules)

    def get(self, rule_id: RuleId) -> RuleDefinition | None:
        """Get a registered rule definition, or None."""
        return self._rules.get(rule_id)

    def with_rules(self, *definitions: RuleDefinition) -> RuleCatalog:
        """Return a new catalog with additional rules.

        The receiver is not modified.

        Args:
            *definitions: Rule definitions to add or replace

        Returns:
            New RuleCatalog containing this catalog's rules plus definitions
        """
        # Custom rules and overridden built-ins carry over; later definitions win
        carried = [d for d in self._rules.values() if d not in BUILTIN_RULES]
        return RuleCatalog([*carried, *definitions])

    def category_count(self, rule_id: RuleId | None) -> int | None:
        """Get the number of categories a rule distinguishes.

        Args:
            rule_id: Rule identifier

        Returns:
            Category count, or None if the identifier is not recognized
        """
        if rule_id is None:
            return None
        definition = self._rules.get(rule_id)
        if definition is not None:
            return definition.category_count
        locale = _cldr_locale(rule_id)
        if locale is None:
            return None
        categories = plural_rules.cldr_categories(locale)
        return len(categories) if categories is not None else None

    def resolve(self, rule_id: RuleId | None, quantity: Quantity) -> int:
        """Compute the category ordinal for a quantity.

        Rules receive the signed quantity. Formulas keyed on trailing digits
        read the digits of its magnitude, while floor-based rules such as
        fraction2Type1 see the sign.

        Args:
            rule_id: Rule identifier (None means no rule declared)
            quantity: Count to categorize

        Returns:
            Zero-based ordinal; DEFAULT_ORDINAL for unrecognized rules
            and non-finite quantities
        """
        if rule_id is None or not _is_finite(quantity):
            return DEFAULT_ORDINAL

        definition = self._rules.get(rule_id)
        if definition is not None:
            return definition.function(quantity)

        locale = _cldr_locale(rule_id)
        if locale is not None:
            return plural_rules.select_cldr_ordinal(quantity, locale)

        return DEFAULT_ORDINAL


def _cldr_locale(rule_id: str) -> str | None:
    """Extract the locale from a ``cldr:<locale>`` identifier."""
    if rule_id.startswith(CLDR_RULE_PREFIX):
        locale = rule_id[len(CLDR_RULE_PREFIX):]
        return locale or None
    return None


DEFAULT_CATALOG: RuleCatalog = RuleCatalog()
"""Shared catalog holding only the built-in rules."""
