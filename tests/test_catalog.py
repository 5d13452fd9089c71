"""Tests for RuleCatalog and quantity classification."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from locatext import PluralRule
from locatext.runtime.catalog import (
    BUILTIN_RULES,
    DEFAULT_CATALOG,
    RuleCatalog,
    RuleDefinition,
    is_fractional,
)


def _three_way(n: object) -> int:
    return int(n) % 3  # type: ignore[call-overload]


class TestIsFractional:
    """Quantity classification depends on value, not storage type."""

    @pytest.mark.parametrize("q", [0, 1, 2, -5, 10**20, True])
    def test_ints_are_integer(self, q: int) -> None:
        """Python ints never have a fractional component."""
        assert is_fractional(q) is False

    @pytest.mark.parametrize("q", [0.0, 2.0, -3.0, 1e15])
    def test_whole_valued_floats_are_integer(self, q: float) -> None:
        """2.0 is an integer quantity."""
        assert is_fractional(q) is False

    @pytest.mark.parametrize("q", [0.1, 1.5, -2.25, 2.000001])
    def test_floats_with_fraction_are_fractional(self, q: float) -> None:
        """A non-zero fractional part makes a quantity fractional."""
        assert is_fractional(q) is True

    def test_decimals(self) -> None:
        """Trailing zeros do not make a Decimal fractional."""
        assert is_fractional(Decimal("2.00")) is False
        assert is_fractional(Decimal("2.50")) is True
        assert is_fractional(Decimal("-0.01")) is True

    def test_fractions(self) -> None:
        """Fraction values are classified by value."""
        assert is_fractional(Fraction(5, 2)) is True
        assert is_fractional(Fraction(-1, 3)) is True
        assert is_fractional(Fraction(4, 2)) is False
        assert DEFAULT_CATALOG.resolve("fraction2Type1", Fraction(5, 2)) == 1

    @pytest.mark.parametrize(
        "q", [math.nan, math.inf, -math.inf, Decimal("NaN"), Decimal("Infinity")]
    )
    def test_non_finite_classify_as_integer(self, q: float | Decimal) -> None:
        """Non-finite values have no fractional component."""
        assert is_fractional(q) is False


class TestBuiltins:
    """Every PluralRule member is registered."""

    def test_all_members_registered(self) -> None:
        """The default catalog holds one definition per enum member."""
        assert set(DEFAULT_CATALOG.identifiers) == {str(r) for r in PluralRule}
        assert len(BUILTIN_RULES) == len(PluralRule)

    @pytest.mark.parametrize(
        ("rule_id", "count"),
        [
            ("int1", 1),
            ("int2Type3", 2),
            ("int2Type4", 2),
            ("int3Type4", 3),
            ("int4Type1", 4),
            ("int6Type1", 6),
            ("fraction2Type1", 2),
        ],
    )
    def test_category_counts(self, rule_id: str, count: int) -> None:
        """Category counts match the number of forms each rule needs."""
        assert DEFAULT_CATALOG.category_count(rule_id) == count

    def test_category_count_unknown(self) -> None:
        """Unknown identifiers have no category count."""
        assert DEFAULT_CATALOG.category_count("int9Type9") is None
        assert DEFAULT_CATALOG.category_count(None) is None

    def test_contains(self) -> None:
        """Membership accepts both enum members and raw strings."""
        assert PluralRule.INT3_TYPE4 in DEFAULT_CATALOG
        assert "int2Type4" in DEFAULT_CATALOG
        assert "bogus" not in DEFAULT_CATALOG
        assert 42 not in DEFAULT_CATALOG


class TestResolve:
    """RuleCatalog.resolve contract."""

    def test_slavic_scenario(self) -> None:
        """int3Type4 selects one/few/many."""
        results = [DEFAULT_CATALOG.resolve("int3Type4", n) for n in range(6)]
        assert results == [2, 0, 1, 1, 1, 2]

    def test_unknown_rule_is_zero(self) -> None:
        """Unrecognized identifiers collapse to the first form."""
        assert DEFAULT_CATALOG.resolve("noSuchRule", 5) == 0

    def test_none_rule_is_zero(self) -> None:
        """A missing rule declaration collapses to the first form."""
        assert DEFAULT_CATALOG.resolve(None, 5) == 0

    @pytest.mark.parametrize("q", [math.nan, math.inf, -math.inf, Decimal("NaN")])
    def test_non_finite_quantities_are_zero(self, q: float | Decimal) -> None:
        """Non-finite quantities never raise."""
        assert DEFAULT_CATALOG.resolve("int3Type4", q) == 0
        assert DEFAULT_CATALOG.resolve("fraction2Type1", q) == 0

    def test_negative_quantities_are_signed(self) -> None:
        """Equality and floor rules see the sign of the quantity."""
        assert DEFAULT_CATALOG.resolve("int2Type4", -1) == 1
        assert DEFAULT_CATALOG.resolve("int2Type3", -1) == 1
        assert DEFAULT_CATALOG.resolve("int2Type3", 0) == 0
        assert DEFAULT_CATALOG.resolve("fraction2Type1", -2.5) == 0
        assert DEFAULT_CATALOG.resolve("fraction2Type1", -1.5) == 0

    def test_negative_quantities_use_trailing_digits(self) -> None:
        """Digit-based rules read the digits of the magnitude."""
        assert DEFAULT_CATALOG.resolve("int3Type4", -22) == 1
        assert DEFAULT_CATALOG.resolve("int3Type4", -21) == 0
        assert DEFAULT_CATALOG.resolve("int3Type4", -11) == 2

    def test_enum_member_as_identifier(self) -> None:
        """StrEnum members resolve like their string values."""
        assert DEFAULT_CATALOG.resolve(PluralRule.INT2_TYPE4, 1) == 0


class TestExtension:
    """Catalogs are extended by construction, never mutated."""

    def test_extra_rule(self) -> None:
        """Extra rules are resolvable in the new catalog only."""
        catalog = RuleCatalog([RuleDefinition("mod3", 3, _three_way)])
        assert catalog.resolve("mod3", 5) == 2
        assert DEFAULT_CATALOG.resolve("mod3", 5) == 0
        assert "mod3" not in DEFAULT_CATALOG

    def test_with_rules_returns_new_catalog(self) -> None:
        """with_rules leaves the receiver untouched."""
        base = RuleCatalog([RuleDefinition("mod3", 3, _three_way)])
        extended = base.with_rules(RuleDefinition("always1", 2, lambda n: 1))
        assert "always1" in extended
        assert "mod3" in extended
        assert "always1" not in base
        assert len(extended) == len(base) + 1

    def test_override_builtin(self) -> None:
        """A definition with a built-in identifier replaces it locally."""
        catalog = RuleCatalog([RuleDefinition("int1", 2, lambda n: 1)])
        assert catalog.resolve("int1", 7) == 1
        assert catalog.with_rules().resolve("int1", 7) == 1
        assert DEFAULT_CATALOG.resolve("int1", 7) == 0

    def test_rejects_non_definition(self) -> None:
        """Extra rules must be RuleDefinition instances."""
        with pytest.raises(TypeError, match="Expected RuleDefinition"):
            RuleCatalog([("mod3", _three_way)])  # type: ignore[list-item]

    def test_rejects_cldr_prefix(self) -> None:
        """The cldr: prefix is reserved for the CLDR family."""
        with pytest.raises(ValueError, match="reserved prefix"):
            RuleCatalog([RuleDefinition("cldr:xx", 2, _three_way)])

    def test_definition_validation(self) -> None:
        """RuleDefinition rejects empty ids, zero counts and non-callables."""
        with pytest.raises(ValueError, match="cannot be empty"):
            RuleDefinition("", 1, _three_way)
        with pytest.raises(ValueError, match="at least one category"):
            RuleDefinition("x", 0, _three_way)
        with pytest.raises(TypeError, match="not callable"):
            RuleDefinition("x", 1, "nope")  # type: ignore[arg-type]

    def test_repr(self) -> None:
        """repr reports the rule count."""
        assert repr(DEFAULT_CATALOG) == f"RuleCatalog(rules={len(PluralRule)})"
