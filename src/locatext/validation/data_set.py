"""Data set validation.

Checks a LocaleData for conditions that lookups silently paper over:
rule identifiers the catalog does not know, plural entries with no rule
declared, and forms lists shorter than the declared rule distinguishes.

Validation never raises on content; every finding is a ValidationWarning.

Python 3.13+.
"""

from __future__ import annotations

import logging

from locatext.constants import FRACTION_RULE_KEY, INTEGER_RULE_KEY
from locatext.diagnostics import DiagnosticCode, ValidationResult, ValidationWarning
from locatext.runtime.catalog import DEFAULT_CATALOG, RuleCatalog
from locatext.runtime.locale_data import LocaleData

__all__ = ["validate_locale_data"]

logger = logging.getLogger(__name__)


def _check_rule(
    data: LocaleData,
    catalog: RuleCatalog,
    rule_key: str,
    rule_id: str | None,
    has_plurals: bool,
) -> tuple[list[ValidationWarning], int | None]:
    """Check one reserved rule key.

    Returns:
        (warnings, category count of the rule or None if unusable)
    """
    warnings: list[ValidationWarning] = []
    if rule_id is None:
        if has_plurals:
            warnings.append(
                ValidationWarning(
                    code="missing-rule",
                    message=f"Plural entries present but '{rule_key}' is not declared",
                    context=rule_key,
                    diagnostic_code=DiagnosticCode.VALIDATION_MISSING_RULE,
                )
            )
        return warnings, None

    count = catalog.category_count(rule_id)
    if count is None:
        warnings.append(
            ValidationWarning(
                code="unknown-rule",
                message=f"Rule '{rule_id}' declared by '{rule_key}' is not in the catalog",
                context=rule_key,
                diagnostic_code=DiagnosticCode.VALIDATION_UNKNOWN_RULE,
            )
        )
    logger.debug("Locale %s: %s=%s (%s categories)", data.locale, rule_key, rule_id, count)
    return warnings, count


def validate_locale_data(
    data: LocaleData, catalog: RuleCatalog | None = None
) -> ValidationResult:
    """Validate a data set against a rule catalog.

    Args:
        data: Data set to validate
        catalog: Catalog the data set will be used with (default: built-ins)

    Returns:
        ValidationResult with one warning per finding

    Example:
        >>> data = LocaleData({"IntegerRule": "int3Type4", "apples": ["a", "b"]})
        >>> result = validate_locale_data(data)
        >>> [w.code for w in result.warnings]
        ['missing-rule', 'insufficient-forms']
    """
    if catalog is None:
        catalog = DEFAULT_CATALOG

    plural_keys = data.plural_keys()
    has_plurals = bool(plural_keys)

    warnings: list[ValidationWarning] = []
    int_warnings, int_count = _check_rule(
        data, catalog, INTEGER_RULE_KEY, data.integer_rule, has_plurals
    )
    frac_warnings, frac_count = _check_rule(
        data, catalog, FRACTION_RULE_KEY, data.fraction_rule, has_plurals
    )
    warnings.extend(int_warnings)
    warnings.extend(frac_warnings)

    for key in plural_keys:
        forms = data.get_plural(key)
        if forms is None:  # pragma: no cover - plural_keys guarantees plural
            continue
        for rule_key, count in ((INTEGER_RULE_KEY, int_count), (FRACTION_RULE_KEY, frac_count)):
            if count is not None and len(forms) < count:
                warnings.append(
                    ValidationWarning(
                        code="insufficient-forms",
                        message=(
                            f"'{key}' has {len(forms)} form(s) but '{rule_key}' "
                            f"distinguishes {count}"
                        ),
                        context=key,
                        diagnostic_code=DiagnosticCode.VALIDATION_INSUFFICIENT_FORMS,
                    )
                )

    if warnings:
        logger.debug("Validation of locale %s: %d warning(s)", data.locale, len(warnings))
        return ValidationResult(warnings=tuple(warnings), locale=data.locale)
    return ValidationResult.valid(locale=data.locale)
