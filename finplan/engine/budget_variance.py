"""Budget vs. actual variance classification."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, Mapping, Union

from finplan.models.enums import CategoryType, Criticality, SignificanceLevel, VarianceType
from finplan.models.inputs import BudgetItem, coerce_input

from .decimal_core import absolute, percentage_of, subtract
from .recommendations import recommended_action
from .result import BudgetVarianceAnalysis

logger = logging.getLogger(__name__)

CRITICAL_THRESHOLD = Decimal("15")
HIGH_CRITICALITY_THRESHOLD = Decimal("10")
MODERATE_THRESHOLD = Decimal("5")


def classify_variance(category_type: CategoryType, variance_amount: Decimal) -> VarianceType:
    """Revenue above budget and expenses at or below budget are favorable."""
    if category_type == CategoryType.REVENUE:
        favorable = variance_amount >= 0
    else:
        favorable = variance_amount <= 0
    return VarianceType.FAVORABLE if favorable else VarianceType.UNFAVORABLE


def significance_level(criticality: Criticality, variance_percentage: Decimal) -> SignificanceLevel:
    """Thresholds on |variance %|: >15 critical (>10 for high criticality), >5 moderate."""
    magnitude = absolute(variance_percentage)
    if criticality == Criticality.HIGH and magnitude > HIGH_CRITICALITY_THRESHOLD:
        return SignificanceLevel.CRITICAL
    if magnitude > CRITICAL_THRESHOLD:
        return SignificanceLevel.CRITICAL
    if magnitude > MODERATE_THRESHOLD:
        return SignificanceLevel.MODERATE
    return SignificanceLevel.MINOR


def _analyze_item(item: BudgetItem) -> BudgetVarianceAnalysis:
    degraded: list[str] = []
    variance = subtract(item.actual_amount, item.budgeted_amount)
    variance_pct = percentage_of(variance, item.budgeted_amount, "variance_percentage", degraded)

    variance_type = classify_variance(item.category_type, variance)
    significance = significance_level(item.criticality, variance_pct)

    return BudgetVarianceAnalysis(
        category=item.category,
        budgeted_amount=item.budgeted_amount,
        actual_amount=item.actual_amount,
        variance_amount=variance,
        variance_percentage=variance_pct,
        variance_type=variance_type,
        significance_level=significance,
        recommended_action=recommended_action(significance, variance_type, item.category_type),
        degraded_fields=degraded,
    )


def analyze_budget_variance(
    items: Iterable[Union[BudgetItem, Mapping[str, Any]]],
) -> list[BudgetVarianceAnalysis]:
    """Compare budgeted and actual amounts per line item, in input order.

    A zero budget leaves ``variance_percentage`` at 0 (listed in
    ``degraded_fields``), which classifies the item as minor.
    """
    results = [_analyze_item(coerce_input(BudgetItem, item)) for item in items]

    unbudgeted = [r.category for r in results if r.degraded_fields]
    if unbudgeted:
        logger.warning("Variance %% undefined for zero-budget categories: %s", unbudgeted)
    logger.debug("Analyzed %d budget line items", len(results))
    return results
