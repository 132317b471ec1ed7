"""Fixed wording for recommended actions, risk factors and mitigations.

Dashboards and alerting key off these exact strings.
"""

from __future__ import annotations

from finplan.models.enums import CategoryType, SignificanceLevel, VarianceType

_C, _MO, _MI = SignificanceLevel.CRITICAL, SignificanceLevel.MODERATE, SignificanceLevel.MINOR
_FAV, _UNF = VarianceType.FAVORABLE, VarianceType.UNFAVORABLE
_REV, _EXP = CategoryType.REVENUE, CategoryType.EXPENSE

INVESTIGATE_SHORTFALL = (
    "Immediate action required: Investigate revenue shortfall and implement corrective measures"
)
REDUCE_EXPENSES = "Cost control measures needed: Review and reduce expenses immediately"
REPLICATE_SUCCESS = "Analyze success factors and replicate in other areas"
REVIEW_PROCESSES = "Review and adjust processes to improve performance"
DOCUMENT_STRATEGIES = "Document and leverage successful strategies"
MONITOR = "Monitor performance"

# (significance, variance type, category type) -> recommended action
RECOMMENDED_ACTIONS: dict[tuple[SignificanceLevel, VarianceType, CategoryType], str] = {
    (_C, _UNF, _REV): INVESTIGATE_SHORTFALL,
    (_C, _UNF, _EXP): REDUCE_EXPENSES,
    (_C, _FAV, _REV): REPLICATE_SUCCESS,
    (_C, _FAV, _EXP): REPLICATE_SUCCESS,
    (_MO, _UNF, _REV): REVIEW_PROCESSES,
    (_MO, _UNF, _EXP): REVIEW_PROCESSES,
    (_MO, _FAV, _REV): DOCUMENT_STRATEGIES,
    (_MO, _FAV, _EXP): DOCUMENT_STRATEGIES,
    (_MI, _UNF, _REV): MONITOR,
    (_MI, _UNF, _EXP): MONITOR,
    (_MI, _FAV, _REV): MONITOR,
    (_MI, _FAV, _EXP): MONITOR,
}

HIGH_REVENUE_VOLATILITY = "High revenue volatility"
SIGNIFICANT_COST_INFLATION = "Significant cost inflation"
LOW_PROBABILITY_HIGH_IMPACT = "Low probability scenario with high impact"

CONTINGENCY_COST_REDUCTION = "Develop contingency cost reduction plans"
DIVERSIFY_REVENUE = "Diversify revenue streams"
HIGHER_CASH_RESERVES = "Maintain higher cash reserves"
INSURANCE_COVERAGE = "Consider insurance coverage"

NEGATIVE_IMPACT_MITIGATIONS = (CONTINGENCY_COST_REDUCTION, DIVERSIFY_REVENUE)
COMPOUND_RISK_MITIGATIONS = (HIGHER_CASH_RESERVES, INSURANCE_COVERAGE)


def recommended_action(
    significance: SignificanceLevel,
    variance_type: VarianceType,
    category_type: CategoryType,
) -> str:
    return RECOMMENDED_ACTIONS[(significance, variance_type, category_type)]
