"""Immutable result records and the output-boundary serializer."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from finplan.models.enums import SignificanceLevel, VarianceType

from .decimal_core import to_number


@dataclass(frozen=True)
class CashFlowProjection:
    """One projected month."""

    period: str
    revenue: Decimal
    operating_expenses: Decimal
    capital_expenses: Decimal
    tax_obligations: Decimal
    net_cash_flow: Decimal
    cumulative_cash_flow: Decimal
    cash_position: Decimal
    liquidity_ratio: Decimal
    degraded_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ROIAnalysis:
    investment_amount: Decimal
    annual_revenue_increase: Decimal
    annual_cost_savings: Decimal
    payback_period_months: Decimal
    net_present_value: Decimal
    internal_rate_of_return: Decimal
    roi_percentage: Decimal
    risk_adjusted_roi: Decimal
    break_even_point: str
    degraded_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProfitabilityAnalysis:
    gross_profit: Decimal
    gross_margin_percentage: Decimal
    operating_profit: Decimal
    operating_margin_percentage: Decimal
    net_profit: Decimal
    net_margin_percentage: Decimal
    ebitda: Decimal
    ebitda_margin: Decimal
    contribution_margin: Decimal
    break_even_revenue: Decimal
    degraded_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BudgetVarianceAnalysis:
    category: str
    budgeted_amount: Decimal
    actual_amount: Decimal
    variance_amount: Decimal
    variance_percentage: Decimal
    variance_type: VarianceType
    significance_level: SignificanceLevel
    recommended_action: str
    degraded_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class LiquidityRatios:
    current_ratio: Decimal
    quick_ratio: Decimal
    cash_ratio: Decimal


@dataclass(frozen=True)
class EfficiencyRatios:
    asset_turnover: Decimal
    inventory_turnover: Decimal
    receivables_turnover: Decimal


@dataclass(frozen=True)
class ProfitabilityRatios:
    """Margins and return on assets, all expressed in percent."""

    gross_profit_margin: Decimal
    operating_profit_margin: Decimal
    net_profit_margin: Decimal
    return_on_assets: Decimal


@dataclass(frozen=True)
class LeverageRatios:
    debt_to_equity: Decimal
    debt_service_coverage: Decimal
    interest_coverage: Decimal


@dataclass(frozen=True)
class FinancialRatios:
    liquidity_ratios: LiquidityRatios
    efficiency_ratios: EfficiencyRatios
    profitability_ratios: ProfitabilityRatios
    leverage_ratios: LeverageRatios
    degraded_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScenarioAnalysis:
    scenario_name: str
    probability: Decimal
    revenue_impact: Decimal
    cost_impact: Decimal
    net_impact: Decimal
    key_assumptions: list[str]
    risk_factors: list[str]
    mitigation_strategies: list[str]


def to_payload(result: Any, places: Optional[int] = None) -> Any:
    """Convert result records into JSON-ready structures.

    Decimals become floats (banker's-rounded to ``places`` when given),
    enums become their values, dataclasses become dicts. Lists are
    converted element by element.
    """
    if isinstance(result, Decimal):
        return to_number(result, places)
    if isinstance(result, Enum):
        return result.value
    if is_dataclass(result) and not isinstance(result, type):
        return {f.name: to_payload(getattr(result, f.name), places) for f in fields(result)}
    if isinstance(result, (list, tuple)):
        return [to_payload(item, places) for item in result]
    if isinstance(result, dict):
        return {key: to_payload(value, places) for key, value in result.items()}
    return result
