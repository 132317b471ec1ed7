"""What-if scenario deltas against a base case."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, Mapping, Union

from finplan.models.inputs import BaseCase, ScenarioInput, coerce_input

from .decimal_core import absolute, add, apply_percentage, subtract
from .recommendations import (
    COMPOUND_RISK_MITIGATIONS,
    HIGH_REVENUE_VOLATILITY,
    LOW_PROBABILITY_HIGH_IMPACT,
    NEGATIVE_IMPACT_MITIGATIONS,
    SIGNIFICANT_COST_INFLATION,
)
from .result import ScenarioAnalysis

logger = logging.getLogger(__name__)

REVENUE_VOLATILITY_THRESHOLD = Decimal("20")
COST_INFLATION_THRESHOLD = Decimal("15")
LOW_PROBABILITY_THRESHOLD = Decimal("0.3")


def derive_risk_factors(scenario: ScenarioInput) -> list[str]:
    risk_factors: list[str] = []
    if absolute(scenario.revenue_change_percent) > REVENUE_VOLATILITY_THRESHOLD:
        risk_factors.append(HIGH_REVENUE_VOLATILITY)
    if scenario.cost_change_percent > COST_INFLATION_THRESHOLD:
        risk_factors.append(SIGNIFICANT_COST_INFLATION)
    if scenario.probability < LOW_PROBABILITY_THRESHOLD:
        risk_factors.append(LOW_PROBABILITY_HIGH_IMPACT)
    return risk_factors


def derive_mitigation_strategies(net_impact: Decimal, risk_factors: list[str]) -> list[str]:
    strategies: list[str] = []
    if net_impact < 0:
        strategies.extend(NEGATIVE_IMPACT_MITIGATIONS)
    if len(risk_factors) > 1:
        strategies.extend(COMPOUND_RISK_MITIGATIONS)
    return strategies


def _analyze_scenario(base: BaseCase, base_net: Decimal, scenario: ScenarioInput) -> ScenarioAnalysis:
    revenue_impact = apply_percentage(base.annual_revenue, scenario.revenue_change_percent)
    cost_impact = apply_percentage(base.annual_costs, scenario.cost_change_percent)

    new_net = subtract(
        add(base.annual_revenue, revenue_impact),
        add(base.annual_costs, cost_impact),
    )
    net_impact = subtract(new_net, base_net)

    risk_factors = derive_risk_factors(scenario)
    return ScenarioAnalysis(
        scenario_name=scenario.name,
        probability=scenario.probability,
        revenue_impact=revenue_impact,
        cost_impact=cost_impact,
        net_impact=net_impact,
        key_assumptions=list(scenario.key_assumptions),
        risk_factors=risk_factors,
        mitigation_strategies=derive_mitigation_strategies(net_impact, risk_factors),
    )


def perform_scenario_analysis(
    base_case: Union[BaseCase, Mapping[str, Any]],
    scenarios: Iterable[Union[ScenarioInput, Mapping[str, Any]]],
) -> list[ScenarioAnalysis]:
    """Apply each scenario's percentage changes to the base case.

    Scenarios are independent of one another; results keep input order.
    """
    base = coerce_input(BaseCase, base_case)
    base_net = subtract(base.annual_revenue, base.annual_costs)

    results = [
        _analyze_scenario(base, base_net, coerce_input(ScenarioInput, scenario))
        for scenario in scenarios
    ]
    logger.debug("Analyzed %d scenarios against base net %s", len(results), base_net)
    return results
