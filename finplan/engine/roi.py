"""Investment ROI analysis: payback, NPV, approximate IRR and simple ROI."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Union

from finplan.models.inputs import InvestmentInput, coerce_input

from .decimal_core import (
    HUNDRED,
    ONE,
    TWELVE,
    ZERO,
    add,
    ceiling,
    divide,
    divide_or_zero,
    maximum,
    multiply,
    power,
    subtract,
)
from .result import ROIAnalysis

logger = logging.getLogger(__name__)

NO_BREAK_EVEN = "Never"


def _net_present_value(
    total_investment: Decimal,
    annual_benefit: Decimal,
    discount_rate: Decimal,
    lifespan_years: int,
    degraded: list[str],
) -> Decimal:
    """-investment + sum(benefit / (1 + r)^year) for year in 1..lifespan."""
    growth = add(ONE, discount_rate)
    if growth.is_zero() and lifespan_years >= 1:
        degraded.append("net_present_value")
        return ZERO

    npv = multiply(total_investment, Decimal(-1))
    for year in range(1, lifespan_years + 1):
        npv = add(npv, divide(annual_benefit, power(growth, year)))
    return npv


def calculate_roi_analysis(data: Union[InvestmentInput, Mapping[str, Any]]) -> ROIAnalysis:
    """Analyze a single investment.

    ``internal_rate_of_return`` is the first-order approximation
    ``max(0, (benefit / investment - discount_rate) * 100)``, not a root of
    the NPV equation.

    When the net annual benefit is zero the investment never pays back:
    ``payback_period_months`` is 0 and listed in ``degraded_fields`` and
    ``break_even_point`` reads ``"Never"``.
    """
    inputs = coerce_input(InvestmentInput, data)
    degraded: list[str] = []

    total_investment = add(inputs.initial_investment, inputs.implementation_costs)
    gross_benefit = add(inputs.annual_revenue_increase, inputs.annual_cost_savings)
    net_annual_benefit = subtract(gross_benefit, inputs.annual_maintenance_costs)

    payback_years = divide_or_zero(
        total_investment, net_annual_benefit, "payback_period_months", degraded
    )
    payback_months = multiply(payback_years, TWELVE)
    if "payback_period_months" in degraded:
        break_even_point = NO_BREAK_EVEN
    else:
        break_even_point = f"{ceiling(payback_months)} months"

    npv = _net_present_value(
        total_investment,
        net_annual_benefit,
        inputs.discount_rate,
        inputs.project_lifespan_years,
        degraded,
    )

    lifespan = Decimal(inputs.project_lifespan_years)
    total_benefit = multiply(net_annual_benefit, lifespan)
    if total_investment.is_zero():
        degraded.extend(["roi_percentage", "risk_adjusted_roi", "internal_rate_of_return"])
        roi = ZERO
        irr = ZERO
    else:
        roi = multiply(
            divide(subtract(total_benefit, total_investment), total_investment), HUNDRED
        )
        irr_approx = subtract(divide(net_annual_benefit, total_investment), inputs.discount_rate)
        irr = maximum(ZERO, multiply(irr_approx, HUNDRED))

    risk_adjusted = multiply(roi, subtract(ONE, inputs.risk_factor))

    logger.debug(
        "ROI analysis: investment=%s net_benefit=%s lifespan=%d",
        total_investment,
        net_annual_benefit,
        inputs.project_lifespan_years,
    )
    if degraded:
        logger.warning("ROI analysis degraded fields: %s", degraded)

    return ROIAnalysis(
        investment_amount=total_investment,
        annual_revenue_increase=inputs.annual_revenue_increase,
        annual_cost_savings=inputs.annual_cost_savings,
        payback_period_months=payback_months,
        net_present_value=npv,
        internal_rate_of_return=irr,
        roi_percentage=roi,
        risk_adjusted_roi=risk_adjusted,
        break_even_point=break_even_point,
        degraded_fields=degraded,
    )
