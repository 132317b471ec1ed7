"""Margin waterfall and break-even revenue for one period."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from finplan.models.inputs import ProfitabilityInput, coerce_input

from .decimal_core import (
    ZERO,
    add,
    divide_or_zero,
    maximum,
    multiply,
    percentage_of,
    subtract,
)
from .result import ProfitabilityAnalysis

logger = logging.getLogger(__name__)


def analyze_profitability(
    data: Union[ProfitabilityInput, Mapping[str, Any]],
) -> ProfitabilityAnalysis:
    """Compute gross, operating, EBITDA and net profit with their margins.

    Margins are percentages of revenue. Taxes apply only to positive
    earnings before tax. Break-even revenue is
    ``fixed_costs / (contribution_margin / revenue)``.

    A zero revenue zeroes every margin and the break-even revenue and lists
    them in ``degraded_fields``; so does a zero contribution margin rate for
    the break-even revenue.
    """
    inputs = coerce_input(ProfitabilityInput, data)
    degraded: list[str] = []
    revenue = inputs.revenue

    gross_profit = subtract(revenue, inputs.cost_of_goods_sold)
    gross_margin = percentage_of(gross_profit, revenue, "gross_margin_percentage", degraded)

    # EBIT
    operating_profit = subtract(gross_profit, inputs.operating_expenses)
    operating_margin = percentage_of(
        operating_profit, revenue, "operating_margin_percentage", degraded
    )

    ebitda = add(operating_profit, inputs.depreciation)
    ebitda_margin = percentage_of(ebitda, revenue, "ebitda_margin", degraded)

    ebt = subtract(operating_profit, inputs.interest_expense)
    taxes = multiply(maximum(ebt, ZERO), inputs.tax_rate)
    net_profit = subtract(ebt, taxes)
    net_margin = percentage_of(net_profit, revenue, "net_margin_percentage", degraded)

    variable_costs = multiply(revenue, inputs.variable_cost_rate)
    contribution_margin = subtract(revenue, variable_costs)

    contribution_rate = divide_or_zero(
        contribution_margin, revenue, "break_even_revenue", degraded
    )
    if "break_even_revenue" in degraded:
        break_even_revenue = ZERO
    else:
        break_even_revenue = divide_or_zero(
            inputs.fixed_costs, contribution_rate, "break_even_revenue", degraded
        )

    logger.debug("Profitability analysis: revenue=%s net_profit=%s", revenue, net_profit)
    if degraded:
        logger.warning("Profitability analysis degraded fields: %s", degraded)

    return ProfitabilityAnalysis(
        gross_profit=gross_profit,
        gross_margin_percentage=gross_margin,
        operating_profit=operating_profit,
        operating_margin_percentage=operating_margin,
        net_profit=net_profit,
        net_margin_percentage=net_margin,
        ebitda=ebitda,
        ebitda_margin=ebitda_margin,
        contribution_margin=contribution_margin,
        break_even_revenue=break_even_revenue,
        degraded_fields=degraded,
    )
