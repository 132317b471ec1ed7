"""Monthly cash-flow projection."""

from __future__ import annotations

import logging
from collections import defaultdict
from decimal import Decimal
from itertools import accumulate
from typing import Any, Mapping, Union

from finplan.models.inputs import CapitalExpense, CashFlowInput, coerce_input

from .decimal_core import (
    ONE,
    TWELVE,
    ZERO,
    add,
    divide,
    divide_or_zero,
    maximum,
    multiply,
    subtract,
)
from .result import CashFlowProjection

logger = logging.getLogger(__name__)


def _schedule_by_month(schedule: list[CapitalExpense]) -> dict[int, Decimal]:
    """Sum capital expenses per month."""
    by_month: dict[int, Decimal] = defaultdict(lambda: ZERO)
    for entry in schedule:
        by_month[entry.month] = add(by_month[entry.month], entry.amount)
    return by_month


def _linear_factor(annual_rate: Decimal, period: int) -> Decimal:
    """1 + annual_rate * (period - 1) / 12"""
    accrued = divide(multiply(annual_rate, Decimal(period - 1)), TWELVE)
    return add(ONE, accrued)


def generate_cash_flow_projection(
    data: Union[CashFlowInput, Mapping[str, Any]],
    periods: int = 12,
) -> list[CashFlowProjection]:
    """Project ``periods`` months of cash flow.

    Revenue grows and expenses inflate linearly from their monthly base
    (annual rate pro-rated by elapsed months). Taxes apply only to a
    positive operating result. Running totals are a prefix scan over the
    per-period net cash flow:

        cumulative[n] = cumulative[n-1] + net[n]    (cumulative[0] = 0)
        cash[n]       = cash[n-1] + net[n]          (cash[0] = starting_cash)

    Raises:
        pydantic.ValidationError: malformed input or schedule entry.
        ValueError: ``periods`` is negative.
    """
    inputs = coerce_input(CashFlowInput, data)
    if periods < 0:
        raise ValueError(f"periods must be non-negative, got {periods}")

    capex_by_month = _schedule_by_month(inputs.capital_expenses_schedule)

    rows: list[tuple[Decimal, Decimal, Decimal, Decimal, Decimal]] = []
    for period in range(1, periods + 1):
        revenue = multiply(
            inputs.monthly_revenue, _linear_factor(inputs.revenue_growth_rate, period)
        )
        expenses = multiply(
            inputs.operating_expenses, _linear_factor(inputs.expense_inflation_rate, period)
        )
        capital = capex_by_month.get(period, ZERO)

        # Losses generate no tax credit
        gross_profit = subtract(revenue, expenses)
        taxes = multiply(maximum(gross_profit, ZERO), inputs.tax_rate)

        net = subtract(subtract(gross_profit, capital), taxes)
        rows.append((revenue, expenses, capital, taxes, net))

    nets = [row[4] for row in rows]
    cumulative = list(accumulate(nets, add))
    positions = list(accumulate(nets, add, initial=inputs.starting_cash))[1:]

    projections: list[CashFlowProjection] = []
    degraded_periods: list[int] = []
    for index, (revenue, expenses, capital, taxes, net) in enumerate(rows):
        period = index + 1
        degraded: list[str] = []
        liquidity = divide_or_zero(
            positions[index], add(expenses, capital), "liquidity_ratio", degraded
        )
        if degraded:
            degraded_periods.append(period)
        projections.append(
            CashFlowProjection(
                period=f"Month {period}",
                revenue=revenue,
                operating_expenses=expenses,
                capital_expenses=capital,
                tax_obligations=taxes,
                net_cash_flow=net,
                cumulative_cash_flow=cumulative[index],
                cash_position=positions[index],
                liquidity_ratio=liquidity,
                degraded_fields=degraded,
            )
        )

    logger.debug("Projected %d periods of cash flow", periods)
    if degraded_periods:
        logger.warning(
            "Liquidity ratio undefined (zero outflows) in periods %s", degraded_periods
        )
    return projections
