"""Liquidity, efficiency, profitability and leverage ratio panels."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from finplan.models.inputs import BalanceSheetInput, coerce_input

from .decimal_core import divide_or_zero, percentage_of, subtract
from .result import (
    EfficiencyRatios,
    FinancialRatios,
    LeverageRatios,
    LiquidityRatios,
    ProfitabilityRatios,
)

logger = logging.getLogger(__name__)


def calculate_financial_ratios(
    data: Union[BalanceSheetInput, Mapping[str, Any]],
) -> FinancialRatios:
    """Compute all four ratio panels from one balance-sheet snapshot.

    Every zero denominator yields 0 for that ratio and is listed in
    ``degraded_fields`` as ``"<panel>.<ratio>"``.
    """
    bs = coerce_input(BalanceSheetInput, data)
    degraded: list[str] = []

    liquidity = LiquidityRatios(
        current_ratio=divide_or_zero(
            bs.current_assets, bs.current_liabilities, "liquidity_ratios.current_ratio", degraded
        ),
        quick_ratio=divide_or_zero(
            bs.quick_assets, bs.current_liabilities, "liquidity_ratios.quick_ratio", degraded
        ),
        cash_ratio=divide_or_zero(
            bs.cash, bs.current_liabilities, "liquidity_ratios.cash_ratio", degraded
        ),
    )

    efficiency = EfficiencyRatios(
        asset_turnover=divide_or_zero(
            bs.annual_sales, bs.total_assets, "efficiency_ratios.asset_turnover", degraded
        ),
        inventory_turnover=divide_or_zero(
            bs.cost_of_goods_sold, bs.inventory, "efficiency_ratios.inventory_turnover", degraded
        ),
        receivables_turnover=divide_or_zero(
            bs.annual_sales,
            bs.accounts_receivable,
            "efficiency_ratios.receivables_turnover",
            degraded,
        ),
    )

    profitability = ProfitabilityRatios(
        gross_profit_margin=percentage_of(
            subtract(bs.annual_sales, bs.cost_of_goods_sold),
            bs.annual_sales,
            "profitability_ratios.gross_profit_margin",
            degraded,
        ),
        operating_profit_margin=percentage_of(
            bs.operating_profit,
            bs.annual_sales,
            "profitability_ratios.operating_profit_margin",
            degraded,
        ),
        net_profit_margin=percentage_of(
            bs.net_income, bs.annual_sales, "profitability_ratios.net_profit_margin", degraded
        ),
        return_on_assets=percentage_of(
            bs.net_income, bs.total_assets, "profitability_ratios.return_on_assets", degraded
        ),
    )

    leverage = LeverageRatios(
        debt_to_equity=divide_or_zero(
            bs.total_debt, bs.equity, "leverage_ratios.debt_to_equity", degraded
        ),
        debt_service_coverage=divide_or_zero(
            bs.operating_profit,
            bs.debt_service_payments,
            "leverage_ratios.debt_service_coverage",
            degraded,
        ),
        interest_coverage=divide_or_zero(
            bs.operating_profit, bs.interest_expense, "leverage_ratios.interest_coverage", degraded
        ),
    )

    logger.debug("Computed financial ratio panels")
    if degraded:
        logger.warning("Financial ratios degraded fields: %s", degraded)

    return FinancialRatios(
        liquidity_ratios=liquidity,
        efficiency_ratios=efficiency,
        profitability_ratios=profitability,
        leverage_ratios=leverage,
        degraded_fields=degraded,
    )
