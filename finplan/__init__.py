"""Financial Planning Engine.

Pure, deterministic decimal computations for cash-flow projection, ROI,
profitability, budget variance, financial ratios and scenario analysis.
"""

from finplan.engine import (
    analyze_budget_variance,
    analyze_profitability,
    calculate_financial_ratios,
    calculate_roi_analysis,
    generate_cash_flow_projection,
    perform_scenario_analysis,
)

__all__ = [
    "analyze_budget_variance",
    "analyze_profitability",
    "calculate_financial_ratios",
    "calculate_roi_analysis",
    "generate_cash_flow_projection",
    "perform_scenario_analysis",
]
