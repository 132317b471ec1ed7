from .budget_variance import analyze_budget_variance
from .cash_flow import generate_cash_flow_projection
from .profitability import analyze_profitability
from .ratios import calculate_financial_ratios
from .roi import calculate_roi_analysis
from .scenarios import perform_scenario_analysis

__all__ = [
    "analyze_budget_variance",
    "analyze_profitability",
    "calculate_financial_ratios",
    "calculate_roi_analysis",
    "generate_cash_flow_projection",
    "perform_scenario_analysis",
]
