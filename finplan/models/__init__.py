from .enums import CategoryType, Criticality, SignificanceLevel, VarianceType
from .inputs import (
    BalanceSheetInput,
    BaseCase,
    BudgetItem,
    CapitalExpense,
    CashFlowInput,
    InvestmentInput,
    ProfitabilityInput,
    ScenarioInput,
    coerce_input,
)

__all__ = [
    "BalanceSheetInput",
    "BaseCase",
    "BudgetItem",
    "CapitalExpense",
    "CashFlowInput",
    "CategoryType",
    "Criticality",
    "InvestmentInput",
    "ProfitabilityInput",
    "ScenarioInput",
    "SignificanceLevel",
    "VarianceType",
    "coerce_input",
]
