"""Pydantic input records for the analyzers.

These models are the input boundary of the engine: caller-supplied numbers
are parsed into ``Decimal`` here and nowhere else. Negative amounts and rates
are accepted on purpose and flow through the formulas unchanged.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, TypeVar, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from finplan.engine.decimal_core import MAX_FINANCIAL_VALUE, is_financially_valid, to_decimal

from .enums import CategoryType, Criticality

ModelT = TypeVar("ModelT", bound=BaseModel)


class FinancialRecord(BaseModel):
    """Base model whose Decimal fields are parsed by ``decimal_core.to_decimal``.

    Amounts outside the supported money range are rejected.
    """

    @field_validator("*", mode="before")
    @classmethod
    def parse_amount(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or cls.model_fields[info.field_name].annotation is not Decimal:
            return v
        try:
            value = to_decimal(v)
        except (ArithmeticError, TypeError) as e:
            raise ValueError(f"not a numeric amount: {v!r}") from e
        if not is_financially_valid(value):
            raise ValueError(f"{value} is outside the supported range of +/-{MAX_FINANCIAL_VALUE}")
        return value


class CapitalExpense(FinancialRecord):
    """A scheduled capital outlay in a given projection month."""

    month: int = Field(ge=1, description="1-based projection month")
    amount: Decimal
    description: str = ""


class CashFlowInput(FinancialRecord):
    starting_cash: Decimal
    monthly_revenue: Decimal
    operating_expenses: Decimal = Field(description="Monthly operating expenses")
    capital_expenses_schedule: list[CapitalExpense] = Field(default_factory=list)
    tax_rate: Decimal
    revenue_growth_rate: Decimal = Field(default=Decimal("0"), description="Annual rate")
    expense_inflation_rate: Decimal = Field(default=Decimal("0"), description="Annual rate")


class InvestmentInput(FinancialRecord):
    initial_investment: Decimal
    annual_revenue_increase: Decimal
    annual_cost_savings: Decimal
    implementation_costs: Decimal
    annual_maintenance_costs: Decimal
    project_lifespan_years: int
    discount_rate: Decimal
    risk_factor: Decimal = Field(description="0-1, share of ROI discounted for risk")


class ProfitabilityInput(FinancialRecord):
    revenue: Decimal
    cost_of_goods_sold: Decimal
    operating_expenses: Decimal
    depreciation: Decimal
    interest_expense: Decimal
    tax_rate: Decimal
    fixed_costs: Decimal
    variable_cost_rate: Decimal


class BudgetItem(FinancialRecord):
    category: str
    budgeted_amount: Decimal
    actual_amount: Decimal
    category_type: CategoryType
    criticality: Criticality


class BalanceSheetInput(FinancialRecord):
    current_assets: Decimal
    quick_assets: Decimal
    cash: Decimal
    total_assets: Decimal
    inventory: Decimal
    accounts_receivable: Decimal
    current_liabilities: Decimal
    total_debt: Decimal
    equity: Decimal
    annual_sales: Decimal
    cost_of_goods_sold: Decimal
    operating_profit: Decimal
    net_income: Decimal
    interest_expense: Decimal
    debt_service_payments: Decimal


class BaseCase(FinancialRecord):
    annual_revenue: Decimal
    annual_costs: Decimal


class ScenarioInput(FinancialRecord):
    name: str
    probability: Decimal
    revenue_change_percent: Decimal
    cost_change_percent: Decimal
    key_assumptions: list[str] = Field(default_factory=list)


def coerce_input(model_cls: type[ModelT], data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    """Return ``data`` as ``model_cls``, validating plain mappings.

    Raises:
        pydantic.ValidationError: when a mapping does not parse.
    """
    if isinstance(data, model_cls):
        return data
    return model_cls.model_validate(data)
