"""Shared test fixtures for the financial planning engine test suite."""


import pytest

from finplan.models import (
    BalanceSheetInput,
    BaseCase,
    CashFlowInput,
    InvestmentInput,
    ProfitabilityInput,
)


@pytest.fixture
def steady_cafe() -> CashFlowInput:
    """Flat-growth cafe: $5k/month revenue, $3k/month expenses, 20% tax."""
    return CashFlowInput(
        starting_cash=10_000,
        monthly_revenue=5_000,
        operating_expenses=3_000,
        capital_expenses_schedule=[],
        tax_rate="0.2",
        revenue_growth_rate=0,
        expense_inflation_rate=0,
    )


@pytest.fixture
def pos_upgrade() -> InvestmentInput:
    """Point-of-sale upgrade: $50k all-in, $20k/year net benefit, 5 years."""
    return InvestmentInput(
        initial_investment=40_000,
        annual_revenue_increase=15_000,
        annual_cost_savings=8_000,
        implementation_costs=10_000,
        annual_maintenance_costs=3_000,
        project_lifespan_years=5,
        discount_rate="0.1",
        risk_factor="0.2",
    )


@pytest.fixture
def restaurant_year() -> ProfitabilityInput:
    return ProfitabilityInput(
        revenue=1_000_000,
        cost_of_goods_sold=400_000,
        operating_expenses=300_000,
        depreciation=50_000,
        interest_expense=20_000,
        tax_rate="0.25",
        fixed_costs=200_000,
        variable_cost_rate="0.4",
    )


@pytest.fixture
def balance_sheet() -> BalanceSheetInput:
    return BalanceSheetInput(
        current_assets=200_000,
        quick_assets=150_000,
        cash=50_000,
        total_assets=500_000,
        inventory=40_000,
        accounts_receivable=60_000,
        current_liabilities=100_000,
        total_debt=150_000,
        equity=300_000,
        annual_sales=1_000_000,
        cost_of_goods_sold=400_000,
        operating_profit=120_000,
        net_income=80_000,
        interest_expense=10_000,
        debt_service_payments=40_000,
    )


@pytest.fixture
def base_case() -> BaseCase:
    return BaseCase(annual_revenue=1_000_000, annual_costs=800_000)
