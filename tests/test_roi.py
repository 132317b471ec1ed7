"""Tests for the investment ROI analyzer."""

from decimal import Decimal

import pytest

from finplan.engine.roi import calculate_roi_analysis
from finplan.engine.decimal_core import to_number


class TestROIAnalysis:
    def test_investment_and_benefit_echo(self, pos_upgrade):
        result = calculate_roi_analysis(pos_upgrade)
        # initial + implementation
        assert result.investment_amount == Decimal("50000")
        assert result.annual_revenue_increase == Decimal("15000")
        assert result.annual_cost_savings == Decimal("8000")

    def test_payback_and_break_even(self, pos_upgrade):
        # $50k / $20k per year = 2.5 years
        result = calculate_roi_analysis(pos_upgrade)
        assert result.payback_period_months == Decimal("30")
        assert result.break_even_point == "30 months"

    def test_break_even_rounds_up_partial_months(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"initial_investment": Decimal("40001")})
        result = calculate_roi_analysis(data)
        assert result.payback_period_months > Decimal("30")
        assert result.break_even_point == "31 months"

    def test_simple_and_risk_adjusted_roi(self, pos_upgrade):
        # (20k * 5 - 50k) / 50k = 100%
        result = calculate_roi_analysis(pos_upgrade)
        assert result.roi_percentage == Decimal("100")
        assert result.risk_adjusted_roi == Decimal("80")

    def test_irr_first_order_approximation(self, pos_upgrade):
        # (20k / 50k - 0.10) * 100 = 30
        result = calculate_roi_analysis(pos_upgrade)
        assert result.internal_rate_of_return == Decimal("30")

    def test_irr_floored_at_zero(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"discount_rate": Decimal("0.6")})
        result = calculate_roi_analysis(data)
        assert result.internal_rate_of_return == Decimal("0")

    def test_npv_discounted(self, pos_upgrade):
        result = calculate_roi_analysis(pos_upgrade)
        assert to_number(result.net_present_value) == pytest.approx(25815.7354, abs=1e-4)

    def test_npv_at_zero_discount_is_undiscounted_sum(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"discount_rate": Decimal("0")})
        result = calculate_roi_analysis(data)
        assert result.net_present_value == Decimal("20000") * 5 - Decimal("50000")

    def test_fully_computed_result_not_degraded(self, pos_upgrade):
        assert calculate_roi_analysis(pos_upgrade).degraded_fields == []


class TestROIEdgeCases:
    def test_zero_net_benefit_never_breaks_even(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"annual_maintenance_costs": Decimal("23000")})
        result = calculate_roi_analysis(data)
        assert result.payback_period_months == Decimal("0")
        assert result.break_even_point == "Never"
        assert "payback_period_months" in result.degraded_fields
        assert result.net_present_value == Decimal("-50000")
        assert result.roi_percentage == Decimal("-100")
        assert result.internal_rate_of_return == Decimal("0")

    def test_zero_investment_degrades_roi(self, pos_upgrade):
        data = pos_upgrade.model_copy(
            update={"initial_investment": Decimal("0"), "implementation_costs": Decimal("0")}
        )
        result = calculate_roi_analysis(data)
        assert result.roi_percentage == Decimal("0")
        assert result.risk_adjusted_roi == Decimal("0")
        assert result.internal_rate_of_return == Decimal("0")
        assert result.degraded_fields == [
            "roi_percentage",
            "risk_adjusted_roi",
            "internal_rate_of_return",
        ]
        assert result.break_even_point == "0 months"

    def test_discount_rate_of_minus_one_degrades_npv(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"discount_rate": Decimal("-1")})
        result = calculate_roi_analysis(data)
        assert result.net_present_value == Decimal("0")
        assert "net_present_value" in result.degraded_fields

    def test_negative_inputs_propagate(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"initial_investment": Decimal("-50000")})
        result = calculate_roi_analysis(data)
        assert result.investment_amount == Decimal("-40000")
        assert result.payback_period_months == Decimal("-24")
        assert result.break_even_point == "-24 months"

    def test_zero_lifespan(self, pos_upgrade):
        data = pos_upgrade.model_copy(update={"project_lifespan_years": 0})
        result = calculate_roi_analysis(data)
        assert result.net_present_value == Decimal("-50000")
        assert result.roi_percentage == Decimal("-100")

    def test_plain_mapping_input(self):
        result = calculate_roi_analysis(
            {
                "initial_investment": 1000,
                "annual_revenue_increase": 500,
                "annual_cost_savings": 0,
                "implementation_costs": 0,
                "annual_maintenance_costs": 0,
                "project_lifespan_years": 3,
                "discount_rate": 0,
                "risk_factor": 0.5,
            }
        )
        assert result.roi_percentage == Decimal("50")
        assert result.risk_adjusted_roi == Decimal("25")
        assert result.break_even_point == "24 months"
