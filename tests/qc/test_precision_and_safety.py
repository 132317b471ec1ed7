"""Quality checks: exact running totals, finite outputs and thread safety."""

import math
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from finplan.engine.cash_flow import generate_cash_flow_projection
from finplan.engine.decimal_core import add
from finplan.engine.ratios import calculate_financial_ratios
from finplan.engine.result import to_payload
from finplan.engine.roi import calculate_roi_analysis
from finplan.engine.scenarios import perform_scenario_analysis


def _walk_numbers(payload):
    if isinstance(payload, dict):
        for value in payload.values():
            yield from _walk_numbers(value)
    elif isinstance(payload, list):
        for value in payload:
            yield from _walk_numbers(value)
    elif isinstance(payload, float):
        yield payload


class TestRunningTotals:
    """Cumulative cash flow must not drift over long horizons."""

    def test_cumulative_equals_sum_of_nets_over_1000_periods(self, steady_cafe):
        data = steady_cafe.model_copy(
            update={
                "monthly_revenue": Decimal("5000.33"),
                "operating_expenses": Decimal("3000.17"),
                "revenue_growth_rate": Decimal("0.07"),
                "expense_inflation_rate": Decimal("0.03"),
            }
        )
        projection = generate_cash_flow_projection(data, 1000)

        running = Decimal("0")
        for row in projection:
            running = add(running, row.net_cash_flow)
            assert row.cumulative_cash_flow == running

    def test_cash_position_is_start_plus_cumulative(self, steady_cafe):
        data = steady_cafe.model_copy(update={"monthly_revenue": Decimal("4999.99")})
        projection = generate_cash_flow_projection(data, 1000)
        for row in projection:
            assert row.cash_position == steady_cafe.starting_cash + row.cumulative_cash_flow

    def test_exact_cents_after_1000_periods(self, steady_cafe):
        data = steady_cafe.model_copy(update={"monthly_revenue": Decimal("5000.10")})
        last = generate_cash_flow_projection(data, 1000)[-1]
        # net per month: (2000.10 * 0.8) = 1600.08
        assert last.cumulative_cash_flow == Decimal("1600080")
        assert last.cash_position == Decimal("1610080")


class TestFiniteOutputs:
    def test_zero_inputs_never_produce_nan_or_infinity(self, balance_sheet, pos_upgrade):
        zero_sheet = {name: 0 for name in balance_sheet.model_dump()}
        zero_investment = {
            **pos_upgrade.model_dump(),
            "initial_investment": 0,
            "implementation_costs": 0,
            "annual_revenue_increase": 0,
            "annual_cost_savings": 0,
            "annual_maintenance_costs": 0,
        }
        payloads = [
            to_payload(calculate_financial_ratios(zero_sheet)),
            to_payload(calculate_roi_analysis(zero_investment)),
        ]
        for payload in payloads:
            for number in _walk_numbers(payload):
                assert math.isfinite(number)


class TestThreadSafety:
    def test_concurrent_calls_are_deterministic(self, steady_cafe, base_case):
        scenarios = [
            {
                "name": f"S{i}",
                "probability": "0.25",
                "revenue_change_percent": i,
                "cost_change_percent": -i,
            }
            for i in range(-30, 31, 3)
        ]

        def run(_):
            projection = generate_cash_flow_projection(steady_cafe, 120)
            analyses = perform_scenario_analysis(base_case, scenarios)
            return to_payload(projection), to_payload(analyses)

        expected = run(None)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, range(32)))
        assert all(result == expected for result in results)
