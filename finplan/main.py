"""FastAPI application exposing the financial planning analyzers."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from finplan.config import get_settings
from finplan.engine import (
    analyze_budget_variance,
    analyze_profitability,
    calculate_financial_ratios,
    calculate_roi_analysis,
    generate_cash_flow_projection,
    perform_scenario_analysis,
)
from finplan.engine.result import to_payload
from finplan.hooks import log_analysis_call
from finplan.models import (
    BalanceSheetInput,
    BaseCase,
    BudgetItem,
    CashFlowInput,
    InvestmentInput,
    ProfitabilityInput,
    ScenarioInput,
)

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CashFlowRequest(CashFlowInput):
    periods: Optional[int] = None


class BudgetVarianceRequest(BaseModel):
    items: list[BudgetItem]


class ScenarioAnalysisRequest(BaseModel):
    base_case: BaseCase
    scenarios: list[ScenarioInput]


def _respond(analyzer: str, body: BaseModel, result: Any) -> Any:
    log_analysis_call(analyzer, arguments=body.model_dump(mode="json"), result=result)
    return to_payload(result, settings.output_decimal_places)


@app.post("/api/cash-flow")
async def cash_flow(body: CashFlowRequest):
    """Project monthly cash flow."""
    periods = body.periods if body.periods is not None else settings.default_projection_periods
    try:
        result = generate_cash_flow_projection(body, periods)
    except ValueError as e:
        logger.warning("Rejected cash flow request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _respond("cash_flow", body, result)


@app.post("/api/roi")
async def roi(body: InvestmentInput):
    """Analyze a single investment."""
    return _respond("roi", body, calculate_roi_analysis(body))


@app.post("/api/profitability")
async def profitability(body: ProfitabilityInput):
    """Margin waterfall and break-even revenue."""
    return _respond("profitability", body, analyze_profitability(body))


@app.post("/api/budget-variance")
async def budget_variance(body: BudgetVarianceRequest):
    """Classify budget vs. actual variances."""
    return _respond("budget_variance", body, analyze_budget_variance(body.items))


@app.post("/api/ratios")
async def ratios(body: BalanceSheetInput):
    """Financial ratio panels for one balance-sheet snapshot."""
    return _respond("ratios", body, calculate_financial_ratios(body))


@app.post("/api/scenarios")
async def scenarios(body: ScenarioAnalysisRequest):
    """What-if deltas for each scenario against the base case."""
    return _respond("scenarios", body, perform_scenario_analysis(body.base_case, body.scenarios))


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())
