"""Analysis routes — the primary API entry point."""

import logging

from fastapi import APIRouter

from src.api.schemas import (
    AnalyzeDealRequest,
    AnalyzeDealResponse,
    DealMetricsResponse,
    DealRequest,
    LoanRequest,
    ScenarioRequest,
)
from src.api.serialize import rounded_dict
from src.engine.analysis import analyze_deal
from src.models.deal import DealInput, Loan, ScenarioInput
from src.models.results import DealMetrics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def build_loan(req: LoanRequest) -> Loan:
    return Loan(
        amount=req.amount,
        interest_rate=req.interest_rate,
        repayment_rate=req.repayment_rate,
        fixed_years=req.fixed_years,
        fixed_annuity=req.fixed_annuity,
    )


def _build_deal(req: DealRequest) -> DealInput:
    """Build engine input from request data."""
    fields = req.model_dump(exclude={"loans"})
    return DealInput(**fields, loans=tuple(build_loan(loan) for loan in req.loans))


def _build_scenario(req: ScenarioRequest) -> ScenarioInput:
    return ScenarioInput(**req.model_dump())


def _metrics_to_response(metrics: DealMetrics) -> DealMetricsResponse:
    """Convert engine DealMetrics to API response, rounding money for display."""
    data = rounded_dict(metrics)
    data["soll_has_values"] = metrics.soll_has_values
    return DealMetricsResponse.model_validate(data)


@router.post("/deals/analyze", response_model=AnalyzeDealResponse)
def analyze(req: AnalyzeDealRequest):
    """Deal + scenario in, acquisition metrics out. Stateless, no persistence."""
    deal = _build_deal(req.deal)
    scenario = _build_scenario(req.scenario)

    logger.info(
        "Analyzing deal: price=%s loans=%d", deal.purchase_price, len(deal.loans)
    )
    metrics = analyze_deal(deal, scenario)
    return AnalyzeDealResponse(metrics=_metrics_to_response(metrics))
