"""Portfolio cockpit route."""

import logging

from fastapi import APIRouter

from src.api.routes.analysis import build_loan
from src.api.schemas import PortfolioRequest, PortfolioSummaryResponse
from src.api.serialize import rounded_dict
from src.engine.portfolio import (
    PortfolioLoan,
    PortfolioProperty,
    portfolio_summary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["portfolio"])


@router.post("/portfolio/summary", response_model=PortfolioSummaryResponse)
def summary(req: PortfolioRequest):
    """Current debt, LTV, debt service and rent potential across holdings."""
    properties = [PortfolioProperty(**p.model_dump()) for p in req.properties]
    loans = [
        PortfolioLoan(
            loan=build_loan(loan),
            start_date=loan.start_date,
            property_id=loan.property_id,
        )
        for loan in req.loans
    ]
    logger.info(
        "Portfolio summary: %d properties, %d loans", len(properties), len(loans)
    )
    result = portfolio_summary(properties, loans, as_of=req.as_of)
    return PortfolioSummaryResponse.model_validate(rounded_dict(result))
