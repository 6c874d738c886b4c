"""Loan routes: amortization schedule (Tilgungsplan) for a single loan."""

from fastapi import APIRouter

from src.api.routes.analysis import build_loan
from src.api.schemas import ScheduleRequest, ScheduleResponse
from src.api.serialize import round_money, rounded_dict
from src.engine.debt import amortization_schedule, balance_after, yearly_debt_summary

router = APIRouter(prefix="/api/v1", tags=["loans"])


@router.post("/loans/schedule", response_model=ScheduleResponse)
def schedule(req: ScheduleRequest):
    """Month-by-month schedule plus yearly aggregation."""
    loan = build_loan(req.loan)
    amort = amortization_schedule(loan, req.months)
    yearly = [round_money(y) for y in yearly_debt_summary(amort)]
    data = rounded_dict(amort)
    return ScheduleResponse(
        monthly_payment=data["monthly_payment"],
        total_interest=data["total_interest"],
        total_principal=data["total_principal"],
        ending_balance=round_money(balance_after(loan, req.months)),
        payments=data["payments"],
        yearly=yearly,
    )
