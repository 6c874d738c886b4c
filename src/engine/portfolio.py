"""Portfolio cockpit: current debt, debt service and rent potential across holdings.

Uses the same flat-payment amortization as the deal analysis so that
"current debt" figures agree with projected balances.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Sequence

from src.engine.debt import current_debt
from src.models.deal import Loan

ZERO = Decimal("0")
UNASSIGNED = "unassigned"


@dataclass(frozen=True)
class PortfolioLoan:
    loan: Loan
    start_date: date | None = None
    property_id: str = UNASSIGNED


@dataclass(frozen=True)
class PortfolioProperty:
    market_value: Decimal = Decimal("0")
    rent_ist_mo: Decimal = Decimal("0")  # Cold rent of active leases
    rent_soll_mo: Decimal = Decimal("0")  # Target rent over all units


@dataclass(frozen=True)
class LoanTotals:
    """Loan list totals for one property. Annuity is monthly."""
    amount: Decimal
    current_debt: Decimal
    annuity_mo: Decimal


@dataclass(frozen=True)
class PortfolioSummary:
    total_market_value: Decimal
    total_debt: Decimal
    monthly_income: Decimal
    monthly_debt_service: Decimal
    net_cashflow_mo: Decimal
    ltv_pct: Decimal
    rent_potential_mo: Decimal
    loans_by_property: dict[str, LoanTotals] = field(default_factory=dict)


def standard_annuity(loan: Loan) -> Decimal:
    """Monthly payment shown in loan lists.

    A declared fixed annuity wins; otherwise all of amount, rate and
    repayment must be set, else 0.
    """
    if loan.fixed_annuity:
        return loan.fixed_annuity
    if not loan.amount or not loan.interest_rate or not loan.repayment_rate:
        return ZERO
    return loan.amount * (loan.interest_rate + loan.repayment_rate) / 100 / 12


def loan_totals_by_property(
    loans: Sequence[PortfolioLoan], as_of: date | None = None
) -> dict[str, LoanTotals]:
    """Group loans by property: original amount, current debt and monthly annuity.

    Annuities use the loan-list convention of standard_annuity.
    """
    as_of = as_of or date.today()
    grouped: dict[str, list[PortfolioLoan]] = {}
    for pl in loans:
        grouped.setdefault(pl.property_id, []).append(pl)

    return {
        property_id: LoanTotals(
            amount=sum((pl.loan.amount for pl in group), ZERO),
            current_debt=sum(
                (current_debt(pl.loan, pl.start_date, as_of) for pl in group), ZERO
            ),
            annuity_mo=sum((standard_annuity(pl.loan) for pl in group), ZERO),
        )
        for property_id, group in grouped.items()
    }


def portfolio_summary(
    properties: Sequence[PortfolioProperty],
    loans: Sequence[PortfolioLoan],
    as_of: date | None = None,
) -> PortfolioSummary:
    as_of = as_of or date.today()

    market_value = sum((p.market_value for p in properties), ZERO)
    income = sum((p.rent_ist_mo for p in properties), ZERO)
    target = sum((p.rent_soll_mo for p in properties), ZERO)

    debt = sum((current_debt(pl.loan, pl.start_date, as_of) for pl in loans), ZERO)
    debt_service = sum((pl.loan.annuity_pa / 12 for pl in loans), ZERO)

    ltv = debt / market_value * 100 if market_value > 0 else ZERO

    return PortfolioSummary(
        total_market_value=market_value,
        total_debt=debt,
        monthly_income=income,
        monthly_debt_service=debt_service,
        net_cashflow_mo=income - debt_service,
        ltv_pct=ltv,
        rent_potential_mo=target - income,
        loans_by_property=loan_totals_by_property(loans, as_of),
    )
