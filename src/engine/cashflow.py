"""Debt service, pre/post-tax cashflow and equity yield.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal
from typing import Iterable

from src.models.deal import Loan

ZERO = Decimal("0")


def annuity_pa(loans: Iterable[Loan]) -> Decimal:
    """Annual debt service across loans.

    Uses the same per-loan payment as the amortization schedule.
    """
    return sum((loan.annuity_pa for loan in loans), ZERO)


def cashflow_pre_tax_mo(
    annual_income: Decimal, non_recoverable_pa: Decimal, debt_service_pa: Decimal
) -> Decimal:
    """Monthly cashflow before tax = (rent - non-recoverable costs - debt service) / 12."""
    return (annual_income - non_recoverable_pa - debt_service_pa) / 12


def cashflow_post_tax_mo(pre_tax_mo: Decimal, tax_pa: Decimal) -> Decimal:
    return pre_tax_mo - tax_pa / 12


def equity_yield_pct(post_tax_mo: Decimal, equity: Decimal) -> Decimal:
    """EK-Rendite = annual post-tax cashflow / equity."""
    if equity <= 0:
        return ZERO
    return post_tax_mo * 12 / equity * 100
