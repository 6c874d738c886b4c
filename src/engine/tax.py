"""Simplified income tax on rental activity.

AfA on the total investment, interest deducted at the loans' original terms,
no loss carry-forward. Not a substitute for a tax advisor.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal
from typing import Iterable

from src.config import settings
from src.models.deal import DealInput, Loan

ZERO = Decimal("0")


def renovation_in_afa_base(deal: DealInput) -> bool:
    """Renovation counts towards the AfA base only above 15% of the purchase price.

    Strictly greater: spend of exactly 15% stays out.
    """
    return deal.renovation_costs > deal.purchase_price * settings.renovation_afa_threshold


def afa_base(deal: DealInput, total_investment: Decimal) -> Decimal:
    if renovation_in_afa_base(deal):
        return total_investment + deal.renovation_costs
    return total_investment


def annual_depreciation(base: Decimal, afa_rate: Decimal) -> Decimal:
    return base * afa_rate / 100


def total_interest_pa(loans: Iterable[Loan]) -> Decimal:
    """Nominal annual interest summed over loans, on original amounts."""
    return sum((loan.interest_pa for loan in loans), ZERO)


def taxable_income(
    annual_income: Decimal,
    interest_pa: Decimal,
    depreciation: Decimal,
    housegeld_pa: Decimal,
) -> Decimal:
    """Taxable income = rent - interest - AfA - Hausgeld.

    Reserves are not deductible; principal payments are not deductible.
    """
    return annual_income - interest_pa - depreciation - housegeld_pa


def tax_burden(taxable: Decimal, marginal_tax_rate: Decimal) -> Decimal:
    """Annual tax. Losses produce no refund."""
    return max(ZERO, taxable * marginal_tax_rate / 100)


def future_depreciation(base: Decimal, depreciation: Decimal, years: int) -> Decimal:
    """AfA still available after ``years`` of straight-line claims.

    Never exceeds the regular annual amount or the undepreciated remainder.
    """
    remaining = max(ZERO, base - depreciation * years)
    if remaining <= 0:
        return ZERO
    return min(depreciation, remaining)
