"""Rental income and yields: Bruttorendite, Nettorendite, Faktor.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from src.models.deal import DealInput

ZERO = Decimal("0")


def gross_income_mo(deal: DealInput, soll: bool = False) -> Decimal:
    """Cold rent + garage for IST (default) or SOLL."""
    return deal.gross_soll_mo if soll else deal.gross_ist_mo


def non_recoverable_mo(deal: DealInput, soll: bool = False) -> Decimal:
    """Hausgeld + reserves. Not deducted on the SOLL side until SOLL income is entered."""
    if soll and not deal.soll_has_values:
        return ZERO
    return deal.non_recoverable_mo


def deductible_housegeld_pa(deal: DealInput, soll: bool = False) -> Decimal:
    """Hausgeld is tax deductible, reserves are not. Same SOLL rule as above."""
    if soll and not deal.soll_has_values:
        return ZERO
    return deal.housegeld * 12


def net_income_mo(deal: DealInput, soll: bool = False) -> Decimal:
    return gross_income_mo(deal, soll) - non_recoverable_mo(deal, soll)


def income_pa(deal: DealInput, soll: bool = False) -> Decimal:
    return gross_income_mo(deal, soll) * 12


def yield_gross_pct(annual_income: Decimal, purchase_price: Decimal) -> Decimal:
    """Bruttorendite = annual rent / purchase price."""
    if purchase_price <= 0:
        return ZERO
    return annual_income / purchase_price * 100


def yield_net_pct(
    annual_income: Decimal, non_recoverable_pa: Decimal, total_investment: Decimal
) -> Decimal:
    """Nettorendite = (annual rent - non-recoverable costs) / total investment."""
    if total_investment <= 0:
        return ZERO
    return (annual_income - non_recoverable_pa) / total_investment * 100


def multiplier(purchase_price: Decimal, annual_income: Decimal) -> Decimal:
    """Kaufpreisfaktor = purchase price / annual rent."""
    if annual_income <= 0:
        return ZERO
    return purchase_price / annual_income
