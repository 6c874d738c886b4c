"""Acquisition costs (Kaufnebenkosten) and total investment.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from src.models.deal import DealInput


def acquisition_cost_rate(deal: DealInput) -> Decimal:
    """Combined KNK rate in percent: transfer tax + broker + notary + registry."""
    return deal.transfer_tax_rate + deal.broker_rate + deal.notary_rate + deal.registry_rate


def acquisition_costs(deal: DealInput) -> Decimal:
    return deal.purchase_price * acquisition_cost_rate(deal) / 100


def total_investment(deal: DealInput) -> Decimal:
    """Purchase price + KNK + renovation."""
    return deal.purchase_price + acquisition_costs(deal) + deal.renovation_costs
