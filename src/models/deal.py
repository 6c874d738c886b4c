from dataclasses import dataclass, field
from decimal import Decimal

from src.config import settings


@dataclass(frozen=True)
class Loan:
    """One tranche of acquisition financing. Rates are percent (3.5 = 3.5%)."""
    amount: Decimal
    interest_rate: Decimal
    repayment_rate: Decimal  # Anfangstilgung p.a.
    fixed_years: int = settings.default_fixed_years  # Zinsbindung
    fixed_annuity: Decimal | None = None  # Declared monthly payment, overrides the flat payment

    @property
    def interest_pa(self) -> Decimal:
        """Nominal annual interest on the original amount."""
        return self.amount * self.interest_rate / 100

    @property
    def annuity_pa(self) -> Decimal:
        """Annual debt service at the initial terms."""
        if self.fixed_annuity:
            return self.fixed_annuity * 12
        return self.amount * (self.interest_rate + self.repayment_rate) / 100


@dataclass(frozen=True)
class DealInput:
    # Purchase
    purchase_price: Decimal
    transfer_tax_rate: Decimal = settings.default_transfer_tax_rate  # Grunderwerbsteuer
    broker_rate: Decimal = settings.default_broker_rate
    notary_rate: Decimal = settings.default_notary_rate
    registry_rate: Decimal = settings.default_registry_rate
    renovation_costs: Decimal = Decimal("0")

    # Income IST (monthly)
    cold_rent_ist: Decimal = Decimal("0")
    garage_ist: Decimal = Decimal("0")
    other_costs_ist: Decimal = Decimal("0")  # Informational, not part of any formula

    # Income SOLL (monthly)
    cold_rent_soll: Decimal = Decimal("0")
    garage_soll: Decimal = Decimal("0")
    other_costs_soll: Decimal = Decimal("0")
    target_year: int = 0  # Year after purchase when SOLL income is reached

    # Non-recoverable costs (monthly)
    housegeld: Decimal = Decimal("0")
    reserves: Decimal = Decimal("0")

    # Financing
    equity: Decimal = Decimal("0")
    loans: tuple[Loan, ...] = field(default_factory=tuple)

    # Tax
    afa_rate: Decimal = settings.default_afa_rate
    building_share: Decimal = settings.default_building_share  # Kept for a land/building split, not used yet
    marginal_tax_rate: Decimal = settings.default_marginal_tax_rate

    @property
    def gross_ist_mo(self) -> Decimal:
        return self.cold_rent_ist + self.garage_ist

    @property
    def gross_soll_mo(self) -> Decimal:
        return self.cold_rent_soll + self.garage_soll

    @property
    def soll_has_values(self) -> bool:
        return self.gross_soll_mo > 0

    @property
    def non_recoverable_mo(self) -> Decimal:
        return self.housegeld + self.reserves


@dataclass(frozen=True)
class ScenarioInput:
    """Terms applied to each loan's outstanding balance once its rate lock ends."""
    rent_growth_rate: Decimal = settings.default_rent_growth_rate
    new_interest_rate: Decimal = settings.default_new_interest_rate
    new_repayment_rate: Decimal = settings.default_new_repayment_rate
