from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class IncomeMetrics:
    """Yield, tax and cashflow figures for one income scenario (IST or SOLL)."""

    gross_income_mo: Decimal = Decimal("0")
    non_recoverable_mo: Decimal = Decimal("0")
    net_income_mo: Decimal = Decimal("0")

    yield_gross_pct: Decimal = Decimal("0")
    yield_net_pct: Decimal = Decimal("0")
    multiplier: Decimal = Decimal("0")
    equity_yield_pct: Decimal = Decimal("0")

    annuity_mo: Decimal = Decimal("0")
    taxable_income_pa: Decimal = Decimal("0")
    tax_mo: Decimal = Decimal("0")
    cashflow_pre_tax_mo: Decimal = Decimal("0")
    cashflow_post_tax_mo: Decimal = Decimal("0")


@dataclass(frozen=True)
class LoanDetail:
    amount: Decimal
    fixed_years: int
    annuity_mo: Decimal
    interest_pa: Decimal
    balance_at_horizon: Decimal  # Restschuld at the loan's own fixed_years
    new_annuity_mo: Decimal


@dataclass(frozen=True)
class ScenarioProjection:
    horizon_years: int = 0
    growth_years: int = 0
    new_annuity_mo: Decimal = Decimal("0")
    new_interest_pa: Decimal = Decimal("0")
    projected_income_mo: Decimal = Decimal("0")
    future_depreciation: Decimal = Decimal("0")
    projected_tax_mo: Decimal = Decimal("0")
    projected_cashflow_pre_tax_mo: Decimal = Decimal("0")
    projected_cashflow_post_tax_mo: Decimal = Decimal("0")


@dataclass(frozen=True)
class DealMetrics:
    acquisition_costs: Decimal
    total_investment: Decimal
    ist: IncomeMetrics
    soll: IncomeMetrics | None  # None when no SOLL income was entered

    # Depreciation
    afa_base: Decimal = Decimal("0")
    annual_depreciation: Decimal = Decimal("0")

    # Financing
    loans: list[LoanDetail] = field(default_factory=list)
    loan_balance_at_horizon: Decimal = Decimal("0")
    horizon_years: int = 0

    scenario: ScenarioProjection = field(default_factory=ScenarioProjection)

    @property
    def soll_has_values(self) -> bool:
        return self.soll is not None
