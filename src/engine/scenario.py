"""Projection past the end of the fixed-rate period (Zinsbindungsende).

Every loan is refinanced on its remaining balance at the scenario terms;
rent grows from the SOLL level (IST when no SOLL was entered) until the
last rate lock expires.

Pure functions. No I/O.
"""

from decimal import Decimal
from typing import Sequence

from src.engine.cashflow import cashflow_pre_tax_mo, cashflow_post_tax_mo
from src.engine.debt import balance_at_fixed_rate_end
from src.engine.tax import future_depreciation, taxable_income, tax_burden
from src.models.deal import Loan, ScenarioInput
from src.models.results import ScenarioProjection

ZERO = Decimal("0")


def horizon_years(loans: Sequence[Loan]) -> int:
    """Shared projection horizon: the longest rate lock. 0 without loans."""
    return max((loan.fixed_years for loan in loans), default=0)


def refinanced_rate(scenario: ScenarioInput) -> Decimal:
    """Interest rate applied after the lock. Negative input is treated as 0."""
    return max(ZERO, scenario.new_interest_rate)


def new_annuity_pa(balance: Decimal, scenario: ScenarioInput) -> Decimal:
    return balance * (refinanced_rate(scenario) + scenario.new_repayment_rate) / 100


def grown_income_pa(base_income_pa: Decimal, growth_rate: Decimal, years: int) -> Decimal:
    if years <= 0:
        return base_income_pa
    return base_income_pa * (1 + growth_rate / 100) ** years


def project_scenario(
    loans: Sequence[Loan],
    scenario: ScenarioInput,
    *,
    base_income_pa: Decimal,
    base_non_recoverable_pa: Decimal,
    housegeld_pa: Decimal,
    afa_base: Decimal,
    annual_depreciation: Decimal,
    marginal_tax_rate: Decimal,
    target_year: int,
    balances: Sequence[Decimal] | None = None,
) -> ScenarioProjection:
    """Cashflow after the last rate lock ends.

    Args:
        base_income_pa: Annual rent to grow from (SOLL if entered, else IST)
        base_non_recoverable_pa: Non-recoverable costs matching that base
        housegeld_pa: Deductible Hausgeld, held constant
        balances: Per-loan Restschuld at each loan's own fixed_years.
            Computed here when not supplied.
    """
    horizon = horizon_years(loans)
    if balances is None:
        balances = [balance_at_fixed_rate_end(loan) for loan in loans]

    new_annuity = sum((new_annuity_pa(b, scenario) for b in balances), ZERO)
    new_interest = sum((b * refinanced_rate(scenario) / 100 for b in balances), ZERO)

    growth_years = max(0, horizon - target_year)
    future_income = grown_income_pa(base_income_pa, scenario.rent_growth_rate, growth_years)

    future_afa = future_depreciation(afa_base, annual_depreciation, horizon)
    taxable = taxable_income(future_income, new_interest, future_afa, housegeld_pa)
    tax = tax_burden(taxable, marginal_tax_rate)

    pre_tax = cashflow_pre_tax_mo(future_income, base_non_recoverable_pa, new_annuity)
    post_tax = cashflow_post_tax_mo(pre_tax, tax)

    return ScenarioProjection(
        horizon_years=horizon,
        growth_years=growth_years,
        new_annuity_mo=new_annuity / 12,
        new_interest_pa=new_interest,
        projected_income_mo=future_income / 12,
        future_depreciation=future_afa,
        projected_tax_mo=tax / 12,
        projected_cashflow_pre_tax_mo=pre_tax,
        projected_cashflow_post_tax_mo=post_tax,
    )
