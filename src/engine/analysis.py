"""Deal analysis orchestrator: composes the engine sub-modules into DealMetrics.

Pure computation. No I/O. DealInput + ScenarioInput in, DealMetrics out.
"""

import logging
from decimal import Decimal

from src.models.deal import DealInput, ScenarioInput
from src.models.results import DealMetrics, IncomeMetrics, LoanDetail

from src.engine.acquisition import acquisition_costs, total_investment
from src.engine.debt import balance_at_fixed_rate_end, monthly_payment
from src.engine.income import (
    deductible_housegeld_pa,
    gross_income_mo,
    non_recoverable_mo,
    income_pa,
    yield_gross_pct,
    yield_net_pct,
    multiplier,
)
from src.engine.tax import (
    afa_base,
    annual_depreciation,
    total_interest_pa,
    taxable_income,
    tax_burden,
)
from src.engine.cashflow import (
    annuity_pa,
    cashflow_pre_tax_mo,
    cashflow_post_tax_mo,
    equity_yield_pct,
)
from src.engine.scenario import horizon_years, new_annuity_pa, project_scenario

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _income_metrics(
    deal: DealInput,
    *,
    soll: bool,
    investment: Decimal,
    depreciation: Decimal,
    interest_pa: Decimal,
    debt_service_pa: Decimal,
) -> IncomeMetrics:
    gross_mo = gross_income_mo(deal, soll)
    non_rec_mo = non_recoverable_mo(deal, soll)
    annual_income = income_pa(deal, soll)
    non_rec_pa = non_rec_mo * 12

    taxable = taxable_income(
        annual_income, interest_pa, depreciation, deductible_housegeld_pa(deal, soll)
    )
    tax = tax_burden(taxable, deal.marginal_tax_rate)

    pre_tax = cashflow_pre_tax_mo(annual_income, non_rec_pa, debt_service_pa)
    post_tax = cashflow_post_tax_mo(pre_tax, tax)

    return IncomeMetrics(
        gross_income_mo=gross_mo,
        non_recoverable_mo=non_rec_mo,
        net_income_mo=gross_mo - non_rec_mo,
        yield_gross_pct=yield_gross_pct(annual_income, deal.purchase_price),
        yield_net_pct=yield_net_pct(annual_income, non_rec_pa, investment),
        multiplier=multiplier(deal.purchase_price, annual_income),
        equity_yield_pct=equity_yield_pct(post_tax, deal.equity),
        annuity_mo=debt_service_pa / 12,
        taxable_income_pa=taxable,
        tax_mo=tax / 12,
        cashflow_pre_tax_mo=pre_tax,
        cashflow_post_tax_mo=post_tax,
    )


def analyze_deal(deal: DealInput, scenario: ScenarioInput | None = None) -> DealMetrics:
    """Run the complete acquisition analysis.

    Returns DealMetrics with IST figures, SOLL figures when SOLL income was
    entered, per-loan financing detail and the post-rate-lock projection.
    """
    scenario = scenario or ScenarioInput()

    # Acquisition
    knk = acquisition_costs(deal)
    investment = total_investment(deal)

    # Financing
    interest_pa = total_interest_pa(deal.loans)
    debt_service_pa = annuity_pa(deal.loans)
    balances = [balance_at_fixed_rate_end(loan) for loan in deal.loans]
    loan_details = [
        LoanDetail(
            amount=loan.amount,
            fixed_years=loan.fixed_years,
            annuity_mo=monthly_payment(loan),
            interest_pa=loan.interest_pa,
            balance_at_horizon=balance,
            new_annuity_mo=new_annuity_pa(balance, scenario) / 12,
        )
        for loan, balance in zip(deal.loans, balances)
    ]

    # Depreciation
    base = afa_base(deal, investment)
    depreciation = annual_depreciation(base, deal.afa_rate)

    common = dict(
        investment=investment,
        depreciation=depreciation,
        interest_pa=interest_pa,
        debt_service_pa=debt_service_pa,
    )
    ist = _income_metrics(deal, soll=False, **common)
    soll = _income_metrics(deal, soll=True, **common) if deal.soll_has_values else None

    # Scenario after Zinsbindungsende
    base_soll = deal.soll_has_values
    projection = project_scenario(
        deal.loans,
        scenario,
        base_income_pa=income_pa(deal, soll=base_soll),
        base_non_recoverable_pa=non_recoverable_mo(deal, soll=base_soll) * 12,
        housegeld_pa=deal.housegeld * 12,
        afa_base=base,
        annual_depreciation=depreciation,
        marginal_tax_rate=deal.marginal_tax_rate,
        target_year=deal.target_year,
        balances=balances,
    )

    logger.debug(
        "Analyzed deal: price=%s loans=%d soll=%s horizon=%d",
        deal.purchase_price, len(deal.loans), deal.soll_has_values, projection.horizon_years,
    )

    return DealMetrics(
        acquisition_costs=knk,
        total_investment=investment,
        ist=ist,
        soll=soll,
        afa_base=base,
        annual_depreciation=depreciation,
        loans=loan_details,
        loan_balance_at_horizon=sum(balances, ZERO),
        horizon_years=horizon_years(deal.loans),
        scenario=projection,
    )
