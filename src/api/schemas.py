"""Pydantic schemas for API request/response models.

Requests carry the input bounds the engine itself does not enforce:
non-negative money, rates within 0..999 percent, positive rate locks.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from src.config import settings
from src.engine.portfolio import UNASSIGNED

MAX_RATE = Decimal("999")
MAX_MONEY = Decimal("1000000000000")


# ---- Request schemas ----

class LoanRequest(BaseModel):
    amount: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    interest_rate: Decimal = Field(settings.default_interest_rate, ge=0, le=MAX_RATE)
    repayment_rate: Decimal = Field(settings.default_repayment_rate, ge=0, le=MAX_RATE)
    fixed_years: int = Field(settings.default_fixed_years, gt=0, le=50)
    fixed_annuity: Decimal | None = Field(None, ge=0, le=MAX_MONEY, description="Declared monthly payment")


class DealRequest(BaseModel):
    # Purchase
    purchase_price: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    transfer_tax_rate: Decimal = Field(settings.default_transfer_tax_rate, ge=0, le=MAX_RATE)
    broker_rate: Decimal = Field(settings.default_broker_rate, ge=0, le=MAX_RATE)
    notary_rate: Decimal = Field(settings.default_notary_rate, ge=0, le=MAX_RATE)
    registry_rate: Decimal = Field(settings.default_registry_rate, ge=0, le=MAX_RATE)
    renovation_costs: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)

    # Income IST / SOLL (monthly)
    cold_rent_ist: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    garage_ist: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    other_costs_ist: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    cold_rent_soll: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    garage_soll: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    other_costs_soll: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    target_year: int = Field(0, ge=0)

    # Non-recoverable costs (monthly)
    housegeld: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    reserves: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)

    # Financing
    equity: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    loans: list[LoanRequest] = Field(default_factory=list)

    # Tax
    afa_rate: Decimal = Field(settings.default_afa_rate, ge=0, le=MAX_RATE)
    building_share: Decimal = Field(settings.default_building_share, ge=0, le=100)
    marginal_tax_rate: Decimal = Field(settings.default_marginal_tax_rate, ge=0, le=100)


class ScenarioRequest(BaseModel):
    rent_growth_rate: Decimal = Field(settings.default_rent_growth_rate, ge=-100, le=50)
    new_interest_rate: Decimal = Field(settings.default_new_interest_rate, ge=0, le=MAX_RATE)
    new_repayment_rate: Decimal = Field(settings.default_new_repayment_rate, ge=0, le=MAX_RATE)


class AnalyzeDealRequest(BaseModel):
    deal: DealRequest
    scenario: ScenarioRequest = Field(default_factory=ScenarioRequest)


class ScheduleRequest(BaseModel):
    loan: LoanRequest
    months: int = Field(..., ge=0, le=1200)


class PortfolioLoanRequest(LoanRequest):
    start_date: date | None = None
    property_id: str = Field(UNASSIGNED, min_length=1, max_length=100)


class PortfolioPropertyRequest(BaseModel):
    market_value: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    rent_ist_mo: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    rent_soll_mo: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)


class PortfolioRequest(BaseModel):
    properties: list[PortfolioPropertyRequest] = Field(default_factory=list)
    loans: list[PortfolioLoanRequest] = Field(default_factory=list)
    as_of: date | None = None


# ---- Response schemas ----

class IncomeMetricsResponse(BaseModel):
    gross_income_mo: Decimal
    non_recoverable_mo: Decimal
    net_income_mo: Decimal
    yield_gross_pct: Decimal
    yield_net_pct: Decimal
    multiplier: Decimal
    equity_yield_pct: Decimal
    annuity_mo: Decimal
    taxable_income_pa: Decimal
    tax_mo: Decimal
    cashflow_pre_tax_mo: Decimal
    cashflow_post_tax_mo: Decimal


class LoanDetailResponse(BaseModel):
    amount: Decimal
    fixed_years: int
    annuity_mo: Decimal
    interest_pa: Decimal
    balance_at_horizon: Decimal
    new_annuity_mo: Decimal


class ScenarioProjectionResponse(BaseModel):
    horizon_years: int
    growth_years: int
    new_annuity_mo: Decimal
    new_interest_pa: Decimal
    projected_income_mo: Decimal
    future_depreciation: Decimal
    projected_tax_mo: Decimal
    projected_cashflow_pre_tax_mo: Decimal
    projected_cashflow_post_tax_mo: Decimal


class DealMetricsResponse(BaseModel):
    acquisition_costs: Decimal
    total_investment: Decimal
    soll_has_values: bool
    ist: IncomeMetricsResponse
    soll: IncomeMetricsResponse | None = None
    afa_base: Decimal
    annual_depreciation: Decimal
    loans: list[LoanDetailResponse] = []
    loan_balance_at_horizon: Decimal
    horizon_years: int
    scenario: ScenarioProjectionResponse


class AnalyzeDealResponse(BaseModel):
    metrics: DealMetricsResponse


class PaymentResponse(BaseModel):
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class YearlyDebtResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class ScheduleResponse(BaseModel):
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    ending_balance: Decimal
    payments: list[PaymentResponse]
    yearly: list[YearlyDebtResponse]


class LoanTotalsResponse(BaseModel):
    amount: Decimal
    current_debt: Decimal
    annuity_mo: Decimal


class PortfolioSummaryResponse(BaseModel):
    total_market_value: Decimal
    total_debt: Decimal
    monthly_income: Decimal
    monthly_debt_service: Decimal
    net_cashflow_mo: Decimal
    ltv_pct: Decimal
    rent_potential_mo: Decimal
    loans_by_property: dict[str, LoanTotalsResponse] = Field(default_factory=dict)


class TransferTaxRateResponse(BaseModel):
    state: str
    rate: Decimal
