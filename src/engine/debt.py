"""Amortization schedule computation.

Flat-payment convention: the monthly payment is fixed once from the initial
amount and rates (or a declared fixed annuity) and is not recalculated as the
balance amortizes. Balances are clamped at zero.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.models.deal import Loan

ZERO = Decimal("0")


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    payments: list[AmortizationPayment]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal

    @property
    def ending_balance(self) -> Decimal:
        if not self.payments:
            return ZERO
        return self.payments[-1].balance


def monthly_payment(loan: Loan) -> Decimal:
    """Monthly payment from the initial terms, or the declared fixed annuity."""
    return loan.annuity_pa / 12


def amortization_schedule(loan: Loan, months: int) -> AmortizationSchedule:
    """Simulate the loan month by month for the given horizon.

    Once the balance reaches zero it stays there; the final payment only
    covers what is left, nothing is carried over.
    """
    pmt = monthly_payment(loan)

    payments: list[AmortizationPayment] = []
    balance = loan.amount
    total_interest = ZERO
    total_principal = ZERO

    for period in range(1, months + 1):
        interest = balance * loan.interest_rate / 1200  # monthly rate, percent input
        principal_paid = pmt - interest
        new_balance = max(ZERO, balance - principal_paid)

        # Final payment adjustment
        if new_balance == ZERO:
            principal_paid = max(ZERO, balance)
            actual_payment = interest + principal_paid if balance > 0 else ZERO
        else:
            actual_payment = pmt

        balance = new_balance
        total_interest += interest
        total_principal += principal_paid

        payments.append(AmortizationPayment(
            period=period,
            payment=actual_payment,
            principal=principal_paid,
            interest=interest,
            balance=balance,
        ))

    return AmortizationSchedule(
        payments=payments,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_principal=total_principal,
    )


def balance_after(loan: Loan, months: int) -> Decimal:
    """Remaining balance (Restschuld) after the given number of months."""
    if months <= 0:
        return loan.amount
    return amortization_schedule(loan, months).ending_balance


def balance_at_fixed_rate_end(loan: Loan) -> Decimal:
    """Restschuld when the loan's own rate lock expires."""
    return balance_after(loan, loan.fixed_years * 12)


def months_elapsed(start: date, as_of: date) -> int:
    """Whole calendar months between two dates (day of month ignored)."""
    return (as_of.year - start.year) * 12 + (as_of.month - start.month)


def current_debt(loan: Loan, start: date | None, as_of: date | None = None) -> Decimal:
    """Outstanding balance today, or at ``as_of``.

    Loans without a start date, or starting in the future, report the full amount.
    """
    if start is None:
        return loan.amount
    as_of = as_of or date.today()
    elapsed = months_elapsed(start, as_of)
    if elapsed <= 0:
        return loan.amount
    return balance_after(loan, elapsed)


def yearly_debt_summary(schedule: AmortizationSchedule) -> list[dict]:
    """Aggregate amortization schedule by year.

    Returns one dict per loan year (1-based int ``year``) with Decimal
    principal, interest, debt_service and ending_balance.
    """
    yearly: list[dict] = []
    year_principal = ZERO
    year_interest = ZERO
    year_debt_service = ZERO

    for p in schedule.payments:
        year_principal += p.principal
        year_interest += p.interest
        year_debt_service += p.payment

        if p.period % 12 == 0 or p.period == len(schedule.payments):
            yearly.append({
                "year": (p.period - 1) // 12 + 1,
                "principal": year_principal,
                "interest": year_interest,
                "debt_service": year_debt_service,
                "ending_balance": p.balance,
            })
            year_principal = ZERO
            year_interest = ZERO
            year_debt_service = ZERO

    return yearly
