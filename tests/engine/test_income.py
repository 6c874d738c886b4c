from dataclasses import replace
from decimal import Decimal

from src.engine.income import (
    deductible_housegeld_pa,
    gross_income_mo,
    income_pa,
    multiplier,
    net_income_mo,
    non_recoverable_mo,
    yield_gross_pct,
    yield_net_pct,
)


class TestIncome:
    def test_gross_ist(self, canonical_deal):
        assert gross_income_mo(canonical_deal) == Decimal("1000")

    def test_gross_soll_includes_garage(self, canonical_deal):
        assert gross_income_mo(canonical_deal, soll=True) == Decimal("1500")

    def test_other_costs_not_in_income(self, canonical_deal):
        deal = replace(canonical_deal, other_costs_ist=Decimal("80"))
        assert gross_income_mo(deal) == Decimal("1000")

    def test_net_ist(self, canonical_deal):
        assert net_income_mo(canonical_deal) == Decimal("750")

    def test_annualized(self, canonical_deal):
        assert income_pa(canonical_deal) == Decimal("12000")
        assert income_pa(canonical_deal, soll=True) == Decimal("18000")


class TestNonRecoverable:
    def test_ist_always(self, ist_only_deal):
        assert non_recoverable_mo(ist_only_deal) == Decimal("250")

    def test_soll_when_active(self, canonical_deal):
        assert non_recoverable_mo(canonical_deal, soll=True) == Decimal("250")

    def test_soll_inactive_is_zero(self, ist_only_deal):
        assert ist_only_deal.soll_has_values is False
        assert non_recoverable_mo(ist_only_deal, soll=True) == 0
        assert deductible_housegeld_pa(ist_only_deal, soll=True) == 0

    def test_only_housegeld_deductible(self, canonical_deal):
        assert deductible_housegeld_pa(canonical_deal) == Decimal("2400")


class TestYields:
    def test_gross_yield(self):
        # 12000 / 300000
        assert yield_gross_pct(Decimal("12000"), Decimal("300000")) == Decimal("4.0")

    def test_gross_yield_zero_price(self):
        assert yield_gross_pct(Decimal("12000"), Decimal("0")) == 0

    def test_net_yield(self):
        y = yield_net_pct(Decimal("12000"), Decimal("3000"), Decimal("300000"))
        assert y == Decimal("3")

    def test_net_yield_zero_investment(self):
        assert yield_net_pct(Decimal("12000"), Decimal("3000"), Decimal("0")) == 0


class TestMultiplier:
    def test_factor(self):
        assert multiplier(Decimal("300000"), Decimal("12000")) == Decimal("25")

    def test_zero_income(self):
        assert multiplier(Decimal("300000"), Decimal("0")) == 0
