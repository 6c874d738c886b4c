from dataclasses import replace
from decimal import Decimal

from src.config import settings
from src.engine.acquisition import acquisition_cost_rate, acquisition_costs, total_investment
from src.models.deal import DealInput, Loan, ScenarioInput


class TestAcquisitionCosts:
    def test_combined_rate(self, canonical_deal):
        assert acquisition_cost_rate(canonical_deal) == Decimal("10.57")

    def test_knk(self, canonical_deal):
        # 300000 * 10.57%
        assert acquisition_costs(canonical_deal) == Decimal("31710")

    def test_zero_price(self, canonical_deal):
        deal = replace(canonical_deal, purchase_price=Decimal("0"))
        assert acquisition_costs(deal) == 0


class TestTotalInvestment:
    def test_without_renovation(self, canonical_deal):
        assert total_investment(canonical_deal) == Decimal("331710")

    def test_renovation_added(self, canonical_deal):
        deal = replace(canonical_deal, renovation_costs=Decimal("20000"))
        assert total_investment(deal) == Decimal("351710")

    def test_negative_price_propagates(self, canonical_deal):
        deal = replace(canonical_deal, purchase_price=Decimal("-100000"))
        assert total_investment(deal) == Decimal("-110570")


class TestDefaults:
    def test_deal_defaults_from_settings(self):
        deal = DealInput(purchase_price=Decimal("100000"))
        assert deal.transfer_tax_rate == settings.default_transfer_tax_rate
        assert deal.broker_rate == settings.default_broker_rate
        assert deal.afa_rate == settings.default_afa_rate
        assert deal.marginal_tax_rate == settings.default_marginal_tax_rate
        assert acquisition_costs(deal) == Decimal("10570")

    def test_loan_and_scenario_defaults(self):
        loan = Loan(Decimal("100000"), Decimal("3"), Decimal("2"))
        assert loan.fixed_years == settings.default_fixed_years
        scenario = ScenarioInput()
        assert scenario.rent_growth_rate == settings.default_rent_growth_rate
        assert scenario.new_repayment_rate == settings.default_new_repayment_rate
