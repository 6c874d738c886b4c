"""Canonical test fixtures used across all engine and API tests.

Fixture: 300K € condo, 10.57% KNK, 1,000 €/mo IST rent, 1,500 €/mo SOLL rent,
one 240K € loan at 3.5% interest / 2% repayment, 10 years fixed.
"""

import pytest
from dataclasses import replace
from decimal import Decimal
from fastapi.testclient import TestClient

from src.api.app import app
from src.models.deal import DealInput, Loan, ScenarioInput


@pytest.fixture
def canonical_loan() -> Loan:
    return Loan(
        amount=Decimal("240000"),
        interest_rate=Decimal("3.5"),
        repayment_rate=Decimal("2"),
        fixed_years=10,
    )


@pytest.fixture
def canonical_deal(canonical_loan) -> DealInput:
    """300K € purchase with IST and SOLL income."""
    return DealInput(
        purchase_price=Decimal("300000"),
        transfer_tax_rate=Decimal("5"),
        broker_rate=Decimal("3.57"),
        notary_rate=Decimal("1.5"),
        registry_rate=Decimal("0.5"),
        renovation_costs=Decimal("0"),
        cold_rent_ist=Decimal("1000"),
        garage_ist=Decimal("0"),
        cold_rent_soll=Decimal("1400"),
        garage_soll=Decimal("100"),
        target_year=2,
        housegeld=Decimal("200"),
        reserves=Decimal("50"),
        equity=Decimal("91710"),
        loans=(canonical_loan,),
        afa_rate=Decimal("2"),
        building_share=Decimal("80"),
        marginal_tax_rate=Decimal("42"),
    )


@pytest.fixture
def ist_only_deal(canonical_deal) -> DealInput:
    """Same deal without any SOLL income entered."""
    return replace(
        canonical_deal,
        cold_rent_soll=Decimal("0"),
        garage_soll=Decimal("0"),
        other_costs_soll=Decimal("0"),
    )


@pytest.fixture
def canonical_scenario() -> ScenarioInput:
    return ScenarioInput(
        rent_growth_rate=Decimal("3"),
        new_interest_rate=Decimal("4.5"),
        new_repayment_rate=Decimal("2"),
    )


@pytest.fixture
def canonical_payload() -> dict:
    """JSON body for POST /api/v1/deals/analyze matching canonical_deal."""
    return {
        "deal": {
            "purchase_price": 300000,
            "cold_rent_ist": 1000,
            "cold_rent_soll": 1400,
            "garage_soll": 100,
            "target_year": 2,
            "housegeld": 200,
            "reserves": 50,
            "equity": 91710,
            "loans": [
                {"amount": 240000, "interest_rate": 3.5, "repayment_rate": 2, "fixed_years": 10},
            ],
        },
        "scenario": {
            "rent_growth_rate": 3,
            "new_interest_rate": 4.5,
            "new_repayment_rate": 2,
        },
    }


@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)
