from decimal import Decimal


class TestPortfolioEndpoint:
    def test_summary(self, client):
        body = {
            "properties": [
                {"market_value": 300000, "rent_ist_mo": 1200, "rent_soll_mo": 1400},
                {"market_value": 200000, "rent_ist_mo": 800, "rent_soll_mo": 1100},
            ],
            "loans": [
                {"amount": 200000, "interest_rate": 4, "repayment_rate": 2},
            ],
            "as_of": "2025-01-01",
        }
        r = client.post("/api/v1/portfolio/summary", json=body)
        assert r.status_code == 200, r.text
        data = r.json()
        assert Decimal(data["total_debt"]) == Decimal("200000")
        assert Decimal(data["ltv_pct"]) == Decimal("40")
        assert Decimal(data["net_cashflow_mo"]) == Decimal("1000")
        assert Decimal(data["rent_potential_mo"]) == Decimal("500")

    def test_loans_grouped_by_property(self, client):
        body = {
            "loans": [
                {"amount": 200000, "interest_rate": 4, "repayment_rate": 2, "property_id": "haus-1"},
                {"amount": 100000, "interest_rate": 3, "repayment_rate": 3, "property_id": "haus-1"},
                {"amount": 80000, "interest_rate": 4, "repayment_rate": 0},
            ],
            "as_of": "2025-01-01",
        }
        r = client.post("/api/v1/portfolio/summary", json=body)
        assert r.status_code == 200, r.text
        groups = r.json()["loans_by_property"]
        assert set(groups) == {"haus-1", "unassigned"}
        assert Decimal(groups["haus-1"]["amount"]) == Decimal("300000")
        assert Decimal(groups["haus-1"]["annuity_mo"]) == Decimal("1500")
        assert Decimal(groups["unassigned"]["annuity_mo"]) == 0

    def test_debt_reduced_by_start_date(self, client):
        body = {
            "loans": [
                {"amount": 200000, "interest_rate": 4, "repayment_rate": 2, "start_date": "2020-01-01"},
            ],
            "as_of": "2025-01-01",
        }
        data = client.post("/api/v1/portfolio/summary", json=body).json()
        assert Decimal(data["total_debt"]) < Decimal("200000")

    def test_empty(self, client):
        r = client.post("/api/v1/portfolio/summary", json={})
        assert r.status_code == 200, r.text
        assert Decimal(r.json()["ltv_pct"]) == 0
        assert r.json()["loans_by_property"] == {}


class TestReferenceEndpoints:
    def test_transfer_tax_sorted(self, client):
        r = client.get("/api/v1/reference/transfer-tax")
        assert r.status_code == 200
        rates = r.json()
        assert rates[0] == {"state": "Bayern", "rate": "3.5"}
        values = [Decimal(x["rate"]) for x in rates]
        assert values == sorted(values)
        assert len(rates) == 16

    def test_health(self, client):
        r = client.get("/health")
        assert r.json() == {"status": "ok"}
