from decimal import Decimal


class TestScheduleEndpoint:
    def test_linear_schedule(self, client):
        body = {
            "loan": {"amount": 12000, "interest_rate": 0, "repayment_rate": 10},
            "months": 12,
        }
        r = client.post("/api/v1/loans/schedule", json=body)
        assert r.status_code == 200, r.text
        data = r.json()
        assert len(data["payments"]) == 12
        assert Decimal(data["monthly_payment"]) == Decimal("100")
        assert Decimal(data["ending_balance"]) == Decimal("10800")
        assert len(data["yearly"]) == 1
        assert data["yearly"][0]["year"] == 1
        assert Decimal(data["yearly"][0]["debt_service"]) == Decimal("1200")

    def test_fixed_annuity(self, client):
        body = {
            "loan": {"amount": 10000, "interest_rate": 0, "repayment_rate": 2, "fixed_annuity": 500},
            "months": 24,
        }
        data = client.post("/api/v1/loans/schedule", json=body).json()
        assert Decimal(data["monthly_payment"]) == Decimal("500")
        assert Decimal(data["ending_balance"]) == 0
        assert Decimal(data["payments"][19]["payment"]) == Decimal("500")
        assert Decimal(data["payments"][-1]["payment"]) == 0

    def test_zero_months(self, client):
        body = {"loan": {"amount": 10000}, "months": 0}
        data = client.post("/api/v1/loans/schedule", json=body).json()
        assert data["payments"] == []
        assert Decimal(data["ending_balance"]) == Decimal("10000")

    def test_months_out_of_range(self, client):
        body = {"loan": {"amount": 10000}, "months": 5000}
        r = client.post("/api/v1/loans/schedule", json=body)
        assert r.status_code == 422
