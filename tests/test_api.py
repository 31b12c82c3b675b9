"""Tests for the Flask API."""

from api.app import create_app


class TestExpenseEndpoints:
    """CRUD over /expenses."""

    def test_list_expenses_sorted_desc(self, client):
        response = client.get("/expenses")
        assert response.status_code == 200
        data = response.get_json()
        assert data["count"] == 5
        assert data["total"] == "5399.00"
        dates = [item["date"] for item in data["items"]]
        assert dates == sorted(dates, reverse=True)

    def test_list_expenses_filtered(self, client):
        data = client.get("/expenses?category=food&month=all").get_json()
        assert [item["note"] for item in data["items"]] == ["Grocery shopping at D-Mart"]

    def test_invalid_filter(self, client):
        response = client.get("/expenses?month=October")
        assert response.status_code == 400
        assert response.get_json()["code"] == "invalid_filter"

    def test_create_expense(self, client):
        response = client.post(
            "/expenses",
            json={"amount": "250", "date": "2025-10-06", "note": " Pharmacy ", "category": "health"},
        )
        assert response.status_code == 201
        created = response.get_json()
        assert created["id"] == 6
        assert created["note"] == "Pharmacy"
        assert created["amount"] == "250.00"
        assert client.get(f"/expenses/{created['id']}").get_json() == created

    def test_create_expense_validation_error(self, client):
        response = client.post(
            "/expenses",
            json={"amount": "0", "date": "2025-01-01", "note": "x", "category": "food"},
        )
        assert response.status_code == 400
        body = response.get_json()
        assert body["code"] == "invalid_amount"
        assert body["details"] == "Please enter a valid amount greater than 0"
        assert client.get("/expenses").get_json()["count"] == 5

    def test_create_requires_json(self, client):
        response = client.post("/expenses", data="amount=5")
        assert response.status_code == 400

    def test_update_expense(self, client):
        response = client.put(
            "/expenses/1",
            json={"amount": "500", "date": "2025-10-05", "note": "Groceries", "category": "food"},
        )
        assert response.status_code == 200
        assert response.get_json()["amount"] == "500.00"
        assert client.get("/expenses/1").get_json()["note"] == "Groceries"

    def test_update_unknown_expense(self, client):
        response = client.put(
            "/expenses/99",
            json={"amount": "5", "date": "2025-10-05", "note": "x", "category": "food"},
        )
        assert response.status_code == 404

    def test_delete_expense(self, client):
        assert client.delete("/expenses/2").status_code == 204
        assert client.get("/expenses/2").status_code == 404
        assert client.delete("/expenses/2").status_code == 404


class TestReportEndpoints:
    def test_summary(self, client):
        data = client.get("/summary?month=2025-10").get_json()
        assert data["total"] == "2000.00"
        assert data["count"] == 3
        assert data["top_category"] == {"category": "bills", "amount": "1200.00", "label": "Bills"}
        assert data["breakdown"][0] == {
            "category": "bills",
            "label": "Bills",
            "amount": "1200.00",
            "percentage": "60.0",
        }
        assert data["filter"] == {"category": "all", "month": "2025-10"}

    def test_summary_empty(self, client):
        data = client.get("/summary?category=health").get_json()
        assert data["total"] == "0.00"
        assert data["avg_per_transaction"] == "0.00"
        assert data["top_category"]["category"] == "none"
        assert data["breakdown"] == []

    def test_months(self, client):
        assert client.get("/months").get_json() == {"items": ["2025-10", "2025-09"]}

    def test_categories(self, client):
        items = client.get("/categories").get_json()["items"]
        assert [item["value"] for item in items][:3] == ["food", "travel", "bills"]
        assert items[0]["color"] == "orange"


class TestAppFactory:
    def test_seed_flag(self):
        client = create_app(seed=True).test_client()
        assert client.get("/expenses").get_json()["count"] == 5

    def test_empty_by_default_outside_dev(self, monkeypatch):
        monkeypatch.delenv("MONEYFLOW_SEED_SAMPLES", raising=False)
        monkeypatch.setenv("MONEYFLOW_ENV", "prod")
        client = create_app().test_client()
        assert client.get("/expenses").get_json()["count"] == 0

    def test_seed_from_environment(self, monkeypatch):
        monkeypatch.setenv("MONEYFLOW_SEED_SAMPLES", "yes")
        client = create_app().test_client()
        assert client.get("/months").get_json()["items"] == ["2025-10", "2025-09"]

    def test_dev_environment_seeds(self, monkeypatch):
        monkeypatch.delenv("MONEYFLOW_SEED_SAMPLES", raising=False)
        monkeypatch.setenv("MONEYFLOW_ENV", "dev")
        client = create_app().test_client()
        assert client.get("/expenses").get_json()["count"] == 5
