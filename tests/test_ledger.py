from datetime import datetime
from uuid import uuid4

import pytest

from app.core.errors import ValidationError
from app.services.ledger_service import month_window


def create_income(client, amount=1000, when="2024-05-01", branch=1, type=1):
    response = client.post(
        "/incomes/create-income",
        json={"branch": branch, "type": type, "amount": amount, "income_date": when, "notes": "admission"},
    )
    assert response.status_code == 201, response.json()
    return response.json()["data"]["id"]


def test_month_window():
    assert month_window(None, None) is None
    assert month_window(2024, None) == (datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 59, 59, 999999))
    assert month_window(2024, 12) == (datetime(2024, 12, 1), datetime(2024, 12, 31, 23, 59, 59, 999999))
    assert month_window(2024, 2) == (datetime(2024, 2, 1), datetime(2024, 2, 29, 23, 59, 59, 999999))
    assert month_window(None, 3, now=datetime(2030, 7, 1)) == (datetime(2030, 3, 1), datetime(2030, 3, 31, 23, 59, 59, 999999))
    with pytest.raises(ValidationError):
        month_window(2024, 13)


def test_month_window_handles_last_supported_year():
    assert month_window(9999, None)[1] == datetime(9999, 12, 31, 23, 59, 59, 999999)
    assert month_window(9999, 12)[0] == datetime(9999, 12, 1)


def test_income_list_for_last_supported_year_is_empty(client):
    create_income(client, amount=1000, when="2024-05-01")

    for params in ({"year": 9999}, {"year": 9999, "month": 12}):
        response = client.get("/incomes", params=params)
        assert response.status_code == 200
        assert response.json()["data"]["total"] == 0
        assert response.json()["data"]["totalAmount"] == 0.0


def test_income_list_includes_last_moment_of_month(client):
    create_income(client, amount=250, when="2024-05-31T23:30:00")

    data = client.get("/incomes", params={"year": 2024, "month": 5}).json()["data"]
    assert data["totalAmount"] == 250.0
    assert client.get("/incomes", params={"year": 2024, "month": 6}).json()["data"]["total"] == 0


def test_income_crud(client):
    income_id = create_income(client)

    fetched = client.get(f"/incomes/{income_id}").json()["data"]
    assert fetched["amount"] == 1000.0
    assert fetched["admin_name"] == "Mahmud Hasan"

    response = client.put(
        f"/incomes/{income_id}",
        json={"branch": 2, "type": 3, "amount": 1200, "income_date": "2024-05-02"},
    )
    assert response.status_code == 200
    assert client.get(f"/incomes/{income_id}").json()["data"]["amount"] == 1200.0

    assert client.delete(f"/incomes/{income_id}").status_code == 200
    missing = client.get(f"/incomes/{income_id}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Income not found"


def test_income_list_filters_and_total(client):
    create_income(client, amount=1000, when="2024-05-01", branch=1)
    create_income(client, amount=500, when="2024-05-20", branch=2)
    create_income(client, amount=300, when="2024-06-03", branch=1)
    create_income(client, amount=50, when="2023-05-03", branch=1)

    data = client.get("/incomes", params={"year": 2024}).json()["data"]
    assert data["total"] == 3
    assert data["totalAmount"] == 1800.0
    assert [doc["amount"] for doc in data["docs"]] == [300.0, 500.0, 1000.0]

    may = client.get("/incomes", params={"year": 2024, "month": 5, "branch": "1"}).json()["data"]
    assert may["totalAmount"] == 1000.0

    everything = client.get("/incomes", params={"branch": "all"}).json()["data"]
    assert everything["total"] == 4


def test_income_list_filters_by_type(client):
    create_income(client, amount=1000, type=1)
    create_income(client, amount=200, type=4)

    data = client.get("/incomes", params={"type": 4}).json()["data"]
    assert data["totalAmount"] == 200.0


def test_income_rejects_bad_date(client):
    response = client.post(
        "/incomes/create-income",
        json={"branch": 1, "type": 1, "amount": 10, "income_date": "31/12/2024"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_income_rejects_unknown_type(client):
    response = client.post(
        "/incomes/create-income",
        json={"branch": 1, "type": 9, "amount": 10, "income_date": "2024-01-01"},
    )
    assert response.status_code == 400


def test_donation_and_expense_ledgers(client):
    donation = client.post(
        "/donations/create-donation",
        json={
            "branch": 1,
            "donation_type": 2,
            "fullname": "Abdul Karim",
            "phone_number": "01912345678",
            "donation_amount": 2500,
            "donation_date": "2024-04-01T10:00:00Z",
        },
    )
    assert donation.status_code == 201

    expense = client.post(
        "/expenses/create-expense",
        json={"branch": 1, "type": 10, "amount": 40000, "expense_date": "2024-04-02"},
    )
    assert expense.status_code == 201

    assert client.get("/donations").json()["data"]["totalAmount"] == 2500.0
    expenses = client.get("/expenses").json()["data"]
    assert expenses["docs"][0]["type"] == 10


def test_missing_entry_is_404(client):
    assert client.delete(f"/expenses/{uuid4()}").status_code == 404


def test_ledger_requires_authentication(anonymous_client):
    response = anonymous_client.get("/incomes")
    assert response.status_code == 401


def test_invalid_token_rejected(anonymous_client):
    response = anonymous_client.get("/incomes", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["statusCode"] == 401
