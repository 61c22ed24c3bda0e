import pytest
from rest_framework.test import APIClient


@pytest.mark.django_db
def test_health_reports_database_and_checkout_mode():
    client = APIClient()
    resp = client.get("/health/")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert body["checkout_decrements_inventory"] is True
