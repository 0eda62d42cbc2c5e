"""
Tests for the REST API.
"""

import pytest
from fastapi.testclient import TestClient

from italian_holidays.api import app


@pytest.fixture
def client():
    """Create a TestClient for the API."""
    return TestClient(app)


class TestApi:
    """Tests for the FastAPI endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_holidays(self, client):
        response = client.get("/holidays/2024")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 12
        assert data[0] == {
            "date": "2024-01-01",
            "name": "Capodanno",
            "name_english": "New Year's Day",
            "is_movable": False,
        }

    def test_holidays_year_out_of_range(self, client):
        assert client.get("/holidays/1200").status_code == 400

    def test_easter(self, client):
        response = client.get("/easter/2024")

        assert response.status_code == 200
        assert response.json() == {"year": 2024, "easter": "2024-03-31", "pasquetta": "2024-04-01"}

    def test_check_day(self, client):
        response = client.get("/days/2024-04-25")

        assert response.status_code == 200
        data = response.json()
        assert data["day_type"] == "holiday"
        assert data["is_working_day"] is False

    def test_check_day_invalid(self, client):
        assert client.get("/days/2024-02-30").status_code == 422

    def test_add_working_days(self, client):
        response = client.post(
            "/working-days/add", json={"start_date": "2024-01-05", "working_days": 1}
        )

        assert response.status_code == 200
        assert response.json()["result_date"] == "2024-01-08"

    def test_add_zero_working_days(self, client):
        response = client.post(
            "/working-days/add", json={"start_date": "2024-01-06", "working_days": 0}
        )

        assert response.json()["result_date"] == "2024-01-06"

    def test_count_working_days(self, client):
        response = client.post(
            "/working-days/count", json={"start_date": "2024-04-01", "end_date": "2024-04-30"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["working_days"] == 20
        assert data["saturdays"] == 4

    def test_count_inverted_range(self, client):
        response = client.post(
            "/working-days/count", json={"start_date": "2024-05-01", "end_date": "2024-04-01"}
        )
        assert response.status_code == 400

    def test_count_until_last_representable_date(self, client):
        response = client.post(
            "/working-days/count", json={"start_date": "9999-12-27", "end_date": "9999-12-31"}
        )

        assert response.status_code == 200
        assert response.json()["calendar_days"] == 5
