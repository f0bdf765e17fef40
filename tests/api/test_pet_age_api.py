"""
Tests for the pet age API.

Endpoints:
- POST /api/pet-age
- POST /api/pet-age/compare
- GET  /api/pet-age/chart
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.clock import FixedClock
from src.adapters.pet_age_rules import RulesPetAgeAdapter
from src.api import deps
from src.api.routes import pet_age
from src.rules.models import PetAgeRules

# --- Test Setup ---


@pytest.fixture
def app(pet_age_rules: RulesPetAgeAdapter, fixed_clock: FixedClock) -> FastAPI:
    """Test FastAPI app with pet age routes."""
    app = FastAPI()
    app.include_router(pet_age.router, prefix="/api/pet-age")

    # Override dependencies
    app.dependency_overrides[deps.get_pet_age_rules] = lambda: pet_age_rules
    app.dependency_overrides[deps.get_clock] = lambda: fixed_clock

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)


# --- Age Query ---


class TestCalculatePetAge:
    """POST /api/pet-age"""

    def test_adult_dog(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age", json={"species": "dog", "date_of_birth": "2020-06-15"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["species"] == "dog"
        assert data["actual_age"] == {"years": 4, "months": 0}
        assert data["human_age"] == 33
        assert data["formatted_age"] == "4 years"
        assert data["age_in_years"] == 4.0
        assert data["life_stage"]["stage"] == "Adult"
        assert data["life_stage"]["color"] == "from-violet-400 to-purple-400"
        assert len(data["life_stage"]["tips"]) == 4
        assert [m["stage"] for m in data["milestones"]] == ["Mature Adult", "Senior"]
        assert data["milestones"][0]["reached_on"] == "2027-06-15"
        assert data["warnings"] == []

    def test_name_echoed(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age",
            json={"name": "Biscuit", "species": "dog", "date_of_birth": "2020-06-15"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Biscuit"

    def test_without_milestones(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age",
            json={
                "species": "cat",
                "date_of_birth": "2023-12-20",
                "include_milestones": False,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["formatted_age"] == "5 months"
        assert data["milestones"] == []

    def test_unknown_species_warns(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age", json={"species": "hamster", "date_of_birth": "2022-06-15"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["species"] == "other"
        assert data["human_age"] == 24
        assert data["life_stage"]["stage"] == "Unknown"
        assert data["life_stage"]["tips"] == []
        assert [w["code"] for w in data["warnings"]] == ["UNKNOWN_SPECIES"]

    def test_future_birth_date_clamped(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age", json={"species": "dog", "date_of_birth": "2025-02-01"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["actual_age"] == {"years": 0, "months": 0}
        assert [w["code"] for w in data["warnings"]] == ["FUTURE_BIRTH_DATE"]

    def test_future_birth_date_rejected(self, app: FastAPI) -> None:
        strict = RulesPetAgeAdapter(PetAgeRules(future_birth_date="reject"))
        app.dependency_overrides[deps.get_pet_age_rules] = lambda: strict
        client = TestClient(app)

        response = client.post(
            "/api/pet-age", json={"species": "dog", "date_of_birth": "2025-02-01"}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "FUTURE_BIRTH_DATE"

    def test_missing_birth_date(self, client: TestClient) -> None:
        response = client.post("/api/pet-age", json={"species": "dog"})

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "MISSING_BIRTH_DATE"

    def test_invalid_birth_date(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age", json={"species": "dog", "date_of_birth": "last spring"}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "INVALID_BIRTH_DATE"


# --- Age Chart ---


class TestAgeChart:
    """GET /api/pet-age/chart"""

    def test_default_species(self, client: TestClient) -> None:
        response = client.get("/api/pet-age/chart")

        assert response.status_code == 200
        data = response.json()
        assert data["species"] == "dog"
        assert len(data["rows"]) == 9
        assert data["rows"][0] == {
            "age": 0.5,
            "human_age": 8,
            "stage": "Young Puppy",
            "is_current": False,
        }

    def test_cat(self, client: TestClient) -> None:
        response = client.get("/api/pet-age/chart", params={"species": "cat"})

        assert response.status_code == 200
        rows = response.json()["rows"]
        assert rows[-1] == {
            "age": 16.0,
            "human_age": 80,
            "stage": "Geriatric",
            "is_current": False,
        }

    def test_current_age_marks_row(self, client: TestClient) -> None:
        response = client.get("/api/pet-age/chart", params={"species": "dog", "current_age": 7.9})

        assert response.status_code == 200
        current = [row["age"] for row in response.json()["rows"] if row["is_current"]]
        assert current == [7.0]

    def test_negative_current_age(self, client: TestClient) -> None:
        response = client.get("/api/pet-age/chart", params={"current_age": -1})
        assert response.status_code == 422


# --- Comparison ---


class TestComparePets:
    """POST /api/pet-age/compare"""

    def test_ranks_oldest_first(self, client: TestClient) -> None:
        response = client.post(
            "/api/pet-age/compare",
            json={
                "pets": [
                    {"name": "Rex", "species": "dog", "date_of_birth": "2020-06-15"},
                    {"name": "Ghost", "species": "cat"},
                    {"name": "Tom", "species": "cat", "date_of_birth": "2014-06-15"},
                ]
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["oldest"] == "Tom"
        assert [pet["name"] for pet in data["pets"]] == ["Tom", "Rex", "Ghost"]
        assert [pet["rank"] for pet in data["pets"]] == [1, 2, 3]
        assert data["pets"][0]["human_age"] == 56
        assert data["pets"][2]["errors"][0]["code"] == "MISSING_BIRTH_DATE"

    def test_empty_list_rejected(self, client: TestClient) -> None:
        response = client.post("/api/pet-age/compare", json={"pets": []})
        assert response.status_code == 422


# --- Application ---


def test_health() -> None:
    from src.api.main import app

    client = TestClient(app)
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "api"}


def test_app_serves_pet_age_routes(
    pet_age_rules: RulesPetAgeAdapter, fixed_clock: FixedClock
) -> None:
    from src.api.main import app

    app.dependency_overrides[deps.get_pet_age_rules] = lambda: pet_age_rules
    app.dependency_overrides[deps.get_clock] = lambda: fixed_clock
    try:
        client = TestClient(app)
        age = client.post(
            "/api/pet-age", json={"species": "cat", "date_of_birth": "2020-06-15"}
        )
        chart = client.get("/api/pet-age/chart")
    finally:
        app.dependency_overrides.clear()

    assert age.status_code == 200
    assert age.json()["human_age"] == 32
    assert chart.status_code == 200
