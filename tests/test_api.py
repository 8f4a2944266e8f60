"""Tests for the HTTP API."""

import json
import logging

from fastapi.testclient import TestClient

from nutrition_planner.api.app import create_app
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.requirements import SexCategory

MALE_EXAMPLE = {
    "gender": "male",
    "age_years": 30,
    "weight_kg": 70,
    "height_cm": 175,
    "activity_level": "moderately_active",
    "goal": "maintenance",
}


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requirements_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/requirements", json=MALE_EXAMPLE)

    assert response.status_code == 200
    data = response.json()
    assert data["calories"] == 2556
    assert data["protein_g"] == 160
    assert data["carbs_g"] == 288
    assert data["fats_g"] == 85
    assert data["micronutrients"]["vitaminB12"] == 2.4
    assert data["micronutrient_units"]["zinc"] == "mg"


def test_requirements_accepts_sex_field_name(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {**MALE_EXAMPLE}
    payload.pop("gender")
    payload["sex"] = "male"

    response = client.post("/requirements", json=payload)

    assert response.json()["fiber_g"] == 38


def test_requirements_rejects_non_positive_weight(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/requirements", json={**MALE_EXAMPLE, "weight_kg": 0})

    assert response.status_code == 422
    assert "weight_kg" in response.json()["detail"]


def test_requirements_from_profile(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/requirements/from-profile",
        json={
            "gender": "female",
            "age": 55,
            "weight": "60.00",
            "height": "160.00",
            "activityLevel": "sedentary",
            "healthGoals": "weight_loss",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["calories"] == 1200
    assert data["micronutrients"] == {
        "iron": 8,
        "calcium": 1200,
        "vitaminD": 15,
        "folate": 400,
    }


def test_guidance_tips_with_limit(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/guidance/female/tips", params={"limit": 3})

    assert response.status_code == 200
    assert response.json() == {
        "sex": "female",
        "tips": ["female tip 1", "female tip 2", "female tip 3"],
    }


def test_guidance_foods_for_unknown_sex_uses_fallback(
    container: AppContainer,
) -> None:
    container.requirement_service.sex_fallback = SexCategory.MALE
    container.guidance_service.sex_fallback = SexCategory.MALE
    client = TestClient(create_app(container))

    response = client.get("/guidance/other/foods")

    data = response.json()
    assert data["sex"] == "male"
    assert len(data["recommended"]) == 6
    assert len(data["focus"]) == 4


def test_broken_catalog_returns_503(container: AppContainer) -> None:
    container.guidance_service.repository.catalog.clear()
    client = TestClient(create_app(container))

    response = client.get("/guidance/male/tips")

    assert response.status_code == 503


def test_progress_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/progress",
        json={
            "biometrics": MALE_EXAMPLE,
            "intake": {
                "calories": 1278,
                "water_glasses": 12,
                "micronutrients": {"zinc": 11, "magnesium": 300},
            },
        },
    )

    assert response.status_code == 200
    progress = response.json()["progress"]
    macros = {entry["name"]: entry["percent"] for entry in progress["macros"]}
    assert macros["calories"] == 50.0
    assert macros["water_glasses"] == 100.0
    statuses = {entry["name"]: entry["status"] for entry in progress["micronutrients"]}
    assert statuses == {
        "zinc": "excellent",
        "magnesium": "good",
        "potassium": "low",
        "vitaminB12": "low",
    }


def test_progress_rejects_negative_intake(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/progress",
        json={"biometrics": MALE_EXAMPLE, "intake": {"protein_g": -10}},
    )

    assert response.status_code == 422


def test_requirements_rejects_oversized_weight(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/requirements", json={**MALE_EXAMPLE, "weight_kg": 1e308})

    assert response.status_code == 422
    assert "weight_kg" in response.json()["detail"]


def test_progress_rejects_nan_intake(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    body = json.dumps(
        {"biometrics": MALE_EXAMPLE, "intake": {"calories": float("nan")}}
    )

    response = client.post(
        "/progress", content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422


def test_activity_level_case_matches_across_endpoints(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    direct = client.post(
        "/requirements", json={**MALE_EXAMPLE, "activity_level": "Very_Active"}
    )
    from_profile = client.post(
        "/requirements/from-profile",
        json={
            "gender": "male",
            "age": 30,
            "weight": 70,
            "height": 175,
            "activityLevel": "Very_Active",
            "healthGoals": "maintenance",
        },
    )
    lowercase = client.post(
        "/requirements", json={**MALE_EXAMPLE, "activity_level": "very_active"}
    )

    assert direct.json() == lowercase.json()
    assert from_profile.json() == lowercase.json()


def test_app_uses_configured_log_level(container: AppContainer) -> None:
    container.settings.log_level = "DEBUG"

    create_app(container)

    assert logging.getLogger("nutrition_planner").level == logging.DEBUG

    container.settings.log_level = "INFO"
    create_app(container)
