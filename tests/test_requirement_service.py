"""Tests for the requirement service."""

import logging

from nutrition_planner.domain.requirements import (
    ActivityLevel,
    SexCategory,
    UserBiometricInput,
)
from nutrition_planner.services.requirements import RequirementService


def _unspecified() -> UserBiometricInput:
    return UserBiometricInput(
        sex=SexCategory.UNSPECIFIED,
        age_years=40,
        weight_kg=80,
        height_cm=180,
        activity_level=ActivityLevel.VERY_ACTIVE,
    )


def test_service_applies_configured_fallback() -> None:
    female_first = RequirementService(sex_fallback=SexCategory.FEMALE)
    male_first = RequirementService(sex_fallback=SexCategory.MALE)

    assert "iron" in female_first.compute(_unspecified()).micronutrients
    assert "zinc" in male_first.compute(_unspecified()).micronutrients
    assert male_first.profile_sex(SexCategory.UNSPECIFIED) is SexCategory.MALE
    assert male_first.profile_sex(SexCategory.FEMALE) is SexCategory.FEMALE


def test_service_logs_computed_calories(caplog) -> None:
    service = RequirementService()
    logger = logging.getLogger("nutrition_planner")
    propagate = logger.propagate
    logger.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger="nutrition_planner"):
            requirement = service.compute(_unspecified())
    finally:
        logger.propagate = propagate

    assert f"calories={requirement.calories}" in caplog.text
