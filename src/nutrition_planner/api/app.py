"""FastAPI application factory."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_planner.api.models import BiometricsPayload, ProgressPayload
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.progress import (
    MicronutrientProgress,
    NutrientProgress,
    ProgressReport,
)
from nutrition_planner.domain.requirements import (
    MICRONUTRIENT_UNITS,
    InvalidInputError,
    NutritionRequirement,
    SexCategory,
)
from nutrition_planner.services.guidance import GuidanceCatalogError
from nutrition_planner.services.profiles import build_biometric_input


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Planner")
    app.state.container = container

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("Rejected input on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(GuidanceCatalogError)
    async def broken_catalog(
        request: Request, exc: GuidanceCatalogError
    ) -> JSONResponse:
        logger.error("Guidance catalog unavailable: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Guidance is temporarily unavailable."},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/requirements")
    async def requirements(
        payload: BiometricsPayload, request: Request
    ) -> dict[str, object]:
        """Compute the daily nutrient budget for submitted biometrics."""
        state_container: AppContainer = request.app.state.container
        requirement = state_container.requirement_service.compute(payload.to_domain())
        return _serialize_requirement(requirement)

    @app.post("/requirements/from-profile")
    async def requirements_from_profile(
        profile: dict[str, Any], request: Request
    ) -> dict[str, object]:
        """Compute the budget for a stored profile record, filling gaps."""
        state_container: AppContainer = request.app.state.container
        biometrics = build_biometric_input(profile, state_container.profile_defaults)
        requirement = state_container.requirement_service.compute(biometrics)
        return _serialize_requirement(requirement)

    @app.get("/guidance/{sex}/tips")
    async def tips(
        sex: str, request: Request, limit: int | None = None
    ) -> dict[str, object]:
        """Return nutrition tips for a sex category."""
        state_container: AppContainer = request.app.state.container
        category = SexCategory.parse(sex)
        return {
            "sex": state_container.requirement_service.profile_sex(category).value,
            "tips": state_container.guidance_service.tips_for_sex(category, limit),
        }

    @app.get("/guidance/{sex}/foods")
    async def foods(sex: str, request: Request) -> dict[str, object]:
        """Return recommended and focus foods for a sex category."""
        state_container: AppContainer = request.app.state.container
        category = SexCategory.parse(sex)
        recommendations = (
            state_container.guidance_service.food_recommendations_for_sex(category)
        )
        return {
            "sex": state_container.requirement_service.profile_sex(category).value,
            "recommended": list(recommendations.recommended),
            "focus": list(recommendations.focus),
        }

    @app.post("/progress")
    async def progress(payload: ProgressPayload, request: Request) -> dict[str, object]:
        """Score a day's intake against the user's requirements."""
        state_container: AppContainer = request.app.state.container
        requirement = state_container.requirement_service.compute(
            payload.biometrics.to_domain()
        )
        report = state_container.progress_service.score(
            requirement, payload.intake.to_domain()
        )
        return {
            "requirements": _serialize_requirement(requirement),
            "progress": _serialize_report(report),
        }

    return app


def _serialize_requirement(requirement: NutritionRequirement) -> dict[str, object]:
    return {
        "calories": requirement.calories,
        "protein_g": requirement.protein_g,
        "carbs_g": requirement.carbs_g,
        "fats_g": requirement.fats_g,
        "fiber_g": requirement.fiber_g,
        "water_glasses": requirement.water_glasses,
        "micronutrients": dict(requirement.micronutrients),
        "micronutrient_units": {
            name: MICRONUTRIENT_UNITS[name] for name in requirement.micronutrients
        },
    }


def _serialize_progress(progress: NutrientProgress) -> dict[str, object]:
    return {
        "name": progress.name,
        "consumed": progress.consumed,
        "target": progress.target,
        "percent": round(progress.percent, 1),
    }


def _serialize_micronutrient(entry: MicronutrientProgress) -> dict[str, object]:
    return {
        **_serialize_progress(entry.progress),
        "unit": entry.unit,
        "status": entry.status.value,
    }


def _serialize_report(report: ProgressReport) -> dict[str, object]:
    return {
        "macros": [_serialize_progress(entry) for entry in report.macros],
        "micronutrients": [
            _serialize_micronutrient(entry) for entry in report.micronutrients
        ],
    }
