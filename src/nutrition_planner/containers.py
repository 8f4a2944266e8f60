"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_planner.adapters.json_guidance_repository import JsonGuidanceRepository
from nutrition_planner.config import Settings, parse_sex_fallback
from nutrition_planner.services.cache import InMemoryCache
from nutrition_planner.services.guidance import GuidanceService
from nutrition_planner.services.profiles import ProfileDefaults
from nutrition_planner.services.progress import ProgressService
from nutrition_planner.services.requirements import RequirementService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    requirement_service: RequirementService
    guidance_service: GuidanceService
    progress_service: ProgressService
    profile_defaults: ProfileDefaults


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    sex_fallback = parse_sex_fallback(resolved_settings.unspecified_sex_fallback)
    guidance_service = GuidanceService(
        repository=JsonGuidanceRepository.create(resolved_settings.guidance_path),
        cache=InMemoryCache(),
        sex_fallback=sex_fallback,
        ttl_seconds=resolved_settings.guidance_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        requirement_service=RequirementService(sex_fallback=sex_fallback),
        guidance_service=guidance_service,
        progress_service=ProgressService(),
        profile_defaults=profile_defaults_from(resolved_settings),
    )


def profile_defaults_from(settings: Settings) -> ProfileDefaults:
    return ProfileDefaults(
        gender=settings.default_gender,
        age_years=settings.default_age_years,
        weight_kg=settings.default_weight_kg,
        height_cm=settings.default_height_cm,
        activity_level=settings.default_activity_level,
        goal=settings.default_goal,
    )
