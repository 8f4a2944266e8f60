"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_planner.config import Settings
from nutrition_planner.containers import AppContainer, profile_defaults_from
from nutrition_planner.domain.guidance import FoodRecommendations, SexGuidance
from nutrition_planner.domain.requirements import SexCategory
from nutrition_planner.services.cache import InMemoryCache
from nutrition_planner.services.guidance import GuidanceRepository, GuidanceService
from nutrition_planner.services.progress import ProgressService
from nutrition_planner.services.requirements import RequirementService


def _catalog() -> dict[SexCategory, SexGuidance]:
    return {
        SexCategory.MALE: SexGuidance(
            tips=tuple(f"male tip {i}" for i in range(1, 7)),
            foods=FoodRecommendations(
                recommended=tuple(f"male food {i}" for i in range(1, 7)),
                focus=tuple(f"male focus {i}" for i in range(1, 5)),
            ),
        ),
        SexCategory.FEMALE: SexGuidance(
            tips=tuple(f"female tip {i}" for i in range(1, 7)),
            foods=FoodRecommendations(
                recommended=tuple(f"female food {i}" for i in range(1, 7)),
                focus=tuple(f"female focus {i}" for i in range(1, 5)),
            ),
        ),
    }


@dataclass
class InMemoryGuidanceRepository(GuidanceRepository):
    """In-memory guidance repository that counts loads."""

    catalog: dict[SexCategory, SexGuidance] = field(default_factory=_catalog)
    loads: int = 0

    def load(self) -> dict[SexCategory, SexGuidance]:
        self.loads += 1
        return dict(self.catalog)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def guidance_repository() -> InMemoryGuidanceRepository:
    return InMemoryGuidanceRepository()


@pytest.fixture
def container(
    settings: Settings, guidance_repository: InMemoryGuidanceRepository
) -> AppContainer:
    guidance_service = GuidanceService(
        repository=guidance_repository,
        cache=InMemoryCache(),
        ttl_seconds=settings.guidance_ttl_seconds,
    )
    return AppContainer(
        settings=settings,
        requirement_service=RequirementService(),
        guidance_service=guidance_service,
        progress_service=ProgressService(),
        profile_defaults=profile_defaults_from(settings),
    )
