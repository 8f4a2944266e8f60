"""Sex-specific nutrition tips and food recommendations."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_planner.domain.guidance import FoodRecommendations, SexGuidance
from nutrition_planner.domain.requirements import SexCategory
from nutrition_planner.services.cache import Cache

_CATALOG_CACHE_KEY = "guidance:catalog"

_logger = logging.getLogger(__name__)


class GuidanceCatalogError(RuntimeError):
    """Raised when the guidance catalog is missing or malformed."""


class GuidanceRepository(Protocol):
    """Source of the guidance catalog."""

    def load(self) -> dict[SexCategory, SexGuidance]:
        """Return guidance keyed by male/female."""


@dataclass
class GuidanceService:
    """Serves guidance from a cached catalog."""

    repository: GuidanceRepository
    cache: Cache
    sex_fallback: SexCategory = SexCategory.FEMALE
    ttl_seconds: int = 300

    def tips_for_sex(self, sex: SexCategory, limit: int | None = None) -> list[str]:
        """Return tips in catalog order, optionally only the first ``limit``."""
        tips = list(self._guidance_for(sex).tips)
        if limit is not None:
            return tips[: max(limit, 0)]
        return tips

    def food_recommendations_for_sex(self, sex: SexCategory) -> FoodRecommendations:
        """Return recommended and focus foods."""
        return self._guidance_for(sex).foods

    def reload(self) -> None:
        """Forget the cached catalog so the next lookup reads it again."""
        self.cache.invalidate(_CATALOG_CACHE_KEY)

    def _guidance_for(self, sex: SexCategory) -> SexGuidance:
        profile = self.sex_fallback if sex is SexCategory.UNSPECIFIED else sex
        catalog = self._catalog()
        guidance = catalog.get(profile)
        if guidance is None:
            raise GuidanceCatalogError(f"No guidance for {profile.value}")
        return guidance

    def _catalog(self) -> dict[SexCategory, SexGuidance]:
        cached = self.cache.get(_CATALOG_CACHE_KEY)
        if isinstance(cached, dict):
            return cached
        catalog = self.repository.load()
        _logger.info("Loaded guidance catalog: sexes=%s", sorted(catalog))
        self.cache.set(_CATALOG_CACHE_KEY, catalog, ttl_seconds=self.ttl_seconds)
        return catalog
