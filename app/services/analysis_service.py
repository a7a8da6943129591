"""
Analysis orchestration service.

Wraps the synchronous analyzer with result caching and logging for the
API layer.
"""

from typing import Optional

from app.core.cache import CacheService, get_cache_service
from app.core.logging import get_logger
from app.schemas.interaction import AnalysisRequest, SafetyAssessmentResult
from app.services.interaction_analyzer import InteractionAnalyzer, get_interaction_analyzer

logger = get_logger(__name__)


class AnalysisService:
    """
    Service for running interaction analyses on behalf of HTTP callers.
    """

    def __init__(
        self,
        analyzer: Optional[InteractionAnalyzer] = None,
        cache: Optional[CacheService] = None
    ):
        self._analyzer = analyzer or get_interaction_analyzer()
        self._cache = cache

    async def _get_cache(self) -> CacheService:
        if self._cache is None:
            self._cache = await get_cache_service()
        return self._cache

    async def analyze(self, request: AnalysisRequest) -> tuple[SafetyAssessmentResult, bool]:
        """
        Run an analysis, serving repeated requests from cache.

        Args:
            request: Drugs, patient data, food and alcohol details.

        Returns:
            The assessment and whether it came from cache.
        """
        cache = await self._get_cache()
        cache_key = request.model_dump(mode="json", by_alias=True)
        kb_version = self._analyzer.database_version

        cached = await cache.get_analysis(cache_key, kb_version)
        if cached:
            logger.debug("Cache hit for interaction analysis")
            # analyzed_at is not cached, so the model stamps this call's time
            return SafetyAssessmentResult.model_validate(cached), True

        result = self._analyzer.analyze(
            request.drugs,
            patient_data=request.patient_data,
            food_items=request.food_items,
            alcohol=request.alcohol,
        )

        logger.info(
            f"Interaction analysis complete: {len(result.interaction_results)} pairs analyzed",
            extra={
                "overall_risk_level": result.overall_risk_level.value,
                "overall_compatibility_status": result.overall_compatibility_status.value,
                "advisories": len(result.advisories),
            }
        )

        await cache.set_analysis(
            cache_key,
            kb_version,
            result.model_dump(mode="json", by_alias=True, exclude={"analyzed_at"})
        )
        return result, False
