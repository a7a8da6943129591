"""
Tests for the caching analysis service.
"""

import json
from typing import Optional

import pytest

from app.schemas.interaction import AnalysisRequest, RiskLevel
from app.services.analysis_service import AnalysisService


class FakeCache:
    """In-memory stand-in for the Redis cache service."""

    def __init__(self):
        self.store: dict[str, dict] = {}

    @staticmethod
    def _key(request: dict, kb_version: str) -> str:
        return f"{kb_version}:{json.dumps(request, sort_keys=True)}"

    async def get_analysis(self, request: dict, kb_version: str) -> Optional[dict]:
        return self.store.get(self._key(request, kb_version))

    async def set_analysis(self, request: dict, kb_version: str, data: dict) -> bool:
        self.store[self._key(request, kb_version)] = data
        return True


@pytest.fixture
def request_body(analysis_payload) -> AnalysisRequest:
    return AnalysisRequest.model_validate(analysis_payload("warfarin", "aspirin"))


async def test_miss_then_hit(analyzer, request_body):
    cache = FakeCache()
    service = AnalysisService(analyzer=analyzer, cache=cache)

    first, first_cached = await service.analyze(request_body)
    second, second_cached = await service.analyze(request_body)

    assert (first_cached, second_cached) == (False, True)
    assert len(cache.store) == 1
    assert second.overall_risk_level == first.overall_risk_level == RiskLevel.HIGH
    assert second.interaction_results == first.interaction_results


async def test_different_requests_do_not_share_entries(analyzer, analysis_payload):
    cache = FakeCache()
    service = AnalysisService(analyzer=analyzer, cache=cache)

    await service.analyze(AnalysisRequest.model_validate(analysis_payload("warfarin", "aspirin")))
    result, cached = await service.analyze(
        AnalysisRequest.model_validate(analysis_payload("warfarin", "lisinopril"))
    )

    assert not cached
    assert result.overall_risk_level == RiskLevel.NONE
    assert len(cache.store) == 2


async def test_cache_hit_is_stamped_with_its_own_time(analyzer, request_body):
    cache = FakeCache()
    service = AnalysisService(analyzer=analyzer, cache=cache)

    first, _ = await service.analyze(request_body)
    second, cached = await service.analyze(request_body)

    (stored,) = cache.store.values()
    assert cached
    assert "analyzedAt" not in stored
    assert second.analyzed_at >= first.analyzed_at
