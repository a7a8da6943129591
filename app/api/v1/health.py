"""
Health check and monitoring endpoints.
"""

import time
from datetime import datetime

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from starlette.responses import Response

from app.config import get_settings
from app.core.cache import get_cache_service
from app.schemas.common import HealthResponse
from app.services.drug_catalog import get_drug_catalog
from app.services.knowledge_base import get_knowledge_base

router = APIRouter()

# Track startup time
_startup_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Check service health and knowledge base availability.

    No authentication required for health checks.
    """
    settings = get_settings()
    cache = await get_cache_service()

    return HealthResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        status="healthy",
        timestamp=datetime.utcnow(),
        knowledge_base={
            "version": settings.KNOWLEDGE_BASE_VERSION,
            "last_updated": settings.KNOWLEDGE_BASE_UPDATED,
            "drugs": len(get_drug_catalog()),
            "interactions": len(get_knowledge_base()),
        },
        redis=cache.is_connected,
        uptime_seconds=time.time() - _startup_time
    )


@router.get("/metrics")
async def prometheus_metrics():
    """
    Expose Prometheus metrics.

    No authentication for metrics endpoint.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
