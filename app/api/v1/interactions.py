"""
Drug Interaction Analysis Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from starlette.requests import Request

from app.config import get_settings
from app.core.auth import verify_api_key
from app.core.logging import get_logger
from app.core.rate_limit import limiter
from app.dependencies import get_analysis_service, get_interaction_knowledge_base
from app.schemas.common import ErrorResponse
from app.schemas.interaction import (
    AnalysisRequest,
    KnownInteraction,
    SafetyAssessmentResult,
)
from app.services.analysis_service import AnalysisService
from app.services.knowledge_base import InteractionKnowledgeBase

logger = get_logger(__name__)

router = APIRouter(prefix="/interactions")


@router.post(
    "/analyze",
    response_model=SafetyAssessmentResult,
    dependencies=[Depends(verify_api_key)],
    responses={422: {"model": ErrorResponse}},
    summary="Analyze Drug Interactions",
    description="""
    Resolve every pair of submitted drugs against the interaction knowledge
    base and fold in patient, food and alcohol risk factors.

    Returns one record per drug pair (including "no known interaction"
    records), advisories, and the overall risk level and compatibility.
    """
)
@limiter.limit("30/minute")
async def analyze_interactions(
    request: Request,
    response: Response,
    body: AnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service)
):
    """
    Analyze potential interactions between multiple drugs.

    Insufficient or unresolved input is reported by the application-level
    InteractionAnalysisError handler.
    """
    settings = get_settings()

    logger.info(f"Drug interaction analysis requested for {len(body.drugs)} drugs")

    if len(body.drugs) > settings.MAX_DRUGS_PER_ANALYSIS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maximum {settings.MAX_DRUGS_PER_ANALYSIS} drugs can be analyzed at once"
        )

    result, cached = await service.analyze(body)
    response.headers["X-Cache"] = "HIT" if cached else "MISS"
    return result


@router.get(
    "/known",
    response_model=list[KnownInteraction],
    summary="List Documented Interactions"
)
@limiter.limit("60/minute")
async def list_known_interactions(
    request: Request,
    knowledge_base: InteractionKnowledgeBase = Depends(get_interaction_knowledge_base)
):
    """List every drug pair with a documented interaction."""
    return [
        KnownInteraction(
            drug_ids=pair,
            risk_level=record.risk_level,
            compatibility_status=record.compatibility_status,
        )
        for pair, record in knowledge_base.pairs()
    ]
