"""
Drug catalog endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from starlette.requests import Request

from app.config import get_settings
from app.core.rate_limit import limiter
from app.dependencies import get_catalog
from app.schemas.interaction import Drug
from app.services.drug_catalog import DrugCatalog

router = APIRouter(prefix="/drugs")


@router.get("", response_model=list[Drug])
@limiter.limit("100/minute")
async def list_drugs(
    request: Request,
    catalog: DrugCatalog = Depends(get_catalog)
):
    """List every drug in the catalog."""
    return catalog.list_all()


@router.get("/search", response_model=list[Drug])
@limiter.limit("300/minute")
async def search_drugs(
    request: Request,
    q: str = Query(..., description="Name, generic or brand name fragment"),
    catalog: DrugCatalog = Depends(get_catalog)
):
    """
    Autocomplete suggestions for a partial drug name.

    Queries shorter than the configured minimum are rejected.
    """
    settings = get_settings()
    if len(q.strip()) < settings.SEARCH_MIN_QUERY_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Query must be at least {settings.SEARCH_MIN_QUERY_LENGTH} characters"
        )
    return catalog.suggest(q)


@router.get("/{drug_id}", response_model=Drug)
@limiter.limit("100/minute")
async def get_drug(
    request: Request,
    drug_id: str,
    catalog: DrugCatalog = Depends(get_catalog)
):
    """Get a single drug by id (case-insensitive)."""
    drug = catalog.get_by_id(drug_id)
    if drug is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Drug not found: {drug_id}"
        )
    return drug
