"""API routes for the DrugSafe Interaction Engine."""

from fastapi import APIRouter

from app.api.v1 import drugs, health, interactions

# Create main API router
api_router = APIRouter()

# Include all v1 routes
api_router.include_router(health.router, tags=["health"])
api_router.include_router(drugs.router, tags=["drugs"])
api_router.include_router(interactions.router, tags=["interactions"])

__all__ = ["api_router"]
