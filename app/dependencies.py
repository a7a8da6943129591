"""
FastAPI dependency injection utilities.
"""

from app.core.auth import verify_api_key
from app.core.cache import get_cache_service
from app.services.analysis_service import AnalysisService
from app.services.drug_catalog import DrugCatalog, get_drug_catalog
from app.services.knowledge_base import InteractionKnowledgeBase, get_knowledge_base


def get_catalog() -> DrugCatalog:
    """Get the process-wide drug catalog."""
    return get_drug_catalog()


def get_interaction_knowledge_base() -> InteractionKnowledgeBase:
    """Get the process-wide interaction knowledge base."""
    return get_knowledge_base()


def get_analysis_service() -> AnalysisService:
    """Get analysis service instance."""
    return AnalysisService()


# Re-export for convenience
__all__ = [
    "verify_api_key",
    "get_cache_service",
    "get_catalog",
    "get_interaction_knowledge_base",
    "get_analysis_service",
]
