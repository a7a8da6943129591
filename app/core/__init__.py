"""Core modules for the DrugSafe Interaction Engine."""

from app.core.auth import verify_api_key
from app.core.cache import CacheService, get_cache_service
from app.core.exceptions import (
    InsufficientInputError,
    InteractionAnalysisError,
    UnresolvedDrugError,
)
from app.core.logging import get_logger, setup_logging
from app.core.rate_limit import limiter, get_remote_address

__all__ = [
    "verify_api_key",
    "CacheService",
    "get_cache_service",
    "InsufficientInputError",
    "InteractionAnalysisError",
    "UnresolvedDrugError",
    "get_logger",
    "setup_logging",
    "limiter",
    "get_remote_address",
]
