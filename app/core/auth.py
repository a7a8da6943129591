"""
API key protection for analysis endpoints.

Catalog lookups and health checks are public; submitting patient data for
analysis requires the shared key configured in ``API_KEY``.
"""

import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.config import get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)

API_KEY_HEADER_NAME = "X-API-Key"

api_key_header = APIKeyHeader(
    name=API_KEY_HEADER_NAME,
    auto_error=False,
    description="Shared key for analysis endpoints"
)


async def verify_api_key(api_key: str | None = Security(api_key_header)) -> str:
    """
    Check the X-API-Key header against the configured key.

    Raises:
        HTTPException: 500 when the server has no key configured,
            401 when the header is absent, 403 when it does not match.
    """
    expected = get_settings().API_KEY

    if not expected:
        logger.error("API_KEY is not configured; rejecting analysis request")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API key not configured on server"
        )

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key required",
            headers={"WWW-Authenticate": "ApiKey"}
        )

    if not secrets.compare_digest(api_key.encode(), expected.encode()):
        logger.warning("Rejected request with invalid API key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key"
        )

    return api_key
