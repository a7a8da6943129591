"""
Request throttling with SlowAPI.

Authenticated callers share a bucket per API key; anonymous catalog and
search traffic is bucketed per client address.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.config import get_settings

# Only a prefix of the key is kept in limiter storage
_KEY_PREFIX_LENGTH = 8


def _get_rate_limit_key(request: Request) -> str:
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"api_key:{api_key[:_KEY_PREFIX_LENGTH]}"
    return f"ip:{get_remote_address(request)}"


def get_rate_limit_string() -> str:
    """Default limit applied to routes without their own decorator."""
    settings = get_settings()
    return f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW} seconds"


limiter = Limiter(
    key_func=_get_rate_limit_key,
    default_limits=[get_rate_limit_string()]
)
