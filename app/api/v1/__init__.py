"""API v1 routes."""

from app.api.v1 import drugs, health, interactions

__all__ = ["drugs", "health", "interactions"]
