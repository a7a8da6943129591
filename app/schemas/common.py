"""
Common schemas used across multiple endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "error": "InsufficientInputError",
                "message": "At least 2 resolved drugs are required for interaction analysis, got 1",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    knowledge_base: dict[str, str | int] = Field(
        default_factory=dict,
        description="Knowledge base provenance and size"
    )
    redis: bool = Field(default=False, description="Redis connection status")
    uptime_seconds: float = Field(default=0, description="Service uptime")

    class Config:
        json_schema_extra = {
            "example": {
                "service": "DrugSafe Interaction Engine",
                "version": "1.0.0",
                "status": "healthy",
                "timestamp": "2024-01-15T10:30:00Z",
                "knowledge_base": {
                    "version": "2024.1",
                    "last_updated": "2024-01-15",
                    "drugs": 15,
                    "interactions": 16
                },
                "redis": True,
                "uptime_seconds": 3600.5
            }
        }
