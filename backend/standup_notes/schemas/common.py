"""
Standup Notes Backend - Shared Response Schemas
===============================================

What:  Error body shared by every endpoint, and the health report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body for 400 and 500 responses.

    Example:
        {
            "error": "Date is required",
            "details": {"field": "date"},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="What went wrong")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health report for GET /health."""
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    completion: str = Field(description="Completion provider: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
