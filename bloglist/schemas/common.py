"""
Bloglist Backend — Shared Response Schemas
============================================

What:  Error and health payloads shared by every router.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body for every 4xx/5xx response.

    Example:
        {"error": "username must be unique"}
    """
    error: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
