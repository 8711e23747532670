"""
Common API schemas used across the service.
"""

from typing import Dict

from pydantic import BaseModel, Field


class HealthCheckSchema(BaseModel):
    """Health check response DTO."""

    status: str = Field(..., description="Service health status")
    message: str = Field(..., description="Service status message")
    timestamp: str = Field(..., description="ISO-8601 time of the check")


class ErrorResponseSchema(BaseModel):
    """Error envelope returned by every failing endpoint."""

    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Error message")


class RootSchema(BaseModel):
    """Service index returned by the root route."""

    message: str = Field(..., description="Welcome message")
    endpoints: Dict[str, str] = Field(..., description="Available endpoints")
