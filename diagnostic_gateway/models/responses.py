"""
Gateway Response Models
======================

Pydantic models for API responses.
"""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """
    Response for an accepted submission.

    Also returned, unchanged, when the honeypot trips: bots must not be able
    to distinguish a silent drop from a real acceptance.
    """

    success: bool = True


class ErrorResponse(BaseModel):
    """Error response"""

    error: str


class HealthResponse(BaseModel):
    """Health check response"""

    service: str
    status: str
    build_id: str
    github_commit: str
    timestamp: str
