"""
Shared response schemas - errors, messages, health
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Human-readable error message")
    details: Optional[List[Dict[str, Any]]] = Field(
        default=None, description="Field-level or per-entry details"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "username: String should have at least 3 characters",
                "details": [
                    {"field": "username", "message": "String should have at least 3 characters"}
                ],
            }
        }
    )


class MessageResponse(BaseModel):
    message: str


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: Dict[str, Dict[str, Any]] = Field(description="Individual component health checks")
