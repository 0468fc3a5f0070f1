# models/requests.py
"""
API request and response models
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime, UTC


class DeleteResponse(BaseModel):
    """Result of a delete operation"""

    deleted: bool


class HealthCheckResponse(BaseModel):
    """Health check response"""

    status: str = "healthy"
    version: str
    environment: str
    services: Dict[str, str]  # service_name -> status
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ErrorResponse(BaseModel):
    """Standard error response"""

    error: str
    message: str
    code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    request_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
