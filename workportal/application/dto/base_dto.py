"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from workportal.domain.models.base import utcnow


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[str] = None
    created_at: Optional[datetime] = None


class PageRequestDTO(RequestDTO):
    """Base class for list requests with offset pagination."""

    limit: Optional[int] = Field(default=None, ge=1, description="Maximum number of items, configured page size when omitted")
    offset: int = Field(default=0, ge=0, description="Number of items to skip")


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    timestamp: datetime = Field(default_factory=utcnow, description="Check timestamp")
    version: Optional[str] = Field(default=None, description="Application version")
    environment: Optional[str] = Field(default=None, description="Deployment environment")
    storage_backend: Optional[str] = Field(default=None, description="Configured store")


class AckResponseDTO(BaseDTO):
    """Plain acknowledgement."""

    message: str


class CountResponseDTO(BaseDTO):
    count: int = Field(ge=0)


def to_update_dict(dto: BaseModel, exclude_fields: Optional[List[str]] = None) -> Dict[str, Any]:
    """Fields the caller actually sent, minus the excluded ones."""
    data = dto.model_dump(exclude_unset=True)
    for field in exclude_fields or []:
        data.pop(field, None)
    return data
