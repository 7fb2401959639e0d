"""
Dashboard DTOs for the application layer.
"""

from typing import Optional
from decimal import Decimal
from pydantic import Field

from workportal.domain.models.profile import UserRole
from .base_dto import BaseDTO


class DashboardStatsResponseDTO(BaseDTO):
    """Headline numbers for the caller's dashboard."""

    role: UserRole
    total_projects: int = Field(ge=0, description="Projects owned (clients) or assigned (freelancers)")
    active_projects: int = Field(ge=0, description="Projects in progress or in review")
    completed_projects: int = Field(ge=0)
    open_projects: int = Field(ge=0, description="Unassigned projects (clients only)")
    unread_notifications: int = Field(ge=0)
    unread_messages: int = Field(ge=0)
    total_earnings: Optional[Decimal] = Field(default=None, description="Paid invoice total (freelancers)")
    total_spent: Optional[Decimal] = Field(default=None, description="Paid invoice total (clients)")
