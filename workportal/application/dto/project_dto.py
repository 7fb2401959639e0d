"""
Project DTOs for the application layer.
Data Transfer Objects for project-related operations.
"""

from typing import Optional, List
from datetime import datetime, date
from decimal import Decimal
from pydantic import Field, validator

from workportal.domain.models.project import Project, ProjectStatus, ProjectAction
from .base_dto import BaseDTO, RequestDTO, ResponseDTO, PageRequestDTO
from .profile_dto import ProfileSummaryDTO


class CreateProjectRequestDTO(RequestDTO):
    """DTO for project creation requests."""

    title: str = Field(min_length=1, max_length=200, description="Project title")
    description: str = Field(min_length=1, max_length=5000, description="Project description")
    budget: Optional[Decimal] = Field(default=None, ge=0, description="Budget")
    deadline: Optional[date] = Field(default=None, description="Deadline")

    @validator('title', 'description')
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be blank')
        return v.strip()


class ListProjectsRequestDTO(PageRequestDTO):
    """DTO for listing the projects visible to the caller."""

    status: Optional[ProjectStatus] = Field(default=None, description="Filter by project status")


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    client_id: str
    freelancer_id: Optional[str] = None
    title: str
    description: str
    budget: Optional[Decimal] = None
    deadline: Optional[date] = None
    status: ProjectStatus
    updated_at: Optional[datetime] = None
    client: Optional[ProfileSummaryDTO] = Field(default=None, description="Name and avatar of the posting client")
    available_actions: List[ProjectAction] = Field(
        default_factory=list,
        description="Lifecycle actions the caller can take right now"
    )

    @classmethod
    def from_domain(
        cls,
        project: Project,
        available_actions: Optional[List[ProjectAction]] = None
    ) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            created_at=project.created_at,
            updated_at=project.updated_at,
            client_id=project.client_id,
            freelancer_id=project.freelancer_id,
            title=project.title,
            description=project.description,
            budget=project.budget,
            deadline=project.deadline,
            status=project.status,
            client=ProfileSummaryDTO.from_domain(project.client) if project.client else None,
            available_actions=available_actions or [],
        )


class ProjectListResponseDTO(BaseDTO):
    projects: List[ProjectResponseDTO]
    total: int
    limit: int
    offset: int
