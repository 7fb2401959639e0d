"""
SQLAlchemy models for the database.
Mirrors the marketplace tables: profiles, projects, deliverables, messages,
invoices and notifications.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Numeric, Date, ForeignKey, JSON,
    Index, UniqueConstraint, CheckConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


class ProfileModel(Base):
    """Profile table - one row per auth principal"""
    __tablename__ = 'profiles'

    id = Column(String(36), primary_key=True)
    full_name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)
    bio = Column(Text)
    hourly_rate = Column(Numeric(10, 2))
    skills = Column(JSON)
    rating = Column(Numeric(3, 2))
    total_reviews = Column(Integer, default=0)
    avatar_url = Column(String(500))

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    owned_projects = relationship("ProjectModel", foreign_keys="ProjectModel.client_id", back_populates="client")
    assigned_projects = relationship("ProjectModel", foreign_keys="ProjectModel.freelancer_id", back_populates="freelancer")

    __table_args__ = (
        CheckConstraint("role IN ('client', 'freelancer')", name='check_profile_role'),
    )


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(String(36), primary_key=True)
    client_id = Column(String(36), ForeignKey('profiles.id'), nullable=False)
    freelancer_id = Column(String(36), ForeignKey('profiles.id'))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    budget = Column(Numeric(12, 2))
    deadline = Column(Date)
    status = Column(String(20), nullable=False, default='open')

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    client = relationship("ProfileModel", foreign_keys=[client_id], back_populates="owned_projects")
    freelancer = relationship("ProfileModel", foreign_keys=[freelancer_id], back_populates="assigned_projects")
    deliverables = relationship("DeliverableModel", back_populates="project")
    messages = relationship("MessageModel", back_populates="project")
    invoices = relationship("InvoiceModel", back_populates="project")

    # Indexes
    __table_args__ = (
        Index('idx_projects_client_status', 'client_id', 'status'),
        Index('idx_projects_freelancer_status', 'freelancer_id', 'status'),
        Index('idx_projects_status', 'status'),
        CheckConstraint(
            "status IN ('open', 'in_progress', 'in_review', 'completed', 'cancelled')",
            name='check_project_status'
        ),
        CheckConstraint(
            "(status = 'open' AND freelancer_id IS NULL) OR status = 'cancelled' OR freelancer_id IS NOT NULL",
            name='check_project_assignment'
        ),
    )


class DeliverableModel(Base):
    """Deliverable table"""
    __tablename__ = 'deliverables'

    id = Column(String(36), primary_key=True)
    project_id = Column(String(36), ForeignKey('projects.id'), nullable=False)
    freelancer_id = Column(String(36), ForeignKey('profiles.id'), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    file_url = Column(String(1000))
    version = Column(Integer, nullable=False, default=1)
    status = Column(String(30), nullable=False, default='pending')
    submitted_at = Column(DateTime(timezone=True))
    reviewed_at = Column(DateTime(timezone=True))
    feedback = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("ProjectModel", back_populates="deliverables")

    __table_args__ = (
        UniqueConstraint('project_id', 'freelancer_id', 'version', name='unique_deliverable_version'),
        Index('idx_deliverables_project', 'project_id'),
    )


class MessageModel(Base):
    """Message table"""
    __tablename__ = 'messages'

    id = Column(String(36), primary_key=True)
    project_id = Column(String(36), ForeignKey('projects.id'), nullable=False)
    sender_id = Column(String(36), ForeignKey('profiles.id'), nullable=False)
    content = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("ProjectModel", back_populates="messages")

    __table_args__ = (
        Index('idx_messages_project_created', 'project_id', 'created_at'),
    )


class InvoiceModel(Base):
    """Invoice table"""
    __tablename__ = 'invoices'

    id = Column(String(36), primary_key=True)
    project_id = Column(String(36), ForeignKey('projects.id'), nullable=False)
    client_id = Column(String(36), ForeignKey('profiles.id'), nullable=False)
    freelancer_id = Column(String(36), ForeignKey('profiles.id'), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text)
    due_date = Column(Date)
    status = Column(String(50), nullable=False, default='sent')
    paid_at = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("ProjectModel", back_populates="invoices")

    __table_args__ = (
        Index('idx_invoices_client', 'client_id'),
        Index('idx_invoices_freelancer', 'freelancer_id'),
        CheckConstraint('amount > 0', name='check_invoice_amount_positive'),
    )


class NotificationModel(Base):
    """Notification table"""
    __tablename__ = 'notifications'

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey('profiles.id'), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), nullable=False)
    link = Column(String(500))
    read = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index('idx_notifications_user_read', 'user_id', 'read'),
    )
