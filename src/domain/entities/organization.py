"""
Organization Entity

Represents an isolated tenant workspace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Organization(SQLModel, table=True):
    """
    Organization entity - the tenant that owns users, factories,
    subscriptions, goals and organization-scoped emission sources.

    Business Rules:
    - Every other tenant-owned row carries organization_id
    - Created together with its first administrator and subscription
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    industry: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
