"""
User Entity

A person belonging to exactly one organization with one role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity.

    Business Rules:
    - Email is unique across all users
    - Password stored as bcrypt hash
    - Inactive users cannot log in but still count against the plan's user cap
    - Factory operators are bound to a factory through their Invitation row
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)

    role: UserRole = Field(nullable=False)
    status: UserStatus = Field(default=UserStatus.active)

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=30)
    password_hash: str = Field(max_length=60)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_org_role", "organization_id", "role"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
