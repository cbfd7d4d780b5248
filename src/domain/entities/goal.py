"""
Goal Entity
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from .enums import GoalStatus


class Goal(SQLModel, table=True):
    """
    Goal entity - a sustainability target on one emission source.

    Business Rules:
    - Created with status=active
    - end_date must not precede start_date
    """

    __tablename__ = "goals"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    emission_source_id: UUID = Field(foreign_key="emission_sources.id", nullable=False)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    status: GoalStatus = Field(default=GoalStatus.active)
    target_value: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=4)
    period: Optional[str] = Field(default=None, max_length=50)
    start_date: date
    end_date: date
