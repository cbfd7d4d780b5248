"""
EmissionSource Entity

One entry of the emission factor catalog.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import SourceRequestStatus


class EmissionSource(SQLModel, table=True):
    """
    EmissionSource entity.

    Business Rules:
    - organization_id is None for the global catalog shared by every tenant
    - Global sources are never editable or deletable by an organization
    - Organization-requested sources start inactive with factor 0 and
      request_status=pending until a platform admin reviews them
    - Cannot be deleted while any emission record references it
    """

    __tablename__ = "emission_sources"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )

    name: str = Field(max_length=150)
    description: Optional[str] = Field(default=None, max_length=255)
    period: Optional[str] = Field(default=None, max_length=50)
    scope: str = Field(max_length=50)
    unit: str = Field(max_length=50)
    emission_factor: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=6)
    formula: Optional[str] = Field(default=None, max_length=255)

    is_active: bool = Field(default=True)
    is_requested: bool = Field(default=False)
    request_status: Optional[SourceRequestStatus] = Field(default=None)
    requested_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_emission_source_active", "is_active"),)

    @property
    def is_global(self) -> bool:
        return self.organization_id is None
