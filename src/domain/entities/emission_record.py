"""
EmissionRecord Entity

Monthly activity quantity for one source at one factory.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class EmissionRecord(SQLModel, table=True):
    """
    EmissionRecord entity.

    Business Rules:
    - At most one record per (organization, factory, source, year, month);
      the unique constraint below is the authoritative guard
    - emissions = source.emission_factor * quantity, never stored
    """

    __tablename__ = "emission_records"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    factory_id: UUID = Field(foreign_key="factories.id", nullable=False, index=True)
    emission_source_id: UUID = Field(
        foreign_key="emission_sources.id", nullable=False, index=True
    )
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    year: int = Field(nullable=False)
    month: int = Field(nullable=False)
    quantity: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=4)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint(
            "organization_id",
            "factory_id",
            "emission_source_id",
            "year",
            "month",
            name="uq_emission_record_period",
        ),
        Index("idx_emission_record_period", "year", "month"),
    )
