"""
Read models returned by repository queries.

Each query returns exactly the joined shape its callers need instead of an
entity graph with lazy relationships.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class RecordScope(BaseModel):
    """
    Set of emission records (and factories) a caller may see.

    Resolved once per request before any record query runs.
    """

    model_config = ConfigDict(frozen=True)

    organization_id: UUID
    factory_id: Optional[UUID] = None
    is_empty: bool = False

    @classmethod
    def organization_wide(cls, organization_id: UUID) -> "RecordScope":
        return cls(organization_id=organization_id)

    @classmethod
    def single_factory(cls, organization_id: UUID, factory_id: UUID) -> "RecordScope":
        return cls(organization_id=organization_id, factory_id=factory_id)

    @classmethod
    def empty(cls, organization_id: UUID) -> "RecordScope":
        return cls(organization_id=organization_id, is_empty=True)

    def allows_factory(self, factory_id: UUID) -> bool:
        if self.is_empty:
            return False
        return self.factory_id is None or self.factory_id == factory_id


class RecordFilters(BaseModel):
    """Optional narrowing applied inside a RecordScope"""

    factory_id: Optional[UUID] = None
    emission_source_id: Optional[UUID] = None
    year: Optional[int] = None
    month: Optional[int] = None
    scope: Optional[str] = None


class RecordWithFactorAndScope(BaseModel):
    """Emission record joined with its source factor/scope and factory name"""

    model_config = ConfigDict(frozen=True)

    record_id: UUID
    organization_id: UUID
    factory_id: UUID
    factory_name: str
    emission_source_id: UUID
    source_name: str
    scope: str
    unit: str
    emission_factor: Decimal
    quantity: Decimal
    year: int
    month: int
    user_id: UUID
    created_at: Optional[datetime] = None

    @property
    def emissions(self) -> Decimal:
        return self.emission_factor * self.quantity
