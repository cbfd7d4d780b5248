"""
Emission Record Use Case DTOs
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.repositories.read_models import RecordWithFactorAndScope
from src.app.services.emission_aggregator import EmissionSummaryView, to_display


class EmissionRecordCommand(BaseModel):
    """Command to create or update an emission record"""

    factory_id: UUID
    emission_source_id: UUID
    year: int
    month: int
    quantity: Decimal


class EmissionRecordResponse(BaseModel):
    id: str
    factory_id: str
    factory_name: str
    emission_source_id: str
    source_name: str
    scope: str
    unit: str
    emission_factor: float
    quantity: float
    emissions: float
    year: int
    month: int
    user_id: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_read_model(cls, record: RecordWithFactorAndScope) -> "EmissionRecordResponse":
        return cls(
            id=str(record.record_id),
            factory_id=str(record.factory_id),
            factory_name=record.factory_name,
            emission_source_id=str(record.emission_source_id),
            source_name=record.source_name,
            scope=record.scope,
            unit=record.unit,
            emission_factor=float(record.emission_factor),
            quantity=float(record.quantity),
            emissions=to_display(record.emissions),
            year=record.year,
            month=record.month,
            user_id=str(record.user_id),
            created_at=record.created_at,
        )


class EmissionRecordListResponse(BaseModel):
    records: List[EmissionRecordResponse]
    summary: EmissionSummaryView


class EmissionRecordDetailResponse(BaseModel):
    record: EmissionRecordResponse
    similar_records: List[EmissionRecordResponse]
