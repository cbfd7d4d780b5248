"""
Emission Source Use Case DTOs
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import EmissionSource


class EmissionSourceCommand(BaseModel):
    """Command to create or update an organization emission source"""

    name: str
    description: Optional[str] = None
    period: Optional[str] = None
    scope: str
    unit: str
    emission_factor: Decimal
    formula: Optional[str] = None
    is_active: bool = True


class RequestCustomSourceCommand(BaseModel):
    """Command to ask the platform to add a source; the factor is set on review"""

    name: str
    description: Optional[str] = None
    period: Optional[str] = None
    scope: str
    unit: str


class EmissionSourceResponse(BaseModel):
    id: str
    organization_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    period: Optional[str] = None
    scope: str
    unit: str
    emission_factor: float
    formula: Optional[str] = None
    is_active: bool
    is_global: bool
    is_requested: bool
    request_status: Optional[str] = None
    requested_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, source: EmissionSource) -> "EmissionSourceResponse":
        return cls(
            id=str(source.id),
            organization_id=str(source.organization_id) if source.organization_id else None,
            name=source.name,
            description=source.description,
            period=source.period,
            scope=source.scope,
            unit=source.unit,
            emission_factor=float(source.emission_factor),
            formula=source.formula,
            is_active=source.is_active,
            is_global=source.is_global,
            is_requested=source.is_requested,
            request_status=source.request_status.value if source.request_status else None,
            requested_at=source.requested_at,
        )


class EmissionSourceListResponse(BaseModel):
    sources: List[EmissionSourceResponse]
