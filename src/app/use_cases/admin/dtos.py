"""
Platform Admin Use Case DTOs
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.emission_sources.dtos import EmissionSourceResponse


class ReviewCustomSourceCommand(BaseModel):
    """Decision on a requested source; factor and formula apply on approval"""

    approve: bool
    emission_factor: Optional[Decimal] = None
    formula: Optional[str] = None


class PendingSourceRequestsResponse(BaseModel):
    sources: List[EmissionSourceResponse]
