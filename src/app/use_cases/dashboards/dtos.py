"""
Dashboard Use Case DTOs
"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from src.app.services.emission_aggregator import EmissionSummaryView
from src.app.use_cases.emission_records.dtos import EmissionRecordResponse
from src.app.use_cases.factories.dtos import FactoryResponse
from src.app.use_cases.subscriptions.dtos import LimitsResponse, SubscriptionResponse


class UserCounts(BaseModel):
    total: int
    active: int
    administrators: int
    sustainability_officers: int
    factory_operators: int


class FactoryEmissions(BaseModel):
    factory_id: str
    factory_name: str
    emissions: float


class AdminDashboardResponse(BaseModel):
    users: UserCounts
    total_factories: int
    factories_with_records: int
    data_compliance: float
    factory_emissions: List[FactoryEmissions]
    subscription: Optional[SubscriptionResponse] = None
    limits: LimitsResponse


class OfficerDashboardResponse(BaseModel):
    selected_factory_id: Optional[str] = None
    summary: EmissionSummaryView
    records: List[EmissionRecordResponse]
    factory_names: Dict[str, str]


class OperatorDashboardResponse(BaseModel):
    factory: FactoryResponse
    summary: EmissionSummaryView
    records: List[EmissionRecordResponse]
    latest_records: List[EmissionRecordResponse]
