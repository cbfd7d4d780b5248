"""
Emission Record Use Cases
"""

from .create_emission_record_use_case import CreateEmissionRecordUseCase
from .delete_emission_record_use_case import DeleteEmissionRecordUseCase
from .dtos import (
    EmissionRecordCommand,
    EmissionRecordDetailResponse,
    EmissionRecordListResponse,
    EmissionRecordResponse,
)
from .get_emission_record_use_case import GetEmissionRecordUseCase
from .list_emission_records_use_case import ListEmissionRecordsUseCase
from .update_emission_record_use_case import UpdateEmissionRecordUseCase

__all__ = [
    "ListEmissionRecordsUseCase",
    "GetEmissionRecordUseCase",
    "CreateEmissionRecordUseCase",
    "UpdateEmissionRecordUseCase",
    "DeleteEmissionRecordUseCase",
    "EmissionRecordCommand",
    "EmissionRecordResponse",
    "EmissionRecordListResponse",
    "EmissionRecordDetailResponse",
]
