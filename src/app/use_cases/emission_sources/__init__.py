"""
Emission Source Use Cases
"""

from .create_emission_source_use_case import CreateEmissionSourceUseCase
from .delete_emission_source_use_case import DeleteEmissionSourceUseCase
from .dtos import (
    EmissionSourceCommand,
    EmissionSourceListResponse,
    EmissionSourceResponse,
    RequestCustomSourceCommand,
)
from .list_emission_sources_use_case import ListEmissionSourcesUseCase
from .request_custom_source_use_case import RequestCustomSourceUseCase
from .update_emission_source_use_case import UpdateEmissionSourceUseCase

__all__ = [
    "ListEmissionSourcesUseCase",
    "CreateEmissionSourceUseCase",
    "UpdateEmissionSourceUseCase",
    "DeleteEmissionSourceUseCase",
    "RequestCustomSourceUseCase",
    "EmissionSourceCommand",
    "RequestCustomSourceCommand",
    "EmissionSourceResponse",
    "EmissionSourceListResponse",
]
