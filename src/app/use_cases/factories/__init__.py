"""
Factory Use Cases
"""

from .create_factory_use_case import CreateFactoryUseCase
from .delete_factory_use_case import DeleteFactoryUseCase
from .dtos import FactoryCommand, FactoryListResponse, FactoryResponse
from .list_factories_use_case import ListFactoriesUseCase
from .update_factory_use_case import UpdateFactoryUseCase

__all__ = [
    "ListFactoriesUseCase",
    "CreateFactoryUseCase",
    "UpdateFactoryUseCase",
    "DeleteFactoryUseCase",
    "FactoryCommand",
    "FactoryResponse",
    "FactoryListResponse",
]
