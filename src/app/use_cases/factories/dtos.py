"""
Factory Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Factory


class FactoryCommand(BaseModel):
    """Command to create or update a factory"""

    code: str
    name: str
    location: Optional[str] = None


class FactoryResponse(BaseModel):
    id: str
    code: str
    name: str
    location: Optional[str] = None

    @classmethod
    def from_entity(cls, factory: Factory) -> "FactoryResponse":
        return cls(
            id=str(factory.id),
            code=factory.code,
            name=factory.name,
            location=factory.location,
        )


class FactoryListResponse(BaseModel):
    factories: List[FactoryResponse]
    can_create_factory: bool
    current_factories: int
    max_factories: int
