"""
Factory Entity
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Factory(SQLModel, table=True):
    """
    Factory entity - a site whose emissions are reported monthly.

    Business Rules:
    - Code is unique across all organizations, not just per organization
    - Cannot be deleted while any emission record references it
    """

    __tablename__ = "factories"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)

    code: str = Field(unique=True, index=True, max_length=50)
    name: str = Field(max_length=255)
    location: str = Field(default="", max_length=255)
