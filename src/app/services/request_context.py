from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import UserRole


class RequestContext(BaseModel):
    """Identity of the caller, decoded once per request and passed to use cases"""

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    organization_id: UUID
    role: UserRole

    @property
    def is_administrator(self) -> bool:
        return self.role == UserRole.administrator

    @property
    def is_factory_operator(self) -> bool:
        return self.role == UserRole.factory_operator
