"""
SubscriptionPlan Entity
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from .enums import PlanType


class SubscriptionPlan(SQLModel, table=True):
    """
    SubscriptionPlan entity - catalog of purchasable plans.

    Business Rules:
    - A missing max_users / max_factories means a cap of 0, not unlimited
    - Free plans run for one month, paid plans for one year
    """

    __tablename__ = "subscription_plans"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    type: PlanType = Field(nullable=False)
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    max_users: Optional[int] = Field(default=None)
    max_factories: Optional[int] = Field(default=None)
    duration: Optional[str] = Field(default=None, max_length=50)
