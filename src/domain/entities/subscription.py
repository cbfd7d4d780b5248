"""
Subscription Entity
"""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import SubscriptionStatus


class Subscription(SQLModel, table=True):
    """
    Subscription entity - links an organization to a plan for a period.

    Business Rules:
    - One active subscription per organization; renewal expires the others
    - When several are active anyway, the most recently started one wins
    """

    __tablename__ = "subscriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    plan_id: UUID = Field(foreign_key="subscription_plans.id", nullable=False)

    start_date: date
    end_date: date
    status: SubscriptionStatus = Field(default=SubscriptionStatus.active)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_subscription_org_status", "organization_id", "status"),)
