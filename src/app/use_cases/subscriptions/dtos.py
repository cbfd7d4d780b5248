"""
Subscription & Billing Use Case DTOs
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.services.entitlement_service import SubscriptionLimits
from src.domain.entities import Invoice, Payment, Subscription, SubscriptionPlan


# ============================================================================
# Command DTOs
# ============================================================================


class RenewSubscriptionCommand(BaseModel):
    """Command to replace the active subscription with a new plan period"""

    subscription_id: UUID
    plan_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class PlanResponse(BaseModel):
    id: str
    name: str
    type: str
    price: float
    max_users: Optional[int] = None
    max_factories: Optional[int] = None
    duration: Optional[str] = None

    @classmethod
    def from_entity(cls, plan: SubscriptionPlan) -> "PlanResponse":
        return cls(
            id=str(plan.id),
            name=plan.name,
            type=plan.type.value,
            price=float(plan.price),
            max_users=plan.max_users,
            max_factories=plan.max_factories,
            duration=plan.duration,
        )


class SubscriptionResponse(BaseModel):
    id: str
    plan: Optional[PlanResponse] = None
    start_date: date
    end_date: date
    status: str

    @classmethod
    def from_entity(
        cls, subscription: Subscription, plan: Optional[SubscriptionPlan] = None
    ) -> "SubscriptionResponse":
        return cls(
            id=str(subscription.id),
            plan=PlanResponse.from_entity(plan) if plan else None,
            start_date=subscription.start_date,
            end_date=subscription.end_date,
            status=subscription.status.value,
        )


class PaymentResponse(BaseModel):
    id: str
    amount: float
    status: str
    method: str
    paid_at: datetime

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            id=str(payment.id),
            amount=float(payment.amount),
            status=payment.status.value,
            method=payment.method,
            paid_at=payment.paid_at,
        )


class InvoiceResponse(BaseModel):
    id: str
    subscription_id: str
    total_amount: float
    status: str
    issued_at: datetime
    payments: List[PaymentResponse] = []

    @classmethod
    def from_entity(cls, invoice: Invoice, payments: List[Payment]) -> "InvoiceResponse":
        return cls(
            id=str(invoice.id),
            subscription_id=str(invoice.subscription_id),
            total_amount=float(invoice.total_amount),
            status=invoice.status.value,
            issued_at=invoice.issued_at,
            payments=[PaymentResponse.from_entity(p) for p in payments],
        )


class LimitsResponse(BaseModel):
    """Usage against plan caps"""

    has_subscription: bool
    plan_name: Optional[str] = None
    current_users: int
    max_users: int
    current_factories: int
    max_factories: int
    user_limit_reached: bool
    factory_limit_reached: bool

    @classmethod
    def from_limits(cls, limits: SubscriptionLimits) -> "LimitsResponse":
        return cls(
            has_subscription=limits.has_subscription,
            plan_name=limits.plan_name,
            current_users=limits.current_users,
            max_users=limits.max_users,
            current_factories=limits.current_factories,
            max_factories=limits.max_factories,
            user_limit_reached=limits.user_limit_reached,
            factory_limit_reached=limits.factory_limit_reached,
        )


class UsageResponse(BaseModel):
    users: int
    factories: int
    emission_records: int


class BillingResponse(BaseModel):
    """Response for the billing overview"""

    subscription: Optional[SubscriptionResponse] = None
    invoices: List[InvoiceResponse]
    available_plans: List[PlanResponse]
    usage: UsageResponse
    limits: LimitsResponse


class RenewSubscriptionResponse(BaseModel):
    """Response for subscription renewal"""

    subscription: SubscriptionResponse
    invoice_id: str
    expired_subscription_ids: List[str]
