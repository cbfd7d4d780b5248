"""
Subscription & Billing Use Cases
"""

from .dtos import (
    BillingResponse,
    InvoiceResponse,
    LimitsResponse,
    PaymentResponse,
    PlanResponse,
    RenewSubscriptionCommand,
    RenewSubscriptionResponse,
    SubscriptionResponse,
    UsageResponse,
)
from .get_billing_use_case import GetBillingUseCase
from .get_limits_use_case import GetLimitsUseCase
from .list_plans_use_case import ListPlansUseCase
from .purchase_subscription_use_case import PurchaseSubscriptionUseCase
from .renew_subscription_use_case import RenewSubscriptionUseCase

__all__ = [
    # Use Cases
    "ListPlansUseCase",
    "PurchaseSubscriptionUseCase",
    "GetBillingUseCase",
    "GetLimitsUseCase",
    "RenewSubscriptionUseCase",
    # DTOs - Commands
    "RenewSubscriptionCommand",
    # DTOs - Responses
    "PlanResponse",
    "SubscriptionResponse",
    "InvoiceResponse",
    "PaymentResponse",
    "LimitsResponse",
    "UsageResponse",
    "BillingResponse",
    "RenewSubscriptionResponse",
]
