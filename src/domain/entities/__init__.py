"""
Sustain Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    EmissionScope,
    GoalStatus,
    InvitationStatus,
    InvoiceStatus,
    PaymentStatus,
    PlanType,
    SourceRequestStatus,
    SubscriptionStatus,
    UserRole,
    UserStatus,
)

# Export all entities
from .organization import Organization
from .user import User
from .factory import Factory
from .emission_source import EmissionSource
from .emission_record import EmissionRecord
from .goal import Goal
from .subscription_plan import SubscriptionPlan
from .subscription import Subscription
from .invoice import Invoice, Payment
from .invitation import Invitation

__all__ = [
    # Enums
    "EmissionScope",
    "GoalStatus",
    "InvitationStatus",
    "InvoiceStatus",
    "PaymentStatus",
    "PlanType",
    "SourceRequestStatus",
    "SubscriptionStatus",
    "UserRole",
    "UserStatus",
    # Entities
    "Organization",
    "User",
    "Factory",
    "EmissionSource",
    "EmissionRecord",
    "Goal",
    "SubscriptionPlan",
    "Subscription",
    "Invoice",
    "Payment",
    "Invitation",
]
