"""
Sustain Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user within their organization"""

    administrator = "administrator"
    sustainability_officer = "sustainability_officer"
    factory_operator = "factory_operator"


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    inactive = "inactive"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    cancelled = "cancelled"


class SubscriptionStatus(str, Enum):
    """Subscription status"""

    active = "active"
    expired = "expired"


class PlanType(str, Enum):
    """Subscription plan type"""

    free = "free"
    paid = "paid"


class GoalStatus(str, Enum):
    """Goal status"""

    active = "active"
    completed = "completed"
    cancelled = "cancelled"


class SourceRequestStatus(str, Enum):
    """Review status of an organization-requested emission source"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class InvoiceStatus(str, Enum):
    """Invoice status"""

    paid = "paid"


class PaymentStatus(str, Enum):
    """Payment status"""

    completed = "completed"


class EmissionScope(str, Enum):
    """GHG Protocol scope tags used by the emission catalog"""

    scope_1 = "Scope 1"
    scope_2 = "Scope 2"
    scope_3 = "Scope 3"
