"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterOrganizationCommand(BaseModel):
    """Command to register a new organization with its first administrator"""

    first_name: str
    last_name: str
    email: str
    password: str
    phone: Optional[str] = None
    organization_name: str
    industry: Optional[str] = None
    city: Optional[str] = None
    plan_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class AuthResponse(BaseModel):
    """Token and landing page returned after registration, login or acceptance"""

    access_token: str
    token_type: str = "bearer"
    user_id: str
    organization_id: str
    role: str
    dashboard_path: str


class RegisterOrganizationResponse(AuthResponse):
    """Response for organization registration"""

    subscription_id: str
    plan_name: str
    invoice_id: Optional[str] = None


DASHBOARD_PATHS = {
    "administrator": "/dashboards/admin",
    "sustainability_officer": "/dashboards/officer",
    "factory_operator": "/dashboards/operator",
}


def dashboard_path(role: str) -> str:
    """Landing dashboard of a role"""
    return DASHBOARD_PATHS.get(role, "/dashboards/admin")
