"""
Authentication Use Cases

Registration and login.
"""

from .dtos import (
    AuthResponse,
    RegisterOrganizationCommand,
    RegisterOrganizationResponse,
    dashboard_path,
)
from .login_use_case import LoginUseCase
from .register_organization_use_case import RegisterOrganizationUseCase

__all__ = [
    # Use Cases
    "RegisterOrganizationUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "RegisterOrganizationCommand",
    # DTOs - Responses
    "AuthResponse",
    "RegisterOrganizationResponse",
    # Helpers
    "dashboard_path",
]
