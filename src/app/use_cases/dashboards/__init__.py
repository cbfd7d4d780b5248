"""
Dashboard Use Cases
"""

from .dtos import AdminDashboardResponse, OfficerDashboardResponse, OperatorDashboardResponse
from .get_admin_dashboard_use_case import GetAdminDashboardUseCase
from .get_officer_dashboard_use_case import GetOfficerDashboardUseCase
from .get_operator_dashboard_use_case import GetOperatorDashboardUseCase

__all__ = [
    "GetAdminDashboardUseCase",
    "GetOfficerDashboardUseCase",
    "GetOperatorDashboardUseCase",
    "AdminDashboardResponse",
    "OfficerDashboardResponse",
    "OperatorDashboardResponse",
]
