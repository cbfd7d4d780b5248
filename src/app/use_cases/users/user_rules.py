from typing import Optional

from libs.result import Error
from src.domain.entities import UserRole

INVITABLE_ROLES = (UserRole.sustainability_officer, UserRole.factory_operator)


def parse_invitable_role(value: str) -> Optional[UserRole]:
    """Roles an administrator can hand out; administrator itself is not one"""
    try:
        role = UserRole(value)
    except ValueError:
        return None
    return role if role in INVITABLE_ROLES else None


def invalid_role(value: str) -> Error:
    allowed = ", ".join(r.value for r in INVITABLE_ROLES)
    return Error("INVALID_ROLE", f"Invalid role: {value}. Must be one of: {allowed}")
