"""
User & Invitation Use Cases
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import (
    AcceptInvitationCommand,
    InvitationPreviewResponse,
    InvitationResponse,
    SendInvitationCommand,
    UpdateProfileCommand,
    UpdateUserCommand,
    UserListResponse,
    UserResponse,
)
from .get_invitation_use_case import GetInvitationUseCase
from .list_users_use_case import ListUsersUseCase
from .resend_invitation_use_case import ResendInvitationUseCase
from .send_invitation_use_case import SendInvitationUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    # Use Cases
    "ListUsersUseCase",
    "SendInvitationUseCase",
    "ResendInvitationUseCase",
    "CancelInvitationUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "UpdateProfileUseCase",
    # DTOs - Commands
    "SendInvitationCommand",
    "AcceptInvitationCommand",
    "UpdateUserCommand",
    "UpdateProfileCommand",
    # DTOs - Responses
    "UserResponse",
    "InvitationResponse",
    "UserListResponse",
    "InvitationPreviewResponse",
]
