from uuid import uuid4

import pytest

from src.app.use_cases.users import DeleteUserUseCase
from src.domain.entities import Invitation, User, UserRole
from src.domain.base import utcnow


def make_user(organization_id, role=UserRole.factory_operator):
    return User(
        id=uuid4(),
        organization_id=organization_id,
        role=role,
        first_name="Ola",
        last_name="Nord",
        email="op@acme.com",
        password_hash="x",
    )


@pytest.mark.asyncio
async def test_user_with_records_cannot_be_deleted(mock_uow, admin_context):
    user = make_user(admin_context.organization_id)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.emission_records.exists_for_user.return_value = True
    mock_uow.goals.exists_for_user.return_value = False

    result = await DeleteUserUseCase(mock_uow).execute(admin_context, user.id)

    assert result.error.code == "USER_HAS_RECORDS"
    mock_uow.users.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user_removes_invitations(mock_uow, admin_context):
    user = make_user(admin_context.organization_id)
    invitation = Invitation(
        organization_id=admin_context.organization_id,
        role=UserRole.factory_operator,
        user_id=user.id,
        email=user.email,
        token="c" * 64,
        expires_at=utcnow(),
    )
    mock_uow.users.get_by_id.return_value = user
    mock_uow.emission_records.exists_for_user.return_value = False
    mock_uow.goals.exists_for_user.return_value = False
    mock_uow.invitations.list_by_user.return_value = [invitation]

    result = await DeleteUserUseCase(mock_uow).execute(admin_context, user.id)

    assert result.is_ok()
    mock_uow.invitations.delete.assert_called_once_with(invitation)
    mock_uow.users.delete.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_administrators_cannot_be_deleted(mock_uow, admin_context):
    admin = make_user(admin_context.organization_id, role=UserRole.administrator)
    mock_uow.users.get_by_id.return_value = admin

    result = await DeleteUserUseCase(mock_uow).execute(admin_context, admin.id)

    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_officer_cannot_delete_users(mock_uow, officer_context):
    result = await DeleteUserUseCase(mock_uow).execute(officer_context, uuid4())

    assert result.error.code == "INSUFFICIENT_ROLE"
