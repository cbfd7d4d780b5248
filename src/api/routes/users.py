from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserListResponse,
    UserResponse,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(tags=["Users"])


class UpdateUserRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=30)
    status: str = Field(..., description="active or inactive")
    role: str
    factory_id: Optional[UUID] = None


class UpdateProfileRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=30)
    password: Optional[str] = Field(None, min_length=8, description="Leave empty to keep")


@router.get("/users", response_model=UserListResponse)
async def list_users(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Members of the organization with pending invitations (administrator only)"""
    result = await ListUsersUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_STATUS, FACTORY_REQUIRED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: USER_NOT_FOUND, FACTORY_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    command = UpdateUserCommand(**request.model_dump())
    result = await UpdateUserUseCase(uow).execute(context, user_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: USER_HAS_RECORDS
    """
    result = await DeleteUserUseCase(uow).execute(context, user_id)
    if result.is_err():
        raise_for_error(result.error)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    request: UpdateProfileRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateProfileCommand(**request.model_dump())
    result = await UpdateProfileUseCase(uow).execute(context, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
