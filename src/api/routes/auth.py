from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    RegisterOrganizationCommand,
    RegisterOrganizationResponse,
    RegisterOrganizationUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Registration HTTP request payload

    Validates incoming HTTP request before converting to RegisterOrganizationCommand.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., description="Administrator email address")
    password: str = Field(..., min_length=8, description="Password (min 8 chars)")
    phone: Optional[str] = Field(None, max_length=30)
    organization_name: str = Field(..., min_length=1, max_length=255)
    industry: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    plan_id: UUID

    def to_command(self) -> RegisterOrganizationCommand:
        return RegisterOrganizationCommand(**self.model_dump())


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterOrganizationResponse,
)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Register Organization

    Creates the organization, its administrator and the subscription on the
    chosen plan. Returns a JWT for the administrator.

    Raises:
        - 404 Not Found: PLAN_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    use_case = RegisterOrganizationUseCase(uow)
    result = await use_case.execute(request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 403 Forbidden: USER_INACTIVE
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
