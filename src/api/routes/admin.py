"""
Admin API Routes - Platform Administration Endpoints

These endpoints are for the platform operator reviewing custom source requests.
Authentication is via Admin API Key, not user JWTs.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    ListSourceRequestsUseCase,
    PendingSourceRequestsResponse,
    ReviewCustomSourceCommand,
    ReviewCustomSourceUseCase,
)
from src.app.use_cases.emission_sources import EmissionSourceResponse
from src.depends import get_unit_of_work

router = APIRouter(
    prefix="/admin", tags=["Admin"], dependencies=[Depends(verify_admin_api_key)]
)


class ReviewSourceRequest(BaseModel):
    approve: bool
    emission_factor: Optional[Decimal] = Field(
        None, description="Required when approving"
    )
    formula: Optional[str] = Field(None, max_length=255)


@router.get(
    "/source-requests",
    status_code=status.HTTP_200_OK,
    response_model=PendingSourceRequestsResponse,
)
async def list_source_requests(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Pending Source Requests

    Requires: X-Admin-API-Key header
    """
    result = await ListSourceRequestsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/source-requests/{source_id}/review",
    status_code=status.HTTP_200_OK,
    response_model=EmissionSourceResponse,
)
async def review_source_request(
    source_id: UUID,
    request: ReviewSourceRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Review Custom Source Request

    Approval sets the emission factor and activates the source for the
    requesting organization. Rejection leaves it inactive.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_EMISSION_FACTOR
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: SOURCE_NOT_FOUND
        - 409 Conflict: SOURCE_NOT_PENDING
    """
    command = ReviewCustomSourceCommand(
        approve=request.approve,
        emission_factor=request.emission_factor,
        formula=request.formula,
    )
    result = await ReviewCustomSourceUseCase(uow).execute(source_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
