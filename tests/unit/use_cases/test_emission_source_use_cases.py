from decimal import Decimal
from uuid import uuid4

import pytest

from src.app.use_cases.admin import ReviewCustomSourceCommand, ReviewCustomSourceUseCase
from src.app.use_cases.emission_sources import (
    DeleteEmissionSourceUseCase,
    EmissionSourceCommand,
    RequestCustomSourceCommand,
    RequestCustomSourceUseCase,
    UpdateEmissionSourceUseCase,
)
from src.domain.entities import EmissionSource, SourceRequestStatus


def make_command(**overrides):
    values = dict(
        name="Natural gas",
        scope="Scope 1",
        unit="m3",
        emission_factor=Decimal("1.9"),
    )
    values.update(overrides)
    return EmissionSourceCommand(**values)


@pytest.mark.asyncio
async def test_global_source_cannot_be_updated(mock_uow, admin_context):
    mock_uow.emission_sources.get_by_id.return_value = EmissionSource(
        id=uuid4(), organization_id=None, name="Diesel", scope="Scope 1", unit="L"
    )

    result = await UpdateEmissionSourceUseCase(mock_uow).execute(
        admin_context, uuid4(), make_command()
    )

    assert result.error.code == "SOURCE_NOT_FOUND"
    mock_uow.emission_sources.update.assert_not_called()


@pytest.mark.asyncio
async def test_negative_factor_is_rejected(mock_uow, officer_context):
    result = await UpdateEmissionSourceUseCase(mock_uow).execute(
        officer_context, uuid4(), make_command(emission_factor=Decimal("-0.1"))
    )

    assert result.error.code == "INVALID_EMISSION_FACTOR"


@pytest.mark.asyncio
async def test_operator_cannot_edit_sources(mock_uow, operator_context):
    result = await UpdateEmissionSourceUseCase(mock_uow).execute(
        operator_context, uuid4(), make_command()
    )

    assert result.error.code == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_source_with_records_cannot_be_deleted(mock_uow, admin_context):
    source = EmissionSource(
        id=uuid4(),
        organization_id=admin_context.organization_id,
        name="Boiler",
        scope="Scope 1",
        unit="kg",
    )
    mock_uow.emission_sources.get_by_id.return_value = source
    mock_uow.emission_records.exists_for_source.return_value = True

    result = await DeleteEmissionSourceUseCase(mock_uow).execute(admin_context, source.id)

    assert result.error.code == "SOURCE_HAS_RECORDS"
    mock_uow.emission_sources.delete.assert_not_called()


@pytest.mark.asyncio
async def test_requested_source_starts_inactive_and_pending(mock_uow, officer_context):
    result = await RequestCustomSourceUseCase(mock_uow).execute(
        officer_context,
        RequestCustomSourceCommand(name="Biogas", scope="Scope 1", unit="m3"),
    )

    assert result.is_ok()
    created = mock_uow.emission_sources.create.call_args.args[0]
    assert created.organization_id == officer_context.organization_id
    assert created.is_active is False
    assert created.is_requested is True
    assert created.request_status == SourceRequestStatus.pending


@pytest.fixture
def pending_source():
    return EmissionSource(
        id=uuid4(),
        organization_id=uuid4(),
        name="Biogas",
        scope="Scope 1",
        unit="m3",
        is_active=False,
        is_requested=True,
        request_status=SourceRequestStatus.pending,
    )


@pytest.mark.asyncio
async def test_approving_request_activates_source(mock_uow, pending_source):
    mock_uow.emission_sources.get_by_id.return_value = pending_source

    result = await ReviewCustomSourceUseCase(mock_uow).execute(
        pending_source.id,
        ReviewCustomSourceCommand(approve=True, emission_factor=Decimal("0.25")),
    )

    assert result.is_ok()
    assert pending_source.is_active is True
    assert pending_source.emission_factor == Decimal("0.25")
    assert pending_source.request_status == SourceRequestStatus.approved


@pytest.mark.asyncio
async def test_approval_requires_factor(mock_uow, pending_source):
    mock_uow.emission_sources.get_by_id.return_value = pending_source

    result = await ReviewCustomSourceUseCase(mock_uow).execute(
        pending_source.id, ReviewCustomSourceCommand(approve=True)
    )

    assert result.error.code == "INVALID_EMISSION_FACTOR"
    assert pending_source.is_active is False


@pytest.mark.asyncio
async def test_reviewed_request_cannot_be_reviewed_again(mock_uow, pending_source):
    pending_source.request_status = SourceRequestStatus.rejected
    mock_uow.emission_sources.get_by_id.return_value = pending_source

    result = await ReviewCustomSourceUseCase(mock_uow).execute(
        pending_source.id, ReviewCustomSourceCommand(approve=False)
    )

    assert result.error.code == "SOURCE_NOT_PENDING"
