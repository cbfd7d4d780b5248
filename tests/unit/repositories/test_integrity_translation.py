from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from src.adapter.repositories.emission_record_repository import EmissionRecordRepository
from src.adapter.repositories.factory_repository import FactoryRepository
from src.app.repositories.exceptions import DuplicateEntryError
from src.domain.entities import EmissionRecord, Factory


def failing_session(message):
    session = MagicMock()
    session.flush = AsyncMock(
        side_effect=IntegrityError("INSERT ...", {}, Exception(message))
    )
    session.refresh = AsyncMock()
    return session


def make_record():
    return EmissionRecord(
        organization_id=uuid4(),
        factory_id=uuid4(),
        emission_source_id=uuid4(),
        user_id=uuid4(),
        year=2024,
        month=3,
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message",
    [
        "UNIQUE constraint failed: emission_records.organization_id, "
        "emission_records.factory_id, emission_records.emission_source_id, "
        "emission_records.year, emission_records.month",
        'duplicate key value violates unique constraint "uq_emission_record_period"',
    ],
)
async def test_period_violation_becomes_duplicate_entry(message):
    repository = EmissionRecordRepository(failing_session(message))

    with pytest.raises(DuplicateEntryError) as exc_info:
        await repository.create(make_record())

    assert exc_info.value.constraint == "uq_emission_record_period"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message",
    [
        "FOREIGN KEY constraint failed",
        "NOT NULL constraint failed: emission_records.user_id",
    ],
)
async def test_other_record_integrity_errors_propagate(message):
    repository = EmissionRecordRepository(failing_session(message))

    with pytest.raises(IntegrityError):
        await repository.update(make_record())


@pytest.mark.asyncio
async def test_factory_code_violation_becomes_duplicate_entry():
    repository = FactoryRepository(
        failing_session("UNIQUE constraint failed: factories.code")
    )

    with pytest.raises(DuplicateEntryError):
        await repository.create(
            Factory(organization_id=uuid4(), code="F-001", name="Plant A")
        )


@pytest.mark.asyncio
async def test_factory_foreign_key_error_propagates():
    repository = FactoryRepository(failing_session("FOREIGN KEY constraint failed"))

    with pytest.raises(IntegrityError):
        await repository.update(Factory(organization_id=uuid4(), code="F-001", name="Plant A"))
