from typing import Optional
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork

DUPLICATE_PERIOD_ENTRY = Error(
    "DUPLICATE_PERIOD_ENTRY",
    "An emission record already exists for this factory, source and period",
)


async def check_period_available(
    uow: UnitOfWork,
    organization_id: UUID,
    factory_id: UUID,
    emission_source_id: UUID,
    year: int,
    month: int,
    exclude_id: Optional[UUID] = None,
) -> Optional[Error]:
    """
    Reject a write that would create a second record for the same
    (organization, factory, source, year, month).

    Pass exclude_id on update so a record may keep its own period. The unique
    constraint on the table remains the final authority.
    """
    existing = await uow.emission_records.find_by_period(
        organization_id, factory_id, emission_source_id, year, month, exclude_id=exclude_id
    )
    if existing is not None:
        return DUPLICATE_PERIOD_ENTRY
    return None
