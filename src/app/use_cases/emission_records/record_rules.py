"""
Checks shared by emission record writes.
"""

from decimal import Decimal
from typing import Optional

from libs.result import Error
from src.app.repositories.read_models import RecordScope
from src.app.services.access_policy import is_source_visible
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import EmissionRecordCommand

MIN_YEAR = 1900
MAX_YEAR = 2100


def validate_values(command: EmissionRecordCommand) -> Optional[Error]:
    if not 1 <= command.month <= 12:
        return Error("INVALID_MONTH", "Month must be between 1 and 12")
    if not MIN_YEAR <= command.year <= MAX_YEAR:
        return Error("INVALID_YEAR", f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    if command.quantity < Decimal("0"):
        return Error("INVALID_QUANTITY", "Quantity cannot be negative")
    return None


async def check_write_target(
    uow: UnitOfWork,
    context: RequestContext,
    scope: RecordScope,
    command: EmissionRecordCommand,
) -> Optional[Error]:
    """Factory must be in the caller's scope; source visible and active"""
    factory = await uow.factories.get_by_id(command.factory_id)
    if factory is None or factory.organization_id != context.organization_id:
        return Error("FACTORY_NOT_FOUND", "Factory not found")
    if not scope.allows_factory(factory.id):
        return Error(
            "INSUFFICIENT_ROLE", "You can only record emissions for your assigned factory"
        )

    source = await uow.emission_sources.get_by_id(command.emission_source_id)
    if source is None or not is_source_visible(source, context.organization_id):
        return Error("SOURCE_NOT_FOUND", "Emission source not found")
    if not source.is_active:
        return Error("SOURCE_INACTIVE", "Emission source is not active")

    return None
