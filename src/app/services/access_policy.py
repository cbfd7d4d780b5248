"""
Access Policy

Decides which records, factories and emission sources a caller may see or
edit. Callers resolve the RecordScope once and pass it to every record or
factory query.
"""

import logging
from typing import Optional

from libs.result import Error
from src.app.repositories.read_models import RecordScope
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import EmissionSource, UserRole

logger = logging.getLogger(__name__)


async def resolve_record_scope(uow: UnitOfWork, context: RequestContext) -> RecordScope:
    """
    Resolve the record scope of the caller.

    Administrators and sustainability officers see their whole organization.
    Factory operators see only the factory bound through their invitation;
    an operator without a binding gets an empty scope.
    """
    if not context.is_factory_operator:
        return RecordScope.organization_wide(context.organization_id)

    assignment = await uow.invitations.get_factory_assignment(
        context.user_id, context.organization_id
    )
    if assignment is None or assignment.factory_id is None:
        logger.info(f"Factory operator {context.user_id} has no factory assignment")
        return RecordScope.empty(context.organization_id)

    return RecordScope.single_factory(context.organization_id, assignment.factory_id)


def is_source_visible(source: EmissionSource, organization_id) -> bool:
    """Global sources and the organization's own sources, requested ones included"""
    return source.organization_id is None or source.organization_id == organization_id


def is_source_mutable(source: EmissionSource, organization_id) -> bool:
    """Only the organization's own sources; the global catalog is read-only"""
    return source.organization_id is not None and source.organization_id == organization_id


def check_role(context: RequestContext, *roles: UserRole) -> Optional[Error]:
    """INSUFFICIENT_ROLE unless the caller holds one of the given roles"""
    if context.role in roles:
        return None
    allowed = ", ".join(role.value for role in roles)
    return Error("INSUFFICIENT_ROLE", f"This action requires one of the roles: {allowed}")
