from libs.result import Result, Return
from src.app.services.entitlement_service import EntitlementService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LimitsResponse


class GetLimitsUseCase:
    """Current usage against the caps of the caller's plan"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[LimitsResponse]:
        async with self.uow:
            limits = await EntitlementService(self.uow).get_limits(context.organization_id)
            return Return.ok(LimitsResponse.from_limits(limits))
