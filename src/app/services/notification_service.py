from abc import ABC, abstractmethod

from src.domain.entities import Invitation


class NotificationService(ABC):
    """Outbound notifications; callers treat every send as best-effort"""

    @abstractmethod
    async def send_invitation(self, invitation: Invitation, organization_name: str) -> None:
        """Deliver an invitation link to the invitee"""
        pass
