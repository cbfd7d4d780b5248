import logging

from config import ApplicationConfig
from src.app.services.notification_service import NotificationService
from src.domain.entities import Invitation

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """Writes invitation links to the log instead of sending mail"""

    def __init__(self, base_url: str = None):
        self.base_url = (base_url or ApplicationConfig.APP_BASE_URL).rstrip("/")

    def invitation_link(self, invitation: Invitation) -> str:
        return f"{self.base_url}/invitations/accept?token={invitation.token}"

    async def send_invitation(self, invitation: Invitation, organization_name: str) -> None:
        logger.info(
            f"Invitation to {organization_name} for {invitation.email} "
            f"({invitation.role.value}): {self.invitation_link(invitation)}"
        )
