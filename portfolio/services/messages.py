"""Contact-form messages."""

import logging

from sqlalchemy.orm import Session

from portfolio.models.enums import MessageStatus
from portfolio.models.message import UserMessage
from portfolio.schemas.message import UserMessageCreate
from portfolio.services.base import CrudService, db_action
from portfolio.services.email_queue import EmailQueue

logger = logging.getLogger(__name__)


class MessageService(CrudService[UserMessage]):
    model = UserMessage
    label = "Message"
    order_by = (UserMessage.created_at.desc(), UserMessage.id.desc())
    image_field = None

    def __init__(self, db: Session, email_queue: EmailQueue):
        super().__init__(db)
        self.email_queue = email_queue

    def create(self, data: UserMessageCreate) -> UserMessage:
        """Store the message, then queue the sender confirmation and admin notification."""
        message = super().create(data)
        self.email_queue.send_user_message_confirmation(message.email, message.name, message.title)
        self.email_queue.send_admin_new_message_notification(
            message.name, message.email, message.title, message.message
        )
        return message

    def update_status(self, message_id: int, status: MessageStatus) -> UserMessage:
        message = self.get(message_id)
        message.status = status.value
        with db_action(self.db, "update message status"):
            self.db.commit()
            self.db.refresh(message)
        logger.info(f"Message {message_id} marked {status.value}")
        return message
