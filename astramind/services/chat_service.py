"""
Chat Service - Business logic for conversational interactions.

This service orchestrates one chat turn:
1. Validates the message
2. Creates a conversation (titled after the message) or loads the given one
3. Stores the user's message
4. Calls the AI gateway with the earlier turns of the conversation
5. Stores the assistant's reply
6. Touches the conversation's updated_at
7. Logs a "chat" activity
8. Returns the reply and conversation id

Each step is its own storage call. A failure in steps 3-5 leaves what was
already written in place (e.g. the user's message survives a provider
error); nothing is rolled back.
"""
from typing import Optional

from astramind.core.exceptions import NotFoundError, ValidationError
from astramind.core.logging_config import get_logger
from astramind.core.validators import truncate, validate_message
from astramind.llm.gateway import AIGateway
from astramind.models.chat import ChatResponse
from astramind.models.schemas import ConversationCreate, MessageCreate
from astramind.services.activity_service import CHAT, ActivityService
from astramind.storage.base import Storage

logger = get_logger(__name__)

TITLE_LENGTH = 50
EXCERPT_LENGTH = 60


def conversation_title(message: str) -> str:
    """Title for a conversation started by ``message``."""
    return truncate(message, TITLE_LENGTH)


class ChatService:
    """
    Service for handling chat turns.

    Example:
        >>> service = ChatService(storage, gateway)
        >>> first = service.send_message("Hello!")
        >>> # Follow-up continues the same conversation
        >>> second = service.send_message("What can you do?", first.conversation_id)
    """

    def __init__(
        self,
        storage: Storage,
        gateway: AIGateway,
        activities: Optional[ActivityService] = None,
        max_message_length: int = 4000,
    ):
        """
        Args:
            storage: Entity store
            gateway: AI gateway used for replies
            activities: Activity log service (built on storage if not provided)
            max_message_length: Longest message accepted
        """
        self.storage = storage
        self.gateway = gateway
        self.activities = activities or ActivityService(storage)
        self.max_message_length = max_message_length

    def send_message(self, message: Optional[str], conversation_id: Optional[str] = None) -> ChatResponse:
        """
        Process a user message and return the stored assistant reply.

        Args:
            message: The user's message
            conversation_id: Conversation to continue; None starts a new one

        Returns:
            ChatResponse with the assistant Message and the conversation id.

        Raises:
            ValidationError: Message missing or empty. Nothing is written.
            NotFoundError: conversation_id is unknown. Nothing is written.
            UpstreamGenerationError: The provider failed. The conversation
                and user message stay stored.
        """
        is_valid, sanitized, error = validate_message(message, self.max_message_length)
        if not is_valid:
            raise ValidationError(error, field="message")

        if conversation_id:
            conversation = self.storage.get_conversation(conversation_id)
            if conversation is None:
                raise NotFoundError("Conversation", conversation_id)
        else:
            conversation = self.storage.create_conversation(
                ConversationCreate(title=conversation_title(sanitized))
            )
            logger.info(f"Started conversation {conversation.id}")

        conv_id = conversation.id
        logger.info(f"Processing message: conversation={conv_id}, message_length={len(sanitized)}")

        user_message = self.storage.create_message(
            MessageCreate(conversation_id=conv_id, role="user", content=sanitized)
        )

        history = [
            m.to_turn() for m in self.storage.list_messages(conv_id)
            if m.id != user_message.id
        ]

        reply = self.gateway.generate_reply(sanitized, history)

        assistant_message = self.storage.create_message(
            MessageCreate(conversation_id=conv_id, role="assistant", content=reply)
        )

        self.storage.update_conversation(conv_id, {})

        self.activities.log(
            CHAT,
            f"Had a conversation about: {truncate(sanitized, EXCERPT_LENGTH)}",
        )

        logger.info(
            f"Message processed: conversation={conv_id}, "
            f"response_length={len(reply)}, history_size={len(history)}"
        )

        return ChatResponse(message=assistant_message, conversation_id=conv_id)
