"""
Conversation Service - CRUD for conversations and their message lists.

Conversation changes are not written to the activity log; only chat
turns are (see ChatService).
"""
from typing import List

from astramind.core.exceptions import NotFoundError
from astramind.core.logging_config import get_logger
from astramind.models.entities import Conversation, Message
from astramind.models.schemas import ConversationCreate, ConversationUpdate
from astramind.storage.base import Storage

logger = get_logger(__name__)


class ConversationService:

    def __init__(self, storage: Storage):
        self.storage = storage

    def list(self) -> List[Conversation]:
        return self.storage.list_conversations()

    def get(self, conversation_id: str) -> Conversation:
        conversation = self.storage.get_conversation(conversation_id)
        if conversation is None:
            raise NotFoundError("Conversation", conversation_id)
        return conversation

    def create(self, data: ConversationCreate) -> Conversation:
        conversation = self.storage.create_conversation(data)
        logger.info(f"Created conversation: {conversation.id}")
        return conversation

    def update(self, conversation_id: str, data: ConversationUpdate) -> Conversation:
        conversation = self.storage.update_conversation(conversation_id, data.to_patch())
        if conversation is None:
            raise NotFoundError("Conversation", conversation_id)
        return conversation

    def delete(self, conversation_id: str) -> None:
        """
        Delete a conversation and every message in it.

        The store removes both in one call so no message is left pointing
        at a missing conversation.
        """
        if not self.storage.delete_conversation(conversation_id, cascade=True):
            raise NotFoundError("Conversation", conversation_id)

        logger.info(f"Deleted conversation {conversation_id}")

    def list_messages(self, conversation_id: str) -> List[Message]:
        """Messages oldest first. Unknown conversations have no messages."""
        return self.storage.list_messages(conversation_id)
