"""
Storage contract.

Storage is the single source of truth for entity state. Every backend
(the in-memory store today, a durable one later) implements this class so
the services never depend on a concrete store.

Contract, per entity type:

- ``list_*``   returns every entity in its fixed order and never fails.
               Conversations: updated_at descending. Goals, notes and
               activities: created_at descending. Messages: created_at
               ascending, ties in insertion order.
- ``get_*``    returns the entity or None when the id is unknown.
- ``create_*`` assigns a fresh id, stamps created_at (and updated_at where
               the entity has one), applies declared defaults
               (Goal.progress=0, Goal.completed=False, Note.tags=[]) and
               returns the stored entity.
- ``update_*`` returns None for an unknown id. Otherwise merges the patch
               (keys by field name or camelCase alias)
               over the stored entity, keeps id and created_at, sets
               updated_at to now, and returns the merged entity. Fields
               missing from the patch are left untouched.
- ``delete_*`` removes the entity and reports whether it existed.

Activities have no update or delete. Each call is atomic on its own;
there are no cross-entity transactions. Stores do not validate ranges or
foreign keys, that is the caller's job.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from astramind.models.entities import Activity, Conversation, Goal, Message, Note
from astramind.models.schemas import (
    ActivityCreate,
    ConversationCreate,
    GoalCreate,
    MessageCreate,
    NoteCreate,
)


class Storage(ABC):
    """Abstract entity store. See module docstring for the contract."""

    # Conversations

    @abstractmethod
    def list_conversations(self) -> List[Conversation]: ...

    @abstractmethod
    def get_conversation(self, conversation_id: str) -> Optional[Conversation]: ...

    @abstractmethod
    def create_conversation(self, data: ConversationCreate) -> Conversation: ...

    @abstractmethod
    def update_conversation(self, conversation_id: str, patch: dict) -> Optional[Conversation]: ...

    @abstractmethod
    def delete_conversation(self, conversation_id: str, cascade: bool = False) -> bool:
        """Delete a conversation; with cascade, its messages go in the same call."""

    # Messages

    @abstractmethod
    def list_messages(self, conversation_id: str) -> List[Message]: ...

    @abstractmethod
    def get_message(self, message_id: str) -> Optional[Message]: ...

    @abstractmethod
    def create_message(self, data: MessageCreate) -> Message: ...

    @abstractmethod
    def delete_message(self, message_id: str) -> bool: ...

    # Goals

    @abstractmethod
    def list_goals(self) -> List[Goal]: ...

    @abstractmethod
    def get_goal(self, goal_id: str) -> Optional[Goal]: ...

    @abstractmethod
    def create_goal(self, data: GoalCreate) -> Goal: ...

    @abstractmethod
    def update_goal(self, goal_id: str, patch: dict) -> Optional[Goal]: ...

    @abstractmethod
    def delete_goal(self, goal_id: str) -> bool: ...

    # Notes

    @abstractmethod
    def list_notes(self) -> List[Note]: ...

    @abstractmethod
    def get_note(self, note_id: str) -> Optional[Note]: ...

    @abstractmethod
    def create_note(self, data: NoteCreate) -> Note: ...

    @abstractmethod
    def update_note(self, note_id: str, patch: dict) -> Optional[Note]: ...

    @abstractmethod
    def delete_note(self, note_id: str) -> bool: ...

    # Activities

    @abstractmethod
    def list_activities(self) -> List[Activity]: ...

    @abstractmethod
    def create_activity(self, data: ActivityCreate) -> Activity: ...

    def stats(self) -> Dict[str, int]:
        """Entity counts per type, used by the readiness check."""
        return {
            "conversations": len(self.list_conversations()),
            "goals": len(self.list_goals()),
            "notes": len(self.list_notes()),
            "activities": len(self.list_activities()),
        }
