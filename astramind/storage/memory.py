"""
In-memory Storage implementation.

One dict per entity type, keyed by id, guarded by a single re-entrant lock
so each public call is atomic. Nothing survives a process restart.

Entities handed out are deep copies: mutating a returned object never
changes stored state.
"""
import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from astramind.core.logging_config import get_logger
from astramind.models.entities import (
    Activity,
    Conversation,
    Goal,
    Message,
    Note,
    new_id,
    utc_now,
)
from astramind.models.schemas import (
    ActivityCreate,
    ConversationCreate,
    GoalCreate,
    MessageCreate,
    NoteCreate,
)
from astramind.storage.base import Storage

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

# Never taken from an update patch
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class _Table(Generic[T]):
    """Keyed record map for one entity type. Callers hold the store lock."""

    def __init__(self, model: type):
        self.model = model
        self._rows: Dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def get(self, entity_id: str) -> Optional[T]:
        row = self._rows.get(entity_id)
        return row.model_copy(deep=True) if row is not None else None

    def put(self, entity: T) -> T:
        self._rows[entity.id] = entity
        return entity.model_copy(deep=True)

    def sorted(
        self,
        key: Callable[[T], object],
        newest_first: bool,
        where: Optional[Callable[[T], bool]] = None,
    ) -> List[T]:
        # dict order is insertion order and sorted() is stable: ties come
        # out oldest-written first, or newest-written first when reversed
        rows = [r for r in self._rows.values() if where is None or where(r)]
        if newest_first:
            rows.reverse()
        rows = sorted(rows, key=key, reverse=newest_first)
        return [r.model_copy(deep=True) for r in rows]

    def merge(self, entity_id: str, patch: dict) -> Optional[T]:
        current = self._rows.get(entity_id)
        if current is None:
            return None

        # patches may use either the field name or its camelCase alias
        names = {field.alias or name: name for name, field in self.model.model_fields.items()}
        changes = {}
        for key, value in patch.items():
            name = names.get(key, key)
            if name not in PROTECTED_FIELDS:
                changes[name] = value

        merged = self.model.model_validate(
            {**current.model_dump(), **changes, "updated_at": utc_now()}
        )
        return self.put(merged)

    def pop(self, entity_id: str) -> bool:
        return self._rows.pop(entity_id, None) is not None

    def pop_where(self, where: Callable[[T], bool]) -> int:
        doomed = [key for key, row in self._rows.items() if where(row)]
        for key in doomed:
            del self._rows[key]
        return len(doomed)

    def clear(self) -> None:
        self._rows.clear()


class MemoryStorage(Storage):
    """
    Process-local entity store.

    Construct one per application (or per test) and inject it; there is no
    global instance.

    Example:
        >>> store = MemoryStorage()
        >>> goal = store.create_goal(GoalCreate(title="Learn X", category="learning"))
        >>> goal.progress, goal.completed
        (0, False)
        >>> store.delete_goal(goal.id)
        True
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._conversations: _Table[Conversation] = _Table(Conversation)
        self._messages: _Table[Message] = _Table(Message)
        self._goals: _Table[Goal] = _Table(Goal)
        self._notes: _Table[Note] = _Table(Note)
        self._activities: _Table[Activity] = _Table(Activity)

        logger.info("MemoryStorage initialized")

    # ============================================================
    # Conversations
    # ============================================================

    def list_conversations(self) -> List[Conversation]:
        with self._lock:
            return self._conversations.sorted(lambda c: c.updated_at, newest_first=True)

    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        with self._lock:
            return self._conversations.get(conversation_id)

    def create_conversation(self, data: ConversationCreate) -> Conversation:
        now = utc_now()
        conversation = Conversation(
            id=new_id(),
            title=data.title,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            return self._conversations.put(conversation)

    def update_conversation(self, conversation_id: str, patch: dict) -> Optional[Conversation]:
        with self._lock:
            return self._conversations.merge(conversation_id, patch)

    def delete_conversation(self, conversation_id: str, cascade: bool = False) -> bool:
        with self._lock:
            if not self._conversations.pop(conversation_id):
                return False
            if cascade:
                removed = self._messages.pop_where(lambda m: m.conversation_id == conversation_id)
                logger.debug(f"Cascade removed {removed} messages of conversation {conversation_id}")
            return True

    # ============================================================
    # Messages
    # ============================================================

    def list_messages(self, conversation_id: str) -> List[Message]:
        with self._lock:
            return self._messages.sorted(
                lambda m: m.created_at,
                newest_first=False,
                where=lambda m: m.conversation_id == conversation_id,
            )

    def get_message(self, message_id: str) -> Optional[Message]:
        with self._lock:
            return self._messages.get(message_id)

    def create_message(self, data: MessageCreate) -> Message:
        # stamped under the lock so created_at follows arrival order
        with self._lock:
            return self._messages.put(Message(
                id=new_id(),
                conversation_id=data.conversation_id,
                role=data.role,
                content=data.content,
                created_at=utc_now(),
            ))

    def delete_message(self, message_id: str) -> bool:
        with self._lock:
            return self._messages.pop(message_id)

    # ============================================================
    # Goals
    # ============================================================

    def list_goals(self) -> List[Goal]:
        with self._lock:
            return self._goals.sorted(lambda g: g.created_at, newest_first=True)

    def get_goal(self, goal_id: str) -> Optional[Goal]:
        with self._lock:
            return self._goals.get(goal_id)

    def create_goal(self, data: GoalCreate) -> Goal:
        now = utc_now()
        goal = Goal(
            id=new_id(),
            title=data.title,
            description=data.description,
            category=data.category,
            progress=data.progress if data.progress is not None else 0,
            target_date=data.target_date,
            completed=data.completed if data.completed is not None else False,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            return self._goals.put(goal)

    def update_goal(self, goal_id: str, patch: dict) -> Optional[Goal]:
        with self._lock:
            return self._goals.merge(goal_id, patch)

    def delete_goal(self, goal_id: str) -> bool:
        with self._lock:
            return self._goals.pop(goal_id)

    # ============================================================
    # Notes
    # ============================================================

    def list_notes(self) -> List[Note]:
        with self._lock:
            return self._notes.sorted(lambda n: n.created_at, newest_first=True)

    def get_note(self, note_id: str) -> Optional[Note]:
        with self._lock:
            return self._notes.get(note_id)

    def create_note(self, data: NoteCreate) -> Note:
        now = utc_now()
        note = Note(
            id=new_id(),
            title=data.title,
            content=data.content,
            tags=list(data.tags) if data.tags else [],
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            return self._notes.put(note)

    def update_note(self, note_id: str, patch: dict) -> Optional[Note]:
        with self._lock:
            return self._notes.merge(note_id, patch)

    def delete_note(self, note_id: str) -> bool:
        with self._lock:
            return self._notes.pop(note_id)

    # ============================================================
    # Activities (append-only)
    # ============================================================

    def list_activities(self) -> List[Activity]:
        with self._lock:
            return self._activities.sorted(lambda a: a.created_at, newest_first=True)

    def create_activity(self, data: ActivityCreate) -> Activity:
        activity = Activity(
            id=new_id(),
            type=data.type,
            description=data.description,
            created_at=utc_now(),
        )
        with self._lock:
            return self._activities.put(activity)

    # ============================================================
    # Maintenance
    # ============================================================

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "conversations": len(self._conversations),
                "messages": len(self._messages),
                "goals": len(self._goals),
                "notes": len(self._notes),
                "activities": len(self._activities),
            }

    def clear(self) -> None:
        """Drop every record."""
        with self._lock:
            for table in (
                self._conversations,
                self._messages,
                self._goals,
                self._notes,
                self._activities,
            ):
                table.clear()
        logger.info("MemoryStorage cleared")
