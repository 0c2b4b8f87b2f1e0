"""
Service container - wires every service to one store and one gateway.

The API builds a single container at startup and keeps it on
``app.state``; tests build their own around an isolated store.
"""
from dataclasses import dataclass
from typing import Optional

from astramind.core.config import Settings, get_settings
from astramind.llm.gateway import AIGateway
from astramind.services.activity_service import ActivityService
from astramind.services.chat_service import ChatService
from astramind.services.conversation_service import ConversationService
from astramind.services.goal_service import GoalService
from astramind.services.note_service import NoteService
from astramind.services.summary_service import SummaryService
from astramind.storage.base import Storage


@dataclass
class ServiceContainer:
    storage: Storage
    gateway: AIGateway
    activities: ActivityService
    conversations: ConversationService
    chat: ChatService
    goals: GoalService
    notes: NoteService
    summary: SummaryService


def build_services(
    storage: Storage,
    gateway: AIGateway,
    settings: Optional[Settings] = None,
) -> ServiceContainer:
    """Construct every service around the given store and gateway."""
    settings = settings or get_settings()
    activities = ActivityService(storage)

    return ServiceContainer(
        storage=storage,
        gateway=gateway,
        activities=activities,
        conversations=ConversationService(storage),
        chat=ChatService(
            storage,
            gateway,
            activities=activities,
            max_message_length=settings.max_message_length,
        ),
        goals=GoalService(storage, activities),
        notes=NoteService(storage, activities),
        summary=SummaryService(activities, gateway),
    )
