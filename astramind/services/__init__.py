"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- No storage internals (those belong in storage/)
- Sequence storage and AI gateway calls, and log activities
"""
from astramind.services.activity_service import ActivityService
from astramind.services.chat_service import ChatService
from astramind.services.conversation_service import ConversationService
from astramind.services.goal_service import GoalService
from astramind.services.note_service import NoteService
from astramind.services.summary_service import SummaryService
from astramind.services.container import ServiceContainer, build_services

__all__ = [
    "ActivityService",
    "ChatService",
    "ConversationService",
    "GoalService",
    "NoteService",
    "SummaryService",
    "ServiceContainer",
    "build_services",
]
