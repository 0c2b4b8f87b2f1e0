"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- conversations.py : conversation CRUD and message listing
- chat.py          : the chat endpoint
- goals.py         : goal CRUD
- notes.py         : note CRUD
- activities.py    : activity log and daily summary
- health.py        : health check endpoints
"""
from astramind.api.routes.activities import router as activities_router
from astramind.api.routes.chat import router as chat_router
from astramind.api.routes.conversations import router as conversations_router
from astramind.api.routes.goals import router as goals_router
from astramind.api.routes.health import router as health_router
from astramind.api.routes.notes import router as notes_router

__all__ = [
    "activities_router",
    "chat_router",
    "conversations_router",
    "goals_router",
    "health_router",
    "notes_router",
]
