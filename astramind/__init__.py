"""
AstraMind - chat-driven personal productivity assistant.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors and cross-cutting utilities
- services/  : Business logic and orchestration
- llm/       : LLM integration and prompt management
- storage/   : Entity storage contract and in-memory store
- models/    : Pydantic models for entities and request/response schemas
"""

__version__ = "0.1.0"
