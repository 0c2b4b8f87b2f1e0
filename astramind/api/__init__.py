"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request validation and parsing
- Response formatting
- Error handling
- Route definitions

Import ``astramind.api.main`` for the application factory and the
module-level ``app``.
"""
