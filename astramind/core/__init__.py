"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error taxonomy shared by all layers
"""
from astramind.core.config import get_settings, Settings
from astramind.core.logging_config import setup_logging, get_logger
from astramind.core.exceptions import (
    AstraMindException,
    ValidationError,
    NotFoundError,
    UpstreamGenerationError,
    InternalError,
)

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "AstraMindException",
    "ValidationError",
    "NotFoundError",
    "UpstreamGenerationError",
    "InternalError",
]
