"""
Input Validators - Sanitization and validation utilities.

These helpers return plain values or (is_valid, ...) tuples; callers decide
whether to raise ValidationError.
"""
from typing import Optional, Tuple

from astramind.core.logging_config import get_logger

logger = get_logger(__name__)

PROGRESS_MIN = 0
PROGRESS_MAX = 100


def sanitize_message(message: str) -> str:
    """
    Sanitize a user message.

    Removes null bytes only. Whitespace, leading and trailing included, is
    kept so the stored message is exactly what the user typed.

    Args:
        message: Raw user message

    Returns:
        Sanitized message
    """
    if not message:
        return ""
    return message.replace("\x00", "")


def validate_message(message: Optional[str], max_length: int = 4000) -> Tuple[bool, str, Optional[str]]:
    """
    Full validation and sanitization of a chat message.

    Args:
        message: Raw user message
        max_length: Maximum allowed length after sanitization

    Returns:
        Tuple of (is_valid, sanitized_message, error_message)
    """
    if not isinstance(message, str) or not message.strip():
        return False, "", "Message is required"

    sanitized = sanitize_message(message)

    if not sanitized.strip():
        return False, "", "Message cannot be empty after sanitization"

    if len(sanitized) > max_length:
        logger.warning(f"Rejected message of length {len(sanitized)} (max {max_length})")
        return False, "", f"Message too long (max {max_length} characters)"

    return True, sanitized, None


def clamp_progress(value: int) -> int:
    """Clamp a goal progress value into [0, 100]."""
    return max(PROGRESS_MIN, min(PROGRESS_MAX, int(value)))


def truncate(text: str, limit: int, suffix: str = "...") -> str:
    """
    Return the first ``limit`` characters of text, adding suffix if cut.

    Example:
        >>> truncate("abcdef", 3)
        'abc...'
        >>> truncate("abc", 3)
        'abc'
    """
    if len(text) <= limit:
        return text
    return text[:limit] + suffix
