"""
Prompts module - LLM prompt templates.

Prompts live in their own files so prompt changes are reviewed
separately from code changes.
"""
from astramind.llm.prompts.assistant_prompts import (
    ASSISTANT_SYSTEM_PROMPT,
    get_daily_insights_prompt,
)

__all__ = [
    "ASSISTANT_SYSTEM_PROMPT",
    "get_daily_insights_prompt",
]
