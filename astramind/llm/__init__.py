"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Gemini or Groq
- Response parsing
- Reply vs. insight error policy (AIGateway)
"""
from astramind.llm.client import LLMClient
from astramind.llm.gateway import AIGateway, parse_insights

__all__ = [
    "LLMClient",
    "AIGateway",
    "parse_insights",
]
