"""
AI Gateway - the two generation operations the services use.

- generate_reply: answers a chat turn. Provider failure is surfaced to the
  caller as UpstreamGenerationError, because the user must know their
  message went unanswered.
- generate_daily_insights: dashboard insights. Any failure is logged and
  replaced by a fixed fallback list; it never raises.
"""
import json
from typing import Dict, List, Optional, Sequence

from astramind.core.exceptions import UpstreamGenerationError
from astramind.core.logging_config import get_logger
from astramind.llm.client import LLMClient
from astramind.llm.prompts import ASSISTANT_SYSTEM_PROMPT, get_daily_insights_prompt

logger = get_logger(__name__)

EMPTY_REPLY_FALLBACK = "I'm sorry, I couldn't generate a response. Please try again."

# Provider answered but no insights could be parsed
EMPTY_INSIGHTS_FALLBACK = ["Keep up the great work!", "Every step forward counts."]

# Provider call failed
FAILED_INSIGHTS_FALLBACK = ["Keep building your momentum!", "Great progress today."]


class AIGateway:
    """
    Adapter between the services and the LLM provider.

    Example:
        >>> gateway = AIGateway()
        >>> gateway.generate_reply("What should I focus on?", [
        ...     {"role": "user", "content": "I have an exam Friday"},
        ...     {"role": "assistant", "content": "Good luck! Want a study plan?"},
        ... ])
        'Start with the topics you find hardest...'
    """

    def __init__(self, llm_client: Optional[LLMClient] = None):
        """
        Args:
            llm_client: Optional LLMClient. A default one is built from
                settings if not provided.
        """
        self.llm_client = llm_client or LLMClient()

    def generate_reply(self, latest_message: str, prior_turns: Sequence[Dict[str, str]]) -> str:
        """
        Generate the assistant's reply to latest_message.

        Args:
            latest_message: The user's new message
            prior_turns: Earlier turns, oldest first, as {"role", "content"} dicts

        Returns:
            The reply text, or a fixed apology if the provider returned none.

        Raises:
            UpstreamGenerationError: If the provider call fails.
        """
        history = [{"role": t["role"], "content": t["content"]} for t in prior_turns]

        text = self.llm_client.generate(
            user_message=latest_message,
            system_prompt=ASSISTANT_SYSTEM_PROMPT,
            history=history or None,
        )

        if not text.strip():
            logger.warning("Provider returned an empty reply; using fallback sentence")
            return EMPTY_REPLY_FALLBACK

        logger.info(f"Generated reply: history={len(history)}, response_length={len(text)}")
        return text

    def generate_daily_insights(self, chat_count: int, goal_count: int, note_count: int) -> List[str]:
        """
        Generate 3-4 short encouraging insights for today's activity.

        Never raises: failures return FAILED_INSIGHTS_FALLBACK and an
        unparseable or empty answer returns EMPTY_INSIGHTS_FALLBACK.
        """
        prompt = get_daily_insights_prompt(chat_count, goal_count, note_count)

        try:
            text = self.llm_client.generate(user_message=prompt, json_output=True)
        except UpstreamGenerationError as e:
            logger.error(f"Error generating daily summary: {e.details or e.message}")
            return list(FAILED_INSIGHTS_FALLBACK)
        except Exception as e:
            logger.exception(f"Unexpected error generating daily summary: {e}")
            return list(FAILED_INSIGHTS_FALLBACK)

        insights = parse_insights(text)
        if not insights:
            logger.warning("No insights parsed from provider output; using fallback")
            return list(EMPTY_INSIGHTS_FALLBACK)
        return insights


def parse_insights(text: str) -> List[str]:
    """
    Parse a JSON array of strings out of provider output.

    Accepts a bare array, an array inside a ``` fence, or an object with an
    "insights" array. Non-string and blank items are dropped. Returns []
    when nothing usable is found.

    Example:
        >>> parse_insights('["a", "b"]')
        ['a', 'b']
        >>> parse_insights('not json')
        []
    """
    if not text:
        return []

    cleaned = text.strip()
    if "```json" in cleaned:
        cleaned = cleaned.split("```json")[1].split("```")[0].strip()
    elif "```" in cleaned:
        cleaned = cleaned.split("```")[1].split("```")[0].strip()

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        # Prose around the array: take the outermost brackets
        start, end = cleaned.find("["), cleaned.rfind("]")
        if start == -1 or end <= start:
            logger.warning(f"Failed to parse insights JSON: {text[:200]}")
            return []
        try:
            data = json.loads(cleaned[start:end + 1])
        except json.JSONDecodeError:
            logger.warning(f"Failed to parse insights JSON: {text[:200]}")
            return []

    if isinstance(data, dict):
        data = data.get("insights", [])
    if not isinstance(data, list):
        return []

    return [item.strip() for item in data if isinstance(item, str) and item.strip()]
