"""
LLM Client for the generative-text provider.

This module provides a thin interface over Google Gemini (default) or Groq.
It handles:
- API client initialization
- Request/response translation
- Wrapping provider failures in UpstreamGenerationError

There is no retry and no provider fallback: a call either returns the
provider's text or raises.
"""
from typing import Dict, List, Optional

import google.generativeai as genai
from groq import Groq

from astramind.core.config import Settings, get_settings
from astramind.core.exceptions import UpstreamGenerationError
from astramind.core.logging_config import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Client for the configured generative-text provider.

    A missing API key does not fail construction; every generate() call
    raises UpstreamGenerationError instead.

    Example:
        >>> client = LLMClient()
        >>> client.generate("Hello!", system_prompt="Be brief.")
        'Hi there!'
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the provider client.

        Args:
            settings: Optional Settings instance. Uses get_settings() if not provided.
        """
        self.settings = settings or get_settings()
        self.provider = self.settings.llm_provider
        self.temperature = self.settings.llm_temperature
        self.max_tokens = self.settings.llm_max_tokens
        self.groq_client: Optional[Groq] = None

        api_key = self.settings.active_api_key()
        if not api_key:
            logger.warning(
                f"No API key configured for provider '{self.provider}'; "
                f"generation calls will fail"
            )
        elif self.provider == "groq":
            self.groq_client = Groq(api_key=api_key)
        else:
            genai.configure(api_key=api_key)

        self.model = self.settings.groq_model if self.provider == "groq" else self.settings.llm_model
        logger.info(f"LLM Client initialized: provider={self.provider}, model={self.model}")

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.active_api_key())

    def generate(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        history: Optional[List[Dict[str, str]]] = None,
        json_output: bool = False,
    ) -> str:
        """
        Send one request to the provider and return its text.

        Args:
            user_message: Latest user turn
            system_prompt: System instruction (persona, rules)
            history: Prior turns, oldest first, as {"role", "content"} dicts
            json_output: Ask the provider for a JSON array of strings

        Returns:
            The provider's text, or "" if it returned none.

        Raises:
            UpstreamGenerationError: On missing credentials or any provider error.
        """
        if not self.is_configured:
            raise UpstreamGenerationError(
                "Failed to get AI response",
                details=f"no API key configured for provider '{self.provider}'",
            )

        logger.debug(
            f"LLM request: provider={self.provider}, model={self.model}, "
            f"history={len(history or [])}, json={json_output}"
        )

        try:
            if self.provider == "groq":
                text = self._generate_groq(user_message, system_prompt, history)
            else:
                text = self._generate_google(user_message, system_prompt, history, json_output)
        except Exception as e:
            logger.error(f"Provider failed ({self.provider}/{self.model}): {e}")
            raise UpstreamGenerationError("Failed to get AI response", details=str(e)) from e

        return text or ""

    def _generate_google(self, user_message, system_prompt, history, json_output):
        """Execute request using Google Gemini."""
        model_instance = genai.GenerativeModel(
            model_name=self.model,
            system_instruction=system_prompt,
        )

        # Convert history format (role/content -> Gemini role/parts)
        chat_history = []
        for msg in history or []:
            role = "model" if msg["role"] == "assistant" else "user"
            chat_history.append({"role": role, "parts": [msg["content"]]})

        config = {
            "temperature": self.temperature,
            "max_output_tokens": self.max_tokens,
        }
        if json_output:
            config["response_mime_type"] = "application/json"
            config["response_schema"] = list[str]

        chat = model_instance.start_chat(history=chat_history)
        response = chat.send_message(
            user_message,
            generation_config=genai.types.GenerationConfig(**config),
        )
        return _response_text(response)

    def _generate_groq(self, user_message, system_prompt, history):
        """Execute request using Groq."""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        for msg in history or []:
            messages.append({"role": msg["role"], "content": msg["content"]})
        messages.append({"role": "user", "content": user_message})

        response = self.groq_client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


def _response_text(response) -> str:
    """
    Extract text from a Gemini response.

    ``response.text`` raises ValueError when the candidate has no text
    parts (safety block, empty completion); that counts as "no text".
    """
    try:
        return response.text or ""
    except ValueError as e:
        logger.warning(f"Gemini returned no text: {e}")
        return ""
