"""Tests for AIGateway: reply fails loud, insights fail quiet."""

from unittest.mock import MagicMock

import pytest

from astramind.core.exceptions import UpstreamGenerationError
from astramind.llm.client import LLMClient
from astramind.llm.gateway import (
    EMPTY_INSIGHTS_FALLBACK,
    EMPTY_REPLY_FALLBACK,
    FAILED_INSIGHTS_FALLBACK,
    AIGateway,
    parse_insights,
)
from astramind.llm.prompts import ASSISTANT_SYSTEM_PROMPT


@pytest.fixture
def llm() -> MagicMock:
    return MagicMock(spec=LLMClient)


# -- generate_reply ------------------------------------------------------------


def test_reply_passes_transcript_in_order(llm: MagicMock) -> None:
    llm.generate.return_value = "Sure!"
    turns = [
        {"role": "user", "content": "one"},
        {"role": "assistant", "content": "two"},
    ]

    assert AIGateway(llm).generate_reply("three", turns) == "Sure!"

    kwargs = llm.generate.call_args.kwargs
    assert kwargs["user_message"] == "three"
    assert kwargs["history"] == turns
    assert kwargs["system_prompt"] == ASSISTANT_SYSTEM_PROMPT


def test_reply_without_history_sends_none(llm: MagicMock) -> None:
    llm.generate.return_value = "Hello"
    AIGateway(llm).generate_reply("hi", [])
    assert llm.generate.call_args.kwargs["history"] is None


def test_reply_empty_text_uses_fallback(llm: MagicMock) -> None:
    llm.generate.return_value = "   "
    assert AIGateway(llm).generate_reply("hi", []) == EMPTY_REPLY_FALLBACK


def test_reply_error_propagates(llm: MagicMock) -> None:
    llm.generate.side_effect = UpstreamGenerationError(details="timeout")
    with pytest.raises(UpstreamGenerationError):
        AIGateway(llm).generate_reply("hi", [])
    assert llm.generate.call_count == 1


# -- generate_daily_insights ---------------------------------------------------


def test_insights_parsed(llm: MagicMock) -> None:
    llm.generate.return_value = '["Great chats!", "Keep going", "Nice notes"]'

    insights = AIGateway(llm).generate_daily_insights(3, 1, 2)

    assert insights == ["Great chats!", "Keep going", "Nice notes"]
    kwargs = llm.generate.call_args.kwargs
    assert kwargs["json_output"] is True
    assert "Chat conversations: 3" in kwargs["user_message"]
    assert "Goals worked on: 1" in kwargs["user_message"]
    assert "Notes created: 2" in kwargs["user_message"]


def test_insights_provider_failure_returns_fallback(llm: MagicMock) -> None:
    llm.generate.side_effect = UpstreamGenerationError(details="boom")
    assert AIGateway(llm).generate_daily_insights(0, 0, 0) == FAILED_INSIGHTS_FALLBACK


def test_insights_unexpected_exception_returns_fallback(llm: MagicMock) -> None:
    llm.generate.side_effect = RuntimeError("boom")
    assert AIGateway(llm).generate_daily_insights(0, 0, 0) == FAILED_INSIGHTS_FALLBACK


def test_insights_empty_array_returns_fallback(llm: MagicMock) -> None:
    llm.generate.return_value = "[]"
    assert AIGateway(llm).generate_daily_insights(1, 1, 1) == EMPTY_INSIGHTS_FALLBACK


def test_insights_garbage_returns_fallback(llm: MagicMock) -> None:
    llm.generate.return_value = "I cannot do that"
    assert AIGateway(llm).generate_daily_insights(1, 1, 1) == EMPTY_INSIGHTS_FALLBACK


def test_fallbacks_are_copies(llm: MagicMock) -> None:
    llm.generate.side_effect = RuntimeError("boom")
    insights = AIGateway(llm).generate_daily_insights(0, 0, 0)
    insights.append("mutated")
    assert len(FAILED_INSIGHTS_FALLBACK) == 2


# -- parse_insights ------------------------------------------------------------


@pytest.mark.parametrize(
    "text, expected",
    [
        ('["a", "b"]', ["a", "b"]),
        ('```json\n["a"]\n```', ["a"]),
        ('Here you go: ["a", "b"] hope it helps', ["a", "b"]),
        ('{"insights": ["x"]}', ["x"]),
        ('["a", 3, "", "  ", "b"]', ["a", "b"]),
        ('{"other": 1}', []),
        ("", []),
        ("nope", []),
    ],
)
def test_parse_insights(text: str, expected: list) -> None:
    assert parse_insights(text) == expected
