"""Shared test fixtures."""

import os

# Before any astramind import: no log files, no real provider credentials
os.environ["LOG_DIR"] = ""
os.environ["GEMINI_API_KEY"] = ""
os.environ["GOOGLE_API_KEY"] = ""
os.environ["GROQ_API_KEY"] = ""
os.environ["LLM_PROVIDER"] = "google"

from typing import Dict, List, Optional, Sequence  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from astramind.api.main import create_app  # noqa: E402
from astramind.core.config import Settings  # noqa: E402
from astramind.llm.gateway import AIGateway  # noqa: E402
from astramind.services.container import ServiceContainer, build_services  # noqa: E402
from astramind.storage.memory import MemoryStorage  # noqa: E402


class FakeGateway(AIGateway):
    """Scripted AI gateway. Records calls; never touches a provider."""

    def __init__(
        self,
        reply: str = "Here is a plan for your day.",
        insights: Optional[List[str]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.llm_client = None
        self.reply = reply
        self.insights = insights if insights is not None else ["Nice work today!"]
        self.error = error
        self.reply_calls: List[tuple] = []
        self.insight_calls: List[tuple] = []

    def generate_reply(self, latest_message: str, prior_turns: Sequence[Dict[str, str]]) -> str:
        self.reply_calls.append((latest_message, [dict(t) for t in prior_turns]))
        if self.error is not None:
            raise self.error
        return self.reply

    def generate_daily_insights(self, chat_count: int, goal_count: int, note_count: int) -> List[str]:
        self.insight_calls.append((chat_count, goal_count, note_count))
        return list(self.insights)


@pytest.fixture
def settings() -> Settings:
    return Settings(log_dir="", app_env="test")


@pytest.fixture
def storage() -> MemoryStorage:
    """A fresh, isolated store per test."""
    return MemoryStorage()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def services(storage: MemoryStorage, gateway: FakeGateway, settings: Settings) -> ServiceContainer:
    return build_services(storage, gateway, settings)


@pytest.fixture
def client(storage: MemoryStorage, gateway: FakeGateway, settings: Settings):
    """TestClient over an app wired to the isolated store and fake gateway."""
    app = create_app(settings=settings, storage=storage, gateway=gateway)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
