"""Shared test configuration, pytest markers and a scripted Gemini stand-in."""

import asyncio

import pytest

from config import settings
from models.schemas.quiz import QuizAnswer
from services import gemini_client
from services.quiz_catalog import QUIZ_QUESTIONS

_real_sleep = asyncio.sleep


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "live_llm: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


class FakeLLM:
    """Replaces ``gemini_client.generate_text`` with queued replies.

    Queued exceptions are raised instead of returned. An empty queue
    answers with an empty string.
    """

    def __init__(self):
        self.replies: list = []
        self.prompts: list[str] = []
        self.system_prompts: list[str | None] = []
        self.sleeps: list[float] = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def generate_text(self, prompt, system_prompt=None, temperature=None):
        self.prompts.append(prompt)
        self.system_prompts.append(system_prompt)
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def sleep(self, delay):
        self.sleeps.append(delay)
        await _real_sleep(0)


@pytest.fixture(autouse=True)
def _no_gemini_key(monkeypatch):
    """Run every test in classifier-only mode unless a test opts in."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    gemini_client.reset_client()
    yield
    gemini_client.reset_client()


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(gemini_client, "generate_text", fake.generate_text)
    monkeypatch.setattr(gemini_client.asyncio, "sleep", fake.sleep)
    return fake


def _answers_for(option_index: int) -> list[QuizAnswer]:
    """Pick the same option position on every quiz question."""
    return [
        QuizAnswer(question_id=q.id, answer=q.options[option_index], is_custom=False)
        for q in QUIZ_QUESTIONS
    ]


@pytest.fixture
def answers_for():
    return _answers_for


@pytest.fixture
def first_option_answers() -> list[QuizAnswer]:
    return _answers_for(0)
