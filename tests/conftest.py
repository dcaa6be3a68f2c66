"""
Pytest configuration and shared fixtures.

Provides a scripted fake LLM client, in-memory client state, a fake HTTP
session for the speech adapter, and canned model replies used across the
test suite.
"""

import json
from typing import Any
from unittest.mock import Mock

import pytest

from aatmai.actions import ServerActions
from aatmai.models import LLMSettings
from aatmai.persistence.session_store import ClientStore, InMemoryStorage
from aatmai.prompts import DefaultPromptFactory

# ==============================================================================
# Fake LLM
# ==============================================================================


class FakeLLM:
    """
    Replays scripted replies in order and records every call.

    A reply may be a dict (sent as JSON), a raw string, or an exception
    instance, which is raised instead of replying.
    """

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    def queue(self, *replies: Any) -> None:
        self.replies.extend(replies)

    def chat(self, messages, settings, system=None):
        self.calls.append({"messages": messages, "settings": settings})
        if not self.replies:
            raise AssertionError("FakeLLM called more times than scripted")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        text = reply if isinstance(reply, str) else json.dumps(reply)
        return text, {"model": settings.model, "tokens_in": 10, "tokens_out": 5}

    @property
    def last_user_text(self) -> str:
        return self.calls[-1]["messages"][-1]["content"]

    @property
    def last_system(self) -> str:
        return self.calls[-1]["messages"][0]["content"]


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def llm_settings():
    return LLMSettings(model="test-model", temperature=0.5, max_tokens=256)


@pytest.fixture
def prompts():
    return DefaultPromptFactory()


@pytest.fixture
def deps(fake_llm, prompts, llm_settings):
    """Keyword arguments every flow function takes."""
    return {"llm": fake_llm, "prompts": prompts, "settings": llm_settings}


@pytest.fixture
def actions(fake_llm, llm_settings):
    return ServerActions(fake_llm, settings=llm_settings)


# ==============================================================================
# Client state
# ==============================================================================


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    return ClientStore(storage)


# ==============================================================================
# HTTP
# ==============================================================================


def _response(status: int = 200, body: Any = None, reason: str = "") -> Mock:
    """A requests.Response stand-in with ok/status_code/json()."""
    resp = Mock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.reason = reason
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body if body is not None else {}
    return resp


@pytest.fixture
def http_session():
    """Mock requests.Session; tests set post/get return values."""
    return Mock()


# ==============================================================================
# Canned model replies
# ==============================================================================


@pytest.fixture
def roadmap_reply():
    step = {
        "id": "step-1",
        "title": "Basics",
        "description": "Learn the fundamentals.",
        "estimatedDuration": "1 week",
        "resources": [{"type": "Video", "descriptionOrLink": "Intro lecture"}],
    }
    return {
        "roadmapTitle": "Learning Python",
        "introduction": "A short path to Python.",
        "steps": [
            step,
            {**step, "id": "step-2", "title": "Data structures"},
            {**step, "id": "step-3", "title": "Projects", "keywords": ["practice"]},
        ],
        "conclusion": "Keep building.",
        "motivationalQuote": {"text": "Start where you are.", "author": "Arthur Ashe"},
    }


@pytest.fixture
def closing_reply():
    return {
        "aiResponse": "Thank you, that concludes our interview.",
        "feedbackSummary": "Clear answers with good structure.",
        "areasForImprovement": ["Quantify impact", "Be more concise"],
        "interviewScore": 78,
    }


@pytest.fixture
def make_response():
    return _response
