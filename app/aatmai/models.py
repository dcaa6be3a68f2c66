"""
Canonical data shapes shared between layers.

Typical contents:
- Enums for every closed set of choices a form or contract accepts.
- LLMSettings (model, temperature, top_p, max_tokens, response format).
- Plain records for client-side state (Quote, MoodEntry).

Request/response contracts for the flows live in schemas.py; this module
stays free of validation logic.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class TurnRole(str, Enum):
    INTERVIEWER = "interviewer"
    USER = "user"


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"


class InterviewPhase(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class TurnStep(str, Enum):
    OPENING = "opening"
    FOLLOW_UP = "follow_up"
    CLOSING = "closing"


class DetailLevel(str, Enum):
    CONCISE = "concise"
    DETAILED = "detailed"


class ReportType(str, Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"


class ProjectType(str, Enum):
    SOFTWARE_APP = "software_app"
    HARDWARE_DEVICE = "hardware_device"
    RESEARCH_PAPER = "research_paper"
    SOCIAL_IMPACT_INITIATIVE = "social_impact_initiative"
    ARTISTIC_CREATION = "artistic_creation"
    BUSINESS_PLAN = "business_plan"
    ANY = "any"


class DifficultyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ANY = "any"


class ResourceType(str, Enum):
    VIDEO = "Video"
    ARTICLE = "Article"
    COURSE = "Course"
    BOOK = "Book"
    DOCUMENTATION = "Documentation"
    TOOL = "Tool"
    OTHER = "Other"


class Mood(str, Enum):
    JOYFUL = "joyful"
    CALM = "calm"
    NEUTRAL = "neutral"
    ANXIOUS = "anxious"
    SAD = "sad"


@dataclass
class LLMSettings:
    model: str
    temperature: float = 0.7
    top_p: float = 1.0
    max_tokens: int = 2048
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    response_format: Optional[dict] = None


@dataclass(frozen=True)
class Quote:
    id: str
    text: str
    author: str


@dataclass
class MoodEntry:
    mood: Mood
    logged_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
