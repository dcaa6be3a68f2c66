"""
Abstractions for pluggable services. Inversion of control: flows and actions
depend on these protocols, not on concrete services, so tests can hand in
fakes and a provider can be swapped without touching the callers.

Common protocols:
- LLMClient.chat(messages, settings) -> (reply, meta)
- PromptFactory: build_*_system() -> str and *_instruction(...) -> str
- SpeechSynthesizer.synthesize(text) -> audio URL
- KeyValueStorage.get/set/clear for client-side state
"""

from __future__ import annotations
from typing import Optional, Protocol

from .models import LLMSettings, TurnStep
from .schemas import (
    ConversationTurn,
    ProjectIdeasRequest,
    ProjectReportRequest,
    StudentNotesRequest,
)


class LLMClient(Protocol):
    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]: ...


class PromptFactory(Protocol):
    def build_guidance_system(self) -> str: ...

    def guidance_instruction(self, *, profile: str, mood: str, issue: str) -> str: ...

    def build_stories_system(self) -> str: ...

    def stories_instruction(
        self, *, user_profile: str, current_challenges: str
    ) -> str: ...

    def build_student_system(self) -> str: ...

    def notes_instruction(self, request: StudentNotesRequest) -> str: ...

    def project_ideas_instruction(self, request: ProjectIdeasRequest) -> str: ...

    def project_guidance_instruction(self, *, title: str, description: str) -> str: ...

    def project_report_instruction(self, request: ProjectReportRequest) -> str: ...

    def roadmap_instruction(self, *, topic_or_skill: str) -> str: ...

    def build_interview_system(self, *, domain: str) -> str: ...

    def interview_turn_instruction(
        self,
        *,
        step: TurnStep,
        domain: str,
        history: list[ConversationTurn],
        current_answer: str,
        questions_asked: int,
    ) -> str: ...


class SpeechSynthesizer(Protocol):
    def synthesize(self, text: str) -> str: ...


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self, key: str) -> None: ...
