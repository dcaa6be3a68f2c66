"""Facade over the per-area prompt modules; the single PromptFactory the app uses."""

from __future__ import annotations

from ..models import TurnStep
from ..schemas import (
    ConversationTurn,
    ProjectIdeasRequest,
    ProjectReportRequest,
    StudentNotesRequest,
)
from . import guidance as _guidance
from . import interview as _interview
from . import students as _students


class DefaultPromptFactory:
    # COMPANION
    def build_guidance_system(self) -> str:
        return _guidance.build_guidance_system()

    def guidance_instruction(self, *, profile: str, mood: str, issue: str) -> str:
        return _guidance.guidance_instruction(profile=profile, mood=mood, issue=issue)

    def build_stories_system(self) -> str:
        return _guidance.build_stories_system()

    def stories_instruction(
        self, *, user_profile: str, current_challenges: str
    ) -> str:
        return _guidance.stories_instruction(
            user_profile=user_profile, current_challenges=current_challenges
        )

    # STUDENT TOOLS
    def build_student_system(self) -> str:
        return _students.build_student_system()

    def notes_instruction(self, request: StudentNotesRequest) -> str:
        return _students.notes_instruction(request)

    def project_ideas_instruction(self, request: ProjectIdeasRequest) -> str:
        return _students.project_ideas_instruction(request)

    def project_guidance_instruction(self, *, title: str, description: str) -> str:
        return _students.project_guidance_instruction(
            title=title, description=description
        )

    def project_report_instruction(self, request: ProjectReportRequest) -> str:
        return _students.project_report_instruction(request)

    def roadmap_instruction(self, *, topic_or_skill: str) -> str:
        return _students.roadmap_instruction(topic_or_skill=topic_or_skill)

    # INTERVIEW
    def build_interview_system(self, *, domain: str) -> str:
        return _interview.build_interview_system(domain=domain)

    def interview_turn_instruction(
        self,
        *,
        step: TurnStep,
        domain: str,
        history: list[ConversationTurn],
        current_answer: str,
        questions_asked: int,
    ) -> str:
        return _interview.interview_turn_instruction(
            step=step,
            domain=domain,
            history=history,
            current_answer=current_answer,
            questions_asked=questions_asked,
        )
