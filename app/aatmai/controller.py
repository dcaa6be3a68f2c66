"""
Purpose: Client-side orchestration of a mock interview session. Owns the
session state (domain, transcript, counter, last result) and feeds each
action result back into it, so the UI never tracks the counter itself.

Key responsibilities:
- start(domain): reset and request the opening question.
- submit_answer(text): send the answer with the current transcript/counter.
- reset(): clear state and token counters.
- finished: True once the closing turn has been received.

Testing: Pure unit tests with a ServerActions backed by a fake LLMClient.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .actions import ActionResult, ServerActions
from .models import InterviewPhase
from .schemas import ConversationTurn, InterviewTurnResult
from .services.interview import phase_for


@dataclass
class InterviewSession:
    domain: str = ""
    history: list[ConversationTurn] = field(default_factory=list)
    questions_asked: int = 0
    last_result: Optional[InterviewTurnResult] = None


class InterviewSessionController:
    def __init__(self, actions: ServerActions):
        self.actions = actions
        self.session = InterviewSession()

        self.tokens_in: int = 0
        self.tokens_out: int = 0
        self.model_used: Optional[str] = None

    @property
    def phase(self) -> InterviewPhase:
        return phase_for(self.session.questions_asked)

    @property
    def finished(self) -> bool:
        result = self.session.last_result
        return bool(result and result.is_interview_over)

    def reset(self) -> None:
        """Clear the transcript, counter and token counters."""
        self.session = InterviewSession()
        self.tokens_in = self.tokens_out = 0
        self.model_used = None

    def start(self, domain: str) -> ActionResult:
        """Begin a new interview in `domain` and fetch the opening question.

        The domain is committed only once the opening question arrives, so a
        failed start leaves the session not started.
        """
        self.reset()
        return self._turn("", domain=domain)

    def submit_answer(self, text: str) -> ActionResult:
        return self._turn(text)

    def _turn(self, answer: str, domain: Optional[str] = None) -> ActionResult:
        domain = self.session.domain if domain is None else domain
        result = self.actions.handle_interview_turn(
            {
                "domain": domain,
                "interviewHistory": self.session.history,
                "currentAnswer": answer,
                "questionsAsked": self.session.questions_asked,
            }
        )
        self.tokens_in += int(result.usage.get("tokens_in", 0))
        self.tokens_out += int(result.usage.get("tokens_out", 0))
        if result.usage.get("model"):
            self.model_used = result.usage["model"]

        if result.is_error:
            return result

        turn: InterviewTurnResult = result.data
        self.session.domain = domain
        self.session.history = list(result.history or [])
        self.session.questions_asked = turn.questions_asked
        self.session.last_result = turn
        return result
