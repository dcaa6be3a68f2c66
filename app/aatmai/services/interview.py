"""
Purpose: Mock interview. Holds the turn controller, the only stateful control
logic in the app, and the flow that runs one interview turn.

The controller owns the question counter. The model is never asked for it,
so its value is always derived from the request:

    questions_asked  step        result counter   over
    0                OPENING     1                no
    1 .. MAX-2       FOLLOW_UP   n + 1            no
    MAX-1            CLOSING     MAX              yes
    MAX              (rejected with InterviewFinishedError)

Testing: plan_turn/next_count are pure; conduct_interview_turn with a fake
LLMClient replaying scripted replies.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Union

from ..errors import InterviewFinishedError, ValidationError
from ..interfaces import LLMClient, PromptFactory
from ..models import InterviewPhase, LLMSettings, TurnRole, TurnStep
from ..schemas import (
    MAX_QUESTIONS,
    ConversationTurn,
    InterviewFeedbackReply,
    InterviewQuestionReply,
    InterviewTurnRequest,
    InterviewTurnResult,
)
from ..validation import validate
from .generation import generate_structured

logger = logging.getLogger(__name__)

ANSWER_REQUIRED = "Please answer the previous question before continuing."


def phase_for(questions_asked: int) -> InterviewPhase:
    if questions_asked <= 0:
        return InterviewPhase.NOT_STARTED
    if questions_asked >= MAX_QUESTIONS:
        return InterviewPhase.FINISHED
    return InterviewPhase.IN_PROGRESS


def plan_turn(request: InterviewTurnRequest) -> TurnStep:
    """Decide what the interviewer does next, or reject an invalid transition."""
    n = request.questions_asked
    if phase_for(n) == InterviewPhase.FINISHED:
        raise InterviewFinishedError(n)
    if n > 0 and not request.current_answer:
        raise ValidationError(ANSWER_REQUIRED, {"currentAnswer": ANSWER_REQUIRED})
    if n + 1 >= MAX_QUESTIONS:
        return TurnStep.CLOSING
    if n == 0:
        return TurnStep.OPENING
    return TurnStep.FOLLOW_UP


def next_count(questions_asked: int) -> int:
    return min(questions_asked + 1, MAX_QUESTIONS)


def append_exchange(
    history: list[ConversationTurn], answer: str, reply: str
) -> list[ConversationTurn]:
    """New history: the old turns, the user's answer (if any), the interviewer's reply."""
    updated = list(history)
    if answer and answer.strip():
        updated.append(ConversationTurn(role=TurnRole.USER, content=answer))
    updated.append(ConversationTurn(role=TurnRole.INTERVIEWER, content=reply))
    return updated


def conduct_interview_turn(
    request: Union[InterviewTurnRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[InterviewTurnResult, dict]:
    """Run one turn. Never retries; upstream failure raises GenerationError."""
    req = validate(InterviewTurnRequest, request)
    step = plan_turn(req)
    count = next_count(req.questions_asked)

    system = prompts.build_interview_system(domain=req.domain)
    user_text = prompts.interview_turn_instruction(
        step=step,
        domain=req.domain,
        history=req.interview_history,
        current_answer=req.current_answer,
        questions_asked=req.questions_asked,
    )

    if step == TurnStep.CLOSING:
        feedback, meta = generate_structured(
            llm=llm,
            settings=settings,
            output_model=InterviewFeedbackReply,
            system=system,
            user_text=user_text,
            flow="the interview",
        )
        result = InterviewTurnResult(
            ai_response=feedback.ai_response,
            is_interview_over=True,
            questions_asked=count,
            feedback_summary=feedback.feedback_summary,
            areas_for_improvement=feedback.areas_for_improvement,
            interview_score=feedback.interview_score,
        )
    else:
        question, meta = generate_structured(
            llm=llm,
            settings=settings,
            output_model=InterviewQuestionReply,
            system=system,
            user_text=user_text,
            flow="the interview",
        )
        result = InterviewTurnResult(
            ai_response=question.ai_response,
            is_interview_over=False,
            questions_asked=count,
        )

    logger.info(
        "Interview turn %s/%s (%s) for domain %r",
        count,
        MAX_QUESTIONS,
        step.value,
        req.domain,
    )
    return result, meta
