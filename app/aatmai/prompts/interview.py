"""Mock interview prompts (opening, follow-up question, closing feedback)."""

from __future__ import annotations
from textwrap import dedent

from aatmai.models import TurnStep
from aatmai.schemas import MAX_QUESTIONS, ConversationTurn

from .common import render_transcript


def build_interview_system(*, domain: str) -> str:
    return dedent(
        f"""\
        You are AatmAI, a professional and insightful AI interviewer.
        You conduct a short mock interview of {MAX_QUESTIONS} turns for the
        domain given below.
        Rules:
        - Keep questions and feedback professional, clear and relevant to the domain.
        - Mix technical and behavioral questions; never repeat a question.
        - Do not ask for personal information. Focus on skills, experience
          (hypothetical if needed), problem-solving and behavior.
        """
    ) + f"Domain: {domain}"


def _step_rules(step: TurnStep, domain: str) -> list[str]:
    if step == TurnStep.OPENING:
        return [
            "This is the start of the interview.",
            "- Introduce yourself briefly and state the domain.",
            f"- Ask the first relevant question for the '{domain}' role.",
            "- Put the introduction and the question in 'aiResponse'.",
        ]
    if step == TurnStep.FOLLOW_UP:
        return [
            "The user has just answered your previous question.",
            "- Briefly acknowledge the answer if appropriate.",
            f"- Ask the NEXT relevant question for the '{domain}' role.",
            "- Put the acknowledgement and the question in 'aiResponse'.",
        ]
    return [
        "The user has just answered your final question. The interview ends now.",
        "- Put a short concluding remark in 'aiResponse'.",
        "- Give constructive, specific overall feedback in 'feedbackSummary',"
        " based on ALL of the user's answers.",
        "- List 2-3 key 'areasForImprovement'.",
        "- Give an overall 'interviewScore' from 0 to 100.",
    ]


def interview_turn_instruction(
    *,
    step: TurnStep,
    domain: str,
    history: list[ConversationTurn],
    current_answer: str,
    questions_asked: int,
) -> str:
    transcript = render_transcript(history)
    lines = [
        "Interview history:",
        transcript or "(none yet)",
        "",
        f"Turns completed so far: {questions_asked} of {MAX_QUESTIONS}",
    ]
    if current_answer:
        lines += ["", f"User's latest answer: {current_answer}"]
    lines += [""] + _step_rules(step, domain)
    return "\n".join(lines)
