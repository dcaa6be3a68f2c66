"""Shared prompt helpers used across prompt modules."""

from __future__ import annotations
import json
from textwrap import dedent
from typing import Iterable, Optional

from pydantic import BaseModel

from aatmai.models import ChatRole, TurnRole
from aatmai.schemas import ChatMessage, ConversationTurn

AATMAI_IDENTITY = (
    "You are AatmAI, a friendly and empathetic AI companion for Indian users."
)

CULTURAL_CONTEXT = (
    "Remember that the user is from India: keep cultural context and "
    "sensitivity in mind."
)


def json_contract_block(model: type[BaseModel]) -> str:
    """Instruction that pins the reply to the output contract's JSON schema."""
    schema = json.dumps(model.model_json_schema(), indent=2, ensure_ascii=False)
    return dedent(
        """\
        Output format:
        - Return EXACTLY one JSON object and nothing else (no prose, no code fences).
        - It must validate against this JSON schema:
        """
    ) + schema


def optional_line(label: str, value: Optional[str], fallback: str = "") -> str:
    value = (value or "").strip()
    if value:
        return f"- {label}: {value}"
    return f"- {label}: {fallback}" if fallback else ""


def render_transcript(turns: Iterable[ConversationTurn]) -> str:
    """Interview history as 'Interviewer: ...' / 'User: ...' lines."""
    lines: list[str] = []
    for t in turns:
        content = (t.content or "").strip()
        if not content:
            continue
        speaker = "Interviewer" if t.role == TurnRole.INTERVIEWER else "User"
        lines.append(f"{speaker}: {content}")
    return "\n".join(lines)


def assemble(
    *, system: str, history: list[ChatMessage], user_text: str
) -> list[dict[str, str]]:
    """System prompt, prior chat turns, then the new user message."""
    msgs = [{"role": "system", "content": system}]
    for m in history:
        role = "assistant" if m.role == ChatRole.MODEL else "user"
        msgs.append({"role": role, "content": m.content})
    msgs.append({"role": "user", "content": user_text})
    return msgs
