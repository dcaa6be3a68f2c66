"""
Purpose: Companion flows: personalized guidance chat and inspiring stories.
Both validate their request, render the prompt and return the typed result
with the call's meta.
"""

from __future__ import annotations
from typing import Any, Mapping, Union

from ..interfaces import LLMClient, PromptFactory
from ..models import LLMSettings
from ..schemas import GuidanceRequest, GuidanceResult, StoriesRequest, StoriesResult
from ..validation import validate
from .generation import generate_structured

NO_PROFILE = "User chose not to share profile details."
NO_MOOD = "Not specified by user."


def generate_personalized_guidance(
    request: Union[GuidanceRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[GuidanceResult, dict]:
    """Supportive reply to the user's issue, continuing any prior chat."""
    req = validate(GuidanceRequest, request)
    user_text = prompts.guidance_instruction(
        profile=req.profile or NO_PROFILE,
        mood=req.mood or NO_MOOD,
        issue=req.issue,
    )
    return generate_structured(
        llm=llm,
        settings=settings,
        output_model=GuidanceResult,
        system=prompts.build_guidance_system(),
        user_text=user_text,
        history=req.conversation_history,
        flow="personalized guidance",
    )


def curate_inspiring_stories(
    request: Union[StoriesRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[StoriesResult, dict]:
    req = validate(StoriesRequest, request)
    return generate_structured(
        llm=llm,
        settings=settings,
        output_model=StoriesResult,
        system=prompts.build_stories_system(),
        user_text=prompts.stories_instruction(
            user_profile=req.user_profile or NO_PROFILE,
            current_challenges=req.current_challenges,
        ),
        flow="inspiring stories",
    )
