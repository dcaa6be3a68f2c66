"""
Purpose: Student tool flows (notes, project ideas, project guidance, project
report, learning roadmap). Each is one validated generation call.
"""

from __future__ import annotations
from typing import Any, Mapping, Union

from ..interfaces import LLMClient, PromptFactory
from ..models import LLMSettings
from ..schemas import (
    ProjectGuidanceRequest,
    ProjectGuidanceResult,
    ProjectIdeasRequest,
    ProjectIdeasResult,
    ProjectReportRequest,
    ProjectReportResult,
    RoadmapRequest,
    RoadmapResult,
    StudentNotesRequest,
    StudentNotesResult,
)
from ..validation import validate
from .generation import generate_structured


def generate_student_notes(
    request: Union[StudentNotesRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[StudentNotesResult, dict]:
    """Notes on a topic. The returned detail level is always the requested one."""
    req = validate(StudentNotesRequest, request)
    result, meta = generate_structured(
        llm=llm,
        settings=settings,
        output_model=StudentNotesResult,
        system=prompts.build_student_system(),
        user_text=prompts.notes_instruction(req),
        flow="student notes",
    )
    return result.model_copy(update={"detail_level": req.detail_level}), meta


def generate_project_ideas(
    request: Union[ProjectIdeasRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[ProjectIdeasResult, dict]:
    req = validate(ProjectIdeasRequest, request)
    return generate_structured(
        llm=llm,
        settings=settings,
        output_model=ProjectIdeasResult,
        system=prompts.build_student_system(),
        user_text=prompts.project_ideas_instruction(req),
        flow="project ideas",
    )


def generate_project_guidance(
    request: Union[ProjectGuidanceRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[ProjectGuidanceResult, dict]:
    req = validate(
        ProjectGuidanceRequest,
        request,
        message=(
            "Invalid project details provided for guidance. "
            "Title and description are required."
        ),
    )
    return generate_structured(
        llm=llm,
        settings=settings,
        output_model=ProjectGuidanceResult,
        system=prompts.build_student_system(),
        user_text=prompts.project_guidance_instruction(
            title=req.project_title, description=req.project_description
        ),
        flow="project guidance",
    )


def generate_project_report(
    request: Union[ProjectReportRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[ProjectReportResult, dict]:
    req = validate(ProjectReportRequest, request)
    return generate_structured(
        llm=llm,
        settings=settings,
        output_model=ProjectReportResult,
        system=prompts.build_student_system(),
        user_text=prompts.project_report_instruction(req),
        flow="project report",
    )


def generate_roadmap(
    request: Union[RoadmapRequest, Mapping[str, Any]],
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
) -> tuple[RoadmapResult, dict]:
    req = validate(RoadmapRequest, request)
    return generate_structured(
        llm=llm,
        settings=settings,
        output_model=RoadmapResult,
        system=prompts.build_student_system(),
        user_text=prompts.roadmap_instruction(topic_or_skill=req.topic_or_skill),
        flow="roadmap",
    )
