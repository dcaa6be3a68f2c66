"""Student tool prompts: notes, project ideas, project guidance, reports, roadmaps."""

from __future__ import annotations
from textwrap import dedent

from aatmai.models import DetailLevel, ReportType
from aatmai.schemas import ProjectIdeasRequest, ProjectReportRequest, StudentNotesRequest

from .common import optional_line


def build_student_system() -> str:
    return dedent(
        """\
        You are AatmAI, an expert academic advisor and study companion for
        students from every stream and background.
        Rules:
        - Be practical, clear and encouraging.
        - Prefer tools and resources that are free, well documented and
          accessible to students.
        - Where it helps, consider the Indian educational context: practical
          skills, societal relevance and room for innovation.
        """
    )


def notes_instruction(request: StudentNotesRequest) -> str:
    if request.detail_level == DetailLevel.DETAILED:
        shape = (
            "Write detailed notes: an overview, each key concept explained in "
            "its own Markdown section with examples, and a short summary."
        )
    else:
        shape = (
            "Write concise notes: Markdown bullet points covering the key "
            "definitions, facts and formulas, with **bold** key terms."
        )
    return "\n".join(
        [
            f"Topic: {request.topic}",
            f"Detail level: {request.detail_level.value}",
            shape,
            "Put the notes in 'notes' and echo the detail level in 'detailLevel'.",
        ]
    )


def project_ideas_instruction(request: ProjectIdeasRequest) -> str:
    lines = [
        "Student's inputs:",
        f"- Field of Study: {request.field_of_study}",
        f"- Interests: {request.interests}",
        f"- Preferred Project Type: {request.project_type.value}",
        f"- Desired Difficulty Level: {request.difficulty_level.value}",
    ]
    extra = optional_line("Additional Context/Requirements", request.additional_context)
    if extra:
        lines.append(extra)
    lines += [
        "",
        "Generate 3 to 5 distinct, actionable project ideas. For each give a clear",
        "'title', a 'description' of at least 2-3 sentences (objectives, scope,",
        "learning outcomes, impact), 2-5 'keywords' and an optional 'suitability'",
        "note. If the inputs are broad, suggest ideas that adapt across project",
        "types; if the field is niche, lean on transferable skills.",
    ]
    return "\n".join(lines)


def project_guidance_instruction(*, title: str, description: str) -> str:
    return "\n".join(
        [
            f"Project Title: {title}",
            f"Project Description: {description}",
            "",
            "Suggest 3-5 technologies or tools in 'suggestedTechStack', 3-5",
            "high-level implementation steps from planning to a first working",
            "version in 'highLevelSteps', and 1-3 'keyConsiderations'",
            "(challenges or good practices specific to this project).",
        ]
    )


def project_report_instruction(request: ProjectReportRequest) -> str:
    if request.report_type == ReportType.DETAILED:
        shape = (
            "Write a detailed report in Markdown with: Title, Abstract, "
            "Introduction, Objectives, Methodology, Implementation, Results and "
            "Discussion, Challenges, Conclusion and Future Scope."
        )
    else:
        shape = (
            "Write a simple report in Markdown with: Title, Introduction, "
            "Objectives, Technologies Used, Implementation Overview and Conclusion."
        )
    return "\n".join(
        [
            f"Project Topic: {request.project_topic}",
            f"Technologies, tools or methods used: {request.tech_stack_details}",
            f"Report type: {request.report_type.value}",
            shape,
            "Put the report in 'reportContent' and, if you cite sources, list",
            "them in 'references'.",
        ]
    )


def roadmap_instruction(*, topic_or_skill: str) -> str:
    return "\n".join(
        [
            f"Topic or skill: {topic_or_skill}",
            "",
            "Create a learning roadmap with a 'roadmapTitle', a short",
            "'introduction', at least 3 ordered 'steps' and a 'conclusion'.",
            "Each step needs an 'id' like 'step-1', a 'title', a 'description',",
            "an 'estimatedDuration' such as '1-2 weeks' and at least one",
            "resource of type Video, Article, Course, Book, Documentation, Tool",
            "or Other. Finish with a fitting 'motivationalQuote'.",
        ]
    )
