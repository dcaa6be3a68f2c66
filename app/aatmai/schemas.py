"""
Typed request/response contracts, one pair per flow.

Requests carry the user-facing messages shown when a field fails its
constraint; responses describe the JSON the model must return. Every contract
accepts both snake_case attribute names and the camelCase names used by the
forms and by the model's JSON.
"""

from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .models import (
    ChatRole,
    DetailLevel,
    DifficultyLevel,
    ProjectType,
    ReportType,
    ResourceType,
    TurnRole,
)

MAX_QUESTIONS = 3


class Contract(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def _blank_if_none(value):
    return "" if value is None else value


def text_length(
    min_length: int = 0,
    max_length: Optional[int] = None,
    *,
    too_short: str = "",
    too_long: str = "",
) -> AfterValidator:
    """Length check that reports the given message verbatim."""

    def check(value: str) -> str:
        if len(value) < min_length:
            raise PydanticCustomError(
                "text_too_short",
                too_short or f"Must be at least {min_length} characters.",
            )
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError(
                "text_too_long",
                too_long or f"Must be at most {max_length} characters.",
            )
        return value

    return AfterValidator(check)


OptionalText = Annotated[str, BeforeValidator(_blank_if_none)]


# ---------------------------
# Conversation records
# ---------------------------
class ConversationTurn(Contract):
    role: TurnRole
    content: str


class ChatMessage(Contract):
    role: ChatRole
    content: str


# ---------------------------
# Personalized guidance
# ---------------------------
class GuidanceRequest(Contract):
    profile: OptionalText = ""
    mood: OptionalText = ""
    issue: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            10,
            too_short=(
                "Please describe your issue in a bit more detail "
                "(at least 10 characters)."
            ),
        ),
    ]
    conversation_history: list[ChatMessage] = Field(default_factory=list)


class GuidanceResult(Contract):
    guidance: str = Field(min_length=1)
    reasoning: str


# ---------------------------
# Inspiring stories
# ---------------------------
class StoriesRequest(Contract):
    user_profile: OptionalText = ""
    current_challenges: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            10,
            too_short=(
                "Please describe current challenges in detail, "
                "at least 10 characters."
            ),
        ),
    ]


class StoriesResult(Contract):
    stories: list[str]


# ---------------------------
# Student notes
# ---------------------------
class StudentNotesRequest(Contract):
    topic: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            3,
            200,
            too_short="Topic must be at least 3 characters long.",
            too_long="Topic must be less than 200 characters long.",
        ),
    ]
    detail_level: DetailLevel = DetailLevel.CONCISE


class StudentNotesResult(Contract):
    notes: str = Field(min_length=1)
    detail_level: DetailLevel = DetailLevel.CONCISE


# ---------------------------
# Project ideas and per-project guidance
# ---------------------------
class ProjectIdeasRequest(Contract):
    field_of_study: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            3,
            150,
            too_short=(
                "Please specify your field of study "
                "(e.g., Computer Science, Arts, Biology)."
            ),
            too_long=(
                "Field of study is too long. Please keep it under 150 characters."
            ),
        ),
    ]
    interests: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            3,
            500,
            too_short=(
                "Describe your interests (e.g., AI, sustainability, healthcare, "
                "web development, creative writing)."
            ),
            too_long=(
                "Interests description is too long. "
                "Please keep it under 500 characters."
            ),
        ),
    ]
    project_type: ProjectType = ProjectType.ANY
    difficulty_level: DifficultyLevel = DifficultyLevel.ANY
    additional_context: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            0,
            500,
            too_long=(
                "Additional context is too long. "
                "Please keep it under 500 characters."
            ),
        ),
    ] = ""


class ProjectIdea(Contract):
    title: str
    description: str
    keywords: list[str] = Field(default_factory=list, max_length=5)
    suitability: Optional[str] = None


class ProjectIdeasResult(Contract):
    ideas: list[ProjectIdea] = Field(default_factory=list, max_length=5)


class ProjectGuidanceRequest(Contract):
    project_title: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(1, too_short="Project title is required."),
    ]
    project_description: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(1, too_short="Project description is required."),
    ]


class ProjectGuidanceResult(Contract):
    suggested_tech_stack: list[str]
    high_level_steps: list[str]
    key_considerations: Optional[list[str]] = None


# ---------------------------
# Project report
# ---------------------------
class ProjectReportRequest(Contract):
    project_topic: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            5,
            200,
            too_short="Project topic must be at least 5 characters.",
            too_long="Project topic must be less than 200 characters.",
        ),
    ]
    tech_stack_details: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            10,
            1000,
            too_short=(
                "Please provide some details about the technologies, tools, "
                "or methods used (at least 10 characters)."
            ),
            too_long="Technology details must be less than 1000 characters.",
        ),
    ]
    report_type: ReportType = ReportType.SIMPLE


class ProjectReportResult(Contract):
    report_content: str = Field(min_length=1)
    references: Optional[str] = None


# ---------------------------
# Learning roadmap
# ---------------------------
class RoadmapRequest(Contract):
    topic_or_skill: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(
            3,
            200,
            too_short="Topic or skill must be at least 3 characters long.",
            too_long="Topic or skill must be less than 200 characters long.",
        ),
    ]


class RoadmapResource(Contract):
    type: ResourceType
    description_or_link: str


class RoadmapStep(Contract):
    id: str
    title: str
    description: str
    estimated_duration: str
    resources: list[RoadmapResource] = Field(min_length=1)
    keywords: Optional[list[str]] = None


class MotivationalQuote(Contract):
    text: str
    author: Optional[str] = None


class RoadmapResult(Contract):
    roadmap_title: str
    introduction: str
    steps: list[RoadmapStep] = Field(min_length=3)
    conclusion: str
    motivational_quote: MotivationalQuote


# ---------------------------
# Mock interview
# ---------------------------
class InterviewTurnRequest(Contract):
    domain: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(1, too_short="Domain must be selected."),
    ]
    interview_history: list[ConversationTurn] = Field(default_factory=list)
    current_answer: OptionalText = ""
    questions_asked: int = Field(default=0, ge=0, le=MAX_QUESTIONS)


class InterviewQuestionReply(Contract):
    """Model reply for the opening and follow-up turns."""

    ai_response: str = Field(min_length=1)


class InterviewFeedbackReply(Contract):
    """Model reply for the closing turn."""

    ai_response: str = Field(min_length=1)
    feedback_summary: str = Field(min_length=1)
    areas_for_improvement: list[str] = Field(min_length=1)
    interview_score: float = Field(ge=0, le=100)


class InterviewTurnResult(Contract):
    ai_response: str
    is_interview_over: bool
    questions_asked: int = Field(ge=0, le=MAX_QUESTIONS)
    feedback_summary: Optional[str] = None
    areas_for_improvement: Optional[list[str]] = None
    interview_score: Optional[float] = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _feedback_only_when_over(self):
        feedback = (
            self.feedback_summary,
            self.areas_for_improvement,
            self.interview_score,
        )
        if self.is_interview_over and any(v is None for v in feedback):
            raise ValueError("A finished interview must carry its feedback.")
        if not self.is_interview_over and any(v is not None for v in feedback):
            raise ValueError("Feedback is only given once the interview is over.")
        return self


# ---------------------------
# Speech
# ---------------------------
class SpeechRequest(Contract):
    text: Annotated[
        str,
        BeforeValidator(_blank_if_none),
        text_length(1, too_short="Text to speak cannot be empty."),
    ]
