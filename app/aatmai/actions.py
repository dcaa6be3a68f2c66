"""
Purpose: The action boundary between the UI and the flows. Each handler takes
raw form fields, runs one flow and always returns an ActionResult; no
exception escapes to the page.

Error mapping, in order:
- ValidationError: its message ("Invalid form data. ...") plus per-field
  messages.
- ServiceUnavailableError: the "not configured" message.
- messages mentioning "overloaded" or "rate limit": the flow's busy message.
- GenerationError: the flow's trouble message.
- anything else: the error text when it is short, else the flow's fallback.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, NamedTuple, Optional

import pydantic

from .errors import (
    AatmaiError,
    GenerationError,
    NOT_CONFIGURED_MESSAGE,
    ServiceUnavailableError,
    ValidationError,
)
from .interfaces import LLMClient, PromptFactory, SpeechSynthesizer
from .models import LLMSettings
from .prompts import DefaultPromptFactory
from .schemas import (
    ChatMessage,
    ConversationTurn,
    GuidanceRequest,
    InterviewTurnRequest,
    ProjectIdeasRequest,
    ProjectReportRequest,
    RoadmapRequest,
)
from .services.guidance import curate_inspiring_stories, generate_personalized_guidance
from .services.interview import append_exchange, conduct_interview_turn
from .services.student_tools import (
    generate_project_guidance,
    generate_project_ideas,
    generate_project_report,
    generate_roadmap,
    generate_student_notes,
)
from .validation import validate

logger = logging.getLogger(__name__)

SHORT_MESSAGE_LIMIT = 150
BUSY_MARKERS = ("overloaded", "rate limit")
NO_IDEAS_MESSAGE = (
    "AatmAI couldn't find specific project ideas for your criteria. "
    "Try broadening your search or rephrasing your interests."
)
SPEECH_FAILED_MESSAGE = "An unexpected error occurred during speech generation."


class FlowMessages(NamedTuple):
    busy: str
    trouble: str
    fallback: str


GUIDANCE = FlowMessages(
    "AatmAI's servers are currently busy. Please try again in a few moments.",
    "AatmAI had trouble understanding the request or formulating a response. "
    "Please try rephrasing or try again later.",
    "Failed to generate guidance. AatmAI might be busy or there was an issue. "
    "Please try again later.",
)
STORIES = FlowMessages(
    "AatmAI's servers are currently busy curating stories. "
    "Please try again in a few moments.",
    "AatmAI had trouble finding stories for you. Please try again.",
    "Failed to curate stories. AatmAI might be busy or there was an issue. "
    "Please try again later.",
)
NOTES = FlowMessages(
    "AatmAI's servers are currently busy generating notes. "
    "Please try again in a few moments.",
    "AatmAI had trouble understanding the topic or generating notes. "
    "Please try rephrasing or try again later.",
    "Failed to generate notes. AatmAI might be busy or there was an issue. "
    "Please try again later.",
)
IDEAS = FlowMessages(
    "AatmAI's servers are currently busy generating ideas. "
    "Please try again in a few moments.",
    "AatmAI had trouble understanding your request or generating ideas. "
    "Please try rephrasing or try again later.",
    "Failed to generate project ideas. AatmAI might be busy or there was an issue. "
    "Please try again later.",
)
PROJECT_GUIDANCE = FlowMessages(
    "AatmAI's servers are currently busy generating guidance. "
    "Please try again in a few moments.",
    "AatmAI had trouble generating specific guidance for this project idea. "
    "Please try again.",
    "Failed to generate project guidance. AatmAI might be busy or there was an issue.",
)
REPORT = FlowMessages(
    "AatmAI's servers are currently busy generating the report. "
    "Please try again in a few moments.",
    "AatmAI had trouble understanding your request or generating the report. "
    "Please try rephrasing or try again later.",
    "Failed to generate project report. AatmAI might be busy or there was an issue. "
    "Please try again later.",
)
ROADMAP = FlowMessages(
    "AatmAI's servers are currently busy generating the roadmap. "
    "Please try again in a few moments.",
    "AatmAI had trouble understanding the topic/skill or generating the roadmap. "
    "Please try rephrasing or try again later.",
    "Failed to generate roadmap. AatmAI might be busy or there was an issue. "
    "Please try again later.",
)
INTERVIEW = FlowMessages(
    "AatmAI's interview servers are currently busy. Please try again in a few moments.",
    "AatmAI had trouble formulating a response for the interview. Please try again.",
    "Failed to process interview turn. AatmAI might be busy or there was an issue.",
)


def _dump(value: Any) -> Any:
    if isinstance(value, pydantic.BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value


@dataclass
class ActionResult:
    message: str
    is_error: bool = False
    fields: dict[str, str] = field(default_factory=dict)
    data: Any = None
    history: Optional[list] = None
    submitted: Optional[Mapping[str, Any]] = None
    usage: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"message": self.message, "isError": self.is_error}
        if self.fields:
            out["fields"] = dict(self.fields)
        if self.data is not None:
            out["payload"] = _dump(self.data)
        if self.history is not None:
            out["updatedHistory"] = _dump(self.history)
        if self.submitted is not None:
            out["inputSubmitted"] = _dump(dict(self.submitted))
        return out


def error_message(exc: BaseException, messages: FlowMessages) -> str:
    """User-facing text for a failed flow."""
    if isinstance(exc, ServiceUnavailableError):
        return NOT_CONFIGURED_MESSAGE
    text = str(exc)
    lowered = text.lower()
    if any(marker in lowered for marker in BUSY_MARKERS):
        return messages.busy
    if isinstance(exc, GenerationError):
        return messages.trouble
    if text and len(text) < SHORT_MESSAGE_LIMIT:
        return text
    return messages.fallback


def parse_history(raw: Any, model: type[pydantic.BaseModel]) -> list:
    """History sent by a form: a list or a JSON string. Bad entries are dropped."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring conversation history that is not valid JSON")
            return []
    if not isinstance(raw, list):
        logger.warning("Ignoring conversation history that is not a list")
        return []
    history = []
    for item in raw:
        try:
            history.append(validate(model, item))
        except (ValidationError, TypeError, ValueError):
            logger.warning("Dropping malformed history entry: %r", item)
    return history


def _usage(meta: Mapping[str, Any]) -> dict:
    return {
        "model": meta.get("model"),
        "tokens_in": int(meta.get("tokens_in") or 0),
        "tokens_out": int(meta.get("tokens_out") or 0),
    }


class ServerActions:
    def __init__(
        self,
        llm: Optional[LLMClient],
        *,
        settings: LLMSettings,
        prompts: Optional[PromptFactory] = None,
        speech: Optional[SpeechSynthesizer] = None,
    ):
        self.llm = llm
        self.settings = settings
        self.prompts = prompts or DefaultPromptFactory()
        self.speech = speech

    def _deps(self) -> dict:
        if self.llm is None:
            raise ServiceUnavailableError(NOT_CONFIGURED_MESSAGE)
        return {"llm": self.llm, "prompts": self.prompts, "settings": self.settings}

    def _run(
        self,
        name: str,
        messages: FlowMessages,
        body: Callable[[], ActionResult],
        *,
        history: Optional[list] = None,
        submitted: Optional[Mapping[str, Any]] = None,
    ) -> ActionResult:
        """Run `body`; on failure build the error result with the old history."""
        try:
            return body()
        except ValidationError as e:
            return ActionResult(
                message=str(e),
                is_error=True,
                fields=e.fields,
                history=history,
                submitted=submitted,
            )
        except AatmaiError as e:
            logger.error("%s failed: %s", name, e)
            return ActionResult(
                message=error_message(e, messages),
                is_error=True,
                history=history,
                submitted=submitted,
            )
        except Exception as e:
            logger.exception("Unexpected error in %s", name)
            return ActionResult(
                message=error_message(e, messages),
                is_error=True,
                history=history,
                submitted=submitted,
            )

    # companion
    def handle_generate_guidance(self, form: Mapping[str, Any]) -> ActionResult:
        previous = parse_history(form.get("conversationHistory"), ChatMessage)

        def body() -> ActionResult:
            req = validate(
                GuidanceRequest,
                {
                    "profile": form.get("profile") or "",
                    "mood": form.get("mood") or "",
                    "issue": form.get("issue"),
                    "conversationHistory": previous,
                },
            )
            result, meta = generate_personalized_guidance(req, **self._deps())
            updated = previous + [
                ChatMessage(role="user", content=req.issue),
                ChatMessage(role="model", content=result.guidance),
            ]
            return ActionResult(
                message="Guidance generated successfully!",
                data=result,
                history=updated,
                usage=_usage(meta),
            )

        return self._run("handle_generate_guidance", GUIDANCE, body, history=previous)

    def handle_curate_stories(self, form: Mapping[str, Any]) -> ActionResult:
        def body() -> ActionResult:
            result, meta = curate_inspiring_stories(
                {
                    "userProfile": form.get("userProfile") or "",
                    "currentChallenges": form.get("currentChallenges"),
                },
                **self._deps(),
            )
            return ActionResult(
                message="Inspiring stories curated successfully!",
                data=result,
                usage=_usage(meta),
            )

        return self._run("handle_curate_stories", STORIES, body)

    # student tools
    def handle_generate_student_notes(self, form: Mapping[str, Any]) -> ActionResult:
        submitted = {
            "topic": form.get("topic"),
            "detailLevel": form.get("detailLevel") or "concise",
        }

        def body() -> ActionResult:
            result, meta = generate_student_notes(submitted, **self._deps())
            return ActionResult(
                message="Notes generated successfully!",
                data=result,
                submitted=submitted,
                usage=_usage(meta),
            )

        return self._run(
            "handle_generate_student_notes", NOTES, body, submitted=submitted
        )

    def handle_generate_project_ideas(self, form: Mapping[str, Any]) -> ActionResult:
        submitted = {
            "fieldOfStudy": form.get("fieldOfStudy"),
            "interests": form.get("interests"),
            "projectType": form.get("projectType") or "any",
            "difficultyLevel": form.get("difficultyLevel") or "any",
            "additionalContext": form.get("additionalContext") or "",
        }

        def body() -> ActionResult:
            req = validate(ProjectIdeasRequest, submitted)
            result, meta = generate_project_ideas(req, **self._deps())
            if not result.ideas:
                return ActionResult(
                    message=NO_IDEAS_MESSAGE,
                    data=result,
                    submitted=submitted,
                    usage=_usage(meta),
                )
            return ActionResult(
                message="Project ideas generated successfully!",
                data=result,
                submitted=submitted,
                usage=_usage(meta),
            )

        return self._run(
            "handle_generate_project_ideas", IDEAS, body, submitted=submitted
        )

    def handle_generate_project_guidance(self, form: Mapping[str, Any]) -> ActionResult:
        submitted = {
            "projectTitle": form.get("projectTitle"),
            "projectDescription": form.get("projectDescription"),
        }

        def body() -> ActionResult:
            result, meta = generate_project_guidance(submitted, **self._deps())
            return ActionResult(
                message="Project guidance generated successfully!",
                data=result,
                submitted=submitted,
                usage=_usage(meta),
            )

        return self._run(
            "handle_generate_project_guidance",
            PROJECT_GUIDANCE,
            body,
            submitted=submitted,
        )

    def handle_generate_project_report(self, form: Mapping[str, Any]) -> ActionResult:
        submitted = {
            "projectTopic": form.get("projectTopic"),
            "techStackDetails": form.get("techStackDetails"),
            "reportType": form.get("reportType") or "simple",
        }

        def body() -> ActionResult:
            req = validate(ProjectReportRequest, submitted)
            result, meta = generate_project_report(req, **self._deps())
            return ActionResult(
                message="Project report generated successfully!",
                data=result,
                submitted=submitted,
                usage=_usage(meta),
            )

        return self._run(
            "handle_generate_project_report", REPORT, body, submitted=submitted
        )

    def handle_generate_roadmap(self, form: Mapping[str, Any]) -> ActionResult:
        submitted = {"topicOrSkill": form.get("topicOrSkill")}

        def body() -> ActionResult:
            req = validate(RoadmapRequest, submitted)
            result, meta = generate_roadmap(req, **self._deps())
            return ActionResult(
                message=f'Roadmap for "{req.topic_or_skill}" generated successfully!',
                data=result,
                submitted=submitted,
                usage=_usage(meta),
            )

        return self._run("handle_generate_roadmap", ROADMAP, body, submitted=submitted)

    # interview
    def handle_interview_turn(self, form: Mapping[str, Any]) -> ActionResult:
        previous = parse_history(form.get("interviewHistory"), ConversationTurn)

        def body() -> ActionResult:
            req = validate(
                InterviewTurnRequest,
                {
                    "domain": form.get("domain"),
                    "interviewHistory": previous,
                    "currentAnswer": form.get("currentAnswer") or "",
                    "questionsAsked": form.get("questionsAsked") or 0,
                },
            )
            result, meta = conduct_interview_turn(req, **self._deps())
            return ActionResult(
                message="Interview turn processed.",
                data=result,
                history=append_exchange(
                    req.interview_history, req.current_answer, result.ai_response
                ),
                usage=_usage(meta),
            )

        return self._run("handle_interview_turn", INTERVIEW, body, history=previous)

    # speech
    def generate_speech(self, payload: Mapping[str, Any]) -> dict:
        """{"audioUrl": ...} on success, {"error": ...} otherwise."""
        if self.speech is None:
            logger.error("Speech requested but no speech client is configured")
            return {"error": "Speech service is not configured."}
        try:
            return {"audioUrl": self.speech.synthesize(payload.get("text") or "")}
        except AatmaiError as e:
            logger.error("generate_speech failed: %s", e)
            return {"error": str(e)}
        except Exception:
            logger.exception("Unexpected error in generate_speech")
            return {"error": SPEECH_FAILED_MESSAGE}
