"""
Tests for the action boundary: success payloads, history handling and the
mapping of errors to user-facing messages.
"""

import json

import pytest

from aatmai.actions import (
    GUIDANCE,
    IDEAS,
    INTERVIEW,
    NO_IDEAS_MESSAGE,
    ROADMAP,
    ActionResult,
    ServerActions,
    error_message,
    parse_history,
)
from aatmai.errors import (
    GenerationError,
    NOT_CONFIGURED_MESSAGE,
    NetworkError,
    ServiceUnavailableError,
)
from aatmai.schemas import ChatMessage, ConversationTurn
from aatmai.validation import INVALID_FORM_MESSAGE

ISSUE = "I keep doubting every decision I make."


class TestErrorMessage:
    """Test error_message() mapping."""

    def test_busy_on_overloaded(self) -> None:
        exc = NetworkError("The model is overloaded")
        assert error_message(exc, GUIDANCE) == GUIDANCE.busy

    def test_busy_on_rate_limit(self) -> None:
        exc = NetworkError("Rate limit reached: slow down")
        assert error_message(exc, ROADMAP) == ROADMAP.busy

    def test_trouble_on_generation_error(self) -> None:
        exc = GenerationError("AI failed to generate a valid response for roadmap.")
        assert error_message(exc, ROADMAP) == ROADMAP.trouble

    def test_short_message_passed_through(self) -> None:
        assert error_message(NetworkError("Connection reset"), IDEAS) == "Connection reset"

    def test_long_message_falls_back(self) -> None:
        exc = NetworkError("x" * 150)
        assert error_message(exc, IDEAS) == IDEAS.fallback

    def test_empty_message_falls_back(self) -> None:
        assert error_message(RuntimeError(), INTERVIEW) == INTERVIEW.fallback

    def test_not_configured(self) -> None:
        exc = ServiceUnavailableError("Missing OPENAI_API_KEY")
        assert error_message(exc, GUIDANCE) == NOT_CONFIGURED_MESSAGE


class TestParseHistory:
    """Test parse_history() for list and JSON-string input."""

    def test_json_string(self) -> None:
        raw = json.dumps([{"role": "user", "content": "hi"}])
        history = parse_history(raw, ChatMessage)
        assert history == [ChatMessage(role="user", content="hi")]

    def test_invalid_json_is_empty(self) -> None:
        assert parse_history("{not json", ChatMessage) == []

    def test_malformed_entries_dropped(self) -> None:
        raw = [{"role": "robot", "content": "x"}, "nope", {"role": "model", "content": "ok"}]
        history = parse_history(raw, ChatMessage)
        assert [m.content for m in history] == ["ok"]

    def test_none_is_empty(self) -> None:
        assert parse_history(None, ConversationTurn) == []


class TestActionResult:
    """Test ActionResult.to_dict()."""

    def test_error_shape(self) -> None:
        out = ActionResult(message="bad", is_error=True, fields={"topic": "short"}).to_dict()
        assert out == {"message": "bad", "isError": True, "fields": {"topic": "short"}}

    def test_payload_and_history_use_form_names(self) -> None:
        out = ActionResult(
            message="ok",
            data=ConversationTurn(role="interviewer", content="Q?"),
            history=[ChatMessage(role="model", content="A")],
            submitted={"topicOrSkill": "Go"},
        ).to_dict()
        assert out["payload"] == {"role": "interviewer", "content": "Q?"}
        assert out["updatedHistory"] == [{"role": "model", "content": "A"}]
        assert out["inputSubmitted"] == {"topicOrSkill": "Go"}


class TestGuidanceAction:
    """Test handle_generate_guidance()."""

    def test_success_extends_history(self, actions, fake_llm) -> None:
        fake_llm.queue({"guidance": "Trust yourself.", "reasoning": "Affirmation."})
        previous = [{"role": "user", "content": "Hi"}, {"role": "model", "content": "Hello!"}]
        result = actions.handle_generate_guidance(
            {"issue": ISSUE, "conversationHistory": json.dumps(previous)}
        )
        assert not result.is_error
        assert result.message == "Guidance generated successfully!"
        assert [m.content for m in result.history] == [
            "Hi",
            "Hello!",
            ISSUE,
            "Trust yourself.",
        ]
        assert result.history[-1].role.value == "model"
        assert result.usage == {"model": "test-model", "tokens_in": 10, "tokens_out": 5}

    def test_error_returns_old_history(self, actions, fake_llm) -> None:
        fake_llm.queue(NetworkError("Server overloaded"))
        previous = [{"role": "user", "content": "Hi"}]
        result = actions.handle_generate_guidance(
            {"issue": ISSUE, "conversationHistory": previous}
        )
        assert result.is_error
        assert result.message == GUIDANCE.busy
        assert [m.content for m in result.history] == ["Hi"]

    def test_validation_error(self, actions, fake_llm) -> None:
        result = actions.handle_generate_guidance({"issue": "sad"})
        assert result.is_error
        assert result.message == INVALID_FORM_MESSAGE
        assert "issue" in result.fields
        assert fake_llm.calls == []
        assert result.history == []


class TestStudentActions:
    """Test the student tool handlers."""

    def test_notes_success(self, actions, fake_llm) -> None:
        fake_llm.queue({"notes": "- point"})
        result = actions.handle_generate_student_notes({"topic": "Optics"})
        assert result.message == "Notes generated successfully!"
        assert result.submitted == {"topic": "Optics", "detailLevel": "concise"}

    def test_ideas_defaults_applied(self, actions, fake_llm) -> None:
        fake_llm.queue({"ideas": [{"title": "t", "description": "d"}]})
        result = actions.handle_generate_project_ideas(
            {"fieldOfStudy": "Design", "interests": "typography", "projectType": ""}
        )
        assert result.message == "Project ideas generated successfully!"
        assert result.submitted["projectType"] == "any"
        assert result.submitted["difficultyLevel"] == "any"

    def test_no_ideas_is_not_an_error(self, actions, fake_llm) -> None:
        fake_llm.queue({"ideas": []})
        result = actions.handle_generate_project_ideas(
            {"fieldOfStudy": "Design", "interests": "typography"}
        )
        assert not result.is_error
        assert result.message == NO_IDEAS_MESSAGE

    def test_ideas_validation_echoes_input(self, actions) -> None:
        result = actions.handle_generate_project_ideas({"fieldOfStudy": "CS"})
        assert result.is_error
        assert result.submitted["fieldOfStudy"] == "CS"
        assert set(result.fields) == {"fieldOfStudy", "interests"}

    def test_project_guidance_validation_message(self, actions) -> None:
        result = actions.handle_generate_project_guidance({"projectTitle": "App"})
        assert result.is_error
        assert result.message.startswith("Invalid project details")

    def test_report_trouble_message(self, actions, fake_llm) -> None:
        fake_llm.queue("not json at all")
        result = actions.handle_generate_project_report(
            {"projectTopic": "Smart irrigation", "techStackDetails": "ESP32 with MQTT"}
        )
        assert result.is_error
        assert result.message.startswith("AatmAI had trouble")

    def test_roadmap_message_names_topic(self, actions, fake_llm, roadmap_reply) -> None:
        fake_llm.queue(roadmap_reply)
        result = actions.handle_generate_roadmap({"topicOrSkill": "  Rust  "})
        assert result.message == 'Roadmap for "Rust" generated successfully!'

    def test_stories_success(self, actions, fake_llm) -> None:
        fake_llm.queue({"stories": ["One."]})
        result = actions.handle_curate_stories(
            {"currentChallenges": "Lost my job last month."}
        )
        assert result.message == "Inspiring stories curated successfully!"
        assert result.data.stories == ["One."]


class TestInterviewAction:
    """Test handle_interview_turn()."""

    def test_opening_turn(self, actions, fake_llm) -> None:
        fake_llm.queue({"aiResponse": "Welcome! First question?"})
        result = actions.handle_interview_turn({"domain": "Data Science"})
        assert result.message == "Interview turn processed."
        assert result.data.questions_asked == 1
        assert [t.content for t in result.history] == ["Welcome! First question?"]

    def test_error_keeps_history(self, actions, fake_llm) -> None:
        fake_llm.queue(NetworkError("boom"))
        previous = [{"role": "interviewer", "content": "Q1?"}]
        result = actions.handle_interview_turn(
            {
                "domain": "Data Science",
                "interviewHistory": previous,
                "currentAnswer": "A1",
                "questionsAsked": 1,
            }
        )
        assert result.is_error
        assert result.message == "boom"
        assert [t.content for t in result.history] == ["Q1?"]

    def test_finished_rejected(self, actions, fake_llm) -> None:
        result = actions.handle_interview_turn(
            {"domain": "Data Science", "currentAnswer": "A", "questionsAsked": 3}
        )
        assert result.is_error
        assert "questionsAsked" in result.fields
        assert fake_llm.calls == []


class TestNotConfigured:
    """Without an LLM every flow reports the not-configured message."""

    @pytest.mark.parametrize(
        "handler, form",
        [
            ("handle_generate_guidance", {"issue": ISSUE}),
            ("handle_generate_student_notes", {"topic": "Optics"}),
            ("handle_generate_roadmap", {"topicOrSkill": "Rust"}),
            ("handle_interview_turn", {"domain": "Data Science"}),
        ],
    )
    def test_missing_llm(self, llm_settings, handler, form) -> None:
        actions = ServerActions(None, settings=llm_settings)
        result = getattr(actions, handler)(form)
        assert result.is_error
        assert result.message == NOT_CONFIGURED_MESSAGE

    def test_unexpected_exception_is_contained(self, actions, fake_llm) -> None:
        fake_llm.queue(KeyError("x" * 200))
        result = actions.handle_generate_student_notes({"topic": "Optics"})
        assert result.is_error
        assert result.message.startswith("Failed to generate notes.")


class TestSpeechAction:
    """Test generate_speech()."""

    def test_not_configured(self, actions) -> None:
        assert actions.generate_speech({"text": "hi"}) == {
            "error": "Speech service is not configured."
        }

    def test_success(self, llm_settings, fake_llm) -> None:
        class Speech:
            def synthesize(self, text):
                return f"https://audio/{text}.mp3"

        actions = ServerActions(fake_llm, settings=llm_settings, speech=Speech())
        assert actions.generate_speech({"text": "hi"}) == {
            "audioUrl": "https://audio/hi.mp3"
        }

    def test_error(self, llm_settings, fake_llm) -> None:
        class Speech:
            def synthesize(self, text):
                raise NetworkError("Speech generation failed: quota")

        actions = ServerActions(fake_llm, settings=llm_settings, speech=Speech())
        assert actions.generate_speech({"text": "hi"}) == {
            "error": "Speech generation failed: quota"
        }
