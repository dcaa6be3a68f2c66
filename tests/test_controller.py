"""
Tests for InterviewSessionController, the client-side interview session.
"""

from aatmai.controller import InterviewSessionController
from aatmai.errors import NetworkError
from aatmai.models import InterviewPhase, TurnRole


class TestInterviewSessionController:
    """Drive a whole session through ServerActions and a scripted LLM."""

    def test_three_turns_finish_the_interview(
        self, actions, fake_llm, closing_reply
    ) -> None:
        fake_llm.queue(
            {"aiResponse": "Hi! Question one?"},
            {"aiResponse": "Good. Question two?"},
            closing_reply,
        )
        controller = InterviewSessionController(actions)

        controller.start("Product Management")
        assert controller.phase == InterviewPhase.IN_PROGRESS
        controller.submit_answer("Answer one")
        assert not controller.finished
        controller.submit_answer("Answer two")

        assert controller.finished
        assert controller.phase == InterviewPhase.FINISHED
        assert controller.session.questions_asked == 3
        assert len(controller.session.history) == 5
        assert controller.session.last_result.interview_score == 78
        assert controller.tokens_in == 30
        assert controller.tokens_out == 15
        assert controller.model_used == "test-model"

    def test_fourth_turn_rejected(self, actions, fake_llm, closing_reply) -> None:
        fake_llm.queue({"aiResponse": "Q1?"}, {"aiResponse": "Q2?"}, closing_reply)
        controller = InterviewSessionController(actions)
        controller.start("Data Science")
        controller.submit_answer("a")
        controller.submit_answer("b")

        result = controller.submit_answer("c")
        assert result.is_error
        assert controller.session.questions_asked == 3
        assert len(fake_llm.calls) == 3

    def test_error_leaves_state_unchanged(self, actions, fake_llm) -> None:
        fake_llm.queue({"aiResponse": "Q1?"}, NetworkError("Rate limit hit"))
        controller = InterviewSessionController(actions)
        controller.start("Data Science")

        result = controller.submit_answer("my answer")
        assert result.is_error
        assert "busy" in result.message
        assert controller.session.questions_asked == 1
        assert [t.content for t in controller.session.history] == ["Q1?"]

    def test_empty_answer_rejected(self, actions, fake_llm) -> None:
        fake_llm.queue({"aiResponse": "Q1?"})
        controller = InterviewSessionController(actions)
        controller.start("Data Science")
        result = controller.submit_answer("   ")
        assert result.is_error
        assert "currentAnswer" in result.fields

    def test_reset(self, actions, fake_llm) -> None:
        fake_llm.queue({"aiResponse": "Q1?"})
        controller = InterviewSessionController(actions)
        controller.start("Data Science")
        controller.reset()
        assert controller.session.domain == ""
        assert controller.session.history == []
        assert controller.phase == InterviewPhase.NOT_STARTED
        assert controller.tokens_in == 0

    def test_failed_start_leaves_session_not_started(self, actions, fake_llm) -> None:
        fake_llm.queue(NetworkError("Rate limit hit"), {"aiResponse": "Hi! Question one?"})
        controller = InterviewSessionController(actions)

        result = controller.start("Data Science")
        assert result.is_error
        assert controller.session.domain == ""
        assert controller.session.history == []
        assert controller.phase == InterviewPhase.NOT_STARTED

        controller.start("Data Science")
        assert controller.session.domain == "Data Science"
        assert [t.role for t in controller.session.history] == [TurnRole.INTERVIEWER]
        assert len(fake_llm.calls) == 2
