"""
Tests for client-side state: storage backends and ClientStore.
"""

import json

import pytest

from aatmai.errors import ValidationError
from aatmai.models import Mood
from aatmai.persistence.session_store import (
    CHAT_HISTORY_KEY,
    MOOD_LOG_KEY,
    SAVED_QUOTES_KEY,
    USER_NAME_KEY,
    ClientStore,
    JsonFileStorage,
)
from aatmai.schemas import ChatMessage


class TestSavedQuotes:
    """Test saved quote ids."""

    def test_save_is_idempotent(self, store, storage) -> None:
        store.save_quote("1")
        store.save_quote("1")
        store.save_quote("4")
        assert store.saved_quote_ids() == ["1", "4"]
        assert json.loads(storage.get(SAVED_QUOTES_KEY)) == ["1", "4"]

    def test_remove(self, store) -> None:
        store.save_quote("1")
        store.save_quote("4")
        assert store.remove_quote("1") == ["4"]
        assert not store.is_saved("1")
        assert store.is_saved("4")

    def test_saved_quotes_skip_unknown_ids(self, store) -> None:
        store.save_quote("1")
        store.save_quote("does-not-exist")
        quotes = store.saved_quotes()
        assert [q.id for q in quotes] == ["1"]
        assert quotes[0].author == "Peter Drucker"

    def test_malformed_json_is_empty_and_cleared(self, store, storage) -> None:
        storage.set(SAVED_QUOTES_KEY, "{oops")
        assert store.saved_quote_ids() == []
        assert storage.get(SAVED_QUOTES_KEY) is None

    def test_non_list_is_empty_and_cleared(self, store, storage) -> None:
        storage.set(SAVED_QUOTES_KEY, json.dumps({"1": True}))
        assert store.saved_quote_ids() == []
        assert storage.get(SAVED_QUOTES_KEY) is None


class TestUserName:
    """Test the display name."""

    def test_round_trip_trimmed(self, store, storage) -> None:
        assert store.set_user_name("  Asha ") == "Asha"
        assert store.user_name() == "Asha"
        assert storage.get(USER_NAME_KEY) == "Asha"

    def test_blank_rejected(self, store) -> None:
        with pytest.raises(ValidationError):
            store.set_user_name("   ")
        assert store.user_name() is None

    def test_clear(self, store) -> None:
        store.set_user_name("Asha")
        store.clear_user_name()
        assert store.user_name() is None


class TestChatHistory:
    """Test the guidance chat history."""

    def test_round_trip(self, store) -> None:
        history = [
            ChatMessage(role="user", content="I feel low."),
            ChatMessage(role="model", content="I'm here for you."),
        ]
        store.save_chat_history(history)
        assert store.chat_history() == history

    def test_malformed_entries_dropped(self, store, storage) -> None:
        storage.set(
            CHAT_HISTORY_KEY,
            json.dumps([{"role": "user", "content": "hi"}, {"role": "bot"}, 3]),
        )
        assert [m.content for m in store.chat_history()] == ["hi"]

    def test_clear(self, store) -> None:
        store.save_chat_history([ChatMessage(role="user", content="hi")])
        store.clear_chat_history()
        assert store.chat_history() == []


class TestMoodLog:
    """Test the mood tracker."""

    def test_log_and_read(self, store) -> None:
        store.log_mood(Mood.CALM)
        store.log_mood("anxious")
        log = store.mood_log()
        assert [e.mood for e in log] == [Mood.CALM, Mood.ANXIOUS]
        assert log[0].logged_at <= log[1].logged_at

    def test_unknown_mood_rejected(self, store) -> None:
        with pytest.raises(ValueError):
            store.log_mood("ecstatic")

    def test_malformed_entries_dropped(self, store, storage) -> None:
        storage.set(
            MOOD_LOG_KEY,
            json.dumps(
                [
                    {"mood": "sad", "loggedAt": "2024-05-01T10:00:00+00:00"},
                    {"mood": "sad"},
                    {"mood": "meh", "loggedAt": "2024-05-01T10:00:00+00:00"},
                ]
            ),
        )
        log = store.mood_log()
        assert len(log) == 1
        assert log[0].logged_at.year == 2024


class TestJsonFileStorage:
    """Test the file-backed storage."""

    def test_persists_across_instances(self, tmp_path) -> None:
        path = tmp_path / "nested" / "state.json"
        ClientStore(JsonFileStorage(path)).set_user_name("Ravi")
        assert ClientStore(JsonFileStorage(path)).user_name() == "Ravi"

    def test_missing_file_is_empty(self, tmp_path) -> None:
        storage = JsonFileStorage(tmp_path / "absent.json")
        assert storage.get("anything") is None

    def test_corrupt_file_is_empty(self, tmp_path) -> None:
        path = tmp_path / "state.json"
        path.write_text("this is not json")
        store = ClientStore(JsonFileStorage(path))
        assert store.saved_quote_ids() == []
        store.save_quote("3")
        assert store.saved_quote_ids() == ["3"]

    def test_clear_removes_key(self, tmp_path) -> None:
        storage = JsonFileStorage(tmp_path / "state.json")
        storage.set("a", "1")
        storage.set("b", "2")
        storage.clear("a")
        assert storage.get("a") is None
        assert storage.get("b") == "2"

    def test_failed_write_keeps_previous_state(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "state.json"
        storage = JsonFileStorage(path)
        storage.set("userName", "Ravi")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(
            "aatmai.persistence.session_store.os.replace", broken_replace
        )
        with pytest.raises(OSError):
            storage.set("userName", "Asha")

        assert storage.get("userName") == "Ravi"
        assert [p.name for p in tmp_path.iterdir()] == ["state.json"]
