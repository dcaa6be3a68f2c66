"""
Purpose: Client-side state that the browser app kept in local storage: saved
quotes, display name, guidance chat history and mood log.

What is inside:
InMemoryStorage and JsonFileStorage, both implementing KeyValueStorage
(get/set/clear of string values).
ClientStore: typed accessors over fixed keys. Values are JSON; anything that
does not parse into the expected shape is treated as empty and cleared.

Testing:
In-memory: round-trips and malformed values.
File: tmp_path fixture; corrupt file tolerated.
"""

from __future__ import annotations
import contextlib
import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

import pydantic

from ..errors import ValidationError
from ..interfaces import KeyValueStorage
from ..models import Mood, MoodEntry, Quote
from ..quotes import resolve_quotes
from ..schemas import ChatMessage

logger = logging.getLogger(__name__)

SAVED_QUOTES_KEY = "aatme-saved-quotes"
USER_NAME_KEY = "userName"
CHAT_HISTORY_KEY = "aatme-chat-history"
MOOD_LOG_KEY = "aatme-mood-log"


class InMemoryStorage:
    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStorage:
    """All keys in one JSON object on disk, rewritten on every change."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring state file %s: not a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, values: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Old state stays intact until os.replace swaps the new file in.
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(values, fh, indent=2)
            os.replace(tmp, self.path)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._save(values)

    def clear(self, key: str) -> None:
        values = self._load()
        if key in values:
            del values[key]
            self._save(values)


class ClientStore:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def _read_json(self, key: str) -> Optional[Any]:
        raw = self.storage.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Clearing corrupt value under %r", key)
            self.storage.clear(key)
            return None

    def _read_list(self, key: str) -> list:
        data = self._read_json(key)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Clearing non-list value under %r", key)
            self.storage.clear(key)
            return []
        return data

    def _write_json(self, key: str, value: Any) -> None:
        self.storage.set(key, json.dumps(value))

    # saved quotes
    def saved_quote_ids(self) -> list[str]:
        ids: list[str] = []
        for item in self._read_list(SAVED_QUOTES_KEY):
            if isinstance(item, (str, int)) and str(item) not in ids:
                ids.append(str(item))
        return ids

    def is_saved(self, quote_id: str) -> bool:
        return str(quote_id) in self.saved_quote_ids()

    def save_quote(self, quote_id: str) -> list[str]:
        ids = self.saved_quote_ids()
        if str(quote_id) not in ids:
            ids.append(str(quote_id))
            self._write_json(SAVED_QUOTES_KEY, ids)
        return ids

    def remove_quote(self, quote_id: str) -> list[str]:
        ids = [i for i in self.saved_quote_ids() if i != str(quote_id)]
        self._write_json(SAVED_QUOTES_KEY, ids)
        return ids

    def saved_quotes(self) -> list[Quote]:
        return resolve_quotes(self.saved_quote_ids())

    # display name
    def user_name(self) -> Optional[str]:
        name = (self.storage.get(USER_NAME_KEY) or "").strip()
        return name or None

    def set_user_name(self, name: str) -> str:
        trimmed = (name or "").strip()
        if not trimmed:
            raise ValidationError(
                "Please enter your name.", {"userName": "Please enter your name."}
            )
        self.storage.set(USER_NAME_KEY, trimmed)
        return trimmed

    def clear_user_name(self) -> None:
        self.storage.clear(USER_NAME_KEY)

    # guidance chat
    def chat_history(self) -> list[ChatMessage]:
        history: list[ChatMessage] = []
        for item in self._read_list(CHAT_HISTORY_KEY):
            try:
                history.append(ChatMessage.model_validate(item))
            except pydantic.ValidationError:
                logger.warning("Dropping malformed chat message: %r", item)
        return history

    def save_chat_history(self, history: list[ChatMessage]) -> None:
        self._write_json(
            CHAT_HISTORY_KEY,
            [m.model_dump(mode="json", by_alias=True) for m in history],
        )

    def clear_chat_history(self) -> None:
        self.storage.clear(CHAT_HISTORY_KEY)

    # mood tracker
    def mood_log(self) -> list[MoodEntry]:
        entries: list[MoodEntry] = []
        for item in self._read_list(MOOD_LOG_KEY):
            try:
                entries.append(
                    MoodEntry(
                        mood=Mood(item["mood"]),
                        logged_at=datetime.fromisoformat(item["loggedAt"]),
                    )
                )
            except (KeyError, TypeError, ValueError):
                logger.warning("Dropping malformed mood entry: %r", item)
        return entries

    def log_mood(self, mood: Union[Mood, str]) -> MoodEntry:
        entry = MoodEntry(mood=Mood(mood))
        log = [
            {"mood": e.mood.value, "loggedAt": e.logged_at.isoformat()}
            for e in self.mood_log()
        ]
        log.append({"mood": entry.mood.value, "loggedAt": entry.logged_at.isoformat()})
        self._write_json(MOOD_LOG_KEY, log)
        return entry
