"""
Purpose: Runtime configuration and logging setup.
Reads a .env file (if any) and the process environment once at startup so the
rest of the package receives plain values instead of calling os.getenv.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .models import LLMSettings

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TTS_URL = "https://api.play.ht/api/v2/tts"
DEFAULT_VOICE_ID = (
    "s3://voice-cloning-zero-shot/d9ff78ba-d016-47f6-b0a8-50a521a08a28/"
    "female/manifest.json"
)
DEFAULT_STATE_FILE = Path.home() / ".aatmai" / "state.json"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", key, raw, default)
        return default


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", key, raw, default)
        return default


@dataclass
class Settings:
    openai_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 2048
    playht_api_key: Optional[str] = None
    playht_user_id: Optional[str] = None
    playht_voice_id: str = DEFAULT_VOICE_ID
    tts_url: str = DEFAULT_TTS_URL
    tts_poll_delay: float = 3.0
    state_file: Path = field(default_factory=lambda: DEFAULT_STATE_FILE)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        state_file = env.get("AATMAI_STATE_FILE")
        return cls(
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            model=env.get("AATMAI_MODEL") or DEFAULT_MODEL,
            temperature=_float(env, "AATMAI_TEMPERATURE", 0.7),
            max_tokens=_int(env, "AATMAI_MAX_TOKENS", 2048),
            playht_api_key=env.get("PLAYHT_API_KEY") or None,
            playht_user_id=env.get("PLAYHT_USER_ID") or None,
            playht_voice_id=env.get("PLAYHT_DEFAULT_VOICE_ID") or DEFAULT_VOICE_ID,
            tts_url=env.get("PLAYHT_TTS_URL") or DEFAULT_TTS_URL,
            tts_poll_delay=_float(env, "AATMAI_TTS_POLL_DELAY", 3.0),
            state_file=(
                Path(state_file).expanduser() if state_file else DEFAULT_STATE_FILE
            ),
            log_level=(env.get("AATMAI_LOG_LEVEL") or "INFO").upper(),
        )

    def llm_settings(self) -> LLMSettings:
        """Default generation settings for every flow."""
        return LLMSettings(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load .env (without overriding real env vars) and build Settings."""
    load_dotenv(dotenv_path)
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
