"""
Purpose: text-to-speech integration (PlayHT v2). Turns a reply into a playable
audio URL so answers can be read out.

One request, plus at most one fixed-delay poll when the service answers with
a job id instead of a URL. No back-off, no retry loop.
"""

from __future__ import annotations
import logging
import time
from typing import Any, Callable, Optional

import requests

from ..config import DEFAULT_TTS_URL, DEFAULT_VOICE_ID
from ..errors import (
    AudioProcessingError,
    GenerationError,
    NetworkError,
    ServiceUnavailableError,
)
from ..schemas import SpeechRequest
from ..validation import validate

logger = logging.getLogger(__name__)

PENDING_STATUSES = ("created", "processing")


def _audio_url(data: dict) -> Optional[str]:
    return data.get("url") or data.get("audio_url") or data.get("audioUrl")


def _json_object(resp: requests.Response) -> dict:
    try:
        data = resp.json()
    except ValueError as e:
        logger.error("PlayHT returned a non-JSON body: %s", e)
        raise GenerationError("Speech service returned an unreadable response.") from e
    if not isinstance(data, dict):
        logger.error("PlayHT returned a non-object body: %r", data)
        raise GenerationError("Speech service returned an unreadable response.")
    return data


def _upstream_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])
    if isinstance(err, str) and err:
        return err
    return resp.reason or f"HTTP {resp.status_code}"


class PlayHTSpeechClient:
    def __init__(
        self,
        api_key: Optional[str],
        user_id: Optional[str],
        *,
        voice: str = DEFAULT_VOICE_ID,
        endpoint: str = DEFAULT_TTS_URL,
        poll_delay: float = 3.0,
        output_format: str = "mp3",
        quality: str = "medium",
        session: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_key = api_key
        self.user_id = user_id
        self.voice = voice
        self.endpoint = endpoint.rstrip("/")
        self.poll_delay = poll_delay
        self.output_format = output_format
        self.quality = quality
        self.session = session or requests.Session()
        self._sleep = sleep

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "X-User-ID": str(self.user_id),
        }

    def synthesize(self, text: str) -> str:
        """Return a playable audio URL for `text`."""
        req = validate(
            SpeechRequest,
            {"text": text},
            message="Invalid input for speech generation.",
        )
        if not self.api_key or not self.user_id:
            logger.error("PlayHT API key or user id is not configured.")
            raise ServiceUnavailableError("Speech service is not configured.")

        body = {
            "text": req.text,
            "voice": self.voice,
            "output_format": self.output_format,
            "quality": self.quality,
        }
        try:
            resp = self.session.post(
                self.endpoint,
                json=body,
                headers={**self._headers(), "Content-Type": "application/json"},
            )
        except requests.RequestException as e:
            raise NetworkError(f"Speech request failed: {e}") from e

        if not resp.ok:
            message = _upstream_message(resp)
            logger.error("PlayHT error %s: %s", resp.status_code, message)
            raise NetworkError(f"Speech generation failed: {message}")

        data = _json_object(resp)
        url = _audio_url(data)
        if not url and data.get("id") and data.get("status") in PENDING_STATUSES:
            url = self._poll_once(str(data["id"]))

        if not url:
            logger.error("PlayHT returned no audio URL: %s", data)
            raise GenerationError("Speech generation completed, but no audio URL found.")
        return url

    def _poll_once(self, job_id: str) -> str:
        logger.info("PlayHT job %s pending; polling once in %ss", job_id, self.poll_delay)
        self._sleep(self.poll_delay)
        try:
            resp = self.session.get(f"{self.endpoint}/{job_id}", headers=self._headers())
        except requests.RequestException as e:
            raise NetworkError("Failed to retrieve generated audio status.") from e

        if not resp.ok:
            logger.error("PlayHT poll for %s failed: %s", job_id, resp.status_code)
            raise NetworkError("Failed to retrieve generated audio status.")

        job = _json_object(resp)
        if not job.get("converted"):
            logger.warning("PlayHT job %s still processing after one poll", job_id)
            raise AudioProcessingError(
                "Audio is still processing. Please try again shortly."
            )
        return job.get("audio") or job.get("url") or ""
