"""
Purpose: Thin client wrapper around the OpenAI chat completions API.
One place for auth, model options, response/usage normalization and the
translation of SDK exceptions into the package's error taxonomy.

Every call is a single best-effort request: no retries, no back-off.

Testing: Inject a fake `client` exposing chat.completions.create; assert it
maps usage and errors correctly.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

import openai
from openai import OpenAI

from ..errors import (
    NOT_CONFIGURED_MESSAGE,
    GenerationError,
    NetworkError,
    ServiceUnavailableError,
)
from ..models import LLMSettings

logger = logging.getLogger(__name__)


class OpenAILLMClient:
    def __init__(self, api_key: Optional[str], *, client: Any = None):
        self.api_key = api_key
        if client is not None:
            self.client = client
            return
        if not self.api_key:
            raise ServiceUnavailableError("Missing OPENAI_API_KEY")
        self.client = OpenAI(api_key=self.api_key)

    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]:
        payload = []
        if system:
            payload.append({"role": "system", "content": system})
        payload.extend(messages)

        kwargs: dict[str, Any] = dict(
            model=settings.model,
            messages=payload,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
            frequency_penalty=settings.frequency_penalty,
            presence_penalty=settings.presence_penalty,
        )
        if settings.response_format:
            kwargs["response_format"] = settings.response_format

        try:
            cc = self.client.chat.completions.create(**kwargs)
        except openai.AuthenticationError as e:
            logger.error("OpenAI rejected the API key: %s", e)
            raise ServiceUnavailableError(NOT_CONFIGURED_MESSAGE) from e
        except openai.RateLimitError as e:
            raise NetworkError(f"Rate limit reached: {e}") from e
        except openai.APIError as e:
            raise NetworkError(str(e) or "The AI service request failed.") from e

        if not cc.choices:
            raise GenerationError("The AI service returned no response.")
        text = cc.choices[0].message.content or ""
        usage = getattr(cc, "usage", None)
        tokens_in = getattr(usage, "prompt_tokens", 0) if usage else 0
        tokens_out = getattr(usage, "completion_tokens", 0) if usage else 0
        return text, {
            "model": getattr(cc, "model", settings.model),
            "tokens_in": tokens_in or 0,
            "tokens_out": tokens_out or 0,
        }
