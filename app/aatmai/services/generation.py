"""
Purpose: The generation adapter every flow goes through.
Pins the model to an output contract (JSON mode + the contract's schema in the
system prompt), makes exactly one call and validates the reply before handing
it back. No retry, caching or rate limiting: one best-effort network call.

Testing: Fake LLMClient returning canned JSON; assert GenerationError on prose,
on schema violations, and that meta passes through untouched.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional, TypeVar

import pydantic

from ..errors import GenerationError
from ..interfaces import LLMClient
from ..models import LLMSettings
from ..prompts.common import assemble, json_contract_block
from ..schemas import ChatMessage
from ..utils.llm_json import require_object

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=pydantic.BaseModel)

JSON_MODE = {"type": "json_object"}


def generate_structured(
    *,
    llm: LLMClient,
    settings: LLMSettings,
    output_model: type[T],
    system: str,
    user_text: str,
    history: Optional[list[ChatMessage]] = None,
    flow: str,
) -> tuple[T, dict]:
    """Return (validated output, meta) for one model call."""
    failure = f"AI failed to generate a valid response for {flow}."
    messages = assemble(
        system=system + "\n\n" + json_contract_block(output_model),
        history=history or [],
        user_text=user_text,
    )

    logger.info("Running %s flow with model %s", flow, settings.model)
    text, meta = llm.chat(messages, replace(settings, response_format=JSON_MODE))

    obj = require_object(text, err=failure)
    try:
        result = output_model.model_validate(obj)
    except pydantic.ValidationError as exc:
        logger.warning(
            "%s reply did not match %s: %s",
            flow,
            output_model.__name__,
            exc.errors(include_url=False),
        )
        raise GenerationError(failure) from exc

    logger.info(
        "%s flow done (tokens in=%s out=%s)",
        flow,
        meta.get("tokens_in", 0),
        meta.get("tokens_out", 0),
    )
    return result, meta
