"""
The one validation boundary every flow goes through.

validate(Contract, raw) returns a typed contract instance or raises
errors.ValidationError whose `fields` are keyed by the camelCase form names,
so callers can show the message next to the right input.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, TypeVar, Union

import pydantic

from .errors import ValidationError

logger = logging.getLogger(__name__)

INVALID_FORM_MESSAGE = "Invalid form data. Please check the fields below."

C = TypeVar("C", bound=pydantic.BaseModel)


def field_errors(
    contract: type[pydantic.BaseModel], exc: pydantic.ValidationError
) -> dict[str, str]:
    """First message per top-level field, keyed by the field's form name."""
    fields: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        key = str(loc[0]) if loc else "__root__"
        info = contract.model_fields.get(key)
        if info is not None and info.alias:
            key = info.alias
        fields.setdefault(key, err.get("msg", "Invalid value."))
    return fields


def validate(
    contract: type[C],
    data: Union[C, Mapping[str, Any], None],
    *,
    message: Optional[str] = None,
) -> C:
    """Parse `data` into `contract`. Instances of the contract pass through."""
    if isinstance(data, contract):
        return data
    try:
        return contract.model_validate(dict(data or {}))
    except pydantic.ValidationError as exc:
        fields = field_errors(contract, exc)
        logger.info(
            "%s rejected input: %s", contract.__name__, ", ".join(sorted(fields))
        )
        raise ValidationError(message or INVALID_FORM_MESSAGE, fields) from exc
