from __future__ import annotations
import logging
from functools import lru_cache
from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodingFailedError
from .models import Envelope

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode_first(body: bytes, *candidates: Any) -> Any:
    """Validate ``body`` against each candidate type in turn.

    Returns the first successful result. When every candidate fails, raises
    DecodingFailedError wrapping the last ValidationError; every
    attempt's error is kept on ``attempts``.
    """
    if not candidates:
        raise ValueError('at least one candidate type is required')
    errors: List[ValidationError] = []
    for tp in candidates:
        try:
            return _adapter(tp).validate_json(body)
        except ValidationError as e:
            logger.debug('Body did not match %s (%d errors)', tp, e.error_count())
            errors.append(e)
    raise DecodingFailedError(errors[-1], errors) from errors[-1]


def decode_entries(body: bytes, response_type: Any) -> Any:
    """Decode ``{"entries": response_type}``, falling back to a bare ``response_type``."""
    decoded = decode_first(body, Envelope[response_type], response_type)
    if isinstance(decoded, Envelope):
        return decoded.entries
    return decoded
