"""Decoding of Kodik response envelopes.

Every endpoint answers with either its success payload or
``{"error": "<message>"}``. There is no discriminant field, so the success
shape is tried first and the error shape second.
"""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from kodik.core.errors import KodikApiError, MalformedResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ErrorEnvelope(BaseModel):
    """Error variant of a response envelope."""

    error: str


def decode_envelope(
    payload: Any, response_model: Type[T], status_code: int | None = None
) -> T | ErrorEnvelope:
    """Classify a decoded JSON payload as success or error.

    Raises:
        MalformedResponseError: If the payload fits neither shape.
    """
    try:
        return response_model.model_validate(payload)
    except ValidationError as success_exc:
        try:
            return ErrorEnvelope.model_validate(payload)
        except ValidationError:
            raise MalformedResponseError(
                f"Response does not match {response_model.__name__} "
                f"or an error payload: {success_exc}",
                success_exc,
                status_code=status_code,
            ) from success_exc


def unwrap_envelope(
    payload: Any, response_model: Type[T], status_code: int | None = None
) -> T:
    """Decode a payload and raise ``KodikApiError`` for the error variant."""
    result = decode_envelope(payload, response_model, status_code)
    if isinstance(result, ErrorEnvelope):
        logger.error("Kodik returned an error: %s", result.error)
        raise KodikApiError(result.error)
    return result
