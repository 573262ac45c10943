from __future__ import annotations

import json
from typing import Any, Mapping

from domain.models import EmptyErrorBody, ErrorBody, ErrorStringBody, FieldErrorsBody

GENERIC_SUBMIT_ERROR = "Ocurrió un error al enviar la postulación."


def parse_error_body(payload: Any) -> ErrorBody:
    """
    Classify a decoded rejection body.

    A ``details.fieldErrors`` mapping wins over a top-level ``error`` string
    whenever it is present, even if it turns out to hold no messages.
    """
    if not isinstance(payload, Mapping):
        return EmptyErrorBody()

    details = payload.get("details")
    if isinstance(details, Mapping):
        field_errors = details.get("fieldErrors")
        if isinstance(field_errors, Mapping):
            return FieldErrorsBody(
                field_errors={
                    str(name): _as_messages(messages)
                    for name, messages in field_errors.items()
                },
            )

    error = payload.get("error")
    if isinstance(error, str) and error:
        return ErrorStringBody(error=error)
    return EmptyErrorBody()


def derive_error_message(body: ErrorBody) -> str:
    if isinstance(body, FieldErrorsBody):
        first_messages = next(iter(body.field_errors.values()), ())
        if first_messages:
            return first_messages[0]
        return GENERIC_SUBMIT_ERROR
    if isinstance(body, ErrorStringBody):
        return body.error
    return GENERIC_SUBMIT_ERROR


def message_from_response_text(text: str) -> str:
    """Decode a rejection body and derive its user-facing message.

    Raises ``ValueError`` (``json.JSONDecodeError``) when the body is not JSON.
    """
    return derive_error_message(parse_error_body(json.loads(text)))


def _as_messages(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        return (raw,)
    if isinstance(raw, (list, tuple)):
        return tuple(str(item) for item in raw)
    return ()
