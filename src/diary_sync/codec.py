"""Codec between typed diary values and the service's JSON wire format."""

from __future__ import annotations

import json
from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .error_codes import ErrorCode
from .exceptions import DecodeError
from .models.diary import Confirmation, DiaryRecord, DiaryRequest, Page
from .models.fields import (
    VisibilityStatus,
    date_from_wire,
    date_to_wire,
    status_from_wire,
    status_to_wire,
)

JSON_CONTENT_TYPE = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_status(value: VisibilityStatus) -> str:
    """Encode a visibility status as its symbolic name."""
    return status_to_wire(value)


def decode_status(value: Any) -> VisibilityStatus:
    """Decode a visibility status symbol.

    Raises:
        DecodeError: If the value is not one of the known variant names
    """
    try:
        return status_from_wire(value)
    except ValueError as e:
        raise DecodeError(
            str(e), error_code=ErrorCode.DEC_UNKNOWN_STATUS.value
        ) from e


def encode_date(value: date) -> str:
    """Encode a calendar date as ``YYYY-MM-DD``."""
    return date_to_wire(value)


def decode_date(value: Any) -> date:
    """Decode an ISO calendar date.

    Raises:
        DecodeError: If the value is not an ISO calendar date
    """
    try:
        return date_from_wire(value)
    except ValueError as e:
        raise DecodeError(str(e), error_code=ErrorCode.DEC_INVALID_DATE.value) from e


def encode_request(request: DiaryRequest) -> bytes:
    """Serialize a diary request to the JSON body part."""
    return request.model_dump_json(by_alias=True).encode("utf-8")


def is_null_body(payload: bytes | str | None) -> bool:
    """True when a response carries no body at all (empty or JSON ``null``)."""
    if payload is None:
        return True
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")
    stripped = payload.strip()
    return not stripped or stripped == "null"


def _load_json(payload: bytes | str) -> Any:
    try:
        return json.loads(payload)
    except (ValueError, TypeError) as e:
        msg = f"Invalid JSON response: {e}"
        raise DecodeError(msg, error_code=ErrorCode.DEC_INVALID_JSON.value) from e


def _validate(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        msg = (
            f"Malformed {model.__name__} payload at '{location}': "
            f"{first.get('msg', str(e))}"
        )
        raise DecodeError(msg, context={"error_count": len(errors)}) from e


def decode_record(payload: bytes | str) -> DiaryRecord:
    """Decode a single diary record.

    Raises:
        DecodeError: If the payload is not a valid diary record
    """
    return _validate(DiaryRecord, _load_json(payload))


def decode_page(payload: bytes | str) -> Page[DiaryRecord]:
    """Decode one page of diary records.

    Raises:
        DecodeError: If the payload is not a valid page of records
    """
    return _validate(Page[DiaryRecord], _load_json(payload))


def decode_confirmation(payload: bytes | str) -> Confirmation:
    """Decode the acknowledgement object of delete/like calls.

    Raises:
        DecodeError: If the payload is not a JSON object
    """
    return _validate(Confirmation, _load_json(payload))


__all__ = [
    "JSON_CONTENT_TYPE",
    "decode_confirmation",
    "decode_date",
    "decode_page",
    "decode_record",
    "decode_status",
    "encode_date",
    "encode_request",
    "encode_status",
    "is_null_body",
]
