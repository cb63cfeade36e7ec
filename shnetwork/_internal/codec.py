"""JSON helpers and response reshaping per result kind."""

import json
from typing import Any

from pydantic import TypeAdapter

from shnetwork.exceptions import DecodeError, InvalidResponseError, RequestBuildError
from shnetwork.models.result_kinds import RawBytes, ResultKind, TypedDocument, UntypedDocument


def json_to_string(document: Any) -> str | None:
    """Pretty-print a JSON-serializable value; None if it cannot be serialized."""
    try:
        return json.dumps(document, indent=2)
    except (TypeError, ValueError):
        return None


def encode_json_body(document: Any) -> bytes:
    """Encode a request body as compact UTF-8 JSON.

    Raises:
        RequestBuildError: If the value cannot be represented as JSON.
    """
    try:
        text = json.dumps(document, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise RequestBuildError(f"Cannot encode request body: {e}") from e
    return text.encode("utf-8")


def decode_document(data: bytes) -> dict[str, Any]:
    """Parse bytes as a JSON object.

    Raises:
        DecodeError: If the bytes are not valid JSON.
        InvalidResponseError: If the JSON top-level value is not an object.
    """
    try:
        document = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise InvalidResponseError(
            f"Expected a JSON object, got {type(document).__name__}"
        )
    return document


def reshape(data: bytes, kind: ResultKind) -> Any:
    """Turn raw response bytes into the shape ``kind`` asks for.

    Typed decode failures raise pydantic's ValidationError unchanged.
    """
    if isinstance(kind, RawBytes):
        return data
    if isinstance(kind, UntypedDocument):
        return decode_document(data)
    if isinstance(kind, TypedDocument):
        return TypeAdapter(kind.decode_as).validate_json(data)
    raise TypeError(f"Unsupported result kind: {kind!r}")
