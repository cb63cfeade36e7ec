"""Result kinds: how a response body is reshaped before it reaches the caller."""

from typing import Any, Literal

from pydantic import BaseModel


class RawBytes(BaseModel):
    """Return the response body unchanged, as bytes."""

    kind: Literal["raw_bytes"] = "raw_bytes"

    model_config = {"frozen": True}


class UntypedDocument(BaseModel):
    """Decode the response body as a JSON object into a plain dict."""

    kind: Literal["untyped_document"] = "untyped_document"

    model_config = {"frozen": True}


class TypedDocument(BaseModel):
    """Decode the response body into ``decode_as``.

    ``decode_as`` is any type pydantic can validate JSON into: a BaseModel
    subclass, ``list[SomeModel]``, a TypedDict, and so on.
    """

    kind: Literal["typed_document"] = "typed_document"
    decode_as: Any

    model_config = {"frozen": True}


ResultKind = RawBytes | UntypedDocument | TypedDocument

RAW_BYTES = RawBytes()
UNTYPED_DOCUMENT = UntypedDocument()
