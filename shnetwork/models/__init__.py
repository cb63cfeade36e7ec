"""Public models for the SHNetwork gateway."""

from shnetwork.models.request import (
    QUERY_METHODS,
    Absolute,
    HTTPMethod,
    RelativeToBase,
    RequestSpec,
    Target,
    as_target,
)
from shnetwork.models.result import Result
from shnetwork.models.result_kinds import (
    RAW_BYTES,
    UNTYPED_DOCUMENT,
    RawBytes,
    ResultKind,
    TypedDocument,
    UntypedDocument,
)

__all__ = [
    "QUERY_METHODS",
    "HTTPMethod",
    "Target",
    "RelativeToBase",
    "Absolute",
    "as_target",
    "RequestSpec",
    "Result",
    "ResultKind",
    "RawBytes",
    "UntypedDocument",
    "TypedDocument",
    "RAW_BYTES",
    "UNTYPED_DOCUMENT",
]
