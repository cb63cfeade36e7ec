"""SHNetwork for Python.

A gateway over httpx with a shared base URL, shared default headers and
per-call overrides. Responses come back as raw bytes, an untyped JSON
document, or a document decoded into a caller-supplied type.

Public API:
    NetworkGateway - Configuration holder and request dispatcher
    get_gateway - Process-wide NetworkGateway
    RequestSpec, Target, ResultKind, Result - Request and response models
"""

from shnetwork._internal.codec import json_to_string
from shnetwork._internal.params import build_query_string, merge_headers, sanitize
from shnetwork._version import __version__
from shnetwork.client import NetworkGateway, get_gateway
from shnetwork.exceptions import (
    DecodeError,
    GatewayError,
    InvalidResponseError,
    RequestBuildError,
    UnknownError,
    create_custom_error,
)
from shnetwork.models import (
    RAW_BYTES,
    UNTYPED_DOCUMENT,
    Absolute,
    RawBytes,
    RelativeToBase,
    RequestSpec,
    Result,
    ResultKind,
    Target,
    TypedDocument,
    UntypedDocument,
)

__all__ = [
    "__version__",
    "NetworkGateway",
    "get_gateway",
    "RequestSpec",
    "Target",
    "RelativeToBase",
    "Absolute",
    "Result",
    "ResultKind",
    "RawBytes",
    "UntypedDocument",
    "TypedDocument",
    "RAW_BYTES",
    "UNTYPED_DOCUMENT",
    "GatewayError",
    "InvalidResponseError",
    "DecodeError",
    "UnknownError",
    "RequestBuildError",
    "create_custom_error",
    "sanitize",
    "build_query_string",
    "merge_headers",
    "json_to_string",
]
