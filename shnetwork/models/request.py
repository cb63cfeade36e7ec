"""Pydantic models describing a single gateway request."""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Constants
# =============================================================================

HTTPMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Methods whose parameters travel in the query string instead of a JSON body.
QUERY_METHODS: frozenset[str] = frozenset({"GET"})

# =============================================================================
# Targets
# =============================================================================


class RelativeToBase(BaseModel):
    """A path appended verbatim to the gateway's base URL."""

    path: str

    model_config = {"frozen": True}

    def resolve(self, base_url: str) -> str:
        return base_url + self.path


class Absolute(BaseModel):
    """A fully-qualified URL; the base URL is ignored."""

    url: str

    model_config = {"frozen": True}

    def resolve(self, base_url: str) -> str:
        return self.url


Target = RelativeToBase | Absolute


def as_target(target: "str | Target") -> Target:
    """Treat a bare string as a path relative to the base URL."""
    if isinstance(target, str):
        return RelativeToBase(path=target)
    return target


# =============================================================================
# Request Spec
# =============================================================================


class RequestSpec(BaseModel):
    """Everything the gateway needs to build and send one request.

    Required fields:
        target: Where to send the request (relative path or absolute URL)

    Optional fields:
        method: HTTP method, case-insensitive (default: GET)
        params: Query parameters for GET, JSON body for other methods
        query: Raw query string, used instead of params for GET
        files: Multipart attachments, form field name -> file path
        content: Raw request body, sent as-is instead of params
        sanitize: Drop empty-string and non-scalar params before sending
        headers: Per-call headers, win over defaults on key collision
        base_headers: Replaces the default headers as the base of the merge
        only_custom_headers: Send ``headers`` alone, without any defaults
    """

    target: Target
    method: HTTPMethod = "GET"
    params: dict[str, Any] | None = None
    query: str | None = None
    files: dict[str, Path] = Field(default_factory=dict)
    content: bytes | None = None
    sanitize: bool = False
    headers: dict[str, str] = Field(default_factory=dict)
    base_headers: dict[str, str] | None = None
    only_custom_headers: bool = False

    model_config = {"frozen": True}

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def uses_query(self) -> bool:
        return self.method in QUERY_METHODS
