"""Parameter sanitization, query strings and header merging."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from shnetwork.exceptions import RequestBuildError

# Characters left untouched when percent-encoding a URL (the URL fragment set).
URL_FRAGMENT_SAFE = "!$&'()*+,-./:;=?@_~"

_SCALAR_TYPES = (bool, int, float)


def sanitize(params: Mapping[str, Any]) -> dict[str, Any]:
    """Drop empty-string and non-scalar values from a parameter map.

    Numbers and booleans are always kept, including ``0`` and ``False``.

    Args:
        params: The parameters to filter. Never mutated.

    Returns:
        A new dict with non-empty strings, numbers and booleans only.
    """
    result: dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, str):
            if value != "":
                result[key] = value
        elif isinstance(value, _SCALAR_TYPES):
            result[key] = value
    return result


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Drop headers whose value is an empty string."""
    return {key: value for key, value in headers.items() if value != ""}


def merge_headers(
    base: Mapping[str, str], overrides: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Shallow-merge two header maps; ``overrides`` wins on key collision."""
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


def render_value(value: Any) -> str:
    """Render one parameter value as query or form-field text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Serialize params as ``key=value`` pairs joined by ``&``.

    Entries whose rendered value is empty are skipped. Values are not escaped
    here; the whole URL is percent-encoded once it is assembled.
    """
    pairs = []
    for key, value in params.items():
        rendered = render_value(value)
        if rendered != "":
            pairs.append(f"{key}={rendered}")
    return "&".join(pairs)


def append_query(url: str, query: str) -> str:
    """Append ``query`` to ``url``; no ``?`` is added for an empty query."""
    if not query:
        return url
    return f"{url}?{query}"


def percent_encode_url(url: str) -> str:
    """Percent-encode every character outside the URL fragment set.

    Raises:
        RequestBuildError: If the URL has no valid UTF-8 encoding.
    """
    try:
        return quote(url, safe=URL_FRAGMENT_SAFE)
    except UnicodeEncodeError as e:
        raise RequestBuildError(f"Cannot percent-encode URL: {e.reason}") from e
