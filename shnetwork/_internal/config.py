"""Shared gateway configuration: base URL and default headers."""

import os
import threading
from collections.abc import Mapping

from shnetwork._internal.params import sanitize_headers

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


class GatewayConfig:
    """Base URL and default headers shared by every request of a gateway.

    All reads and writes go through one lock. Readers always get copies, so a
    request being built never sees a half-applied update and callers cannot
    mutate the stored state.
    """

    def __init__(
        self,
        base_url: str = "",
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._base_url = base_url
        self._headers = dict(default_headers) if default_headers else dict(DEFAULT_HEADERS)

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Create a config from environment variables.

        Optional environment variables:
            SHNETWORK_BASE_URL: Base URL prepended to relative request paths.
        """
        return cls(base_url=os.environ.get("SHNETWORK_BASE_URL", ""))

    @property
    def base_url(self) -> str:
        with self._lock:
            return self._base_url

    @property
    def default_headers(self) -> dict[str, str]:
        with self._lock:
            return dict(self._headers)

    def snapshot(self) -> tuple[str, dict[str, str]]:
        """Read base URL and default headers together, consistently."""
        with self._lock:
            return self._base_url, dict(self._headers)

    def initialise(
        self, base_url: str, default_headers: Mapping[str, str] | None = None
    ) -> None:
        """Set the base URL, and replace the default headers if any are given.

        An empty or missing header map leaves the current defaults untouched.
        """
        with self._lock:
            self._base_url = base_url
            if default_headers:
                self._headers = dict(default_headers)

    def set_header(self, key: str, value: str) -> None:
        """Set a default header. An empty value removes the header."""
        with self._lock:
            headers = dict(self._headers)
            headers[key] = value
            self._headers = sanitize_headers(headers)

    def remove_header(self, key: str) -> None:
        """Remove a default header. Missing keys are ignored."""
        with self._lock:
            headers = dict(self._headers)
            headers.pop(key, None)
            self._headers = sanitize_headers(headers)
