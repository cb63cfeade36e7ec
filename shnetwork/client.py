"""NetworkGateway: shared configuration plus request dispatch.

Example:
    from shnetwork import NetworkGateway, UNTYPED_DOCUMENT

    gateway = NetworkGateway()
    gateway.initialise("https://api.example.com")
    gateway.set_global_header("Authorization", "Bearer abc")

    result = await gateway.get("/users", {"page": 1}, kind=UNTYPED_DOCUMENT)
    if result.ok:
        print(result.value["users"])
"""

import os
import sys
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from shnetwork._internal.codec import encode_json_body, reshape
from shnetwork._internal.config import GatewayConfig
from shnetwork._internal.engine import HttpEngine, HttpxEngine
from shnetwork._internal.http import DEFAULT_TIMEOUT
from shnetwork._internal.params import (
    append_query,
    build_query_string,
    merge_headers,
    percent_encode_url,
    render_value,
    sanitize,
)
from shnetwork.exceptions import GatewayError, RequestBuildError
from shnetwork.models import (
    RAW_BYTES,
    Absolute,
    RequestSpec,
    Result,
    ResultKind,
    Target,
    as_target,
)

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)

Completion = Callable[[Result[Any]], None]

# Failures that are reported through Result instead of being raised.
ENGINE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, OSError)


class NetworkGateway:
    """Configuration holder and request dispatcher.

    Every dispatch method returns a Result and never raises for request
    failures: transport errors, decode errors and request-build errors all
    come back as ``Result(ok=False, error=...)``. When ``on_complete`` is
    given it is called exactly once with that same Result.

    Use `NetworkGateway.from_env()` to create a gateway from environment
    variables, or `get_gateway()` for the process-wide instance.
    """

    def __init__(
        self,
        *,
        config: GatewayConfig | None = None,
        engine: HttpEngine | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the gateway.

        Args:
            config: Shared configuration. A fresh default config if omitted.
            engine: Transport to delegate requests to. An HttpxEngine if omitted.
            timeout_ms: Request timeout in milliseconds for the default engine.
            debug: Enable debug logging to stderr.
        """
        self._config = config or GatewayConfig()
        self._timeout_ms = timeout_ms
        self._engine = engine or HttpxEngine(timeout=timeout_ms / 1000)
        self._debug = debug

    @classmethod
    def from_env(cls) -> "NetworkGateway":
        """Create a gateway from environment variables.

        Optional environment variables:
            SHNETWORK_BASE_URL: Base URL for relative request paths.
            SHNETWORK_DEBUG: Set to "1" to enable debug logging.
            SHNETWORK_TIMEOUT_MS: Request timeout in milliseconds.

        Returns:
            A configured NetworkGateway.
        """
        debug = os.environ.get("SHNETWORK_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("SHNETWORK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            config=GatewayConfig.from_env(),
            timeout_ms=timeout_ms,
            debug=debug,
        )

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[shnetwork] {message}", file=sys.stderr)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def default_headers(self) -> dict[str, str]:
        """Copy of the current default headers."""
        return self._config.default_headers

    def initialise(
        self, base_url: str, default_headers: Mapping[str, str] | None = None
    ) -> None:
        """Set the base URL and, if a non-empty map is given, the default headers.

        The URL is not validated; a malformed one surfaces as a failed Result
        on the first request.
        """
        self._config.initialise(base_url, default_headers)
        self._log_debug(f"Initialised with base URL {base_url!r}")

    def set_global_header(self, key: str, value: str) -> None:
        """Set a default header. Setting it to "" removes it."""
        self._config.set_header(key, value)

    def remove_global_header(self, key: str) -> None:
        """Remove a default header. Removing a missing header does nothing."""
        self._config.remove_header(key)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _resolve_headers(self, spec: RequestSpec, defaults: dict[str, str]) -> dict[str, str]:
        if spec.only_custom_headers:
            return dict(spec.headers)
        base = spec.base_headers if spec.base_headers is not None else defaults
        return merge_headers(base, spec.headers)

    async def dispatch(
        self,
        spec: RequestSpec,
        kind: ResultKind = RAW_BYTES,
        on_complete: Completion | None = None,
    ) -> Result[Any]:
        """Build, send and reshape a single request.

        This is the core dispatch method. All other request methods call this.

        Args:
            spec: The request to send.
            kind: How to reshape the response body.
            on_complete: Optional callback, called once with the Result.

        Returns:
            The Result of the call.
        """
        result = await self._dispatch(spec, kind)
        if on_complete is not None:
            on_complete(result)
        return result

    async def _dispatch(self, spec: RequestSpec, kind: ResultKind) -> Result[Any]:
        base_url, defaults = self._config.snapshot()
        url = spec.target.resolve(base_url)
        headers = self._resolve_headers(spec, defaults)
        params = spec.params
        if params is not None and spec.sanitize:
            params = sanitize(params)

        try:
            if spec.files:
                fields = {key: render_value(value) for key, value in (params or {}).items()}
                self._log_debug(f"{spec.method} {url} (multipart, {len(spec.files)} files)")
                response = await self._engine.send_multipart(
                    url, spec.method, headers, fields, spec.files
                )
            elif spec.content is not None:
                self._log_debug(f"{spec.method} {url} (upload, {len(spec.content)} bytes)")
                response = await self._engine.send_bytes(url, spec.method, headers, spec.content)
            elif spec.uses_query:
                query = spec.query if spec.query is not None else build_query_string(params or {})
                url = percent_encode_url(append_query(url, query))
                self._log_debug(f"{spec.method} {url}")
                response = await self._engine.send(url, spec.method, headers)
            else:
                body = encode_json_body(params) if params is not None else None
                self._log_debug(f"{spec.method} {url}")
                response = await self._engine.send(url, spec.method, headers, body)
        except UnicodeEncodeError as e:
            # Header names must be ASCII.
            error = RequestBuildError(f"Cannot encode request: {e.reason}")
            error.__cause__ = e
            self._log_debug(f"{spec.method} {url} failed: {error!r}")
            return Result.failure(error)
        except (GatewayError, *ENGINE_ERRORS) as e:
            self._log_debug(f"{spec.method} {url} failed: {e!r}")
            return Result.failure(e)

        return self._reshape(response, kind)

    def _reshape(self, response: httpx.Response, kind: ResultKind) -> Result[Any]:
        self._log_debug(f"Received {response.status_code} ({len(response.content)} bytes)")
        try:
            value = reshape(response.content, kind)
        except (GatewayError, ValidationError) as e:
            self._log_debug(f"Reshape failed: {e!r}")
            return Result.failure(e, status_code=response.status_code)
        return Result.success(value, status_code=response.status_code)

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    async def get(
        self,
        target: str | Target,
        params: Mapping[str, Any] | None = None,
        *,
        query: str | None = None,
        headers: Mapping[str, str] | None = None,
        kind: ResultKind = RAW_BYTES,
        on_complete: Completion | None = None,
    ) -> Result[Any]:
        """Send a GET request; params are serialized into the query string.

        Args:
            target: Path relative to the base URL, or a Target.
            params: Query parameters. Empty-string values are skipped.
            query: Raw query string, used instead of params.
            headers: Per-call headers, merged over the defaults.
            kind: How to reshape the response body.
            on_complete: Optional callback, called once with the Result.

        Returns:
            The Result of the call.
        """
        spec = RequestSpec(
            target=as_target(target),
            method="GET",
            params=dict(params) if params is not None else None,
            query=query,
            headers=dict(headers or {}),
        )
        return await self.dispatch(spec, kind, on_complete)

    async def post(
        self,
        target: str | Target,
        params: Mapping[str, Any] | None = None,
        *,
        files: Mapping[str, str | Path] | None = None,
        sanitize: bool = False,
        headers: Mapping[str, str] | None = None,
        kind: ResultKind = RAW_BYTES,
        on_complete: Completion | None = None,
    ) -> Result[Any]:
        """Send a POST request with a JSON body, or multipart when files are given."""
        return await self.request(
            "POST",
            target,
            params,
            files=files,
            sanitize=sanitize,
            headers=headers,
            kind=kind,
            on_complete=on_complete,
        )

    async def request(
        self,
        method: str,
        target: str | Target,
        params: Mapping[str, Any] | None = None,
        *,
        files: Mapping[str, str | Path] | None = None,
        sanitize: bool = False,
        headers: Mapping[str, str] | None = None,
        base_headers: Mapping[str, str] | None = None,
        kind: ResultKind = RAW_BYTES,
        on_complete: Completion | None = None,
    ) -> Result[Any]:
        """Send a request with any HTTP method.

        Args:
            method: HTTP method, case-insensitive.
            target: Path relative to the base URL, or a Target.
            params: JSON body (query string for GET).
            files: Multipart attachments, form field name -> file path.
            sanitize: Drop empty-string and non-scalar params before sending.
            headers: Per-call headers, merged over the base headers.
            base_headers: Headers to merge over instead of the defaults.
            kind: How to reshape the response body.
            on_complete: Optional callback, called once with the Result.

        Returns:
            The Result of the call.
        """
        spec = RequestSpec(
            target=as_target(target),
            method=method,
            params=dict(params) if params is not None else None,
            files=dict(files or {}),
            sanitize=sanitize,
            headers=dict(headers or {}),
            base_headers=dict(base_headers) if base_headers is not None else None,
        )
        return await self.dispatch(spec, kind, on_complete)

    async def upload_media(
        self,
        url: str,
        method: str,
        data: bytes,
        headers: Mapping[str, str] | None = None,
        *,
        use_only_custom_headers: bool = False,
        kind: ResultKind = RAW_BYTES,
        on_complete: Completion | None = None,
    ) -> Result[Any]:
        """Upload raw bytes as the request body to a complete URL.

        Args:
            url: Fully-qualified destination URL.
            method: HTTP method, case-insensitive.
            data: The bytes to send.
            headers: Per-call headers.
            use_only_custom_headers: Send only ``headers``, without the defaults.
            kind: How to reshape the response body.
            on_complete: Optional callback, called once with the Result.

        Returns:
            The Result of the call.
        """
        spec = RequestSpec(
            target=Absolute(url=url),
            method=method,
            headers=dict(headers or {}),
            content=data,
            only_custom_headers=use_only_custom_headers,
        )
        return await self.dispatch(spec, kind, on_complete)


_shared_gateway: NetworkGateway | None = None
_shared_lock = threading.Lock()


def get_gateway() -> NetworkGateway:
    """Get the process-wide gateway, created from environment variables on first use.

    Every caller shares its configuration: ``initialise`` or
    ``set_global_header`` on the returned gateway affects all of them.

    Returns:
        The shared NetworkGateway instance.
    """
    global _shared_gateway
    with _shared_lock:
        if _shared_gateway is None:
            _shared_gateway = NetworkGateway.from_env()
        return _shared_gateway
