"""HTTP engine: the only part of the gateway that talks to the network."""

import mimetypes
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

import httpx

from shnetwork._internal.http import DEFAULT_TIMEOUT, create_http_client


class HttpEngine(Protocol):
    """Asynchronous transport used by the gateway.

    Every method sends exactly one request and returns the response, whatever
    its status code. Transport failures raise httpx exceptions.
    """

    async def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> httpx.Response: ...

    async def send_multipart(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        fields: Mapping[str, str],
        files: Mapping[str, Path],
    ) -> httpx.Response: ...

    async def send_bytes(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        content: bytes,
    ) -> httpx.Response: ...


def _without_content_type(headers: Mapping[str, str]) -> dict[str, str]:
    return {key: value for key, value in headers.items() if key.lower() != "content-type"}


def _encode_headers(headers: Mapping[str, str]) -> dict[str, bytes]:
    """Header values as UTF-8 bytes; httpx only encodes str values as ASCII."""
    return {key: value.encode("utf-8") for key, value in headers.items()}


class HttpxEngine:
    """HttpEngine backed by httpx.

    A fresh ``httpx.AsyncClient`` is opened for each request and closed when
    the response has been read.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            timeout: Request timeout in seconds.
            transport: Optional transport override, mainly for tests.
        """
        self._timeout = timeout
        self._transport = transport

    async def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> httpx.Response:
        """Send a request with an optional pre-encoded JSON body.

        A body without a Content-Type header is labelled application/json.
        """
        headers = dict(headers)
        if body is not None and not any(key.lower() == "content-type" for key in headers):
            headers["Content-Type"] = "application/json"
        async with create_http_client(timeout=self._timeout, transport=self._transport) as client:
            return await client.request(method, url, headers=_encode_headers(headers), content=body)

    async def send_multipart(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        fields: Mapping[str, str],
        files: Mapping[str, Path],
    ) -> httpx.Response:
        """Send a multipart/form-data request.

        Text fields become UTF-8 parts. Each file is read from disk and sent
        under its own name, with a content type guessed from the suffix. Any
        Content-Type header is dropped so httpx can set the multipart boundary.
        """
        file_parts = {}
        for name, path in files.items():
            content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
            file_parts[name] = (path.name, path.read_bytes(), content_type)

        async with create_http_client(timeout=self._timeout, transport=self._transport) as client:
            return await client.request(
                method,
                url,
                headers=_encode_headers(_without_content_type(headers)),
                data=dict(fields),
                files=file_parts,
            )

    async def send_bytes(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        content: bytes,
    ) -> httpx.Response:
        async with create_http_client(timeout=self._timeout, transport=self._transport) as client:
            return await client.request(
                method, url, headers=_encode_headers(headers), content=content
            )
