"""Shared HTTP client configuration."""

import httpx

from shnetwork._version import __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"shnetwork/{__version__}"


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    The gateway resolves full URLs itself, so no base URL is set here.

    Args:
        timeout: Request timeout in seconds.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )
