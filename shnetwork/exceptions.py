"""Public exceptions for the SHNetwork gateway.

Transport failures are not wrapped: they reach the caller as the httpx
exception the engine raised.
"""


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class InvalidResponseError(GatewayError):
    """Response decoded, but is not the key-value document that was requested."""

    def __init__(self, message: str = "Response is not a key-value document") -> None:
        super().__init__(message)


class DecodeError(GatewayError):
    """Response bytes could not be parsed as JSON."""


class UnknownError(GatewayError):
    """Fallback error raised when no message is available."""

    def __init__(self, message: str = "Unknown error") -> None:
        super().__init__(message)


class RequestBuildError(GatewayError):
    """The request URL or body could not be built."""


def create_custom_error(message: str | None, code: int = 0) -> GatewayError:
    """Build an error carrying a message and a numeric code.

    Args:
        message: Human-readable message. ``None`` yields an UnknownError.
        code: Application-specific error code.

    Returns:
        A GatewayError, or UnknownError when there is no message.
    """
    if message is None:
        return UnknownError()
    return GatewayError(message, code=code)
