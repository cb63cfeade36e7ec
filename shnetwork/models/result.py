"""Tagged outcome of a gateway call."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Success or failure of one request, delivered exactly once.

    On success ``value`` holds the reshaped body. On failure ``error`` holds
    the exception, unchanged: httpx errors from the engine, pydantic
    ValidationError from typed decoding, or a GatewayError subclass.
    ``status_code`` is set whenever a response was received.
    """

    ok: bool
    value: T | None = None
    error: BaseException | None = None
    status_code: int | None = None

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @classmethod
    def success(cls, value: Any, status_code: int | None = None) -> "Result[Any]":
        return cls(ok=True, value=value, status_code=status_code)

    @classmethod
    def failure(cls, error: BaseException, status_code: int | None = None) -> "Result[Any]":
        return cls(ok=False, error=error, status_code=status_code)

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
