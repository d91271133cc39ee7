from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class HttpBuilderError(Exception):
    """Base exception for request building and reading errors."""
    pass


class BuildError(HttpBuilderError):
    """The request could not be constructed."""
    pass


class InvalidMethodError(BuildError):
    def __init__(self, method: str):
        super().__init__(f"invalid method {method!r}")
        self.method = method


class InvalidURLError(BuildError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class StatusError(HttpBuilderError):
    """The response status is not 200 OK. The message is the status line."""

    def __init__(self, status_code: int, reason_phrase: str, url: Optional[str] = None):
        status = f"{status_code} {reason_phrase}".rstrip()
        super().__init__(status)
        self.status = status
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.url = url


class RequestPanic(RuntimeError):
    """Raised by the must_* helpers in place of the original error."""

    def __init__(self, error: BaseException):
        super().__init__(str(error) or type(error).__name__)
        self.error = error


def must(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Call ``func`` and convert any exception it raises into ``RequestPanic``.

    The original exception is kept as ``error`` and as ``__cause__``.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        raise RequestPanic(e) from e
