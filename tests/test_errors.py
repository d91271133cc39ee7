import pytest

from http_builder.errors import (
    BuildError,
    HttpBuilderError,
    InvalidMethodError,
    RequestPanic,
    StatusError,
    must,
)


def test_status_error_message():
    err = StatusError(404, "Not Found", "http://example.com")
    assert str(err) == "404 Not Found"
    assert err.status == "404 Not Found"
    assert err.status_code == 404
    assert err.url == "http://example.com"
    assert isinstance(err, HttpBuilderError)


def test_status_error_without_reason():
    assert str(StatusError(599, "")) == "599"


def test_build_error_hierarchy():
    err = InvalidMethodError("BAD METHOD")
    assert isinstance(err, BuildError)
    assert str(err) == "invalid method 'BAD METHOD'"


def test_must_returns_value():
    assert must(lambda a, b=0: a + b, 1, b=2) == 3


def test_must_converts_error():
    def fail():
        raise StatusError(500, "Internal Server Error")

    with pytest.raises(RequestPanic, match="500 Internal Server Error") as exc:
        must(fail)

    assert isinstance(exc.value.error, StatusError)
    assert exc.value.__cause__ is exc.value.error


def test_panic_of_message_less_error():
    with pytest.raises(RequestPanic, match="KeyError|'k'"):
        must(lambda: {}["k"])
