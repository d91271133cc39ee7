"""
Shortcuts to send HTTP requests in one call.

Each function builds a RequestBuilder and reads the whole response body. If the
status code is not 200 OK, the plain variants raise StatusError and the must_
variants raise RequestPanic.

Header maps may be None, in which case they are ignored. All header names are
converted to the Header-Naming-Style.
"""
from typing import Union

from .core.request import RequestBuilder
from .types import ParamMap

Binary = Union[bytes, bytearray]

# ==== GET ====


def get(url: str) -> str:
    """Send a GET request and return the response body as a string."""
    return RequestBuilder("GET", url).read_string()


def get_with_headers(url: str, headers: ParamMap) -> str:
    """Send a GET request with headers and return the response body as a string."""
    return RequestBuilder("GET", url).with_headers(headers).read_string()


def get_binary(url: str) -> bytes:
    """Send a GET request and return the response body as bytes."""
    return RequestBuilder("GET", url).read_binary()


def get_binary_with_headers(url: str, headers: ParamMap) -> bytes:
    """Send a GET request with headers and return the response body as bytes."""
    return RequestBuilder("GET", url).with_headers(headers).read_binary()


def must_get(url: str) -> str:
    return RequestBuilder("GET", url).must_read_string()


def must_get_with_headers(url: str, headers: ParamMap) -> str:
    return RequestBuilder("GET", url).with_headers(headers).must_read_string()


def must_get_binary(url: str) -> bytes:
    return RequestBuilder("GET", url).must_read_binary()


def must_get_binary_with_headers(url: str, headers: ParamMap) -> bytes:
    return RequestBuilder("GET", url).with_headers(headers).must_read_binary()


# ==== POST ====


def post(url: str, body: str) -> str:
    """Send a POST request with a string body and return the response body as a string."""
    return RequestBuilder("POST", url).set_string_body(body).read_string()


def post_with_headers(url: str, body: str, headers: ParamMap) -> str:
    """Send a POST request with a string body and headers."""
    return RequestBuilder("POST", url).with_headers(headers).set_string_body(body).read_string()


def post_binary(url: str, body: Binary) -> bytes:
    """Send a POST request with a binary body and return the response body as bytes."""
    return RequestBuilder("POST", url).set_binary_body(body).read_binary()


def post_binary_with_headers(url: str, body: Binary, headers: ParamMap) -> bytes:
    """Send a POST request with a binary body and headers."""
    return RequestBuilder("POST", url).with_headers(headers).set_binary_body(body).read_binary()


def must_post(url: str, body: str) -> str:
    return RequestBuilder("POST", url).set_string_body(body).must_read_string()


def must_post_with_headers(url: str, body: str, headers: ParamMap) -> str:
    return RequestBuilder("POST", url).with_headers(headers).set_string_body(body).must_read_string()


def must_post_binary(url: str, body: Binary) -> bytes:
    return RequestBuilder("POST", url).set_binary_body(body).must_read_binary()


def must_post_binary_with_headers(url: str, body: Binary, headers: ParamMap) -> bytes:
    return RequestBuilder("POST", url).with_headers(headers).set_binary_body(body).must_read_binary()


# ==== PUT ====


def put(url: str, body: str) -> str:
    """Send a PUT request with a string body and return the response body as a string."""
    return RequestBuilder("PUT", url).set_string_body(body).read_string()


def put_with_headers(url: str, body: str, headers: ParamMap) -> str:
    """Send a PUT request with a string body and headers."""
    return RequestBuilder("PUT", url).with_headers(headers).set_string_body(body).read_string()


def put_binary(url: str, body: Binary) -> bytes:
    """Send a PUT request with a binary body and return the response body as bytes."""
    return RequestBuilder("PUT", url).set_binary_body(body).read_binary()


def put_binary_with_headers(url: str, body: Binary, headers: ParamMap) -> bytes:
    """Send a PUT request with a binary body and headers."""
    return RequestBuilder("PUT", url).with_headers(headers).set_binary_body(body).read_binary()


def must_put(url: str, body: str) -> str:
    return RequestBuilder("PUT", url).set_string_body(body).must_read_string()


def must_put_with_headers(url: str, body: str, headers: ParamMap) -> str:
    return RequestBuilder("PUT", url).with_headers(headers).set_string_body(body).must_read_string()


def must_put_binary(url: str, body: Binary) -> bytes:
    return RequestBuilder("PUT", url).set_binary_body(body).must_read_binary()


def must_put_binary_with_headers(url: str, body: Binary, headers: ParamMap) -> bytes:
    return RequestBuilder("PUT", url).with_headers(headers).set_binary_body(body).must_read_binary()


# ==== DELETE ====


def delete(url: str) -> str:
    """Send a DELETE request and return the response body as a string."""
    return RequestBuilder("DELETE", url).read_string()


def delete_with_headers(url: str, headers: ParamMap) -> str:
    """Send a DELETE request with headers and return the response body as a string."""
    return RequestBuilder("DELETE", url).with_headers(headers).read_string()


def delete_binary(url: str) -> bytes:
    """Send a DELETE request and return the response body as bytes."""
    return RequestBuilder("DELETE", url).read_binary()


def delete_binary_with_headers(url: str, headers: ParamMap) -> bytes:
    """Send a DELETE request with headers and return the response body as bytes."""
    return RequestBuilder("DELETE", url).with_headers(headers).read_binary()


def must_delete(url: str) -> str:
    return RequestBuilder("DELETE", url).must_read_string()


def must_delete_with_headers(url: str, headers: ParamMap) -> str:
    return RequestBuilder("DELETE", url).with_headers(headers).must_read_string()


def must_delete_binary(url: str) -> bytes:
    return RequestBuilder("DELETE", url).must_read_binary()


def must_delete_binary_with_headers(url: str, headers: ParamMap) -> bytes:
    return RequestBuilder("DELETE", url).with_headers(headers).must_read_binary()
