"""
http-builder - fluent HTTP request builder and shortcuts over httpx
"""

__version__ = "0.1.0"

from . import headers
from .coercion import coerce_to_string
from .config import ClientConfig, TimeoutConfig, resolve_config
from .core.request import RequestBuilder
from .core.transport import close_default_client, create_client, get_default_client, set_default_client
from .errors import (
    BuildError,
    HttpBuilderError,
    InvalidMethodError,
    InvalidURLError,
    RequestPanic,
    StatusError,
    must,
)
from .shortcuts import (
    delete,
    delete_binary,
    delete_binary_with_headers,
    delete_with_headers,
    get,
    get_binary,
    get_binary_with_headers,
    get_with_headers,
    must_delete,
    must_delete_binary,
    must_delete_binary_with_headers,
    must_delete_with_headers,
    must_get,
    must_get_binary,
    must_get_binary_with_headers,
    must_get_with_headers,
    must_post,
    must_post_binary,
    must_post_binary_with_headers,
    must_post_with_headers,
    must_put,
    must_put_binary,
    must_put_binary_with_headers,
    must_put_with_headers,
    post,
    post_binary,
    post_binary_with_headers,
    post_with_headers,
    put,
    put_binary,
    put_binary_with_headers,
    put_with_headers,
)
from .types import BinaryBody, FormBody, ReaderBody, StringBody

__all__ = [
    "headers",
    "coerce_to_string",
    "ClientConfig", "TimeoutConfig", "resolve_config",
    "RequestBuilder",
    "create_client", "get_default_client", "set_default_client", "close_default_client",
    "HttpBuilderError", "BuildError", "InvalidMethodError", "InvalidURLError",
    "StatusError", "RequestPanic", "must",
    "StringBody", "BinaryBody", "ReaderBody", "FormBody",
    "get", "get_with_headers", "get_binary", "get_binary_with_headers",
    "must_get", "must_get_with_headers", "must_get_binary", "must_get_binary_with_headers",
    "post", "post_with_headers", "post_binary", "post_binary_with_headers",
    "must_post", "must_post_with_headers", "must_post_binary", "must_post_binary_with_headers",
    "put", "put_with_headers", "put_binary", "put_binary_with_headers",
    "must_put", "must_put_with_headers", "must_put_binary", "must_put_binary_with_headers",
    "delete", "delete_with_headers", "delete_binary", "delete_binary_with_headers",
    "must_delete", "must_delete_with_headers", "must_delete_binary", "must_delete_binary_with_headers",
]
