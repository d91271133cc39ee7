"""
Fluent request builder on top of httpx.
"""
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union
from urllib.parse import urlencode

import httpx

from ..coercion import coerce_to_string
from ..errors import InvalidMethodError, InvalidURLError, StatusError, must
from ..headers import CONTENT_TYPE, canonical_header_key, is_token
from ..types import (
    FORM_CONTENT_TYPE,
    BinaryBody,
    Body,
    FormBody,
    MultiDict,
    ParamMap,
    ParamValue,
    Reader,
    ReaderBody,
    StringBody,
)
from .transport import get_default_client

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[RequestBuilder]"
READ_CHUNK_SIZE = 64 * 1024
MAX_LOGGED_BODY = 5000


def encode_values(values: MultiDict) -> str:
    """
    Encode a multi-map as application/x-www-form-urlencoded, sorted by key.
    Values of the same key keep their insertion order.
    """
    pairs = [(key, value) for key in sorted(values) for value in values[key]]
    return urlencode(pairs)


def format_body(body: Body) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, BinaryBody):
        return f"<binary data: {len(body.value)} bytes>"
    if isinstance(body, ReaderBody):
        return "<drained stream>" if body.drained else "<stream>"
    if isinstance(body, FormBody):
        text = encode_values(body.values)
    else:
        text = body.value
    if len(text) > MAX_LOGGED_BODY:
        return text[:MAX_LOGGED_BODY] + "... (truncated)"
    return text


def _close_reader(body: ReaderBody) -> None:
    body.drained = True
    close = getattr(body.reader, "close", None)
    if callable(close):
        close()


def _iter_reader(body: ReaderBody) -> Iterator[bytes]:
    """Drain the reader in chunks, closing it when done."""
    reader = body.reader
    try:
        while True:
            chunk = reader.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            yield chunk
    finally:
        _close_reader(body)


class RequestBuilder:
    """
    Fluent builder for a single HTTP request.

    Query strings and headers are multi-valued and never overwritten. The body
    is one of string/bytes/reader/form; setting one replaces the others,
    except that form fields accumulate.
    """

    def __init__(self, method: str, base_url: str, client: Optional[httpx.Client] = None):
        self.method = method
        self._base_url = base_url
        self._client = client

        self._query: MultiDict = {}
        self._headers: List[Tuple[str, str]] = []
        self._body: Body = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def body(self) -> Body:
        return self._body

    def url(self) -> str:
        """Return the whole URL, including all added query strings."""
        query_string = encode_values(self._query)
        if not query_string:
            return self._base_url

        separator = "&" if "?" in self._base_url else "?"
        return self._base_url + separator + query_string

    def with_query(self, name: str, value: ParamValue) -> "RequestBuilder":
        """Append a query string parameter. Non-string values are converted to strings."""
        self._query.setdefault(name, []).append(coerce_to_string(value))
        return self

    def with_queries(self, values: ParamMap) -> "RequestBuilder":
        """Append a group of query string parameters. None is ignored."""
        if values is None:
            return self

        for name, value in values.items():
            self.with_query(name, value)
        return self

    def with_header(self, name: str, value: ParamValue) -> "RequestBuilder":
        """
        Append a header. The name is converted to the Header-Naming-Style when
        the request is built.
        """
        self._headers.append((name, coerce_to_string(value)))
        return self

    def with_headers(self, values: ParamMap) -> "RequestBuilder":
        """Append a group of headers. None is ignored."""
        if values is None:
            return self

        for name, value in values.items():
            self.with_header(name, value)
        return self

    def with_form(self, name: str, value: ParamValue) -> "RequestBuilder":
        """
        Append a form field and set Content-Type to
        'application/x-www-form-urlencoded'. A body that is not a form is replaced.
        """
        form = self._ensure_form()
        form.values.setdefault(name, []).append(coerce_to_string(value))
        return self

    def with_forms(self, values: ParamMap) -> "RequestBuilder":
        """
        Append a group of form fields. Even when values is None the body is
        switched to a form and Content-Type is set.
        """
        form = self._ensure_form()

        if values is None:
            return self

        for name, value in values.items():
            form.values.setdefault(name, []).append(coerce_to_string(value))
        return self

    def set_string_body(self, body: str) -> "RequestBuilder":
        """Set a string as the request body, replacing any other body."""
        self._body = StringBody(body)
        return self

    def set_binary_body(self, body: Union[bytes, bytearray]) -> "RequestBuilder":
        """Set bytes as the request body, replacing any other body."""
        self._body = BinaryBody(bytes(body))
        return self

    def set_reader_body(self, reader: Reader) -> "RequestBuilder":
        """
        Set a readable stream as the request body, replacing any other body.

        The stream is drained by the first request and closed afterwards if it
        has a close() method. Later requests send an empty body until a new
        reader is set.
        """
        self._body = ReaderBody(reader)
        return self

    def build(self) -> httpx.Request:
        """
        Return an httpx.Request with all options set on the builder.

        String, bytes and form bodies can be built any number of times; a
        reader body only yields its content once. httpx upper-cases the
        method, so "patch" is sent as "PATCH".
        """
        method = self.method or "GET"
        if not is_token(method):
            raise InvalidMethodError(method)

        url = self.url()
        try:
            return httpx.Request(
                method,
                url,
                headers=self._build_headers(),
                content=self._build_content(),
            )
        except httpx.InvalidURL as e:
            raise InvalidURLError(url, str(e)) from e

    def do(self) -> httpx.Response:
        """
        Execute the request and return the raw, unread response.

        The caller owns the response and must close it, e.g. with
        contextlib.closing().
        """
        request = self.build()
        client = self._client or get_default_client()

        logger.debug(f"{LOG_PREFIX} Request: {request.method} {request.url} body={format_body(self._body)}")

        try:
            response = client.send(request, stream=True)
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {request.method} {request.url}: {e}")
            self._release_reader()
            raise
        except Exception:
            self._release_reader()
            raise

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {response.reason_phrase}")
        return response

    def read_binary(self) -> bytes:
        """
        Execute the request and return the whole response body if the status is
        200 OK; otherwise raise StatusError. Use do() to get the body of a
        non-OK response.
        """
        return self._read_ok().content

    def read_string(self) -> str:
        """Same as read_binary(), decoding the body as text."""
        return self._read_ok().text

    def must_do(self) -> httpx.Response:
        """do() raising RequestPanic on any failure."""
        return must(self.do)

    def must_read_binary(self) -> bytes:
        """read_binary() raising RequestPanic on any failure."""
        return must(self.read_binary)

    def must_read_string(self) -> str:
        """read_string() raising RequestPanic on any failure."""
        return must(self.read_string)

    def _read_ok(self) -> httpx.Response:
        response = self.do()
        try:
            if response.status_code != httpx.codes.OK:
                logger.warning(
                    f"{LOG_PREFIX} Unexpected status {response.status_code} {response.reason_phrase} "
                    f"from {response.request.method} {response.request.url}"
                )
                raise StatusError(response.status_code, response.reason_phrase, str(response.request.url))
            response.read()
        finally:
            response.close()
        return response

    def _build_headers(self) -> List[Tuple[str, str]]:
        grouped: Dict[str, List[str]] = {}
        for name, value in self._headers:
            grouped.setdefault(canonical_header_key(name), []).append(value)
        return [(name, value) for name, values in grouped.items() for value in values]

    def _build_content(self) -> Any:
        body = self._body
        if body is None:
            return None
        if isinstance(body, StringBody):
            return body.value.encode("utf-8")
        if isinstance(body, BinaryBody):
            return body.value
        if isinstance(body, FormBody):
            return encode_values(body.values).encode("ascii")
        if body.drained:
            return b""
        return _iter_reader(body)

    def _release_reader(self) -> None:
        # The transport may fail before it pulls the body.
        if isinstance(self._body, ReaderBody) and not self._body.drained:
            _close_reader(self._body)

    def _set_header(self, name: str, value: str) -> None:
        key = canonical_header_key(name)
        self._headers = [(n, v) for n, v in self._headers if canonical_header_key(n) != key]
        self._headers.append((name, value))

    def _ensure_form(self) -> FormBody:
        self._set_header(CONTENT_TYPE, FORM_CONTENT_TYPE)

        if isinstance(self._body, FormBody):
            return self._body

        form = FormBody()
        self._body = form
        return form
