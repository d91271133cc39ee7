"""
Tests for the one-call shortcuts.
"""
import pytest
import respx

import http_builder as hb
from http_builder import RequestPanic, StatusError

URL = "https://example.com/api"
HEADERS = {"h1-header": "v1", "h2-header": 2}


def assert_headers(request):
    assert (b"H1-Header", b"v1") in request.headers.raw
    assert (b"H2-Header", b"2") in request.headers.raw


class TestGet:

    @respx.mock
    def test_get(self):
        route = respx.get(URL).respond(200, text="content")

        assert hb.get(URL) == "content"
        assert hb.get_binary(URL) == b"content"
        assert route.call_count == 2
        assert route.calls.last.request.method == "GET"

    @respx.mock
    def test_get_with_headers(self):
        route = respx.get(URL).respond(200, content=b"content")

        assert hb.get_with_headers(URL, HEADERS) == "content"
        assert_headers(route.calls.last.request)

        assert hb.get_binary_with_headers(URL, HEADERS) == b"content"
        assert_headers(route.calls.last.request)

    @respx.mock
    def test_get_with_none_headers(self):
        respx.get(URL).respond(200, text="content")
        assert hb.get_with_headers(URL, None) == "content"
        assert hb.must_get_binary_with_headers(URL, None) == b"content"

    @respx.mock
    def test_get_status_error(self):
        respx.get(URL).respond(404, text="missing")

        with pytest.raises(StatusError, match="404 Not Found"):
            hb.get(URL)
        with pytest.raises(StatusError):
            hb.get_binary(URL)

    @respx.mock
    def test_must_get(self):
        route = respx.get(URL).respond(200, text="content")

        assert hb.must_get(URL) == "content"
        assert hb.must_get_binary(URL) == b"content"
        assert hb.must_get_with_headers(URL, HEADERS) == "content"
        assert_headers(route.calls.last.request)

    @respx.mock
    def test_must_get_panics(self):
        respx.get(URL).respond(500)

        with pytest.raises(RequestPanic, match="500 Internal Server Error") as exc:
            hb.must_get(URL)
        assert exc.value.error.status_code == 500

        with pytest.raises(RequestPanic):
            hb.must_get_binary_with_headers(URL, HEADERS)


class TestPost:

    @respx.mock
    def test_post(self):
        route = respx.post(URL).respond(200, text="created")

        assert hb.post(URL, "body") == "created"
        assert route.calls.last.request.content == b"body"

        assert hb.post_binary(URL, b"\x00\x01") == b"created"
        assert route.calls.last.request.content == b"\x00\x01"

    @respx.mock
    def test_post_with_headers(self):
        route = respx.post(URL).respond(200, text="created")

        assert hb.post_with_headers(URL, "body", HEADERS) == "created"
        assert route.calls.last.request.content == b"body"
        assert_headers(route.calls.last.request)

        assert hb.post_binary_with_headers(URL, b"bin", HEADERS) == b"created"
        assert route.calls.last.request.content == b"bin"
        assert_headers(route.calls.last.request)

    @respx.mock
    def test_must_post(self):
        route = respx.post(URL).respond(200, text="created")

        assert hb.must_post(URL, "body") == "created"
        assert hb.must_post_with_headers(URL, "body", HEADERS) == "created"
        assert_headers(route.calls.last.request)
        assert hb.must_post_binary(URL, b"bin") == b"created"
        assert hb.must_post_binary_with_headers(URL, b"bin", HEADERS) == b"created"
        assert route.call_count == 4

    @respx.mock
    def test_post_errors(self):
        respx.post(URL).respond(400)

        with pytest.raises(StatusError, match="400 Bad Request"):
            hb.post(URL, "body")
        with pytest.raises(RequestPanic):
            hb.must_post_binary(URL, b"bin")


class TestPut:

    @respx.mock
    def test_put(self):
        route = respx.put(URL).respond(200, text="updated")

        assert hb.put(URL, "body") == "updated"
        assert hb.put_binary(URL, b"bin") == b"updated"
        assert route.calls.last.request.content == b"bin"

        assert hb.put_with_headers(URL, "body", HEADERS) == "updated"
        assert_headers(route.calls.last.request)
        assert hb.put_binary_with_headers(URL, b"bin", HEADERS) == b"updated"

    @respx.mock
    def test_must_put(self):
        route = respx.put(URL).respond(200, text="updated")

        assert hb.must_put(URL, "body") == "updated"
        assert hb.must_put_with_headers(URL, "body", HEADERS) == "updated"
        assert hb.must_put_binary(URL, b"bin") == b"updated"
        assert hb.must_put_binary_with_headers(URL, b"bin", HEADERS) == b"updated"
        assert route.call_count == 4

    @respx.mock
    def test_must_put_panics(self):
        respx.put(URL).respond(409)
        with pytest.raises(RequestPanic, match="409 Conflict"):
            hb.must_put(URL, "body")


class TestDelete:

    @respx.mock
    def test_delete(self):
        route = respx.delete(URL).respond(200, text="gone")

        assert hb.delete(URL) == "gone"
        assert hb.delete_binary(URL) == b"gone"
        assert hb.delete_with_headers(URL, HEADERS) == "gone"
        assert_headers(route.calls.last.request)
        assert hb.delete_binary_with_headers(URL, HEADERS) == b"gone"
        assert route.calls.last.request.method == "DELETE"

    @respx.mock
    def test_must_delete(self):
        respx.delete(URL).respond(200, text="gone")

        assert hb.must_delete(URL) == "gone"
        assert hb.must_delete_binary(URL) == b"gone"
        assert hb.must_delete_with_headers(URL, HEADERS) == "gone"
        assert hb.must_delete_binary_with_headers(URL, HEADERS) == b"gone"

    @respx.mock
    def test_delete_status_error(self):
        respx.delete(URL).respond(204)

        with pytest.raises(StatusError, match="204 No Content"):
            hb.delete(URL)
        with pytest.raises(RequestPanic):
            hb.must_delete_binary(URL)
