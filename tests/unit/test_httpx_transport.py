# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from restclient import api
from restclient.config import HttpSettings
from restclient.errors import HttpIoError, HttpRequestError
from restclient.http.dispatch import execute
from restclient.http.httpx_transport import HttpxTransport
from restclient.http.models import Method, Response
from restclient.http.transport import create_default_transport


class FailingStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b"partial"
        raise httpx.ReadError("connection dropped")


def make_transport(handler, **settings):
    seen: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.Client(transport=httpx.MockTransport(recording_handler))
    return HttpxTransport(HttpSettings(**settings), client=client), seen


def test_get_sends_explicit_zero_content_length():
    transport, seen = make_transport(lambda request: httpx.Response(200, text="ok"), user_agent="UA/1.0")
    result = execute(Method.GET, "http://example.com/hot.json", transport=transport)
    assert isinstance(result, Response)
    request = seen[0]
    assert request.method == "GET"
    assert request.headers["Content-Length"] == "0"
    assert "Transfer-Encoding" not in request.headers
    assert "Content-Type" not in request.headers
    assert request.headers["User-Agent"] == "UA/1.0"
    assert request.content == b""


def test_post_sends_body_with_length_and_type():
    transport, seen = make_transport(lambda request: httpx.Response(201, text="created"))
    result = execute(Method.POST, "http://example.com/items", body='{"a":"é"}', content_type="application/json", transport=transport)
    assert result.code == 201
    request = seen[0]
    assert request.content == '{"a":"é"}'.encode("utf-8")
    assert request.headers["Content-Length"] == str(len('{"a":"é"}'.encode("utf-8")))
    assert request.headers["Content-Type"] == "application/json"


def test_query_params_reach_the_wire():
    transport, seen = make_transport(lambda request: httpx.Response(200))
    execute(Method.GET, "http://example.com/hot.json?limit=9", [("limit", "1"), ("q", "a&b")], transport=transport)
    assert seen[0].url.query == b"limit=1&q=a%26b"
    assert seen[0].url.path == "/hot.json"


def test_response_fields_are_normalized():
    def handler(request):
        return httpx.Response(
            404,
            headers=[("X-Multi", "1"), ("X-Multi", "2"), ("Content-Type", "application/json")],
            content=b'{"error":"missing"}',
        )

    transport, _ = make_transport(handler)
    result = execute(Method.GET, "http://example.com/missing", transport=transport)
    assert isinstance(result, Response)
    assert result.code == 404
    assert result.status == "Not Found"
    assert result.headers.get_list("x-multi") == ["1", "2"]
    assert result.body == '{"error":"missing"}'
    assert str(result) == result.body


def test_declared_charset_is_used_for_decoding():
    def handler(request):
        return httpx.Response(200, headers={"Content-Type": "text/plain; charset=iso-8859-1"}, content="café".encode("latin-1"))

    transport, _ = make_transport(handler)
    assert execute(Method.GET, "http://example.com/", transport=transport).body == "café"


def test_undecodable_body_is_an_io_error():
    def handler(request):
        return httpx.Response(200, headers={"Content-Type": "text/plain; charset=utf-8"}, content=b"\xff\xfe\xfa")

    transport, _ = make_transport(handler)
    result = execute(Method.GET, "http://example.com/", transport=transport)
    assert isinstance(result, HttpIoError)
    assert isinstance(result.error, UnicodeDecodeError)


def test_connection_drop_during_read_is_an_io_error():
    transport, _ = make_transport(lambda request: httpx.Response(200, stream=FailingStream()))
    result = execute(Method.GET, "http://example.com/", transport=transport)
    assert isinstance(result, HttpIoError)
    assert isinstance(result.error, httpx.ReadError)


def test_connect_failure_is_a_request_error():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    transport, _ = make_transport(handler)
    result = execute(Method.GET, "http://example.com/", transport=transport)
    assert isinstance(result, HttpRequestError)
    assert "connection refused" in str(result.error)


def test_write_failure_during_send_is_an_io_error():
    def handler(request):
        raise httpx.WriteError("broken pipe")

    transport, _ = make_transport(handler)
    result = execute(Method.PUT, "http://example.com/", body="data", content_type="text/plain", transport=transport)
    assert isinstance(result, HttpIoError)


@pytest.mark.parametrize("url", ["ftp://example.com/file", "file://host/etc/hosts"])
def test_unsupported_scheme_is_rejected_before_sending(url):
    transport, seen = make_transport(lambda request: httpx.Response(200))
    result = execute(Method.GET, url, transport=transport)
    assert isinstance(result, HttpRequestError)
    assert isinstance(result.error, httpx.UnsupportedProtocol)
    assert seen == []


def test_redirects_are_not_followed():
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "http://example.com/new"})
        return httpx.Response(200, text="moved")

    client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=False)
    transport = HttpxTransport(HttpSettings(), client=client)
    result = execute(Method.GET, "http://example.com/old", transport=transport)
    assert result.code == 301
    assert result.headers["location"] == "http://example.com/new"


def test_create_default_transport_uses_settings(monkeypatch):
    captured = {}

    class FakeClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)

        def close(self):
            captured["closed"] = True

    monkeypatch.setattr(httpx, "Client", FakeClient)
    with create_default_transport(HttpSettings(verify_ssl=False, user_agent="UA/2.0")) as transport:
        assert transport.settings.user_agent == "UA/2.0"
    assert captured["verify"] is False
    assert captured["follow_redirects"] is False
    assert captured["timeout"] is None
    assert captured["closed"] is True


def test_interleaved_query_params_keep_caller_order():
    transport, seen = make_transport(lambda request: httpx.Response(200))
    execute(Method.GET, "http://example.com/search", [("a", "1"), ("b", "2"), ("a", "3")], transport=transport)
    assert seen[0].url.query == b"a=1&b=2&a=3"


def test_interleaved_form_pairs_keep_caller_order():
    transport, seen = make_transport(lambda request: httpx.Response(200))
    api.post_with_params("http://example.com/form", [("b", "2"), ("a", "1"), ("b", "3")], transport=transport)
    assert seen[0].content == b"b=2&a=1&b=3"


def test_response_headers_are_read_only():
    transport, _ = make_transport(lambda request: httpx.Response(200, headers={"X-Test": "1"}))
    result = execute(Method.GET, "http://example.com/", transport=transport)
    with pytest.raises(TypeError):
        result.headers["X-Test"] = "2"
    assert result.headers["x-test"] == "1"
