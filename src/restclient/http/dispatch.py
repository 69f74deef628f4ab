# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request builder and dispatcher.

``execute`` turns a method, URL string, optional query pairs and optional body
into one outbound request, sends it, and returns either a ``Response`` or one
of the three error values from ``restclient.errors``. Errors are returned,
never raised, and nothing is retried.
"""

from __future__ import annotations

from contextlib import closing

import httpx

from ..errors import HttpIoError, HttpRequestError, UrlParseError
from .models import Body, FrozenHeaders, Method, Params, Response, Result
from .transport import Transport, create_default_transport
from .url import parse_url, set_query

# Native failures of the transport collaborator, by the step that raised them.
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, OSError, UnicodeEncodeError)
IO_ERRORS = (httpx.HTTPError, httpx.StreamError, OSError, UnicodeDecodeError)


def execute(
    method: Method | str,
    url: str,
    params: Params | None = None,
    body: Body | None = None,
    content_type: str | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """
    Issue a single HTTP request.

    When ``params`` is given it replaces any query embedded in ``url``. When
    ``transport`` is omitted a fresh default transport is used for this call only.
    """
    if not isinstance(method, Method):
        method = Method.from_string(method)

    try:
        target = parse_url(url)
        if params is not None:
            target = set_query(target, params)
    except httpx.InvalidURL as exc:
        return UrlParseError(exc)

    if transport is None:
        with closing(create_default_transport()) as owned:
            return _dispatch(owned, method, target, body, content_type)
    return _dispatch(transport, method, target, body, content_type)


def _encode_body(body: Body | None) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    raise TypeError(f"Request body must be str or bytes, not {type(body).__name__}")


def _dispatch(
    transport: Transport,
    method: Method,
    url: httpx.URL,
    body: Body | None,
    content_type: str | None,
) -> Result:
    try:
        # Text that cannot be encoded (lone surrogates) makes the request unbuildable.
        payload = _encode_body(body)
        request = transport.build_request(method, url)
        # Always explicit, even for bodyless requests: without it some servers
        # wait for a chunked body that never arrives.
        request.headers["Content-Length"] = str(len(payload) if payload is not None else 0)
        if content_type is not None:
            request.headers["Content-Type"] = content_type
    except REQUEST_ERRORS as exc:
        return HttpRequestError(exc)

    try:
        stream = transport.begin(request)
    except REQUEST_ERRORS as exc:
        return HttpRequestError(exc)

    if payload is not None:
        try:
            transport.write(stream, payload)
        except IO_ERRORS as exc:
            return HttpIoError(exc)

    try:
        live = transport.send(stream)
    except httpx.WriteError as exc:
        return HttpIoError(exc)
    except REQUEST_ERRORS as exc:
        return HttpRequestError(exc)

    try:
        text = transport.read_all_text(live)
    except IO_ERRORS as exc:
        return HttpIoError(exc)

    return Response(
        code=int(live.status_code),
        status=live.reason_phrase,
        headers=FrozenHeaders(live.headers),
        body=text,
    )


__all__ = ["execute"]
