# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from ..config import HttpSettings, load_http_settings
from .models import Method, OutboundRequest
from .transport import Transport

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = frozenset({"http", "https"})


@dataclass
class RequestStream:
    """Open request whose body is collected before it is handed to httpx."""

    request: OutboundRequest
    buffer: bytearray = field(default_factory=bytearray)


class HttpxTransport(Transport):
    """Synchronous httpx transport.

    Redirects are not followed and no timeout is applied; each request is sent
    exactly once.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=None,
            verify=self.settings.verify_ssl,
        )

    def build_request(self, method: Method, url: httpx.URL) -> OutboundRequest:
        if url.scheme not in SUPPORTED_SCHEMES:
            raise httpx.UnsupportedProtocol(f"Request URL has an unsupported protocol '{url.scheme}://'.")
        headers = httpx.Headers({"User-Agent": self.settings.user_agent})
        return OutboundRequest(method=method, url=url, headers=headers)

    def begin(self, request: OutboundRequest) -> RequestStream:
        return RequestStream(request=request)

    def write(self, stream: RequestStream, data: bytes) -> None:
        stream.buffer.extend(data)

    def send(self, stream: RequestStream) -> httpx.Response:
        request = stream.request
        outbound = self._client.build_request(
            request.method.value,
            request.url,
            headers=request.headers,
            content=bytes(stream.buffer) if stream.buffer else None,
        )
        logger.debug("Sending %s %s (%d body bytes)", request.method.value, request.url, len(stream.buffer))
        response = self._client.send(outbound, stream=True)
        logger.debug("Received %s %s for %s", response.status_code, response.reason_phrase, request.url)
        return response

    def read_all_text(self, response: httpx.Response) -> str:
        try:
            content = response.read()
        finally:
            response.close()

        # Undecodable bytes raise instead of being replaced.
        encoding = response.charset_encoding or "utf-8"
        try:
            return content.decode(encoding)
        except LookupError:
            return content.decode("utf-8")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
