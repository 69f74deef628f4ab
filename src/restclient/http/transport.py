# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory.

A transport performs the wire-level steps of a single request. Implementations
raise their native exceptions; the dispatcher decides which error kind each
step maps to.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from ..config import HttpSettings, load_http_settings
from .models import Method, OutboundRequest


class Transport(Protocol):
    """Minimal protocol for issuing one HTTP request in explicit steps."""

    def build_request(self, method: Method, url: httpx.URL) -> OutboundRequest: ...

    def begin(self, request: OutboundRequest) -> Any: ...

    def write(self, stream: Any, data: bytes) -> None:
        """Write all of ``data`` or raise."""
        ...

    def send(self, stream: Any) -> Any: ...

    def read_all_text(self, response: Any) -> str: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: HttpSettings | None = None) -> Transport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxTransport

    return HttpxTransport(settings or load_http_settings())
