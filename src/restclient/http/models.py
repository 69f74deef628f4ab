# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across restclient."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from ..errors import RestError, is_rest_error

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Params = Sequence[tuple[str, str]]
Body = bytes | str


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def from_string(cls, name: str) -> Method:
        """Resolve a verb name case-insensitively; unknown verbs raise ValueError."""
        normalized = str(name or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {name!r}") from None


@dataclass
class OutboundRequest:
    """Request handle produced by a transport, before any bytes hit the wire."""

    method: Method
    url: httpx.URL
    headers: httpx.Headers = field(default_factory=httpx.Headers)


class FrozenHeaders(httpx.Headers):
    """Case-insensitive, multi-valued headers that reject mutation. ``copy()`` returns a mutable copy."""

    def __setitem__(self, key: str, value: str) -> None:
        raise TypeError("Response headers are read-only")

    def __delitem__(self, key: str) -> None:
        raise TypeError("Response headers are read-only")

    def update(self, headers: Any = None) -> None:  # type: ignore[override]
        raise TypeError("Response headers are read-only")


@dataclass(frozen=True)
class Response:
    """Normalized HTTP response.

    4xx and 5xx replies are ordinary responses; inspect ``code`` to tell them apart.
    """

    code: int
    status: str
    headers: FrozenHeaders
    body: str

    def __post_init__(self) -> None:
        if not isinstance(self.headers, FrozenHeaders):
            object.__setattr__(self, "headers", FrozenHeaders(self.headers))

    def __str__(self) -> str:
        return self.body

    @property
    def is_success(self) -> bool:
        return httpx.codes.is_success(self.code)

    @property
    def is_client_error(self) -> bool:
        return httpx.codes.is_client_error(self.code)

    @property
    def is_server_error(self) -> bool:
        return httpx.codes.is_server_error(self.code)

    @property
    def is_error(self) -> bool:
        return httpx.codes.is_error(self.code)


Result = Response | RestError


def is_ok(result: Result) -> bool:
    return isinstance(result, Response)


def unwrap(result: Result) -> Response:
    """Return the response, or raise the native exception wrapped by the error."""
    if isinstance(result, Response):
        return result
    if is_rest_error(result):
        raise result.error
    raise TypeError(f"Not a restclient result: {type(result).__name__}")
