# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for restclient.

A failed call returns exactly one of three error values. Each wraps the native
exception raised by the collaborator that rejected the call (httpx, the socket
layer or the text decoder), so callers can still inspect the original cause.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    URL_PARSE = "URL_PARSE"
    HTTP_REQUEST = "HTTP_REQUEST"
    HTTP_IO = "HTTP_IO"


@dataclass(frozen=True)
class UrlParseError:
    """The URL string could not be parsed into an absolute URL."""

    error: Exception
    kind: ClassVar[ErrorKind] = ErrorKind.URL_PARSE

    def __str__(self) -> str:
        return f"invalid URL: {self.error}"


@dataclass(frozen=True)
class HttpRequestError:
    """The transport rejected the request while building, opening or sending it."""

    error: Exception
    kind: ClassVar[ErrorKind] = ErrorKind.HTTP_REQUEST

    def __str__(self) -> str:
        return f"request failed: {self.error}"


@dataclass(frozen=True)
class HttpIoError:
    """Writing the request body or reading the response body failed."""

    error: Exception
    kind: ClassVar[ErrorKind] = ErrorKind.HTTP_IO

    def __str__(self) -> str:
        return f"I/O failed: {self.error}"


RestError = UrlParseError | HttpRequestError | HttpIoError

REST_ERROR_TYPES: tuple[type, ...] = (UrlParseError, HttpRequestError, HttpIoError)


def is_rest_error(value: object) -> bool:
    return isinstance(value, REST_ERROR_TYPES)


def error_kind_to_reason(kind: ErrorKind | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorKind.URL_PARSE: "Malformed URL",
        ErrorKind.HTTP_REQUEST: "HTTP request could not be sent",
        ErrorKind.HTTP_IO: "Connection failed while transferring data",
        None: "",
    }
    return mapping.get(kind, "Request failed")


__all__ = [
    "REST_ERROR_TYPES",
    "ErrorKind",
    "HttpIoError",
    "HttpRequestError",
    "RestError",
    "UrlParseError",
    "error_kind_to_reason",
    "is_rest_error",
]
