# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
restclient package entrypoint.

A small REST client facade: one call builds one HTTP request, sends it over an
injectable transport (httpx by default) and returns either a normalized
``Response`` or one of three error values. Failures are returned, not raised.
"""

from .api import (
    delete,
    delete_with_params,
    get,
    get_with_params,
    patch,
    patch_with_params,
    post,
    post_with_params,
    put,
    put_with_params,
)
from .config import HttpSettings, load_http_settings
from .errors import ErrorKind, HttpIoError, HttpRequestError, RestError, UrlParseError
from .http import (
    HttpxTransport,
    Method,
    Response,
    Result,
    Transport,
    create_default_transport,
    execute,
    is_ok,
    unwrap,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "ErrorKind",
    "HttpIoError",
    "HttpRequestError",
    "HttpSettings",
    "HttpxTransport",
    "Method",
    "Response",
    "RestError",
    "Result",
    "Transport",
    "UrlParseError",
    "create_default_transport",
    "delete",
    "delete_with_params",
    "execute",
    "get",
    "get_with_params",
    "is_ok",
    "load_http_settings",
    "patch",
    "patch_with_params",
    "post",
    "post_with_params",
    "put",
    "put_with_params",
    "setup_logging",
    "unwrap",
    "__version__",
]
