# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-verb convenience calls.

Each function fixes the method and the argument shape, then delegates to
``execute``. Bodyless verbs take optional query pairs; body verbs take either a
raw body with its content type or pairs sent as a form-encoded body.
"""

from __future__ import annotations

from .http.dispatch import execute
from .http.models import FORM_CONTENT_TYPE, Body, Method, Params, Result
from .http.transport import Transport
from .http.url import form_encode


def get(url: str, *, transport: Transport | None = None) -> Result:
    return execute(Method.GET, url, transport=transport)


def get_with_params(url: str, params: Params, *, transport: Transport | None = None) -> Result:
    return execute(Method.GET, url, params, transport=transport)


def post(url: str, body: Body, content_type: str, *, transport: Transport | None = None) -> Result:
    return _with_body(Method.POST, url, body, content_type, transport)


def post_with_params(url: str, params: Params, *, transport: Transport | None = None) -> Result:
    return _with_form(Method.POST, url, params, transport)


def put(url: str, body: Body, content_type: str, *, transport: Transport | None = None) -> Result:
    return _with_body(Method.PUT, url, body, content_type, transport)


def put_with_params(url: str, params: Params, *, transport: Transport | None = None) -> Result:
    return _with_form(Method.PUT, url, params, transport)


def patch(url: str, body: Body, content_type: str, *, transport: Transport | None = None) -> Result:
    return _with_body(Method.PATCH, url, body, content_type, transport)


def patch_with_params(url: str, params: Params, *, transport: Transport | None = None) -> Result:
    return _with_form(Method.PATCH, url, params, transport)


def delete(url: str, *, transport: Transport | None = None) -> Result:
    return execute(Method.DELETE, url, transport=transport)


def delete_with_params(url: str, params: Params, *, transport: Transport | None = None) -> Result:
    return execute(Method.DELETE, url, params, transport=transport)


def _with_body(method: Method, url: str, body: Body, content_type: str, transport: Transport | None) -> Result:
    return execute(method, url, None, body, content_type, transport=transport)


def _with_form(method: Method, url: str, params: Params, transport: Transport | None) -> Result:
    return _with_body(method, url, form_encode(params), FORM_CONTENT_TYPE, transport)


__all__ = [
    "delete",
    "delete_with_params",
    "execute",
    "get",
    "get_with_params",
    "patch",
    "patch_with_params",
    "post",
    "post_with_params",
    "put",
    "put_with_params",
]
