# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP layer exports."""

from .dispatch import execute
from .httpx_transport import HttpxTransport, RequestStream
from .models import (
    FORM_CONTENT_TYPE,
    FrozenHeaders,
    Body,
    Method,
    OutboundRequest,
    Params,
    Response,
    Result,
    is_ok,
    unwrap,
)
from .transport import Transport, create_default_transport
from .url import form_encode, parse_url, set_query

__all__ = [
    "FORM_CONTENT_TYPE",
    "FrozenHeaders",
    "Body",
    "HttpxTransport",
    "Method",
    "OutboundRequest",
    "Params",
    "RequestStream",
    "Response",
    "Result",
    "Transport",
    "create_default_transport",
    "execute",
    "form_encode",
    "is_ok",
    "parse_url",
    "set_query",
    "unwrap",
]
