# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL parsing and query/form serialization."""

from __future__ import annotations

from urllib.parse import urlencode

import httpx

from .models import Params


def parse_url(text: str) -> httpx.URL:
    """
    Parse ``text`` into an absolute URL.

    Raises httpx.InvalidURL for syntax errors, and for relative references
    (no scheme or no host), which cannot be requested without a base.
    """
    url = httpx.URL(text)
    if url.is_relative_url:
        raise httpx.InvalidURL(f"Relative URL without a base: {text!r}")
    return url


def form_encode(pairs: Params) -> str:
    """Serialize pairs as ``name=value`` joined by ``&``, keeping order and duplicates."""
    # httpx.QueryParams groups values by name, so encode the pair list directly.
    return urlencode([(str(name), str(value)) for name, value in pairs])


def set_query(url: httpx.URL, pairs: Params) -> httpx.URL:
    """Return ``url`` with its query replaced by the encoded ``pairs``."""
    encoded = form_encode(pairs)
    return url.copy_with(query=encoded.encode("ascii") if encoded else None)


__all__ = ["form_encode", "parse_url", "set_query"]
