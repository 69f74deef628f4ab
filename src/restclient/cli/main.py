# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""restclient CLI."""

from __future__ import annotations

import argparse
import json
import sys
from contextlib import closing
from typing import Any

from .. import api
from ..config import HttpSettings, load_http_settings
from ..errors import error_kind_to_reason
from ..http import FORM_CONTENT_TYPE, Method, Response, Result, create_default_transport, execute
from ..log import setup_logging

_FORM_CALLS = {
    Method.POST: api.post_with_params,
    Method.PUT: api.put_with_params,
    Method.PATCH: api.patch_with_params,
}


def _method_arg(value: str) -> Method:
    try:
        return Method.from_string(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _param_arg(value: str) -> tuple[str, str]:
    name, sep, param_value = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, param_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="restclient", description="Send one HTTP request and print the response")
    parser.add_argument("method", type=_method_arg, help="HTTP method (GET, POST, PUT, PATCH, DELETE)")
    parser.add_argument("url", help="Absolute target URL")
    parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=_param_arg,
        metavar="NAME=VALUE",
        help="Query parameter (repeatable); replaces any query in URL. With --form, sent as the body instead",
    )
    parser.add_argument("-d", "--data", help="Raw request body")
    parser.add_argument("-t", "--content-type", help="Content-Type for --data")
    parser.add_argument(
        "--form",
        action="store_true",
        help=f"Send --param pairs as a {FORM_CONTENT_TYPE} body (POST, PUT, PATCH)",
    )
    parser.add_argument("-i", "--include", action="store_true", help="Print status line and headers before the body")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of the raw body")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", help="Logging level (default: RESTCLIENT_LOG_LEVEL or WARNING)")
    return parser


def _response_to_dict(response: Response) -> dict[str, Any]:
    return {
        "code": response.code,
        "status": response.status,
        "headers": [[name, value] for name, value in response.headers.multi_items()],
        "body": response.body,
    }


def _print_response(response: Response, *, include: bool) -> None:
    if include:
        print(f"HTTP {response.code} {response.status}".rstrip())
        for name, value in response.headers.multi_items():
            print(f"{name}: {value}")
        print()
    sys.stdout.write(str(response))
    if response.body and not response.body.endswith("\n"):
        sys.stdout.write("\n")


def _report(result: Result, *, as_json: bool, include: bool) -> int:
    if isinstance(result, Response):
        if as_json:
            json.dump(_response_to_dict(result), sys.stdout, indent=2, sort_keys=True)
            sys.stdout.write("\n")
        else:
            _print_response(result, include=include)
        return 0

    reason = error_kind_to_reason(result.kind)
    if as_json:
        payload = {"error": result.kind.value, "reason": reason, "message": str(result.error)}
        json.dump(payload, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
    else:
        print(f"restclient: {reason}: {result.error}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.form:
        if args.method not in _FORM_CALLS:
            parser.error(f"--form requires POST, PUT or PATCH, not {args.method.value}")
        if args.data is not None:
            parser.error("--form and --data are mutually exclusive")
    if args.content_type is not None and args.data is None:
        parser.error("--content-type requires --data")

    settings: HttpSettings = load_http_settings()
    if args.insecure:
        settings.verify_ssl = False

    with closing(create_default_transport(settings)) as transport:
        if args.form:
            result = _FORM_CALLS[args.method](args.url, args.params or [], transport=transport)
        else:
            result = execute(
                args.method,
                args.url,
                args.params,
                args.data,
                args.content_type,
                transport=transport,
            )

    return _report(result, as_json=args.json, include=args.include)


if __name__ == "__main__":
    raise SystemExit(main())
