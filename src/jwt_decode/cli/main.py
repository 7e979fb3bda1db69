from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Any, Optional, Sequence

from ..adapters.stdlib.clock import FixedClock
from ..config import settings_from_env
from ..domain.entities import DecodedToken
from ..domain.exceptions import TokenDecodeError
from ..domain.json_value import to_python
from ..integrations.common.factory import decode
from .logging_setup import setup_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jwt-decode",
        description="Decode a JWT and print its header, payload and claims "
                    "as JSON. The signature is NOT verified.",
    )

    parser.add_argument(
        "token",
        nargs="?",
        help="Compact JWT (header.payload.signature).",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the token from standard input.",
    )
    parser.add_argument(
        "--now",
        type=float,
        metavar="UNIX_SECONDS",
        help="Evaluate 'expired' against this instant instead of the current time.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log decode details to stderr.",
    )

    args = parser.parse_args(args=argv)
    args.clock = None
    if args.now is not None:
        try:
            args.clock = FixedClock.at_timestamp(args.now)
        except (OverflowError, OSError, ValueError):
            parser.error(f"--now is not a representable Unix time: {args.now}")
    if args.stdin and args.token:
        parser.error("pass the token either as an argument or with --stdin, not both")
    if not args.stdin and not args.token:
        parser.error("a token is required (argument or --stdin)")
    return args


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _summarize(decoded: DecodedToken) -> dict[str, Any]:
    return {
        "header": to_python(decoded.header),
        "payload": to_python(decoded.payload),
        "signature": decoded.signature,
        "claims": {
            "issuer": decoded.issuer,
            "subject": decoded.subject,
            "audience": decoded.audience,
            "identifier": decoded.identifier,
            "issued_at": _isoformat(decoded.issued_at),
            "not_before": _isoformat(decoded.not_before),
            "expires_at": _isoformat(decoded.expires_at),
            "expired": decoded.expired,
        },
    }


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = settings_from_env()
    setup_logging(verbose=args.verbose, level=settings.log_level)

    token = sys.stdin.read() if args.stdin else args.token
    try:
        decoded = decode(token.strip(), clock=args.clock)
    except TokenDecodeError as exc:
        json.dump(
            {"ok": False, "error": str(exc), "kind": type(exc).__name__},
            sys.stdout,
            indent=settings.indent,
        )
        sys.stdout.write("\n")
        raise SystemExit(1) from exc

    json.dump({"ok": True, **_summarize(decoded)}, sys.stdout, indent=settings.indent)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
