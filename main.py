"""
API start script — serves api.main:app through uvicorn.

Usage:
    python main.py
    python main.py --host 0.0.0.0 --port 8080 --reload

Defaults come from IBAN_CHECK_HOST, IBAN_CHECK_PORT and IBAN_CHECK_LOG_LEVEL;
command-line flags override them.
"""

from __future__ import annotations

import argparse
import os

import uvicorn

_LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def build_parser() -> argparse.ArgumentParser:
    log_level = os.getenv("IBAN_CHECK_LOG_LEVEL", "info").lower()
    if log_level not in _LOG_LEVELS:
        raise SystemExit(f"IBAN_CHECK_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

    parser = argparse.ArgumentParser(description="Serve the iban-check JSON API")
    parser.add_argument("--host", default=os.getenv("IBAN_CHECK_HOST", "127.0.0.1"))
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("IBAN_CHECK_PORT", "8000"))
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--log-level", default=log_level, choices=_LOG_LEVELS)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        # uvicorn ignores workers when reloading
        workers=1 if args.reload else args.workers,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
