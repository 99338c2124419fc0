"""
Command-line IBAN checker.

Usage:
    iban-check DE89370400440532013000
    iban-check --json "DE89 3704 0044 0532 0130 00" GB00WEST12345698765432

Exit status: 0 if every IBAN is valid, 1 if any is well formed but fails
validation, 2 if any cannot be parsed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from .models import Err
from .parser import parse
from .validator import validate

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_MALFORMED = 2


def check(raw: str) -> dict[str, Any]:
    result = parse(raw)
    if isinstance(result, Err):
        return {
            "iban": raw,
            "well_formed": False,
            "valid": False,
            "error": result.error.kind.value,
            "message": result.error.message,
        }
    value = result.value
    return {
        "iban": raw,
        "well_formed": True,
        "valid": validate(value),
        "country_code": value.country_code,
        "check_digits": value.check_digits,
        "account_identifier": value.account_identifier,
        "human_readable": value.human_readable(),
    }


def _print_text(report: dict[str, Any]) -> None:
    if not report["well_formed"]:
        print(f"MALFORMED  {report['message']}")
        return
    verdict = "VALID    " if report["valid"] else "INVALID  "
    print(
        f"{verdict}  {report['human_readable']}"
        f"  (country={report['country_code']},"
        f" check={report['check_digits']:02d},"
        f" account={report['account_identifier']})"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="iban-check", description="Parse and validate IBANs offline"
    )
    parser.add_argument("ibans", nargs="+", metavar="IBAN", help="IBAN to check")
    parser.add_argument(
        "--json", action="store_true", help="Print one JSON object per IBAN"
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Logging level (default: warning)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    status = EXIT_VALID
    for raw in args.ibans:
        report = check(raw)
        if args.json:
            print(json.dumps(report))
        else:
            _print_text(report)
        if not report["well_formed"]:
            status = max(status, EXIT_MALFORMED)
        elif not report["valid"]:
            status = max(status, EXIT_INVALID)
    return status


if __name__ == "__main__":
    sys.exit(main())
