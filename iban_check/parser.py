from __future__ import annotations
import logging
import string

from .models import (
    MAX_LENGTH,
    MIN_LENGTH,
    Err,
    IbanValue,
    Ok,
    ParseError,
    ParseErrorKind,
    ParseResult,
    _is_alnum,
    _is_alpha,
)

logger = logging.getLogger(__name__)

# ASCII only; str.upper() would fold e.g. "\u017f" to "S" or "\u00df" to "SS"
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize(raw: str) -> str:
    """Trim, drop display spaces and upper-case ASCII letters.

    Only the plain space used for 4-character grouping is removed; tabs,
    dashes and other separators are left in place and rejected later.
    """
    return raw.strip().replace(" ", "").translate(_ASCII_UPPER)


def _fail(kind: ParseErrorKind, raw: str) -> Err:
    logger.debug("IBAN rejected: %s", kind.value)
    return Err(ParseError(kind=kind, raw=raw))


def parse(raw: str) -> ParseResult:
    """Split a raw string into an IbanValue.

    Returns ``Ok(IbanValue)`` on success or ``Err(ParseError)`` naming the
    first structural problem found. The checksum is not looked at here.
    """
    s = normalize(raw)

    if len(s) > MAX_LENGTH:
        return _fail(ParseErrorKind.TOO_LONG, raw)
    if len(s) < MIN_LENGTH:
        return _fail(ParseErrorKind.TOO_SHORT, raw)

    # first two chars are the country code
    country_code = s[:2]
    if not _is_alpha(country_code):
        return _fail(ParseErrorKind.INVALID_COUNTRY_CODE, raw)

    # then two decimal digits of checksum
    check = s[2:4]
    if not all("0" <= ch <= "9" for ch in check):
        return _fail(ParseErrorKind.INVALID_CHECK_DIGITS, raw)

    account_identifier = s[4:]
    if not _is_alnum(account_identifier):
        return _fail(ParseErrorKind.INVALID_ACCOUNT_IDENTIFIER, raw)

    return Ok(
        IbanValue(
            country_code=country_code,
            check_digits=int(check),
            account_identifier=account_identifier,
        )
    )


parse_iban = parse
