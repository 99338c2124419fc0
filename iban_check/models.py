from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NoReturn, Union

MIN_LENGTH = 5
MAX_LENGTH = 34


def _is_alpha(text: str) -> bool:
    return all("A" <= ch <= "Z" for ch in text)


def _is_alnum(text: str) -> bool:
    return all("A" <= ch <= "Z" or "0" <= ch <= "9" for ch in text)


class ParseErrorKind(str, Enum):
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INVALID_COUNTRY_CODE = "INVALID_COUNTRY_CODE"
    INVALID_CHECK_DIGITS = "INVALID_CHECK_DIGITS"
    INVALID_ACCOUNT_IDENTIFIER = "INVALID_ACCOUNT_IDENTIFIER"


_REASONS: dict[ParseErrorKind, str] = {
    ParseErrorKind.TOO_SHORT: f"shorter than {MIN_LENGTH} characters",
    ParseErrorKind.TOO_LONG: f"longer than {MAX_LENGTH} characters",
    ParseErrorKind.INVALID_COUNTRY_CODE: "country code must be two letters",
    ParseErrorKind.INVALID_CHECK_DIGITS: "check digits must be two decimal digits",
    ParseErrorKind.INVALID_ACCOUNT_IDENTIFIER: "account identifier must be alphanumeric",
}


@dataclass(frozen=True)
class IbanValue:
    """A structurally well-formed IBAN, split into its three parts.

    Instances come out of ``parse()``. Well-formed does not mean valid:
    call ``validate()`` (or ``is_valid()``) for the checksum verdict.
    """

    country_code: str
    check_digits: int
    account_identifier: str

    def __post_init__(self) -> None:
        if len(self.country_code) != 2 or not _is_alpha(self.country_code):
            raise ValueError(f"invalid country code {self.country_code!r}")
        if not 0 <= self.check_digits <= 99:
            raise ValueError(f"check digits out of range: {self.check_digits}")
        if not _is_alnum(self.account_identifier):
            raise ValueError(f"invalid account identifier {self.account_identifier!r}")
        if not MIN_LENGTH <= len(self.account_identifier) + 4 <= MAX_LENGTH:
            raise ValueError("IBAN length out of range")

    def __str__(self) -> str:
        return self.machine_form()

    def machine_form(self) -> str:
        from .formatting import to_machine_form

        return to_machine_form(self)

    def human_readable(self) -> str:
        from .formatting import to_human_readable

        return to_human_readable(self)

    def is_valid(self) -> bool:
        from .validator import validate

        return validate(self)


@dataclass(frozen=True)
class ParseError:
    kind: ParseErrorKind
    raw: str  # the input exactly as the caller passed it

    @property
    def message(self) -> str:
        return f"Cannot parse IBAN {self.raw!r}: {_REASONS[self.kind]}"


class IbanParseError(ValueError):
    """Raised by ``Err.unwrap()``; carries the underlying ParseError."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Ok:
    value: IbanValue

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> IbanValue:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ParseError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise IbanParseError(self.error)


ParseResult = Union[Ok, Err]
