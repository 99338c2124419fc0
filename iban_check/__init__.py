"""iban-check: offline IBAN parsing and ISO 7064 MOD 97-10 validation."""
from .countries import COUNTRY_LENGTHS
from .formatting import (
    get_account_identifier,
    get_check_digits,
    get_country_code,
    to_human_readable,
    to_machine_form,
)
from .models import Err, IbanParseError, IbanValue, Ok, ParseError, ParseErrorKind
from .parser import parse, parse_iban
from .validator import mod97, validate, validate_iban

__all__ = [
    "COUNTRY_LENGTHS",
    "Err",
    "IbanParseError",
    "IbanValue",
    "Ok",
    "ParseError",
    "ParseErrorKind",
    "get_account_identifier",
    "get_check_digits",
    "get_country_code",
    "mod97",
    "parse",
    "parse_iban",
    "to_human_readable",
    "to_machine_form",
    "validate",
    "validate_iban",
]
