from __future__ import annotations

from .countries import COUNTRY_LENGTHS
from .models import IbanValue

_FIRST_CHUNK = 9
_NEXT_CHUNK = 7


def to_numeric(check_string: str) -> str | None:
    """Replace letters by their two-digit values (A=10 ... Z=35).

    Returns None if the string holds anything besides A-Z and 0-9.
    """
    digits: list[str] = []
    for ch in check_string:
        if "0" <= ch <= "9":
            digits.append(ch)
        elif "A" <= ch <= "Z":
            # position in the latin alphabet plus 9
            digits.append(str(ord(ch) - ord("A") + 1 + 9))
        else:
            return None
    return "".join(digits)


def mod97(numeric: str) -> int:
    """ISO 7064 MOD 97-10 remainder of a decimal digit string.

    The number is reduced piecewise: one chunk of 9 digits, then chunks of 7
    digits each prefixed by the previous remainder padded to 2 digits, so no
    intermediate value exceeds 9 digits.
    """
    if not numeric.isascii() or not numeric.isdigit():
        raise ValueError(f"not a decimal digit string: {numeric!r}")

    prefix = ""
    pos = 0
    step = _FIRST_CHUNK
    while len(numeric) - pos > step:
        prefix = f"{int(prefix + numeric[pos:pos + step]) % 97:02d}"
        pos += step
        step = _NEXT_CHUNK
    return int(prefix + numeric[pos:]) % 97


def validate(value: IbanValue) -> bool:
    """Return True if value has the right length for its country and a correct checksum."""
    expected = COUNTRY_LENGTHS.get(value.country_code)
    if expected is None:
        return False

    # rearranged: account identifier, country code, padded check digits
    check_string = f"{value.account_identifier}{value.country_code}{value.check_digits:02d}"
    if len(check_string) != expected:
        return False

    numeric = to_numeric(check_string)
    if numeric is None:
        return False
    return mod97(numeric) == 1


validate_iban = validate
