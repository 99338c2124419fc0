from __future__ import annotations

from .models import IbanValue

_GROUP = 4


def get_country_code(value: IbanValue) -> str:
    return value.country_code


def get_check_digits(value: IbanValue) -> int:
    return value.check_digits


def get_account_identifier(value: IbanValue) -> str:
    return value.account_identifier


def to_machine_form(value: IbanValue) -> str:
    """IBAN without separators, e.g. ``DE89370400440532013000``."""
    return f"{value.country_code}{value.check_digits:02d}{value.account_identifier}"


def to_human_readable(value: IbanValue) -> str:
    """IBAN in blocks of 4 characters, e.g. ``DE89 3704 0044 0532 0130 00``."""
    machine = to_machine_form(value)
    return " ".join(machine[i:i + _GROUP] for i in range(0, len(machine), _GROUP))
