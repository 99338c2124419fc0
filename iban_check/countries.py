from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Mapping

from .models import MAX_LENGTH, MIN_LENGTH

# Country code -> expected IBAN length (without spaces)
_IBAN_LENGTHS: tuple[tuple[str, int], ...] = (
    ("AD", 24), ("AE", 23), ("AL", 28), ("AO", 25), ("AT", 20),
    ("AZ", 28), ("BA", 20), ("BE", 16), ("BF", 28), ("BG", 22),
    ("BH", 22), ("BI", 16), ("BJ", 28), ("BR", 29), ("BY", 28),
    ("CF", 27), ("CG", 27), ("CH", 21), ("CI", 28), ("CM", 27),
    ("CR", 22), ("CV", 25), ("CY", 28), ("CZ", 24), ("DE", 22),
    ("DJ", 27), ("DK", 18), ("DO", 28), ("DZ", 24), ("EE", 20),
    ("EG", 27), ("ES", 24), ("FI", 18), ("FO", 18), ("FR", 27),
    ("GA", 27), ("GB", 22), ("GE", 22), ("GI", 23), ("GL", 18),
    ("GQ", 27), ("GR", 27), ("GT", 28), ("GW", 25), ("HN", 28),
    ("HR", 21), ("HU", 28), ("IE", 22), ("IL", 23), ("IQ", 23),
    ("IR", 26), ("IS", 26), ("IT", 27), ("JO", 30), ("KM", 27),
    ("KW", 30), ("KZ", 20), ("LB", 28), ("LC", 32), ("LI", 21),
    ("LT", 20), ("LU", 20), ("LV", 21), ("MA", 28), ("MC", 27),
    ("MD", 24), ("ME", 22), ("MG", 27), ("MK", 19), ("ML", 28),
    ("MR", 27), ("MT", 31), ("MU", 30), ("MZ", 25), ("NE", 28),
    ("NI", 32), ("NL", 18), ("NO", 15), ("PK", 24), ("PL", 28),
    ("PS", 29), ("PT", 25), ("QA", 29), ("RO", 24), ("RS", 22),
    ("SA", 24), ("SC", 31), ("SE", 24), ("SI", 19), ("SK", 24),
    ("SM", 27), ("SN", 28), ("ST", 25), ("SV", 28), ("TD", 27),
    ("TG", 28), ("TL", 23), ("TN", 24), ("TR", 26), ("UA", 29),
    ("VG", 24), ("XK", 20),
)


def build_length_table(entries: Iterable[tuple[str, int]]) -> Mapping[str, int]:
    """Build a read-only country table, rejecting duplicate or malformed entries."""
    table: dict[str, int] = {}
    for code, length in entries:
        if len(code) != 2 or not all("A" <= ch <= "Z" for ch in code):
            raise ValueError(f"invalid country code in IBAN table: {code!r}")
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise ValueError(f"invalid IBAN length for {code}: {length}")
        if code in table:
            raise ValueError(f"duplicate country code in IBAN table: {code}")
        table[code] = length
    return MappingProxyType(table)


COUNTRY_LENGTHS: Mapping[str, int] = build_length_table(_IBAN_LENGTHS)


def expected_length(country_code: str) -> int | None:
    return COUNTRY_LENGTHS.get(country_code)
