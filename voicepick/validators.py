# voicepick/validators.py
from __future__ import annotations

import calendar
import re

GTIN_LENGTHS = (8, 12, 13, 14)

_DIGITS_RE = re.compile(r"[0-9]+")
_DATE_PART_RE = re.compile(r"[0-9]{2}")
# GS1 AI(10) batch/lot characters, 1..20 long
_LOT_RE = re.compile(r"""[!"%&'()*+,\-./0-9:;<=>?A-Z_a-z]{1,20}""")


def is_digits(s: str) -> bool:
    return isinstance(s, str) and _DIGITS_RE.fullmatch(s) is not None


def gtin_check_digit(body: str) -> int:
    total = 0
    for i, ch in enumerate(reversed(body)):  # right→left
        d = int(ch)
        total += d * (3 if i % 2 == 0 else 1)  # 3,1,3,1...
    return (10 - (total % 10)) % 10


def validate_gtin(s: str, lengths: tuple[int, ...] = GTIN_LENGTHS) -> bool:
    """Digits only and a GS1 GTIN length. The check digit is not looked at."""
    return is_digits(s) and len(s) in lengths


def gtin_is_valid(s: str, lengths: tuple[int, ...] = GTIN_LENGTHS) -> bool:
    """Well-formed GTIN with a correct mod-10 check digit."""
    if not validate_gtin(s, lengths):
        return False
    data, check = s[:-1], int(s[-1])
    return gtin_check_digit(data) == check


def lot_is_label_safe(lot: str) -> bool:
    """True when the lot fits the GS1 batch/lot character set printed on PTI labels."""
    return isinstance(lot, str) and _LOT_RE.fullmatch(lot) is not None


def is_date_part(s: str) -> bool:
    return isinstance(s, str) and _DATE_PART_RE.fullmatch(s) is not None


def days_in_month(mm: int, yy: int) -> int:
    # two-digit pack years are taken as 20YY for the leap rule
    return calendar.monthrange(2000 + yy, mm)[1]
