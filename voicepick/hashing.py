# voicepick/hashing.py
from __future__ import annotations

CRC_POLY = 0xA001  # reflected CRC-16/ARC polynomial (40961)


def create_crc_lut(poly: int = CRC_POLY) -> tuple[int, ...]:
    """Build the 256-entry lookup table for a reflected 16-bit CRC."""
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


CRC_TABLE = create_crc_lut()


def voice_code_text(gtin: str, lot: str, yy: str, mm: str, dd: str) -> str:
    """Free-form hash text: GTIN, lot, then the pack date as YYMMDD.

    Date parts are left-padded with zeros; nothing is validated.
    """
    return f"{gtin}{lot}{yy:0>2}{mm:0>2}{dd:0>2}"


def voice_code_crc(text: str) -> int:
    crc = 0
    for ch in text:
        crc = (crc >> 8) ^ CRC_TABLE[(crc ^ ord(ch)) & 0xFF]
    return crc


def voice_code_hash(text: str) -> str:
    """4-digit voice code of arbitrary text, e.g. '12345678901244LOT123030102' -> '6991'."""
    return f"{voice_code_crc(text) % 10000:04d}"
