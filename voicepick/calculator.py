# voicepick/calculator.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from voicepick.config import resolve_cfg
from voicepick.dates import date_parts
from voicepick.hashing import voice_code_hash, voice_code_text
from voicepick.validators import (
    days_in_month,
    gtin_is_valid,
    is_date_part,
    validate_gtin,
)

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """GTIN or pack date rejected before any hashing was done."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


# ---------- Validation model ----------
class VoiceCodeInput(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    gtin: str
    lot: str
    month: str
    day: str
    year: str

    @field_validator("gtin")
    @classmethod
    def check_gtin(cls, v: str, info: ValidationInfo) -> str:
        cfg = (info.context or {}).get("cfg") or resolve_cfg()
        lengths = cfg["gtin_lengths"]
        if not validate_gtin(v, lengths):
            allowed = "/".join(str(n) for n in lengths)
            raise ValueError(f"GTIN must be numeric with {allowed} digits.")
        if cfg["require_check_digit"] and not gtin_is_valid(v, lengths):
            raise ValueError("GTIN check digit is incorrect.")
        return v

    @field_validator("month", "day", "year")
    @classmethod
    def check_date_part(cls, v: str, info: ValidationInfo) -> str:
        if not is_date_part(v):
            raise ValueError(f"Pack date {info.field_name} must be exactly two digits.")
        return v

    @model_validator(mode="after")
    def check_calendar(self, info: ValidationInfo) -> VoiceCodeInput:
        cfg = (info.context or {}).get("cfg") or resolve_cfg()
        if not cfg["check_calendar"]:
            return self
        month = int(self.month)
        if not 1 <= month <= 12:
            raise ValueError(f"Pack date month {self.month} is not in 01-12.")
        last = days_in_month(month, int(self.year))
        if not 1 <= int(self.day) <= last:
            raise ValueError(f"Pack date day {self.day} is not in 01-{last:02d} for month {self.month}.")
        return self


# ---------- Result ----------
class VoiceCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    full: int
    major: int
    minor: int
    gtin: str
    lot: str
    pack_date: str  # YYMMDD
    hash_text: str

    @property
    def code(self) -> str:
        return f"{self.full:04d}"

    @property
    def major_text(self) -> str:
        return f"{self.major:02d}"

    @property
    def minor_text(self) -> str:
        return f"{self.minor:02d}"

    def __str__(self) -> str:
        return self.code


class VoiceCodeCalculator:
    """Validates label inputs and derives their voice pick code.

    Options are the keys of ``voicepick.config.DEFAULT_CFG``.
    """

    def __init__(self, cfg: Mapping[str, Any] | None = None):
        self.cfg = resolve_cfg(cfg)

    def compute(self, gtin: str, lot: str, month: str, day: str, year: str) -> VoiceCode:
        """Voice code for a pack date given as two-digit MM, DD and YY strings."""
        try:
            data = VoiceCodeInput.model_validate(
                {"gtin": gtin, "lot": lot, "month": month, "day": day, "year": year},
                context={"cfg": self.cfg},
            )
        except ValidationError as ve:
            errors = [e["msg"].removeprefix("Value error, ") for e in ve.errors()]
            logger.debug("rejected voice code input gtin=%r: %s", gtin, errors)
            raise InvalidInput(errors) from ve

        hash_text = voice_code_text(data.gtin, data.lot, data.year, data.month, data.day)
        code = voice_code_hash(hash_text)
        full = int(code)
        logger.debug("voice code %s for %r", code, hash_text)
        return VoiceCode(
            full=full,
            major=full // 100,
            minor=full % 100,
            gtin=data.gtin,
            lot=data.lot,
            pack_date=f"{data.year}{data.month}{data.day}",
            hash_text=hash_text,
        )

    def compute_from_date(self, gtin: str, lot: str, pack_date: date) -> VoiceCode:
        """Same as `compute`, with the date parts taken from a calendar date."""
        if not isinstance(pack_date, date):
            raise InvalidInput(["Pack date must be a date."])
        mm, dd, yy = date_parts(pack_date)
        return self.compute(gtin, lot, mm, dd, yy)


_default = VoiceCodeCalculator()


def compute(gtin: str, lot: str, month: str, day: str, year: str) -> VoiceCode:
    return _default.compute(gtin, lot, month, day, year)


def compute_from_date(gtin: str, lot: str, pack_date: date) -> VoiceCode:
    return _default.compute_from_date(gtin, lot, pack_date)
