# voicepick/frames.py
from __future__ import annotations

import logging
from datetime import date

import pandas as pd

from voicepick.calculator import InvalidInput, VoiceCodeCalculator
from voicepick.dates import parse_pack_date

logger = logging.getLogger(__name__)

CODE_COLUMNS = ["voice_code", "voice_code_major", "voice_code_minor"]


def _norm(s) -> str:
    if s is None or (isinstance(s, float) and pd.isna(s)):
        return ""
    return str(s)


def _as_date(v) -> date | None:
    if v is pd.NaT:
        return None
    if isinstance(v, date):
        return v
    return parse_pack_date(_norm(v))


def add_voice_codes(
    df: pd.DataFrame,
    gtin_col: str = "gtin",
    lot_col: str = "lot",
    date_col: str = "pack_date",
    calculator: VoiceCodeCalculator | None = None,
) -> tuple[pd.DataFrame, dict]:
    """
    Returns (coded_df, errors_dict).
    coded_df is a copy of df with voice_code / voice_code_major / voice_code_minor
    as zero-padded text; rows that could not be coded get empty strings and their
    index is a key of errors_dict with the reason.
    The index must be unique so every error maps to one row; a ValueError is
    raised otherwise (reset_index first).
    """
    if not df.index.is_unique:
        raise ValueError("add_voice_codes needs a unique index; call reset_index() first.")

    calc = calculator or VoiceCodeCalculator()
    res = df.copy()
    errors: dict = {}
    codes: dict[str, list[str]] = {c: [] for c in CODE_COLUMNS}

    for idx, row in res.iterrows():
        d = _as_date(row[date_col])
        try:
            if d is None:
                raise InvalidInput(["Pack date is missing or not a recognised date."])
            vc = calc.compute_from_date(_norm(row[gtin_col]), _norm(row[lot_col]), d)
        except InvalidInput as e:
            errors[idx] = str(e)
            for c in CODE_COLUMNS:
                codes[c].append("")
            continue
        codes["voice_code"].append(vc.code)
        codes["voice_code_major"].append(vc.major_text)
        codes["voice_code_minor"].append(vc.minor_text)

    for c in CODE_COLUMNS:
        res[c] = pd.Series(codes[c], index=res.index, dtype=object)

    if errors:
        logger.warning("voice codes skipped for %d of %d rows", len(errors), len(res))
    return res, errors
