from datetime import date

import pandas as pd
import pytest

from voicepick.calculator import VoiceCodeCalculator
from voicepick.frames import add_voice_codes


def test_add_voice_codes():
    df = pd.DataFrame(
        {
            "gtin": ["12345678901244", "61414100734933", "ABC"],
            "lot": ["LOT123", "32abcd", "LOT1"],
            "pack_date": [date(2003, 1, 2), "01/02/2003", "2003-01-02"],
        }
    )
    res, errors = add_voice_codes(df)

    assert list(res["voice_code"]) == ["6991", "8079", ""]
    assert list(res["voice_code_major"]) == ["69", "80", ""]
    assert list(res["voice_code_minor"]) == ["91", "79", ""]
    assert list(errors) == [2]
    assert "GTIN" in errors[2]
    assert "voice_code" not in df.columns


def test_unparseable_dates_and_timestamps():
    df = pd.DataFrame(
        {
            "gtin": ["61414100734933", "61414100734933"],
            "lot": ["32ABCD", "32ABCD"],
            "pack_date": pd.to_datetime(["2001-01-01", None]),
        }
    )
    res, errors = add_voice_codes(df)
    assert list(res["voice_code"]) == ["1085", ""]
    assert list(errors) == [1]


def test_custom_columns_and_calculator():
    df = pd.DataFrame({"item": ["12345678901244"], "batch": ["LOT123"], "packed": ["2003-01-02"]})
    res, errors = add_voice_codes(
        df,
        gtin_col="item",
        lot_col="batch",
        date_col="packed",
        calculator=VoiceCodeCalculator({"require_check_digit": True}),
    )
    assert list(res["voice_code"]) == [""]
    assert "check digit" in errors[0]


def test_empty_frame():
    df = pd.DataFrame(columns=["gtin", "lot", "pack_date"])
    res, errors = add_voice_codes(df)
    assert errors == {}
    assert list(res.columns) == ["gtin", "lot", "pack_date", "voice_code", "voice_code_major", "voice_code_minor"]


def test_duplicate_index_rejected():
    df = pd.DataFrame(
        {
            "gtin": ["12345678901244", "ABC"],
            "lot": ["LOT123", "LOT123"],
            "pack_date": ["2003-01-02", "2003-01-02"],
        },
        index=[0, 0],
    )
    with pytest.raises(ValueError, match="unique index"):
        add_voice_codes(df)

    res, errors = add_voice_codes(df.reset_index(drop=True))
    assert list(res["voice_code"]) == ["6991", ""]
    assert list(errors) == [1]
