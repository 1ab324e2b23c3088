from voicepick.config import DEFAULT_CFG, resolve_cfg


def test_defaults():
    cfg = resolve_cfg()
    assert cfg == DEFAULT_CFG
    assert cfg is not DEFAULT_CFG


def test_known_keys_merged_unknown_dropped():
    cfg = resolve_cfg({"require_check_digit": True, "gtin_lengths": [14], "colour": "red"})
    assert cfg["require_check_digit"] is True
    assert cfg["gtin_lengths"] == (14,)
    assert cfg["check_calendar"] is True
    assert "colour" not in cfg
    assert DEFAULT_CFG["require_check_digit"] is False
