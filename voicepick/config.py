from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from voicepick.validators import GTIN_LENGTHS

DEFAULT_CFG: dict[str, Any] = {
    "gtin_lengths": GTIN_LENGTHS,
    "require_check_digit": False,
    "check_calendar": True,
}


def resolve_cfg(overrides: Mapping[str, Any] | None = None, defaults: dict[str, Any] = DEFAULT_CFG) -> dict[str, Any]:
    """Defaults updated with the known keys of `overrides`; unknown keys are dropped."""
    merged = defaults.copy()
    if overrides:
        merged.update({k: overrides[k] for k in overrides if k in defaults})
    merged["gtin_lengths"] = tuple(merged["gtin_lengths"])
    return merged
