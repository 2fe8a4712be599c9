# panostitch/cli/coerce.py
# Strict string -> value conversions used by the flag dispatcher.
# Every helper returns None on failure and never raises.

from __future__ import annotations

import math
import re
from typing import Optional

from panostitch.models.enums import ProjectionType, MatchingType, WaveCorrectionType

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_PROJECTIONS = {p.value: p for p in ProjectionType}
_WAVE_CORRECTIONS = {w.value: w for w in WaveCorrectionType}
_MATCHING_TYPES = {m.value: m for m in MatchingType}


def parse_int(text: str) -> Optional[int]:
    """Whole-string base-10 integer that fits in 32 bits."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_projection(text: str) -> Optional[ProjectionType]:
    return _PROJECTIONS.get(text)


def parse_wave_correction(text: str) -> Optional[WaveCorrectionType]:
    return _WAVE_CORRECTIONS.get(text)


def parse_matching_type(text: str) -> Optional[MatchingType]:
    return _MATCHING_TYPES.get(text)


def matching_type_names() -> str:
    return ", ".join(_MATCHING_TYPES)
