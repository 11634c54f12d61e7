"""
MIT License

Codecs for the sentinel-bearing GFF columns: score, strand and frame.

Every decoder takes the raw column text and returns a typed value, every
encoder takes the typed value and returns canonical column text. A literal
``.`` stands for an absent value in all three columns.
"""

from __future__ import annotations

import math
import numbers
import re
from enum import Enum
from typing import Dict, Optional

from .errors import InvalidFrame, InvalidFrameValue, InvalidScore, InvalidStrand

SENTINEL = "."

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Strand(Enum):
    """Strand of a feature. UNKNOWN and ABSENT are kept apart on decode."""

    FORWARD = "forward"
    REVERSE = "reverse"
    UNKNOWN = "unknown"
    ABSENT = "absent"


# Read side accepts the historical synonyms.
STRAND_ALIASES: Dict[str, Strand] = {
    "+": Strand.FORWARD,
    "f": Strand.FORWARD,
    "F": Strand.FORWARD,
    "-": Strand.REVERSE,
    "r": Strand.REVERSE,
    "R": Strand.REVERSE,
    "?": Strand.UNKNOWN,
    SENTINEL: Strand.ABSENT,
}

# Write side emits one glyph per state. UNKNOWN collapses onto the sentinel.
STRAND_SYMBOLS: Dict[Strand, str] = {
    Strand.FORWARD: "+",
    Strand.REVERSE: "-",
    Strand.UNKNOWN: SENTINEL,
    Strand.ABSENT: SENTINEL,
}

FRAME_VALUES = (0, 1, 2)


def decode_score(text: str) -> Optional[float]:
    if text == SENTINEL:
        return None
    if not _FLOAT_RE.fullmatch(text):
        raise InvalidScore(text)
    return float(text)


def encode_score(value: Optional[float]) -> str:
    """
    Render a score as the shortest text that parses back to the same float.

    Integral values drop the trailing ``.0`` so that ``50.0`` is written as
    ``50``. NaN and infinities have no literal in the format and raise
    :class:`InvalidScore`.
    """
    if value is None:
        return SENTINEL
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidScore(repr(value)) from None
    if not math.isfinite(value):
        raise InvalidScore(repr(value))
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def decode_strand(text: str) -> Strand:
    if not isinstance(text, str) or len(text) != 1:
        raise InvalidStrand(str(text))
    try:
        return STRAND_ALIASES[text]
    except KeyError:
        raise InvalidStrand(text) from None


def encode_strand(strand: Strand) -> str:
    try:
        return STRAND_SYMBOLS[strand]
    except (KeyError, TypeError):
        raise InvalidStrand(repr(strand)) from None


def decode_frame(text: str) -> Optional[int]:
    if text == SENTINEL:
        return None
    if text in ("0", "1", "2"):
        return int(text)
    raise InvalidFrame(text)


def encode_frame(value: Optional[int]) -> str:
    """Render a frame digit, refusing anything outside 0..2."""
    if value is None:
        return SENTINEL
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidFrameValue(value)
    if int(value) not in FRAME_VALUES:
        raise InvalidFrameValue(value)
    return str(int(value))


__all__ = [
    "SENTINEL",
    "Strand",
    "STRAND_ALIASES",
    "STRAND_SYMBOLS",
    "FRAME_VALUES",
    "decode_score",
    "encode_score",
    "decode_strand",
    "encode_strand",
    "decode_frame",
    "encode_frame",
]
