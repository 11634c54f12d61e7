"""
MIT License

Nine-column GFF record model and its assembly from raw column text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from .codecs import (
    Strand,
    decode_frame,
    decode_score,
    decode_strand,
    encode_frame,
    encode_score,
    encode_strand,
)
from .errors import DecodeError, GFFError, InvalidColumnCount, InvalidField

_UNSIGNED_RE = re.compile(r"\+?\d+", re.ASCII)

UINT64_MAX = 2**64 - 1


@dataclass(frozen=True)
class GFFRecord:
    """One feature annotation, in wire column order."""

    seqname: str
    source: str
    feature: str
    start: int
    end: int
    score: Optional[float]
    strand: Strand
    frame: Optional[int]
    attributes: str


class ColumnCodec(NamedTuple):
    name: str
    decode: Callable[[str], Any]
    encode: Callable[[Any], str]


def _decode_text(text: str) -> str:
    return text


def _encode_text(value: str) -> str:
    return str(value)


def _decode_seqname(text: str) -> str:
    if not text:
        raise InvalidField(text, "seqname must not be empty")
    return text


def _decode_unsigned(text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise InvalidField(text, "expected an unsigned integer")
    value = int(text)
    if value > UINT64_MAX:
        raise InvalidField(text, "exceeds the unsigned 64-bit range")
    return value


def _encode_unsigned(value: int) -> str:
    return str(int(value))


COLUMNS: Sequence[ColumnCodec] = (
    ColumnCodec("seqname", _decode_seqname, _encode_text),
    ColumnCodec("source", _decode_text, _encode_text),
    ColumnCodec("feature", _decode_text, _encode_text),
    ColumnCodec("start", _decode_unsigned, _encode_unsigned),
    ColumnCodec("end", _decode_unsigned, _encode_unsigned),
    ColumnCodec("score", decode_score, encode_score),
    ColumnCodec("strand", decode_strand, encode_strand),
    ColumnCodec("frame", decode_frame, encode_frame),
    ColumnCodec("attributes", _decode_text, _encode_text),
)

COLUMN_NAMES = [codec.name for codec in COLUMNS]


def decode_record(columns: Sequence[str]) -> GFFRecord:
    """
    Build a record from nine raw column strings.

    The column count is checked before any column is decoded. Decoding
    stops at the first failing column; the raised error carries that
    column's index and name.
    """
    if len(columns) != len(COLUMNS):
        raise InvalidColumnCount(len(columns), expected=len(COLUMNS))
    values = []
    for index, (codec, text) in enumerate(zip(COLUMNS, columns)):
        try:
            values.append(codec.decode(text))
        except DecodeError as exc:
            raise exc.at_column(index, codec.name)
    return GFFRecord(*values)


def encode_record(record: GFFRecord) -> List[str]:
    """Render a record as nine canonical column strings."""
    out: List[str] = []
    for index, codec in enumerate(COLUMNS):
        value = getattr(record, codec.name)
        try:
            out.append(codec.encode(value))
        except GFFError as exc:
            raise exc.at_column(index, codec.name)
    return out


def parse_line(line: str) -> GFFRecord:
    """Decode one physical line, ignoring its line terminator."""
    return decode_record(line.rstrip("\r\n").split("\t"))


def format_record(record: GFFRecord) -> str:
    return "\t".join(encode_record(record))


__all__ = [
    "GFFRecord",
    "ColumnCodec",
    "COLUMNS",
    "COLUMN_NAMES",
    "decode_record",
    "encode_record",
    "parse_line",
    "format_record",
]
