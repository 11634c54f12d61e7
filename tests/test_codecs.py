from __future__ import annotations

import math

import pytest

from gffcodec.core.codecs import (
    STRAND_SYMBOLS,
    Strand,
    decode_frame,
    decode_score,
    decode_strand,
    encode_frame,
    encode_score,
    encode_strand,
)
from gffcodec.core.errors import (
    DecodeError,
    EncodeError,
    InvalidFrame,
    InvalidFrameValue,
    InvalidScore,
    InvalidStrand,
)


def test_score_sentinel():
    assert decode_score(".") is None
    assert encode_score(None) == "."


@pytest.mark.parametrize(
    "text, expected",
    [
        ("50", 50.0),
        ("50.0", 50.0),
        ("-3.5", -3.5),
        ("+2", 2.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e-10", 1e-10),
        ("6.02E23", 6.02e23),
    ],
)
def test_decode_score(text, expected):
    assert decode_score(text) == expected


@pytest.mark.parametrize(
    "text",
    ["abc", "x", "", " 50", "50 ", "1_000", "nan", "inf", "-Infinity", "1e", "..", "5,0", "٥٠", "1e٣"],
)
def test_decode_score_invalid(text):
    with pytest.raises(InvalidScore) as excinfo:
        decode_score(text)
    assert excinfo.value.text == text
    assert isinstance(excinfo.value, DecodeError)


@pytest.mark.parametrize(
    "value, expected",
    [(50.0, "50"), (0.1, "0.1"), (-2.0, "-2"), (1e-10, "1e-10"), (1e16, "1e+16"), (3.25, "3.25")],
)
def test_encode_score(value, expected):
    assert encode_score(value) == expected


@pytest.mark.parametrize("text", [".", "50", "0.1", "1e-10", "-7.125", "1e16", "123456789.123"])
def test_score_reencoding_is_stable(text):
    """
    Re-encoding a decoded score gives text that decodes to the same value,
    and encoding that value again gives the same text.
    """
    value = decode_score(text)
    encoded = encode_score(value)
    assert decode_score(encoded) == value
    assert encode_score(decode_score(encoded)) == encoded


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "abc", object()])
def test_encode_score_unrepresentable(value):
    with pytest.raises(InvalidScore):
        encode_score(value)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+", Strand.FORWARD),
        ("f", Strand.FORWARD),
        ("F", Strand.FORWARD),
        ("-", Strand.REVERSE),
        ("r", Strand.REVERSE),
        ("R", Strand.REVERSE),
        ("?", Strand.UNKNOWN),
        (".", Strand.ABSENT),
    ],
)
def test_decode_strand(text, expected):
    assert decode_strand(text) is expected


@pytest.mark.parametrize("text", ["x", "", "++", "+ ", "0", "u"])
def test_decode_strand_invalid(text):
    with pytest.raises(InvalidStrand) as excinfo:
        decode_strand(text)
    assert excinfo.value.text == text


def test_strand_synonyms_are_canonicalized():
    for text in ("+", "f", "F"):
        assert encode_strand(decode_strand(text)) == "+"
    for text in ("-", "r", "R"):
        assert encode_strand(decode_strand(text)) == "-"


def test_unknown_and_absent_collapse_on_encode():
    assert decode_strand("?") is not decode_strand(".")
    assert encode_strand(Strand.UNKNOWN) == encode_strand(Strand.ABSENT) == "."


def test_every_strand_has_a_symbol():
    assert set(STRAND_SYMBOLS) == set(Strand)


def test_encode_strand_rejects_non_members():
    with pytest.raises(InvalidStrand):
        encode_strand("+")
    with pytest.raises(InvalidStrand):
        encode_strand(None)


@pytest.mark.parametrize("text, expected", [("0", 0), ("1", 1), ("2", 2), (".", None)])
def test_decode_frame(text, expected):
    assert decode_frame(text) == expected


@pytest.mark.parametrize("text", ["3", "-1", "", "00", "1.", "a"])
def test_decode_frame_invalid(text):
    with pytest.raises(InvalidFrame) as excinfo:
        decode_frame(text)
    assert excinfo.value.text == text


@pytest.mark.parametrize("value, expected", [(0, "0"), (1, "1"), (2, "2"), (None, ".")])
def test_encode_frame(value, expected):
    assert encode_frame(value) == expected


@pytest.mark.parametrize("value", [3, -1, 10, True, 1.0, "1"])
def test_encode_frame_out_of_range(value):
    with pytest.raises(InvalidFrameValue) as excinfo:
        encode_frame(value)
    assert excinfo.value.value == value
    assert isinstance(excinfo.value, EncodeError)
