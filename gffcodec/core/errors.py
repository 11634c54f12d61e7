"""
MIT License

Exception hierarchy for GFF column decoding and encoding.
"""

from __future__ import annotations

from typing import Optional


class GFFError(ValueError):
    """Base class for every codec failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.column: Optional[int] = None
        self.column_name: Optional[str] = None

    def at_column(self, index: int, name: str) -> "GFFError":
        """Attach the column position the failure was raised for."""
        self.column = index
        self.column_name = name
        return self

    def __str__(self) -> str:
        if self.column is None:
            return self.message
        return f"column {self.column + 1} ({self.column_name}): {self.message}"


class DecodeError(GFFError):
    """Raw column text outside the permitted alphabet."""


class EncodeError(GFFError):
    """In-memory value that has no textual form."""


class InvalidScore(DecodeError):
    def __init__(self, text: str) -> None:
        super().__init__(f"invalid score {text!r}, expected a float or '.'")
        self.text = text


class InvalidStrand(DecodeError):
    def __init__(self, text: str) -> None:
        super().__init__(f"invalid strand {text!r}, expected one of '+-fFrR?.'")
        self.text = text


class InvalidFrame(DecodeError):
    def __init__(self, text: str) -> None:
        super().__init__(f"invalid frame {text!r}, expected 0, 1, 2 or '.'")
        self.text = text


class InvalidField(DecodeError):
    """Failure in one of the generic string/integer columns."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"invalid value {text!r}: {reason}")
        self.text = text


class InvalidColumnCount(DecodeError):
    def __init__(self, actual: int, expected: int = 9) -> None:
        super().__init__(f"expected {expected} columns, but got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidFrameValue(EncodeError):
    def __init__(self, value: object) -> None:
        super().__init__(f"invalid frame {value!r}, expected 0, 1, 2 or None")
        self.value = value


class GFFSyntaxError(GFFError):
    """A decode failure located at a line of an input stream."""

    def __init__(self, line_number: int, error: DecodeError) -> None:
        super().__init__(f"line {line_number}: {error}")
        self.line_number = line_number
        self.error = error


__all__ = [
    "GFFError",
    "DecodeError",
    "EncodeError",
    "InvalidScore",
    "InvalidStrand",
    "InvalidFrame",
    "InvalidField",
    "InvalidColumnCount",
    "InvalidFrameValue",
    "GFFSyntaxError",
]
