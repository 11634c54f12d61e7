"""
MIT License

Line-level GFF reading and writing built on the column codecs.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..core.codecs import STRAND_SYMBOLS
from ..core.errors import DecodeError, GFFSyntaxError
from ..core.record import COLUMN_NAMES, GFFRecord, decode_record, format_record
from ..util.logging import get_logger

LOGGER = get_logger()

Source = Union[str, Path, IO[str]]


@dataclass
class ReaderConfig:
    comment: str = "#"
    strict: bool = True


@contextmanager
def _open(source: Source, mode: str) -> Iterator[IO[str]]:
    # Caller-owned handles are left open.
    if isinstance(source, (str, Path)):
        with Path(source).open(mode, encoding="utf-8") as handle:
            yield handle
    else:
        yield source


def iter_columns(lines: Iterable[str], comment: str = "#") -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(line_number, columns)`` for every non-comment, non-blank line."""
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        # Tab-only lines are malformed records, not blanks.
        if not line.strip(" ") or (comment and line.startswith(comment)):
            continue
        yield line_number, line.split("\t")


def iter_records(lines: Iterable[str], config: ReaderConfig | None = None) -> Iterator[GFFRecord]:
    """
    Decode records from an iterable of text lines.

    In strict mode the first malformed line raises :class:`GFFSyntaxError`.
    Otherwise malformed lines are logged and skipped.
    """
    config = config or ReaderConfig()
    for line_number, columns in iter_columns(lines, comment=config.comment):
        try:
            yield decode_record(columns)
        except DecodeError as exc:
            if config.strict:
                raise GFFSyntaxError(line_number, exc) from exc
            LOGGER.warning("Skipping line %s: %s", line_number, exc)


def read_gff(source: Source, config: ReaderConfig | None = None) -> List[GFFRecord]:
    """Load every record of a GFF file or open text handle."""
    with _open(source, "r") as handle:
        records = list(iter_records(handle, config))
    LOGGER.info("Read %s records", len(records))
    return records


def check_gff(source: Source, comment: str = "#") -> List[GFFSyntaxError]:
    """Decode every line and collect the failures instead of stopping."""
    failures: List[GFFSyntaxError] = []
    with _open(source, "r") as handle:
        for line_number, columns in iter_columns(handle, comment=comment):
            try:
                decode_record(columns)
            except DecodeError as exc:
                failures.append(GFFSyntaxError(line_number, exc))
    return failures


def write_gff(records: Iterable[GFFRecord], target: Source) -> int:
    """
    Write one canonical line per record and return the record count.

    Every record is encoded before the target is opened, so an
    :class:`EncodeError` leaves no partial output behind.
    """
    lines = [format_record(record) for record in records]
    with _open(target, "w") as handle:
        for line in lines:
            handle.write(line + "\n")
    return len(lines)


def records_to_frame(records: Sequence[GFFRecord]) -> pd.DataFrame:
    """
    Tabulate decoded records.

    Absent scores become NaN and absent frames ``<NA>``. The strand column
    holds the state name so UNKNOWN and ABSENT stay distinguishable, and
    ``strand_symbol`` holds its canonical glyph.
    """
    df = pd.DataFrame(
        {
            "seqname": pd.Series([r.seqname for r in records], dtype=object),
            "source": pd.Series([r.source for r in records], dtype=object),
            "feature": pd.Series([r.feature for r in records], dtype=object),
            "start": np.array([r.start for r in records], dtype=np.uint64),
            "end": np.array([r.end for r in records], dtype=np.uint64),
            "score": np.array(
                [np.nan if r.score is None else r.score for r in records], dtype=np.float64
            ),
            "strand": pd.Series([r.strand.value for r in records], dtype=object),
            "frame": pd.array([r.frame for r in records], dtype="Int64"),
            "attributes": pd.Series([r.attributes for r in records], dtype=object),
        },
        columns=COLUMN_NAMES,
    )
    df.insert(
        COLUMN_NAMES.index("strand") + 1,
        "strand_symbol",
        [STRAND_SYMBOLS[r.strand] for r in records],
    )
    return df


__all__ = [
    "ReaderConfig",
    "iter_columns",
    "iter_records",
    "read_gff",
    "check_gff",
    "write_gff",
    "records_to_frame",
]
