"""
MIT License

Tabular and plain-text output helpers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

TABLE_FORMATS = ("tsv", "csv", "jsonl")


def write_table(df: pd.DataFrame, path: str | Path, fmt: str = "tsv") -> None:
    """
    Persist a DataFrame in the requested serialization format.

    Parameters
    ----------
    df:
        DataFrame to serialize.
    path:
        Output file path. Parent directories are created.
    fmt:
        One of ``tsv``, ``csv`` or ``jsonl``. Missing values are written as
        ``.`` in the delimited formats and ``null`` in JSONL.
    """
    if fmt not in TABLE_FORMATS:
        raise ValueError(f"Unsupported format: {fmt}")
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "jsonl":
        df.to_json(out_path, orient="records", lines=True)
    else:
        sep = "\t" if fmt == "tsv" else ","
        df.to_csv(out_path, sep=sep, index=False, na_rep=".")


def write_lines(lines: Iterable[str], path: str | Path) -> None:
    """Write plain-text lines, each terminated by a newline."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(f"{line}\n")


__all__ = ["TABLE_FORMATS", "write_table", "write_lines"]
