"""
MIT License

Command-line interface for gffcodec.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .core.errors import GFFError
from .io.gff import ReaderConfig, check_gff, read_gff, records_to_frame, write_gff
from .io.tsv import TABLE_FORMATS, write_lines, write_table
from .util.logging import get_logger, set_verbosity

LOGGER = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gffcodec", description="Read, check and rewrite GFF records")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    subparsers = parser.add_subparsers(dest="command")

    normalize_parser = subparsers.add_parser("normalize", help="Rewrite records in canonical form")
    normalize_parser.set_defaults(handler=run_normalize_command)
    add_input_args(normalize_parser)
    normalize_parser.add_argument("--out", help="Output GFF path (stdout when omitted)")

    table_parser = subparsers.add_parser("table", help="Export decoded records as a table")
    table_parser.set_defaults(handler=run_table_command)
    add_input_args(table_parser)
    table_parser.add_argument("--out", required=True, help="Output table path")
    table_parser.add_argument("--emit", choices=TABLE_FORMATS, default="tsv")

    check_parser = subparsers.add_parser("check", help="Report every malformed line")
    check_parser.set_defaults(handler=run_check_command)
    check_parser.add_argument("--in", dest="input", required=True, help="Input GFF path")
    check_parser.add_argument("--comment", default="#", help="Comment line prefix")
    check_parser.add_argument("--report", help="Also write one failure per line to this path")
    return parser


def add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--in", dest="input", required=True, help="Input GFF path")
    parser.add_argument("--comment", default="#", help="Comment line prefix")
    parser.add_argument("--lenient", action="store_true", help="Skip malformed lines instead of failing")


def reader_config(args: argparse.Namespace) -> ReaderConfig:
    return ReaderConfig(comment=args.comment, strict=not args.lenient)


def dispatch(args: argparse.Namespace) -> None:
    set_verbosity(quiet=args.quiet, verbose=args.verbose)
    if getattr(args, "handler", None) is None:
        raise SystemExit("A command is required: normalize, table or check")
    try:
        args.handler(args)
    except GFFError as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(f"error: {exc}") from exc


def run_normalize_command(args: argparse.Namespace) -> None:
    records = read_gff(args.input, reader_config(args))
    if args.out:
        count = write_gff(records, args.out)
        LOGGER.info("Wrote %s records to %s", count, args.out)
    else:
        write_gff(records, sys.stdout)


def run_table_command(args: argparse.Namespace) -> None:
    records = read_gff(args.input, reader_config(args))
    out_path = Path(args.out)
    write_table(records_to_frame(records), out_path, fmt=args.emit)
    LOGGER.info("Table written to %s", out_path)


def run_check_command(args: argparse.Namespace) -> None:
    failures = check_gff(args.input, comment=args.comment)
    for failure in failures:
        LOGGER.error("%s", failure)
    if args.report:
        write_lines([str(failure) for failure in failures], args.report)
    if failures:
        raise SystemExit(1)
    LOGGER.info("%s: no malformed lines", args.input)


__all__ = ["build_parser", "dispatch"]
