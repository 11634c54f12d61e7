"""
MIT License

Console entry-point for gffcodec.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .cli import build_parser, dispatch


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry-point used by `python -m gffcodec` and console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    dispatch(args)


if __name__ == "__main__":
    main()
