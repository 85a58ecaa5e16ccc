"""Print the tokens of a string, one per line.

Usage:
    python -m wordscan "This   is  a test-aculous test, sir..."
    python -m wordscan --buffer 0 --verbose some text
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordscan.channel import TokenChannel
from wordscan.config import ScanConfig, scan_config_context

DEFAULT_TEXT = "This   is  a test-aculous test, sir..."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordscan",
        description="Split text into word, whitespace and punctuation tokens.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to scan; words are joined with single spaces (default: demo sentence)",
    )
    parser.add_argument(
        "--buffer",
        type=int,
        default=1,
        help="Token channel size, 0 for unbounded (default: 1)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scanner activity and every emitted token to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.buffer < 0:
        build_parser().error("--buffer must be >= 0")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s %(levelname)s %(message)s",
        )

    text = " ".join(args.text) if args.text else DEFAULT_TEXT
    config = ScanConfig(channel_buffer=args.buffer, trace_tokens=args.verbose)
    with scan_config_context(config), TokenChannel(text) as channel:
        for token in channel:
            print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
