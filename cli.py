#!/usr/bin/env python3
"""Score one candidate document against an original and write the percentage to a file."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from algorithms.similarity import compute_similarity
from utils.config import get_settings
from utils.errors import DocumentIOError
from utils.text_io import read_text_file, write_result

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="LCS-based plagiarism check of two text documents.")
    parser.add_argument("original", help="Path to the original document")
    parser.add_argument("candidate", help="Path to the document checked against the original")
    parser.add_argument("output", help="File that receives the similarity percentage, e.g. 85.60%%")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        original = read_text_file(args.original, settings.encoding)
        candidate = read_text_file(args.candidate, settings.encoding)
        logger.info("[cli] comparing %s (%d chars) with %s (%d chars)",
                    args.original, len(original), args.candidate, len(candidate))
        similarity = compute_similarity(original, candidate)
        result = write_result(args.output, similarity, settings.encoding)
    except DocumentIOError as e:
        logger.debug("[cli] aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Similarity {result} written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
