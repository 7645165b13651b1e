"""Command line interface for formatting reference libraries."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .config import load_settings, setup_logging
from .errors import EntryLoadError
from .loaders import load_library
from .report import format_library, render_listing

logger = logging.getLogger(__name__)


def main(argv: List[str] | None = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Render a JSON reference library as APA references")
    parser.add_argument("input", help="Path to a JSON library (key -> record)")
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the formatted references to a text file instead of stdout",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write key, source type and reference for every entry to a JSON file",
    )
    parser.add_argument(
        "--show-types",
        action="store_true",
        help="Prefix every reference with its detected source type",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default from REFERENCE_FORMATTER_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        entries = load_library(args.input)
    except FileNotFoundError:
        logger.warning("Library not found: %s", args.input)
        print(f"error: no such file: {args.input}", file=sys.stderr)
        return 2
    except OSError as exc:
        logger.warning("Could not read %s: %s", args.input, exc)
        print(f"error: cannot read {args.input}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except EntryLoadError as exc:
        logger.warning("Could not load %s: %s", args.input, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    results = format_library(entries)
    listing = render_listing(results, show_types=args.show_types)

    if args.output:
        args.output.write_text(listing + "\n", encoding="utf-8")
    else:
        print(listing)

    if args.json_output:
        payload = [result.as_dict() for result in results]
        args.json_output.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
