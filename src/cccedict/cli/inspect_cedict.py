"""CLI for loading and inspecting a CC-CEDICT file.

Usage:
    python -m cccedict.cli.inspect_cedict \
        --input data/cedict_ts.u8 \
        --max-entries 5 \
        --output output/cedict.json

Features:
- Strict loading by default (first malformed line fails the run)
- --lenient to skip malformed lines with a warning
- Progress bar with tqdm while reading lines
- Optional JSON dump of the parsed entries for inspection
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from cccedict.constants import CEDICT_ENCODING, CEDICT_PATH, LOG_FORMAT, LOG_LEVEL
from cccedict.errors import CedictParseError, SourceUnavailable
from cccedict.loader import load_stream
from cccedict.models.entry import Cedict, CedictEntry, Syllable
from cccedict.utils.file_io import open_text, write_json
from cccedict.utils.logging_config import configure_logging, route_to_loguru, timed_stage

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Load a CC-CEDICT (or cantonese.org) dictionary file and report on it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate the full CC-CEDICT release
  python -m cccedict.cli.inspect_cedict --input data/cedict_1_0_ts_utf-8_mdbg.txt.gz

  # Preview 10 entries of cantonese.org data, skipping malformed lines
  python -m cccedict.cli.inspect_cedict \\
      --input data/cccanto-webdist.txt \\
      --lenient --max-entries 10

  # Dump parsed entries to JSON
  python -m cccedict.cli.inspect_cedict \\
      --input data/cedict_ts.u8 \\
      --output output/cedict.json
        """,
    )

    parser.add_argument(
        "--input",
        type=Path,
        default=Path(CEDICT_PATH) if CEDICT_PATH else None,
        required=CEDICT_PATH is None,
        help="Dictionary file (plain text or .gz; default: $CEDICT_PATH)",
    )

    parser.add_argument(
        "--encoding",
        default=CEDICT_ENCODING,
        help=f"File encoding (default: {CEDICT_ENCODING})",
    )

    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed lines instead of failing on the first one",
    )

    parser.add_argument(
        "--max-entries",
        type=int,
        default=0,
        help="Number of parsed entries to preview (default: 0)",
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write parsed entries to this JSON file",
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=LOG_FORMAT == "json",
        help="Emit JSON log lines (default: on when LOG_FORMAT=json)",
    )

    parser.add_argument(
        "--loguru",
        action="store_true",
        help="Route logging through loguru",
    )

    return parser.parse_args(argv)


def format_syllables(syllables: Optional[Tuple[Syllable, ...]]) -> str:
    if syllables is None:
        return "-"
    return " ".join(f"{s.sound}{s.tone}" for s in syllables)


def format_entry(entry: CedictEntry) -> str:
    """One-line summary of an entry for previews."""
    definitions = "; ".join(entry.definitions) if entry.definitions is not None else "-"
    return (
        f"{entry.traditional} | {entry.simplified} | "
        f"pinyin: {format_syllables(entry.pinyin)} | "
        f"jyutping: {format_syllables(entry.jyutping)} | "
        f"{definitions}"
    )


def summarize(cedict: Cedict) -> dict:
    """Count entries and how many carry each optional section."""
    return {
        "entries": len(cedict),
        "with_pinyin": sum(1 for e in cedict.entries if e.pinyin is not None),
        "with_jyutping": sum(1 for e in cedict.entries if e.jyutping is not None),
        "with_definitions": sum(1 for e in cedict.entries if e.definitions is not None),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if args.loguru:
        route_to_loguru(level=args.log_level, serialize=args.json_logs)
    else:
        configure_logging(
            level=getattr(logging, args.log_level),
            json_format=args.json_logs,
            console_output=True,
        )

    logger.info(f"Input: {args.input}")
    logger.info(f"Mode: {'lenient' if args.lenient else 'strict'}")

    try:
        with timed_stage("load_cedict", source=str(args.input)):
            with open_text(args.input, encoding=args.encoding) as f:
                lines = tqdm(
                    f, desc="Parsing", unit="line", disable=args.no_progress, file=sys.stderr
                )
                cedict = load_stream(
                    lines,
                    strict=not args.lenient,
                    encoding=args.encoding,
                    source_name=str(args.input),
                )
    except CedictParseError as e:
        logger.error(f"Malformed dictionary line: {e}")
        if e.line is not None:
            logger.error(f"  {e.line.rstrip()}")
        return 1
    except SourceUnavailable as e:
        logger.error(f"Dictionary source unavailable: {e}")
        return 1

    stats = summarize(cedict)
    for key, value in stats.items():
        logger.info(f"{key}: {value}")

    for entry in cedict.entries[: args.max_entries]:
        print(format_entry(entry))

    if args.output:
        write_json(
            {"stats": stats, "entries": cedict.model_dump(mode="json")["entries"]},
            args.output,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
