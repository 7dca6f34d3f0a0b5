#!/usr/bin/env python3
"""
Convert a Google Takeout YouTube subscriptions export into an OPML file
that feed readers can import.
"""

import argparse
import asyncio
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from takeout_opml.feeds import map_records
from takeout_opml.loader import load_subscriptions
from takeout_opml.opml import DEFAULT_TITLE, render_document, write_document
from takeout_opml.settings import settings
from takeout_opml.tools.utils import setup_logging, subscriptions_path

logger = logging.getLogger(__name__)


async def convert(
    input_path: Union[str, Path], output_path: Union[str, Path], title: str = DEFAULT_TITLE
) -> int:
    """Run the whole pipeline and return the number of outlines written.

    Nothing is written when the input cannot be read or parsed.
    """
    records = await load_subscriptions(input_path)
    descriptors = map_records(records)
    outlines = [descriptor.outline() for descriptor in descriptors]
    content = render_document(outlines, title=title)
    await write_document(output_path, content)
    return len(outlines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert YouTube Takeout subscriptions to OPML")
    parser.add_argument(
        "--takeout-dir",
        default=settings.takeout_dir,
        help="directory containing the extracted Takeout folder (default: %(default)s)",
    )
    parser.add_argument("--input", help="path to subscriptions.csv, overrides --takeout-dir")
    parser.add_argument("--out", default=settings.output_file, help="output OPML file (default: %(default)s)")
    parser.add_argument("--title", default=settings.opml.title, help="OPML head title (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.log_level,
        help="Set the logging level (default: %(default)s)",
    )
    return parser


async def main_async(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    logger.info("Starting Takeout to OPML conversion")
    logger.debug(f"Arguments: {vars(args)}")

    input_path = Path(args.input) if args.input else subscriptions_path(args.takeout_dir, settings.subscriptions_path)

    try:
        count = await convert(input_path, args.out, title=args.title)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    logger.info(f"Conversion complete! Wrote {count} channels to {args.out}")
    return 0


def main():
    """Synchronous CLI entry point wrapper for the async main function."""
    try:
        exit_code = asyncio.run(main_async())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        sys.exit(130)
    except Exception:
        error = traceback.format_exc()
        logger.error(f"Unexpected error: {error}")
        sys.exit(1)


if __name__ == "__main__":
    main()
