"""
Load the subscriptions export produced by Google Takeout.

The file is a plain comma separated table whose first row holds the column
names ("Channel Id", "Channel Url", "Channel Title"). Every row becomes one
record keyed by those names, in file order.
"""

import asyncio
import io
import logging
import traceback
import warnings
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from takeout_opml.tools.io import read_bytes

logger = logging.getLogger(__name__)

CHANNEL_ID = "Channel Id"
CHANNEL_URL = "Channel Url"
CHANNEL_TITLE = "Channel Title"
REQUIRED_COLUMNS = [CHANNEL_ID, CHANNEL_URL, CHANNEL_TITLE]


def parse_subscriptions(content: bytes) -> List[Dict[str, str]]:
    """Parse CSV bytes into a list of records keyed by the header row."""
    with warnings.catch_warnings():
        # Rows wider than the header are truncated with only a warning
        warnings.simplefilter("error", pd.errors.ParserWarning)
        try:
            df = pd.read_csv(
                io.BytesIO(content),
                sep=",",
                skip_blank_lines=True,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
            )
        except pd.errors.ParserWarning as e:
            raise pd.errors.ParserError(f"Row has more fields than the header: {e}") from e
    logger.info(f"Parsed {len(df)} rows with columns {list(df.columns)}")

    short_rows = int(df.isna().any(axis=1).sum())
    if short_rows:
        logger.warning(f"{short_rows} rows have fewer fields than the header, missing fields will be empty")
    df = df.fillna("")

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        logger.warning(f"Missing expected columns {missing}, those fields will be empty")

    return df.to_dict(orient="records")


async def load_subscriptions(path: Union[str, Path]) -> List[Dict[str, str]]:
    """Read and parse the subscriptions file. I/O and parse errors propagate."""
    content = await read_bytes(path)
    logger.debug(f"Loaded {len(content)} bytes from {path}")

    try:
        records = await asyncio.to_thread(parse_subscriptions, content)
    except (pd.errors.ParserError, pd.errors.EmptyDataError):
        error = traceback.format_exc()
        logger.error(f"Failed to parse subscriptions file {path}: {error}")
        raise

    logger.info(f"Loaded {len(records)} subscriptions from {path}")
    return records
