import logging
import traceback
from pathlib import Path
from typing import Union

import aiofiles

logger = logging.getLogger(__name__)


async def read_bytes(filepath: Union[str, Path]) -> bytes:
    """Read the full content of a file asynchronously."""
    try:
        async with aiofiles.open(filepath, "rb") as f:
            content = await f.read()
        logger.debug(f"Read {len(content)} bytes from {filepath}")
        return content
    except Exception:
        error = traceback.format_exc()
        logger.error(f"Failed to read file {filepath}: {error}")
        raise


async def write_file(filepath: Union[str, Path], content: str) -> None:
    """Write content to file asynchronously."""
    try:
        async with aiofiles.open(filepath, "w", encoding="utf-8") as f:
            await f.write(content)
        logger.debug(f"Successfully wrote file: {filepath}")
    except Exception:
        error = traceback.format_exc()
        logger.error(f"Failed to write file {filepath}: {error}")
        raise
