import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level, format="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Keep asyncio's own debug chatter out of the run log
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def subscriptions_path(takeout_dir: Union[str, Path], relative_path: str) -> Path:
    """Build the location of the subscriptions export inside a Takeout directory."""
    path = Path(takeout_dir) / relative_path
    logger.debug(f"Resolved subscriptions file: {path}")
    return path
